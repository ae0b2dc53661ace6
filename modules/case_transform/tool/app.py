from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from caseworks.errors import install_error_handlers
from caseworks.settings import shared_templates_dir
from modules.case_transform.core.case import convert_case, transform_cases
from modules.case_transform.core.render import STYLES

app = FastAPI(title="Case Transform")
install_error_handlers(app)

BASE_DIR = Path(__file__).parent
SHARED_TEMPLATES = shared_templates_dir()

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)
templates.env.auto_reload = True
templates.env.cache = {}


async def form_text(request: Request) -> Any:
    # An absent field is null; an empty field is the empty string.
    form = await request.form()
    return form.get("text")


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.scope.get("root_path", "").rstrip("/")
    return templates.TemplateResponse(
        request,
        "case_transform.html",
        {"base_path": base_path, "styles": list(STYLES)},
    )


@app.post("/transform")
def transform(text: Any = Depends(form_text)):
    result, error = transform_cases(text)
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result


@app.post("/convert/{style}")
def convert(style: str, text: Any = Depends(form_text)):
    return {"style": style, "result": convert_case(text, style)}
