from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from caseworks.errors import install_error_handlers
from caseworks.registry import load_modules
from caseworks.settings import shared_templates_dir

logger = structlog.get_logger(__name__)


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def build_app(modules_root: Path | None = None) -> FastAPI:
    app = FastAPI(title="Caseworks")
    install_error_handlers(app)

    templates = Jinja2Templates(directory=str(shared_templates_dir()))
    templates.env.auto_reload = True
    templates.env.cache = {}

    modules = load_modules(modules_root)
    listed = sorted(
        (meta for meta in modules.values() if meta.get("public", True)),
        key=lambda item: item.get("title") or item["name"],
    )

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"modules": listed, "base_path": base_path},
        )

    for meta in modules.values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue

        try:
            subapp = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError) as exc:
            logger.warning(
                "engine.mount_skipped", module=meta["name"], entrypoint=api_entry, error=str(exc)
            )
            continue

        app.mount(meta["mount"], subapp)
        logger.debug("engine.mounted", module=meta["name"], mount=meta["mount"])

    return app
