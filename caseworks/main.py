from __future__ import annotations

import os

import uvicorn

from caseworks.engine import build_app
from caseworks.logger import setup_logger

setup_logger()
app = build_app()


def run() -> None:
    uvicorn.run(
        "caseworks.main:app",
        host=os.getenv("CASEWORKS_HOST", "127.0.0.1"),
        port=int(os.getenv("CASEWORKS_PORT", "8000")),
    )


if __name__ == "__main__":
    run()
