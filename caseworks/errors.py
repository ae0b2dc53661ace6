from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from caseworks.exceptions import DomainError

logger = structlog.get_logger(__name__)


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def install_error_handlers(app: FastAPI) -> None:
    """Map domain errors and 422 validation failures onto ``{"error": ...}`` bodies."""

    @app.exception_handler(DomainError)
    async def domain_error(request: Request, exc: DomainError) -> JSONResponse:
        logger.info(
            "request.rejected",
            path=request.url.path,
            code=exc.code,
            error=exc.detail,
        )
        return _error_response(exc.detail, int(exc.status_code))

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("request.invalid", path=request.url.path)
        return _error_response("Invalid input.", status.HTTP_400_BAD_REQUEST)
