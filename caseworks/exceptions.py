from __future__ import annotations

from http import HTTPStatus


class DomainError(Exception):
    """Module-level error the host renders as ``{"error": detail}``."""

    status_code: int = HTTPStatus.BAD_REQUEST
    code: str | None = None

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


__all__ = ["DomainError"]
