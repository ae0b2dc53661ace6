from __future__ import annotations

import numbers
from typing import Any

from caseworks.exceptions import DomainError


class _Missing:
    """Marker for an argument that was never supplied."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class InvalidInputError(DomainError, TypeError):
    """Raised when a conversion receives something other than a string."""

    reason = "invalid"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> str:
        return self.reason


class NullInputError(InvalidInputError):
    reason = "null"

    def __init__(self) -> None:
        super().__init__("Input cannot be null")


class MissingInputError(InvalidInputError):
    reason = "missing"

    def __init__(self) -> None:
        super().__init__("Input cannot be undefined")


class TypeMismatchError(InvalidInputError):
    reason = "type"

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Input must be a string. Received: {type_name}")
        self.type_name = type_name


def describe_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    return type(value).__name__


def require_text(value: Any) -> str:
    if value is None:
        raise NullInputError()
    if value is MISSING:
        raise MissingInputError()
    if not isinstance(value, str):
        raise TypeMismatchError(describe_type(value))
    return value
