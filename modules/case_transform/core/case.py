from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Tuple

from caseworks.exceptions import DomainError
from modules.case_transform.core.render import STYLES, Renderer
from modules.case_transform.core.validate import (
    MISSING,
    InvalidInputError,
    require_text,
)
from modules.case_transform.core.words import split_tokens


class UnknownStyleError(DomainError, ValueError):
    status_code = HTTPStatus.NOT_FOUND
    code = "unknown_style"

    def __init__(self, style: str) -> None:
        known = ", ".join(STYLES)
        super().__init__(f"Unknown case style '{style}'. Expected one of: {known}")
        self.style = style


def _convert(value: Any, render: Renderer) -> str:
    text = require_text(value)
    return render(split_tokens(text))


def to_camel_case(value: Any = MISSING) -> str:
    """Convert ``value`` to camelCase.

    >>> to_camel_case("hello world")
    'helloWorld'
    >>> to_camel_case("SCREEN_NAME")
    'screenName'
    """
    return _convert(value, STYLES["camel"])


def to_kebab_case(value: Any = MISSING) -> str:
    """Convert ``value`` to kebab-case.

    >>> to_kebab_case("userName")
    'user-name'
    """
    return _convert(value, STYLES["kebab"])


def to_dot_case(value: Any = MISSING) -> str:
    """Convert ``value`` to dot.case.

    >>> to_dot_case("userName")
    'user.name'
    """
    return _convert(value, STYLES["dot"])


def to_snake_case(value: Any = MISSING) -> str:
    return _convert(value, STYLES["snake"])


def to_pascal_case(value: Any = MISSING) -> str:
    return _convert(value, STYLES["pascal"])


def convert_case(value: Any, style: str) -> str:
    """Convert ``value`` to the case style named by ``style``.

    The style is checked first, so an unknown style is reported even when the
    value is invalid too.
    """
    render = STYLES.get(style)
    if render is None:
        raise UnknownStyleError(style)
    return _convert(value, render)


def transform_cases(text: Any) -> Tuple[Dict[str, object] | None, str | None]:
    if text is None:
        return None, "Text is required."
    try:
        source = require_text(text)
    except InvalidInputError as exc:
        return None, exc.message

    tokens = split_tokens(source)
    result: Dict[str, object] = {
        "source": source,
        "words": [token.text for token in tokens],
        "word_count": len(tokens),
    }
    for name, render in STYLES.items():
        result[name] = render(tokens)
    return result, None
