from __future__ import annotations

from typing import Callable, Dict, Sequence

from modules.case_transform.core.words import Token

Renderer = Callable[[Sequence[Token]], str]


def _capitalize(word: str) -> str:
    # Only letters are capitalized; a leading digit or symbol is kept as is.
    if word and word[0].isalpha():
        return word[0].title() + word[1:]
    return word


def render_camel(tokens: Sequence[Token]) -> str:
    if not tokens:
        return ""
    head, *rest = tokens
    return head.text + "".join(_capitalize(token.text) for token in rest)


def render_pascal(tokens: Sequence[Token]) -> str:
    return "".join(_capitalize(token.text) for token in tokens)


def _joined(separator: str) -> Renderer:
    def render(tokens: Sequence[Token]) -> str:
        return separator.join(token.text for token in tokens)

    return render


render_kebab = _joined("-")
render_dot = _joined(".")
render_snake = _joined("_")

STYLES: Dict[str, Renderer] = {
    "camel": render_camel,
    "kebab": render_kebab,
    "dot": render_dot,
    "snake": render_snake,
    "pascal": render_pascal,
}
