"""Word-boundary detection shared by every case style.

The input is scanned once, left to right. A boundary is declared on any
separator character (whitespace, ``-``, ``_``, ``.``, ``/``) and between a
lower-case letter and an upper-case letter that directly follows it. Separators
are dropped, runs of them collapse, and every token is lower-cased as it is
captured. Runs of capitals are left together: ``"APIResponse"`` is one word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


SEPARATORS = frozenset("-_./")


@dataclass(frozen=True)
class Token:
    text: str
    position: int


def _is_separator(char: str) -> bool:
    return char in SEPARATORS or char.isspace()


def _starts_hump(char: str) -> bool:
    # Titlecase digraphs such as "ǅ" are what title() produces for "ǆ".
    return char.isupper() or char.istitle()


def split_tokens(text: str) -> Tuple[Token, ...]:
    value = text.strip()
    if not value:
        return ()

    tokens: List[Token] = []
    current: List[str] = []
    start = 0
    previous = ""

    def flush() -> None:
        if current:
            tokens.append(Token("".join(current).lower(), start))
            current.clear()

    for index, char in enumerate(value):
        if _is_separator(char):
            flush()
            previous = ""
            continue
        if previous.islower() and _starts_hump(char):
            flush()
        if not current:
            start = index
        current.append(char)
        previous = char

    flush()
    return tuple(tokens)


def split_words(text: str) -> List[str]:
    return [token.text for token in split_tokens(text)]
