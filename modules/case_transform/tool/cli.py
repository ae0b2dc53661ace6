from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Sequence, TextIO

import structlog

from caseworks.logger import setup_logger
from modules.case_transform.core.case import convert_case
from modules.case_transform.core.render import STYLES

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caseworks-case",
        description="Convert text to camelCase, kebab-case, dot.case, snake_case or PascalCase.",
    )
    parser.add_argument("style", choices=list(STYLES), help="Target case style.")
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert. Words are joined with spaces; reads stdin when omitted.",
    )
    return parser


def _convert_lines(lines: Iterable[str], style: str) -> List[str]:
    return [convert_case(line.rstrip("\r\n"), style) for line in lines]


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    setup_logger()
    args = build_parser().parse_args(argv)

    if args.text:
        outputs = [convert_case(" ".join(args.text), args.style)]
    else:
        outputs = _convert_lines(stdin or sys.stdin, args.style)

    logger.debug("cli.converted", style=args.style, count=len(outputs))
    for output in outputs:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
