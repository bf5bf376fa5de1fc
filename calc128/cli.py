"""Command-line front end: evaluate expressions from arguments or standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from .context import Context, UserDefined
from .output import ERROR_TEXT, calculation_result

__all__ = ["main"]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc128", description="Evaluate arithmetic expressions."
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to evaluate; read from standard input when omitted",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=Context().user_precision,
        help="digits after the decimal point",
    )
    parser.add_argument(
        "-t", "--time", action="store_true", help="show the calculation time"
    )
    return parser


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        line = line.rstrip("\r\n")
        if line.strip():
            yield line


def main(argv: list[str] | None = None) -> int:
    """Evaluate each expression and print its result; return 1 if any failed."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error("precision must not be negative")

    settings = UserDefined(display_elapsed_time=args.time)
    context = Context(user_precision=args.precision)
    expressions = args.expressions or _lines(sys.stdin)

    status = 0
    for expression in expressions:
        text = calculation_result(context, expression)
        print(text)
        if text == ERROR_TEXT:
            status = 1
        elif settings.display_elapsed_time:
            print(context.calculation_time)
    return status


if __name__ == "__main__":
    sys.exit(main())