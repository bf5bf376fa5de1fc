"""Evaluating a token list with 34-digit decimal arithmetic."""

from __future__ import annotations

import decimal
import re
from decimal import Decimal

__all__ = ["calculate", "format_number"]

_ARITHMETIC = decimal.Context(prec=34, traps=[])

_NUMBER = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE,
)


def format_number(value: Decimal, precision: int = 40) -> str:
    """Render ``value`` with ``precision`` significant digits, like ``%g``."""
    text = format(value, f".{precision}g")
    mantissa, sep, exponent = text.partition("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return mantissa + sep + exponent


def _parse(token: str) -> Decimal:
    """Read the leading number of ``token``; anything unreadable counts as zero."""
    match = _NUMBER.match(token.strip())
    if match is None:
        return Decimal(0)
    return Decimal(match.group())


def _apply_power(work: list[str], open_at: int, close_at: int) -> bool:
    for pos in range(close_at, open_at, -1):
        if work[pos] == "^":
            base = _parse(work[pos - 1])
            exponent = _parse(work[pos + 1])
            work[pos - 1] = format_number(_ARITHMETIC.power(base, exponent))
            del work[pos : pos + 2]
            return True
    return False


def _apply_binary(
    work: list[str], open_at: int, close_at: int, operators: tuple[str, ...]
) -> bool:
    for pos in range(open_at, close_at):
        operator = work[pos]
        if operator not in operators:
            continue
        left = _parse(work[pos - 1])
        right = _parse(work[pos + 1])
        if operator == "*":
            result = _ARITHMETIC.multiply(left, right)
        elif operator == "/":
            if right == 0:
                raise ZeroDivisionError("Division by Zero")
            result = _ARITHMETIC.divide(left, right)
        elif operator == "+":
            result = _ARITHMETIC.add(left, right)
        else:
            result = _ARITHMETIC.subtract(left, right)
        work[pos - 1] = format_number(result)
        del work[pos : pos + 2]
        return True
    return False


def _drop_parens(work: list[str], open_at: int) -> bool:
    if open_at + 2 < len(work) and work[open_at + 2] == ")":
        del work[open_at]
        del work[open_at + 1]
        return True
    return False


def _reduce(work: list[str], close_at: int) -> None:
    for open_at in range(close_at, -1, -1):
        if work[open_at] != "(":
            continue
        if (
            _apply_power(work, open_at, close_at)
            or _apply_binary(work, open_at, close_at, ("*", "/"))
            or _apply_binary(work, open_at, close_at, ("+", "-"))
            or _drop_parens(work, open_at)
        ):
            return
    raise ValueError("Malformed expression: unmatched closing parenthesis")


def calculate(tokens: list[str]) -> Decimal:
    """Evaluate a parenthesised token list and return the result.

    Powers are applied right to left, then products and quotients, then
    sums and differences, innermost parentheses first.
    """
    work = [token for token in tokens if token]
    work.append(" ")
    while ")" in work:
        _reduce(work, work.index(")"))
    return _parse(work[0])