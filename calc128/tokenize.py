"""Splitting a cleaned expression into tokens."""

from __future__ import annotations

import logging
import string

__all__ = ["OPERATORS", "tokenize"]

logger = logging.getLogger(__name__)

OPERATORS = "^*/+-()"

_NUL = "\0"


def _digit(char: str) -> bool:
    return char in string.digits


def _alpha(char: str) -> bool:
    return char in string.ascii_letters


def tokenize(text: str) -> list[str]:
    """Split ``text`` into numbers, operators and parentheses.

    Implicit products are made explicit, and subtraction of a number is
    written as addition of a negative number.
    """

    def at(index: int) -> str:
        return text[index] if 0 <= index < len(text) else _NUL

    tokens: list[str] = []
    number = ""
    decimal_count = 0

    for index in range(len(text) + 1):
        char = at(index)
        prev = at(index - 1)
        nxt = at(index + 1)

        if _digit(char):
            if decimal_count > 1:
                logger.warning("Too Many Decimals")
            if prev == ")":
                tokens.append("*")
            number += char
            continue

        if char == ".":
            if not _digit(nxt):
                logger.warning("Invalid Decimal")
            if prev == ")":
                tokens.append("*")
            decimal_count += 1
            number += char
            continue

        if char in OPERATORS:
            if number:
                tokens.append(number)
                number = ""
            decimal_count = 0

            if char == "(":
                if index == 0:
                    tokens.append("(")
                    continue
                if prev == "-" and index >= 2:
                    before = at(index - 2)
                    if before != ")" and not _digit(before):
                        tokens.extend(["-1", "*", "("])
                        continue
                    if before == ")":
                        tokens.append("(")
                        continue
                if prev == ")" or _digit(prev) or _alpha(prev):
                    tokens.extend(["*", "("])
                    continue
                tokens.append("(")
                continue

            if char in ")^*/+":
                tokens.append(char)
                continue

            # char == "-"
            if index == 0:
                if nxt != "(":
                    number += "-"
                continue
            if nxt in " \t" or nxt == ")":
                logger.warning("Invalid End")
                continue
            if (
                (_digit(prev) or _alpha(prev) or prev == ")")
                and not _digit(nxt)
                and not _alpha(nxt)
                and nxt != "."
            ):
                tokens.append("-")
                continue
            if _digit(nxt) or _alpha(nxt) or nxt == "." or prev == "(":
                if prev == ")" or _alpha(prev) or _digit(prev):
                    tokens.append("+")
                number += "-"
                continue

        if number:
            tokens.append(number)

    return tokens