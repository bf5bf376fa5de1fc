"""Input validation for arithmetic expressions."""

from __future__ import annotations

import logging
import string
from enum import Enum, auto

__all__ = [
    "State",
    "ValidationError",
    "VALID_CHARS",
    "INVALID_FIRST",
    "is_valid_first",
    "is_valid_par",
    "is_valid_syntax",
    "is_valid_input",
    "check_input",
]

logger = logging.getLogger(__name__)

VALID_CHARS = " ()^*/+-0123456789."
INVALID_FIRST = "*/+=)^"

_DIGITS = string.digits
_LETTERS = string.ascii_letters
_NUL = "\0"


class ValidationError(ValueError):
    """Raised when an expression fails validation."""


class State(Enum):
    """States of the syntax checker."""

    START = auto()
    NUMBER = auto()
    VARIABLE = auto()
    OPERATOR = auto()
    MINUS = auto()
    UNARY_MINUS = auto()
    BINARY_MINUS = auto()
    DECIMAL = auto()
    FRACTIONAL = auto()
    OPEN_PAR = auto()
    CLOSE_PAR = auto()


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else _NUL


def _check_first(text: str) -> None:
    first = _at(text, 0)
    second = _at(text, 1)
    if first in INVALID_FIRST:
        raise ValidationError(f"String cannot start with: {INVALID_FIRST}")
    if first == "-" and second not in _DIGITS and second not in ".(":
        raise ValidationError(
            "'-' Must be followed by a digit, decimal, or open parentheses"
        )
    if first == "(" and second == ")":
        raise ValidationError("Empty Parentheses()")
    if first == "." and second not in _DIGITS:
        raise ValidationError("'.' Must be followed by a digit")


def _check_par(text: str) -> None:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth < 0:
            raise ValidationError("Invalid Parenthesis")
    if not text or depth != 0:
        raise ValidationError("Invalid Parenthesis")


def _classify(char: str, current: State) -> State:
    if char in _DIGITS:
        return State.NUMBER
    if char in _LETTERS:
        return State.VARIABLE
    if char in "*/+^":
        return State.OPERATOR
    if char == "-":
        return State.MINUS
    if char == ".":
        return State.DECIMAL
    if char == "(":
        return State.OPEN_PAR
    if char == ")":
        return State.CLOSE_PAR
    logger.warning("Undefined valid_syntax")
    return current


def _next_state(current: State, previous: State) -> State:
    if current is State.START:
        raise ValidationError("Undefined //syntax_switch_test")
    if current is State.VARIABLE:
        if previous is State.DECIMAL:
            raise ValidationError("Decimal cannot come before variable")
    elif current is State.OPERATOR:
        if previous is State.DECIMAL:
            raise ValidationError("Decimal cannot come before operator")
        if previous is State.OPERATOR:
            raise ValidationError("Operator cannot come before operator")
        if previous is State.START:
            raise ValidationError("Cannot start string with an operator")
    elif current in (State.MINUS, State.UNARY_MINUS, State.BINARY_MINUS):
        if previous in (State.OPERATOR, State.OPEN_PAR, State.START, State.BINARY_MINUS):
            current = State.UNARY_MINUS
        if previous in (State.NUMBER, State.CLOSE_PAR, State.VARIABLE):
            current = State.BINARY_MINUS
        if current is State.UNARY_MINUS:
            if previous in (
                State.UNARY_MINUS,
                State.DECIMAL,
                State.CLOSE_PAR,
                State.NUMBER,
                State.VARIABLE,
            ):
                raise ValidationError("Double Operator")
        elif current is State.BINARY_MINUS:
            if previous in (
                State.DECIMAL,
                State.UNARY_MINUS,
                State.BINARY_MINUS,
                State.OPERATOR,
            ):
                raise ValidationError("Double Operator")
    elif current in (State.DECIMAL, State.FRACTIONAL):
        if previous in (State.DECIMAL, State.FRACTIONAL):
            raise ValidationError("Double Decimal")
        if previous in (
            State.START,
            State.CLOSE_PAR,
            State.VARIABLE,
            State.OPERATOR,
            State.OPEN_PAR,
            State.UNARY_MINUS,
            State.BINARY_MINUS,
        ):
            current = State.FRACTIONAL
        if previous is State.NUMBER:
            current = State.DECIMAL
    elif current is State.OPEN_PAR:
        if previous in (State.DECIMAL, State.FRACTIONAL):
            raise ValidationError(
                "Invalid Open Parenthesis/Unary Minus must only precede a digit or decimal"
            )
    elif current is State.CLOSE_PAR:
        if previous in (
            State.DECIMAL,
            State.FRACTIONAL,
            State.UNARY_MINUS,
            State.BINARY_MINUS,
            State.OPERATOR,
            State.OPEN_PAR,
        ):
            logger.warning("Invalid Close Parenthesis")
    return current


def _check_syntax(text: str) -> None:
    state = State.START
    for char in text:
        previous = state
        state = _next_state(_classify(char, state), previous)


def _check_chars(text: str) -> None:
    if not text:
        raise ValidationError("Empty Field")
    if any(char not in VALID_CHARS for char in text):
        raise ValidationError(f"Invalid Input: valid characters are {VALID_CHARS!r}")


def check_input(text: str) -> None:
    """Raise ValidationError describing the first problem found in ``text``."""
    _check_chars(text)
    _check_first(text)
    _check_par(text)
    _check_syntax(text)


def _passes(check, text: str) -> bool:
    try:
        check(text)
    except ValidationError as error:
        logger.warning("Error: %s", error)
        return False
    return True


def is_valid_first(text: str) -> bool:
    """Whether the opening characters of ``text`` are acceptable."""
    return _passes(_check_first, text)


def is_valid_par(text: str) -> bool:
    """Whether the parentheses in ``text`` are balanced."""
    return _passes(_check_par, text)


def is_valid_syntax(text: str) -> bool:
    """Whether ``text`` passes the character-by-character syntax checker."""
    return _passes(_check_syntax, text)


def is_valid_input(text: str) -> bool:
    """Whether ``text`` passes every validation step."""
    return _passes(check_input, text)