"""Running one calculation and formatting its result."""

from __future__ import annotations

import logging
import time

from .calculate import calculate
from .context import Context
from .inputs import clean_input, wrap_input
from .tokenize import tokenize
from .validate import check_input

__all__ = ["ERROR_TEXT", "format_elapsed", "calculation_result"]

logger = logging.getLogger(__name__)

ERROR_TEXT = "UNDEFINED ERROR(calculationResult)"


def format_elapsed(microseconds: int) -> str:
    """Describe a duration in microseconds, milliseconds or seconds."""
    if microseconds < 1000:
        return f"Elapsed Time: {microseconds} µs"
    if microseconds < 1_000_000:
        return f"Elapsed Time: {microseconds // 1000} ms"
    return f"Elapsed Time: {microseconds / 1_000_000:.2f} s"


def calculation_result(context: Context, text: str) -> str:
    """Evaluate ``text`` into ``context`` and return the text to display."""
    context.reset()
    context.input_buffer = text
    context.raw_input = wrap_input(text)
    context.clean_input = clean_input(context.raw_input)
    try:
        check_input(context.clean_input)
        start = time.perf_counter_ns()
        context.raw_tokens = tokenize(context.clean_input)
        context.result = calculate(context.raw_tokens)
        elapsed = (time.perf_counter_ns() - start) // 1000
    except (ValueError, ArithmeticError) as error:
        logger.warning("Error: %s", error)
        context.string_result = ERROR_TEXT
        context.calculation_time = ""
        return context.string_result

    context.string_result = format(context.result, f".{context.user_precision}f")
    context.calculation_time = format_elapsed(elapsed)
    return context.string_result