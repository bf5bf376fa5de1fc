from decimal import Decimal

import pytest

from calc128.calculate import calculate
from calc128.context import Context
from calc128.output import ERROR_TEXT, calculation_result, format_elapsed
from calc128.tokenize import tokenize


@pytest.mark.parametrize("us", [0, 1, 999])
def test_elapsed_microseconds(us):
    assert format_elapsed(us) == f"Elapsed Time: {us} µs"


def test_elapsed_milliseconds():
    assert format_elapsed(1000) == "Elapsed Time: 1 ms"
    assert format_elapsed(999_999).endswith(" ms")


def test_elapsed_seconds():
    assert format_elapsed(1_500_000) == "Elapsed Time: 1.50 s"
    assert format_elapsed(1_000_000).endswith(" s")


def test_result_matches_calculation():
    context = Context()
    calculation_result(context, "2 + 3*4")
    assert context.result == calculate(tokenize("(2+3*4)"))
    assert context.raw_input == "(2 + 3*4)"
    assert context.clean_input == "(2+3*4)"


def test_result_has_requested_precision():
    context = Context(user_precision=3)
    text = calculation_result(context, "1/8")
    assert len(text.split(".")[1]) == 3
    assert Decimal(text) == Decimal("0.125")


def test_successful_result_reports_time():
    context = Context()
    calculation_result(context, "1+1")
    assert context.calculation_time.startswith("Elapsed Time: ")


def test_invalid_input_gives_error_text():
    context = Context()
    assert calculation_result(context, "2++3") == ERROR_TEXT
    assert context.calculation_time == ""


def test_division_by_zero_gives_error_text():
    context = Context()
    assert calculation_result(context, "1/0") == ERROR_TEXT


def test_previous_state_is_cleared():
    context = Context()
    calculation_result(context, "1+2")
    calculation_result(context, "abc")
    assert context.raw_tokens == []
    assert context.result == Decimal(0)
    assert context.string_result == ERROR_TEXT