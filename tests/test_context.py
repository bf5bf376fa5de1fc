from decimal import Decimal

from calc128.context import Context, UserDefined


def test_defaults_are_empty():
    ctx = Context()
    assert ctx.raw_tokens == []
    assert ctx.raw_input == ""
    assert ctx.clean_input == ""
    assert ctx.result == Decimal(0)
    assert ctx.string_result == ""


def test_instances_do_not_share_tokens():
    first = Context()
    second = Context()
    first.raw_tokens.append("(")
    assert second.raw_tokens == []


def test_reset_clears_calculation_fields():
    ctx = Context(user_precision=12, input_buffer="(1+2)", zero_count=3)
    ctx.raw_input = "( 1 + 2 )"
    ctx.clean_input = "(1+2)"
    ctx.raw_tokens.extend(["(", "1", "+", "2", ")"])
    ctx.result = Decimal("3")
    ctx.string_result = "3"
    ctx.calculation_time = "Elapsed Time: 5 ms"

    ctx.reset()

    assert ctx == Context(user_precision=12, input_buffer="(1+2)", zero_count=3)


def test_reset_keeps_same_token_list_object():
    ctx = Context()
    tokens = ctx.raw_tokens
    tokens.append("1")
    ctx.reset()
    assert ctx.raw_tokens is tokens
    assert tokens == []


def test_user_defined_compares_by_value():
    assert UserDefined(True) == UserDefined(display_elapsed_time=True)
    assert UserDefined(True) != UserDefined()