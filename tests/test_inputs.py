from calc128.inputs import clean_input, wrap_input


def test_wrap_input_adds_parentheses():
    assert wrap_input("1+2") == "(1+2)"


def test_wrap_empty():
    assert wrap_input("") == "()"


def test_clean_input_removes_spaces_and_tabs():
    assert clean_input(" 1 +\t2 ") == "1+2"


def test_clean_input_keeps_newlines():
    assert clean_input("1\n2") == "1\n2"


def test_clean_of_wrapped_keeps_outer_parentheses():
    cleaned = clean_input(wrap_input("  3 * 4 "))
    assert cleaned.startswith("(")
    assert cleaned.endswith(")")
    assert " " not in cleaned


def test_clean_is_idempotent():
    once = clean_input(" ( 1 + 2 ) ")
    assert clean_input(once) == once