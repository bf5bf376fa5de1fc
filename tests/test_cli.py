import io

import pytest

from calc128.cli import main
from calc128.context import Context
from calc128.output import ERROR_TEXT, calculation_result


def test_argument_expression(capsys):
    assert main(["2+3*4"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [calculation_result(Context(), "2+3*4")]


def test_precision_option(capsys):
    assert main(["--precision", "2", "1/4"]) == 0
    assert capsys.readouterr().out.strip() == "0.25"


def test_invalid_expression_fails(capsys):
    assert main(["2++3"]) == 1
    assert ERROR_TEXT in capsys.readouterr().out


def test_reads_standard_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1+1\n\n2*3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        calculation_result(Context(), "1+1"),
        calculation_result(Context(), "2*3"),
    ]


def test_time_option(capsys):
    assert main(["--time", "1+1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[1].startswith("Elapsed Time: ")


def test_negative_precision_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--precision", "-1", "1+1"])
    assert info.value.code == 2