import io

import pytest

from infix_evaluator.cli import PROMPT, main


def test_expression_argument(capsys):
    assert main(["2+3*4"]) == 0
    assert capsys.readouterr().out == "14.0\n"


def test_leading_negation_after_separator(capsys):
    assert main(["--", "-5^2"]) == 0
    assert capsys.readouterr().out == "-25.0\n"


def test_reads_one_line_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(2+3)*4\nignored\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{PROMPT}\n20.0\n"


def test_infinity_and_nan_rendering(capsys):
    main(["1/0"])
    main(["0/0"])
    assert capsys.readouterr().out == "inf\nnan\n"


def test_parse_error_exit_status(capsys):
    assert main(["1+"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_show_tree(capsys):
    assert main(["--show-tree", "1-2-3"]) == 0
    assert capsys.readouterr().out.splitlines() == ["((1.0 - 2.0) - 3.0)", "-4.0"]


def test_latex(capsys):
    assert main(["--latex", "2^3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[-1] == "8.0"


def test_invalid_log_level():
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "chatty", "1"])
    assert excinfo.value.code == 2


def test_log_level_flag(capsys):
    assert main(["--log-level", "detailed", "1+1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "2.0\n"
    assert "split '1+1' at 1 ('+')" in captured.err


def test_deep_nesting_is_reported(capsys):
    depth = 1200
    assert main(["(" * depth + "1" + ")" * depth]) == 1
    assert "nested too deeply" in capsys.readouterr().err
