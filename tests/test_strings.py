import io

import pytest

from labkit.strings import compare_report, main, readline, string_less


@pytest.mark.parametrize(
    "first, second",
    [("abc", "abd"), ("ab", "abc"), ("", "a"), ("Zeta", "alpha")],
)
def test_string_less_orders_strictly(first, second):
    assert string_less(first, second)
    assert not string_less(second, first)


def test_string_less_equal_strings_is_false():
    assert not string_less("hola", "hola")


def test_readline_strips_newline_and_signals_end():
    stream = io.StringIO("hello\nworld")
    assert readline(stream) == "hello"
    assert readline(stream) == "world"
    assert readline(stream) is None


def test_readline_empty_line_is_empty_string():
    stream = io.StringIO("\nnext\n")
    assert readline(stream) == ""
    assert readline(stream) == "next"
    assert readline(stream) is None


def test_readline_long_line_is_whole():
    text = "x" * 500
    assert readline(io.StringIO(text + "\n")) == text


def test_compare_report_equal():
    assert compare_report("hola", "hola").splitlines() == [
        "Los string son iguales",
        "String 2 es mayor",
    ]


def test_compare_report_first_before_second():
    assert compare_report("abc", "abd").splitlines() == [
        "Los string NO son iguales",
        "String 1 es mayor",
    ]


def test_main_equal_strings(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hola\nhola\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Ingrese el contenido de string 1: " in out
    assert "Los string son iguales" in out


def test_main_truncates_long_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a" * 25 + "\nxy\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Los string NO son iguales" in out
    assert out.endswith(compare_report("a" * 18, "a" * 6))