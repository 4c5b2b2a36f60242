import io

import pytest

from pushswap.libft.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_one_char():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    assert out.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_adds_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_number_int_min():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, 1000])
def test_put_number_round_trips(number):
    out = io.StringIO()
    put_number(number, out)
    assert int(out.getvalue()) == number


def test_default_stream_is_stdout(capsys):
    put_str("Error\n")
    assert capsys.readouterr().out == "Error\n"


def test_writes_accumulate():
    out = io.StringIO()
    put_char("a", out)
    put_str("b", out)
    put_endl("c", out)
    assert out.getvalue() == "abc\n"