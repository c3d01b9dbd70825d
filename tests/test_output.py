import io

import pytest

from ftkit.conversions import itoa
from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_empty():
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    assert buf.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line" + "\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_empty_string_writes_newline():
    buf = io.StringIO()
    put_endl("", buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 9, 10, -1, 42, -2147483648, 2147483647])
def test_put_nbr_matches_itoa(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == itoa(n)
    assert int(buf.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("d")
    put_nbr(-7)
    put_endl("e")
    assert capsys.readouterr().out == "abc" + "d" + itoa(-7) + "e\n"