import io
import os

import pytest

from pipechain.output import (
    format_string,
    print_format,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_put_char_to_stream():
    buf = io.StringIO()
    assert put_char("A", buf) == 1
    assert buf.getvalue() == "A"


def test_put_char_from_code():
    buf = io.StringIO()
    put_char(ord("z"), buf)
    assert buf.getvalue() == "z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_endl():
    buf = io.StringIO()
    put_str("Hello", buf)
    put_endl("World", buf)
    assert buf.getvalue() == "HelloWorld\n"


def test_put_nbr_negative_round_trip():
    buf = io.StringIO()
    put_nbr(-42, buf)
    assert int(buf.getvalue()) == -42


def test_put_str_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        put_str("Could not read infile!\n", write_fd)
        os.close(write_fd)
        assert os.read(read_fd, 100) == b"Could not read infile!\n"
    finally:
        os.close(read_fd)


def test_put_str_defaults_to_stdout(capsys):
    put_endl("line")
    assert capsys.readouterr().out == "line\n"


def test_format_plain_text_unchanged():
    assert format_string("no conversions here") == "no conversions here"


def test_format_decimal_round_trip():
    for n in (0, 7, -123, 2147483647):
        assert int(format_string("%d", n)) == n
        assert format_string("%i", n) == format_string("%d", n)


def test_format_decimal_wraps_to_int():
    assert format_string("%d", 2**31) == "-2147483648"


def test_format_string_and_null():
    assert format_string("cmd: %s", "ls") == "cmd: ls"
    assert format_string("%s", None) == "(null)"


def test_format_char_and_percent():
    assert format_string("%c%c", "o", "k") == "ok"
    assert format_string("100%%") == "100%"


def test_format_hex_round_trip_and_case():
    for n in (0, 15, 255, 3054, 123456789):
        lower = format_string("%x", n)
        assert int(lower, 16) == n
        assert lower == lower.lower()
        assert format_string("%X", n) == lower.upper()


def test_format_unsigned_of_negative():
    assert format_string("%u", -1) == "4294967295"
    assert format_string("%x", -1) == "ffffffff"


def test_format_pointer():
    assert format_string("%p", None) == "(nil)"
    text = format_string("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_unknown_conversion_produces_nothing():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_produces_nothing():
    assert format_string("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_print_format_returns_count(capsys):
    count = print_format("process child [%d] || fd : %d\n", 3, 5)
    out = capsys.readouterr().out
    assert out == "process child [3] || fd : 5\n"
    assert count == len(out)