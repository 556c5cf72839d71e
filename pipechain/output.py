"""Writing characters, strings and numbers, and printf-style formatting."""

from __future__ import annotations

import os
import sys
from typing import Any, Optional, TextIO, Union

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
    "format_string",
    "print_format",
]

Stream = Union[int, TextIO, None]

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _write(text: str, stream: Stream) -> int:
    """Write text to a file descriptor or a text stream; return its length."""
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, int):
        data = text.encode("utf-8")
        view = memoryview(data)
        while view:
            written = os.write(stream, view)
            view = view[written:]
    else:
        stream.write(text)
    return len(text)


def _char_of(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def put_char(c: Union[str, int], stream: Stream = None) -> int:
    """Write one character; an int is taken as a character code."""
    return _write(_char_of(c), stream)


def put_str(text: str, stream: Stream = None) -> int:
    """Write a string as it is."""
    return _write(text, stream)


def put_endl(text: str, stream: Stream = None) -> int:
    """Write a string followed by a newline."""
    return _write(text + "\n", stream)


def put_nbr(n: int, stream: Stream = None) -> int:
    """Write an integer in decimal."""
    return _write(str(int(n)), stream)


def _to_signed32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _to_unsigned32(value: int) -> int:
    return value & 0xFFFFFFFF


def _in_base(value: int, digits: str) -> str:
    base = len(digits)
    out = [digits[value % base]]
    value //= base
    while value:
        out.append(digits[value % base])
        value //= base
    return "".join(reversed(out))


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + _in_base(address, _LOWER_DIGITS)


def _convert(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cdisuxXp":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _char_of(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_signed32(int(value)))
    if spec == "u":
        return str(_to_unsigned32(int(value)))
    if spec == "x":
        return _in_base(_to_unsigned32(int(value)), _LOWER_DIGITS)
    if spec == "X":
        return _in_base(_to_unsigned32(int(value)), _UPPER_DIGITS)
    return _pointer(value)


def format_string(fmt: str, *args: Any) -> str:
    """Format fmt with the conversions %c %s %d %i %u %x %X %p and %%.

    Integers are taken as 32-bit C ints; %s of None gives "(null)" and %p
    of None or 0 gives "(nil)". An unknown conversion, or a lone % at the
    end, produces nothing.
    """
    pending = list(args)
    parts: list[str] = []
    pieces = iter(fmt)
    for ch in pieces:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(pieces, None)
        if spec is not None:
            parts.append(_convert(spec, pending))
    return "".join(parts)


def print_format(fmt: str, *args: Any) -> int:
    """Format like format_string, write to standard output; return the count."""
    return _write(format_string(fmt, *args), sys.stdout)