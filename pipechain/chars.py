"""Character classification, case mapping, integer conversion and comparison."""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_lower",
    "to_upper",
    "atoi",
    "itoa",
    "strcmp",
    "strncmp",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE_CODES = frozenset(range(9, 14)) | {32}


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    """Reduce a value to the signed 32-bit range the way a C int wraps."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is honoured and parsing
    stops at the first non-digit. Text with no digits yields 0. The result
    wraps to the signed 32-bit range.
    """
    rest = text.lstrip("".join(map(chr, _SPACE_CODES)))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def _as_bytes(s: str | bytes) -> bytes:
    """Encode text to bytes and cut it at the first NUL, as C strings end there."""
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    end = data.find(0)
    return data if end < 0 else data[:end]


def strcmp(s1: str | bytes, s2: str | bytes) -> int:
    """Compare two strings byte by byte.

    Returns the difference of the first differing unsigned bytes, negative,
    zero or positive; the end of a string counts as a zero byte.
    """
    for a, b in zip_longest(_as_bytes(s1), _as_bytes(s2), fillvalue=0):
        if a != b:
            return a - b
    return 0


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most the first n bytes of two strings, like strcmp."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(_as_bytes(s1), _as_bytes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0