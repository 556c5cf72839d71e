"""String helpers: splitting, searching, trimming, slicing and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strnstr",
    "strtrim",
    "substr",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strmapi",
    "striteri",
]

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return a one-character string for a character or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if c < 0:
        raise ValueError("character code must not be negative")
    return chr(c)


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on a single separator character, dropping empty pieces."""
    delimiter = _char(sep)
    return [piece for piece in text.split(delimiter) if piece]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in text.

    Searching for NUL finds the terminator, at index len(text).
    Returns None when c does not occur.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in text.

    Searching for NUL finds the terminator, at index len(text).
    Returns None when c does not occur.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find needle within the first n characters of haystack.

    An empty needle matches at index 0. The match must lie wholly inside
    the first n characters; None is returned otherwise.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start beyond the end of text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of s1 and s2."""
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits, at most size - 1 characters, and the full
    length of src, so truncation shows as a length of size or more.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length the result would have had
    without truncation. When size does not exceed len(dest), dest is left
    as it is and the length reported is size + len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply func(index, item) to each item of a mutable sequence in place.

    Whatever func returns replaces the item, unless it returns None, in
    which case the item is kept.
    """
    for index, item in enumerate(text):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement