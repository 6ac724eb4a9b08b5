"""String and byte helpers: splitting, trimming, searching, comparing, bounded copies."""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

_NUL = "\0"


def _single_char(value: str, what: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError(f"{what} must be a single character, got {value!r}")
    return value


def _non_negative(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    _single_char(sep, "separator")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start past the end of the text yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* lying wholly within the first *length* characters of *haystack*.

    Returns the index of the match, 0 for an empty needle, or ``None``.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; the result is the code difference at the first mismatch.

    The end of a string compares as code 0, and comparison stops at a NUL character.
    """
    _non_negative(n, "n")
    for left, right in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def strchr(text: str, char: str) -> int | None:
    """Index of the first *char* in *text*; a NUL finds the end of the text."""
    _single_char(char, "char")
    if char == _NUL:
        return len(text)
    found = text.find(char)
    return None if found < 0 else found


def strrchr(text: str, char: str) -> int | None:
    """Index of the last *char* in *text*; a NUL finds the end of the text."""
    _single_char(char, "char")
    if char == _NUL:
        return len(text)
    found = text.rfind(char)
    return None if found < 0 else found


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text and the full length of *src*.
    """
    _non_negative(size, "size")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* slots, one kept for the terminator.

    Returns the resulting text and the length the full result would have had;
    when *dst* already fills the buffer that length is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call ``func(index, char)`` on every character, in order.

    A returned character replaces the one passed in; ``None`` keeps it.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def _check_span(data: bytes | bytearray | memoryview, n: int, what: str) -> None:
    if n > len(data):
        raise ValueError(f"{what} holds {len(data)} bytes, fewer than {n}")


def memchr(data: bytes | bytearray | memoryview, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value & 0xFF`` among the first *n* bytes."""
    _non_negative(n, "n")
    _check_span(data, n, "data")
    found = bytes(data[:n]).find(value & 0xFF)
    return None if found < 0 else found


def memcmp(
    first: bytes | bytearray | memoryview,
    second: bytes | bytearray | memoryview,
    n: int,
) -> int:
    """Compare the first *n* bytes; the result is the difference at the first mismatch."""
    _non_negative(n, "n")
    _check_span(first, n, "first")
    _check_span(second, n, "second")
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0