"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_SPACES = frozenset("\t\n\v\r\f ")
_DIGITS = frozenset("0123456789")


def _code(value: int | str) -> int:
    """Return the integer code of *value*, which is an int or a single character."""
    if isinstance(value, bool):
        raise TypeError("expected an integer code or a single character, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return ord(value)
    raise TypeError(f"expected an integer code or a single character, got {type(value).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text without digits yields 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _SPACES:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    return sign * int(digits) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return f"{number:d}"


def is_alpha(code: int | str) -> bool:
    """True for ASCII letters."""
    value = _code(code)
    return 65 <= value <= 90 or 97 <= value <= 122


def is_digit(code: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(code) <= 57


def is_alnum(code: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(code) <= 126


def to_upper(code: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    value = _code(code)
    if 97 <= value <= 122:
        value -= 32
    return chr(value) if isinstance(code, str) else value


def to_lower(code: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    value = _code(code)
    if 65 <= value <= 90:
        value += 32
    return chr(value) if isinstance(code, str) else value