"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(char: str, fd: int) -> None:
    """Write a single character to *fd*."""
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError(f"expected a single character, got {char!r}")
    _write_all(fd, char.encode())


def put_str_fd(text: str | None, fd: int) -> None:
    """Write *text* to *fd*; ``None`` writes nothing."""
    if text:
        _write_all(fd, text.encode())


def put_endl_fd(text: str | None, fd: int) -> None:
    """Write *text* followed by a newline to *fd*."""
    put_str_fd(text, fd)
    put_char_fd("\n", fd)


def put_nbr_fd(number: int, fd: int) -> None:
    """Write the decimal representation of *number* to *fd*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    _write_all(fd, f"{number:d}".encode())