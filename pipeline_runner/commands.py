"""Locating commands on the search path and splitting command lines into words."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .textutils import split

_PATH_PREFIX = "PATH="


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be parsed or found on the search path."""


def _environment(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def search_dirs(env: Mapping[str, str] | None = None) -> list[str]:
    """Return the directories of ``PATH`` in order, each ending in a slash.

    Empty entries are dropped. A missing ``PATH`` raises CommandNotFoundError.
    """
    value = _environment(env).get("PATH")
    if value is None:
        raise CommandNotFoundError("no PATH in the environment")
    if value.startswith(_PATH_PREFIX):
        value = value[len(_PATH_PREFIX):]
    return [f"{directory}/" for directory in split(value, ":")]


def parse_command(command: str) -> list[str]:
    """Split a command line on spaces into its words, dropping empty ones."""
    words = split(command, " ")
    if not words:
        raise CommandNotFoundError(f"empty command: {command!r}")
    return words


def resolve_command(
    command: str, env: Mapping[str, str] | None = None
) -> tuple[str, list[str]]:
    """Find the program for *command* on the search path.

    The program name is appended to each searchable directory in turn; the
    first candidate that is an executable file wins. Returns that path and the
    command's words, the program name first.
    """
    argv = parse_command(command)
    name = argv[0]
    for directory in search_dirs(env):
        if not os.access(directory, os.X_OK):
            continue
        candidate = directory + name
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate, argv
    raise CommandNotFoundError(f"command not found: {name}")