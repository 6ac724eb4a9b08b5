"""Running commands as a pipeline between an input file and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence
from contextlib import ExitStack
from typing import IO, Any

from .commands import CommandNotFoundError, resolve_command

INVALID_COMMAND_MESSAGE = "oops !! invalid command try again ."
FAILURE_MESSAGE = "oops somthing wrong try again !!"
USAGE_MESSAGE = "too few args !!"

_OUTPUT_FLAGS = os.O_CREAT | os.O_RDWR | os.O_TRUNC
_OUTPUT_MODE = 0o777


class PipelineError(RuntimeError):
    """Raised when the pipeline's files cannot be opened or no command is given."""


def _close_upstream(upstream: Any, source: IO[bytes]) -> None:
    if upstream is not source and hasattr(upstream, "close"):
        upstream.close()


def _spawn(
    commands: Sequence[str],
    source: IO[bytes],
    out_fd: int,
    env: Mapping[str, str],
) -> list[int]:
    processes: list[subprocess.Popen[bytes] | None] = []
    upstream: Any = source
    last = len(commands) - 1
    for position, command in enumerate(commands):
        stdout: Any = out_fd if position == last else subprocess.PIPE
        try:
            path, argv = resolve_command(command, env)
            process = subprocess.Popen(
                argv, executable=path, stdin=upstream, stdout=stdout, env=dict(env)
            )
        except (CommandNotFoundError, OSError):
            print(INVALID_COMMAND_MESSAGE, file=sys.stderr)
            _close_upstream(upstream, source)
            processes.append(None)
            upstream = subprocess.DEVNULL
            continue
        _close_upstream(upstream, source)
        processes.append(process)
        upstream = process.stdout
    return [0 if process is None else process.wait() for process in processes]


def run_pipeline(
    infile: str | os.PathLike[str],
    commands: Iterable[str],
    outfile: str | os.PathLike[str],
    env: Mapping[str, str] | None = None,
) -> list[int]:
    """Feed *infile* through *commands* in turn and write the result to *outfile*.

    The output file is created or truncated. A command that cannot be found
    reports an error and counts as having produced nothing, with status 0.
    Returns the exit status of every command, in order.
    """
    command_list = list(commands)
    if not command_list:
        raise PipelineError("no commands given")
    environment: Mapping[str, str] = os.environ if env is None else env
    with ExitStack() as stack:
        first_error: OSError | None = None
        source: IO[bytes] | None = None
        out_fd = -1
        try:
            source = stack.enter_context(open(infile, "rb"))
        except OSError as exc:
            first_error = exc
        try:
            out_fd = os.open(outfile, _OUTPUT_FLAGS, _OUTPUT_MODE)
        except OSError as exc:
            first_error = first_error or exc
        else:
            stack.callback(os.close, out_fd)
        if first_error is not None or source is None:
            reason = first_error.strerror if first_error else "cannot open input"
            raise PipelineError(f"{FAILURE_MESSAGE}: {reason}") from first_error
        return _spawn(command_list, source, out_fd, environment)


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile``: exactly two commands."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE_MESSAGE, file=sys.stderr)
        return 0
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, [first, second], outfile)
    except PipelineError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def main_multi(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 ... cmdN outfile``: two or more commands."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(USAGE_MESSAGE, file=sys.stderr)
        return 0
    try:
        run_pipeline(args[0], args[1:-1], args[-1])
    except PipelineError as exc:
        print(exc, file=sys.stderr)
    return 0