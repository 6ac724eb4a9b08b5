# pipeline_runner

Run a chain of commands the way a shell pipeline does, with the first
command reading from a file and the last writing to a file:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

Commands are looked up in the directories listed in the `PATH` entry of
the environment. A command line is split on spaces into words; runs of
spaces produce no empty words.

## Installation

```
pip install .
```

## Command line

Exactly two commands:

```
pipeline-runner infile "grep foo" "wc -l" outfile
```

Two or more commands:

```
pipeline-runner-multi infile "cat" "sort" "uniq -c" outfile
```

The output file is created with mode `0777` (subject to the umask) if
needed, and truncated before writing.

- With the wrong number of arguments, `too few args !!` is printed to
  standard error and the exit status is 0.
- If the input or output file cannot be opened, an error message is
  printed to standard error. `pipeline-runner` then exits with status 1,
  `pipeline-runner-multi` with status 0.
- A command that cannot be found prints
  `oops !! invalid command try again .` to standard error; the commands
  after it receive empty input and the pipeline carries on.

## Library use

```python
import os
from pipeline_runner.pipeline import run_pipeline, PipelineError
from pipeline_runner.commands import resolve_command, CommandNotFoundError

statuses = run_pipeline("in.txt", ["grep foo", "wc -l"], "out.txt", dict(os.environ))
```

`pipeline_runner.pipeline`:

- `run_pipeline(infile, commands, outfile, env=None)` runs the commands in
  a chain and returns the exit status of each command, in order. A command
  that cannot be found counts as status 0. It raises `PipelineError` when
  no command is given or when the input or output file cannot be opened.
  Without `env`, the current process environment is used.
- `main(argv=None)` and `main_multi(argv=None)` are the two commands
  above; they return the exit status.

`pipeline_runner.commands`:

- `search_dirs(env=None)` returns the `PATH` directories in order, each
  ending in `/`, with empty entries dropped. It raises
  `CommandNotFoundError` if there is no `PATH`.
- `parse_command(command)` splits a command line into its words and raises
  `CommandNotFoundError` for an empty one.
- `resolve_command(command, env=None)` returns a tuple of the executable's
  full path and the command's words, taking the first searchable `PATH`
  directory that holds an executable file of that name. It raises
  `CommandNotFoundError` if none does.

Smaller helpers:

- `pipeline_runner.textutils`: `split`, `strtrim`, `substr`, `strnstr`,
  `strncmp`, `strchr`, `strrchr`, `strlcpy`, `strlcat`, `strmapi`,
  `striteri`, `memchr`, `memcmp`.
- `pipeline_runner.chars`: `atoi`, `itoa`, `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
- `pipeline_runner.output`: `put_char_fd`, `put_str_fd`, `put_endl_fd`,
  `put_nbr_fd`, which write straight to a file descriptor.

## What it does not do

There is no shell syntax: no quoting or escaping in command lines, no
globbing, no variable expansion, and no here-document input. Command
names are always looked up on `PATH`; a name containing a slash is not
run as a path of its own.

## Running the tests

```
pip install .[test]
pytest
```