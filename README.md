# pipex

`pipex` feeds a file through two commands joined by a pipe and writes the
result to another file, much as a shell does with
`< infile cmd1 | cmd2 > outfile`. Commands are looked up on the `PATH` of the
environment they run in.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pipex infile "grep foo" "wc -l" outfile
```

Exactly four arguments are expected; with any other number the command does
nothing. The output file is created or truncated with mode `0644`, even when
the input file cannot be opened; in that case the first command is skipped
and the second reads empty input. Problems are reported on standard error.
Command words are split on spaces, with empty words dropped; there is no
quoting.

## Library

```python
from pipex.pipeline import run_two, parse_command
from pipex.path import get_cmd_path, get_path

status1, status2 = run_two("in.txt", "grep foo", "wc -l", "out.txt",
                           env={"PATH": "/usr/bin:/bin"})

parse_command("ls -l  /tmp")          # ['ls', '-l', '/tmp']
get_cmd_path("ls", {"PATH": "/bin"})  # '/bin/ls' if it is executable, else None
get_path(["HOME=/root", "PATH=/bin"]) # '/bin'
```

`run_two` returns the exit statuses of both commands; a command that cannot
be found gets status 1.

The package also carries small helpers:

- `pipex.chars`: character tests and conversions, `atoi`, `itoa`
- `pipex.memory`: byte-buffer operations such as `memset`, `memmove`, `memcmp`
- `pipex.strutil` and `pipex.textops`: string searching, comparing, copying,
  `split`, `strtrim`, `substr` and the like
- `pipex.linkedlist`: `LinkedList` of `Node`s
- `pipex.output`: `format_printf` and `printf` with `%c %s %p %d %i %u %x %X %%`
- `pipex.linereader`: `LineReader`, reading a descriptor or stream line by
  line through a fixed-size buffer

## What it does not do

Only two commands can be chained. There is no way to run a longer chain of
commands, and no here-document input: the input always comes from a file.