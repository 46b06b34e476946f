"""Run two commands joined by a pipe, from an input file to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.path import get_cmd_path
from pipex.textops import split

_OUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUT_MODE = 0o644


def parse_command(text: str) -> list[str]:
    """Split a command line into its words on spaces, dropping empty words."""
    return split(text, " ")


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _open_files(infile: str, outfile: str) -> tuple[int | None, int | None]:
    """Open the input for reading and the output for writing; None marks a failure."""
    error: OSError | None = None
    try:
        in_fd: int | None = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        in_fd, error = None, exc
    try:
        out_fd: int | None = os.open(outfile, _OUT_FLAGS, _OUT_MODE)
    except OSError as exc:
        out_fd, error = None, exc
    if error is not None:
        _report(f"Can't open files: {error.strerror}")
    return in_fd, out_fd


def _spawn(
    args: list[str],
    path: str | None,
    stdin: int | object,
    stdout: int | object | None,
    env: Mapping[str, str],
) -> subprocess.Popen | None:
    """Start *args* from *path*; report and return None when it cannot start."""
    name = args[0] if args else ""
    if path is None:
        _report(f"execve: {name}: command not found")
        return None
    try:
        return subprocess.Popen(args, executable=path, stdin=stdin, stdout=stdout, env=dict(env))
    except OSError as exc:
        _report(f"execve: {name}: {exc.strerror}")
        return None


def run_two(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Run "< infile first | second > outfile" and return both exit statuses.

    The output file is created or truncated even when the input cannot be
    opened; the first command is then skipped with status 0 and the second
    reads empty input. A command that cannot be found gets status 1.
    """
    environment: Mapping[str, str] = os.environ if env is None else env
    args1 = parse_command(first)
    args2 = parse_command(second)
    path1 = get_cmd_path(args1[0], environment) if args1 else None
    path2 = get_cmd_path(args2[0], environment) if args2 else None

    in_fd, out_fd = _open_files(infile, outfile)
    try:
        proc1 = None
        status1 = 0
        if in_fd is not None:
            proc1 = _spawn(args1, path1, in_fd, subprocess.PIPE, environment)
            if proc1 is None:
                status1 = 1
        stdin2 = proc1.stdout if proc1 is not None else subprocess.DEVNULL
        proc2 = _spawn(args2, path2, stdin2, out_fd, environment)
        if proc1 is not None and proc1.stdout is not None:
            proc1.stdout.close()
        if proc1 is not None:
            status1 = proc1.wait()
        status2 = proc2.wait() if proc2 is not None else 1
    finally:
        for fd in (in_fd, out_fd):
            if fd is not None:
                os.close(fd)
    return status1, status2


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: pipex infile "cmd1" "cmd2" outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 4:
        run_two(args[0], args[1], args[2], args[3])
    return 0