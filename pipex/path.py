"""Resolving command names against the PATH of an environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.textops import split

_PREFIX = "PATH="

Environment = Mapping[str, str] | Iterable[str]


def get_path(env: Environment | None) -> str | None:
    """Return the value of PATH in *env*, or None when it has none.

    *env* is a mapping of names to values, or a sequence of "NAME=value"
    strings, in which the first entry starting with "PATH=" wins.
    """
    if env is None:
        return None
    if isinstance(env, Mapping):
        return env.get("PATH")
    return next(
        (entry[len(_PREFIX):] for entry in env if entry.startswith(_PREFIX)),
        None,
    )


def get_cmd_path(cmd: str | None, env: Environment | None = None) -> str | None:
    """Return the first "<dir>/<cmd>" from PATH that is executable, or None.

    *env* defaults to the process environment. Empty PATH entries are
    skipped, and the command name is always joined to a directory.
    """
    if not cmd:
        return None
    search = get_path(os.environ if env is None else env)
    if search is None:
        return None
    return next(
        (
            candidate
            for candidate in (f"{directory}/{cmd}" for directory in split(search, ":"))
            if os.access(candidate, os.X_OK)
        ),
        None,
    )