"""Allocating string helpers: duplication, joining, slicing, trimming and splitting.

Inputs are read as C strings, ending at their first NUL character, if any.
"""

from __future__ import annotations

from collections.abc import Callable

from pipex.strutil import NUL, strcat, strcpy


def _separator(sep: int | str) -> str:
    if isinstance(sep, int):
        sep = chr(sep)
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return sep


def strdup(text: str) -> str:
    """Return a copy of the C string *text*."""
    return strcpy(text)


def strjoin(a: str, b: str) -> str:
    """Return *a* followed by *b*."""
    return strcat(a, b)


def strrev(text: str) -> str:
    """Return *text* reversed."""
    return strcpy(text)[::-1]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return the string made of func(index, char) for each character of *text*."""
    return "".join(func(index, ch) for index, ch in enumerate(strcpy(text)))


def striteri(text: str, func: Callable[[int, list[str]], None]) -> str:
    """Call func(index, chars) for each position of *text* and return the result.

    *chars* is the mutable list of characters, so *func* may change
    chars[index] in place. Iteration stops at a NUL character, and the
    result ends at the first NUL.
    """
    chars = list(strcpy(text))
    index = 0
    while index < len(chars) and chars[index] != NUL:
        func(index, chars)
        index += 1
    return strcpy("".join(chars))


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from index *start*.

    A start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: negative start or length")
    body = strcpy(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Return *text* without leading and trailing characters found in *charset*."""
    return strcpy(text).strip(strcpy(charset))


def split(text: str, sep: int | str) -> list[str]:
    """Split *text* on *sep*, dropping empty words."""
    return [word for word in strcpy(text).split(_separator(sep)) if word]