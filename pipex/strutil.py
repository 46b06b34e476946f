"""C-style string operations on Python strings.

Every input is read as a C string: it ends at its first NUL character, if
it has one. Positions are returned as indices into the input, and None
stands for "not found". Functions that fill a destination buffer in C
return the new string here.
"""

from __future__ import annotations

NUL = "\0"


def _cstr(text: str) -> str:
    """Return *text* up to, not including, its first NUL character."""
    end = text.find(NUL)
    return text if end == -1 else text[:end]


def _char(c: int | str) -> str:
    """Return *c*, given as a code or a one-character string, as a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _check_size(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative size {n}")


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(text))


def _compare(a: str, b: str) -> int:
    for x, y in zip(a + NUL, b + NUL):
        if x != y or x == NUL:
            return ord(x) - ord(y)
    return 0


def strcmp(a: str, b: str) -> int:
    """Return the difference of the first pair of unequal characters, or 0."""
    return _compare(_cstr(a), _cstr(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters, as strcmp does."""
    _check_size("strncmp", n)
    if n == 0:
        return 0
    return _compare(_cstr(a)[:n], _cstr(b)[:n])


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *text*, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    ch = _char(c)
    body = _cstr(text)
    if ch == NUL:
        return len(body)
    found = body.find(ch)
    return None if found == -1 else found


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *text*, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    ch = _char(c)
    body = _cstr(text)
    if ch == NUL:
        return len(body)
    found = body.rfind(ch)
    return None if found == -1 else found


def strstr(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of *needle*, or None.

    An empty needle is found at index 0.
    """
    found = _cstr(haystack).find(_cstr(needle))
    return None if found == -1 else found


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like strstr, but the match must lie within the first *length* characters."""
    _check_size("strnstr", length)
    needle = _cstr(needle)
    if not needle:
        return 0
    found = _cstr(haystack)[:length].find(needle)
    return None if found == -1 else found


def strcpy(src: str) -> str:
    """Return a copy of the C string *src*."""
    return _cstr(src)


def strncpy(src: str, n: int) -> str:
    """Return exactly *n* characters: *src* cut to *n*, padded with NULs.

    As in C, the result carries no terminator when *src* has *n* or more
    characters.
    """
    _check_size("strncpy", n)
    return _cstr(src)[:n].ljust(n, NUL)


def strcat(dest: str, src: str) -> str:
    """Return *src* appended to *dest*."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return at most *n* characters of *src* appended to *dest*."""
    _check_size("strncat", n)
    return _cstr(dest) + _cstr(src)[:n]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied string and strlen(src); the copy was cut short when
    the length is not less than *size*. With a size of 0 nothing is copied.
    """
    _check_size("strlcpy", size)
    body = _cstr(src)
    copied = body[:size - 1] if size else ""
    return copied, len(body)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting string and the length it tried to create. When
    *size* is not larger than strlen(dest), *dest* is left as it is and the
    length returned is size + strlen(src).
    """
    _check_size("strlcat", size)
    head = _cstr(dest)
    tail = _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    return head + tail[:size - 1 - len(head)], len(head) + len(tail)