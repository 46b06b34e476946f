"""Byte-buffer operations over bytearray objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(name: str, data: bytes | bytearray, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative length {n}")
    if n > len(data):
        raise ValueError(f"{name}: length {n} exceeds buffer of {len(data)} bytes")


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buffer* in place."""
    _check_length("bzero", buffer, n)
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of *nmemb* elements of *size* bytes.

    Raises OverflowError when the total size does not fit a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: negative size")
    if not nmemb or not size:
        return bytearray()
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"calloc: {nmemb} * {size} overflows")
    return bytearray(total)


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first *n* bytes of *buffer* to the byte value of *c*."""
    _check_length("memset", buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy *n* bytes from *src* to the start of *dest*."""
    _check_length("memcpy", dest, n)
    _check_length("memcpy", src, n)
    if dest is not src:
        dest[:n] = src[:n]
    return dest


def memccpy(dest: bytearray, src: bytes | bytearray, c: int, n: int) -> int | None:
    """Copy bytes from *src* into *dest*, stopping after byte *c* is copied.

    Returns the index in *dest* just past the copied *c*, or None when *c*
    does not appear in the first *n* bytes (all *n* are copied then).
    """
    _check_length("memccpy", src, min(n, len(src)))
    found = src.find(bytes([c & 0xFF]), 0, n)
    count = n if found == -1 else found + 1
    _check_length("memccpy", dest, count)
    _check_length("memccpy", src, count)
    dest[:count] = src[:count]
    return None if found == -1 else count


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes within *buffer* from offset *src* to offset *dest*.

    Overlapping regions are handled correctly.
    """
    if min(dest, src) < 0:
        raise ValueError("memmove: negative offset")
    _check_length("memmove", buffer, max(dest, src) + n)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to *c* in the first *n* bytes, or None."""
    _check_length("memchr", data, n)
    found = data.find(bytes([c & 0xFF]), 0, n)
    return None if found == -1 else found


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first unequal pair."""
    _check_length("memcmp", a, n)
    _check_length("memcmp", b, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)