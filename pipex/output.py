"""Formatted output to text streams: a small printf and put_* writers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from pipex.strutil import strcpy

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_CONVERSIONS = frozenset("cspdiuxX")


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _to_int32(value: int) -> int:
    """Wrap *value* to a signed 32-bit integer."""
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def format_hex(value: int, upper: bool = False) -> str:
    """Return *value* in hexadecimal, without prefix."""
    value = int(value)
    if value < 0:
        raise ValueError(f"format_hex: negative value {value}")
    if value == 0:
        return "0"
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def format_address(address: int | None) -> str:
    """Return *address* as 0x-prefixed lower-case hex, or "(nil)" for a null address."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address)


def _char_of(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONVERSIONS:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _char_of(value)
    if spec == "s":
        return "(null)" if value is None else strcpy(str(value))
    if spec == "p":
        return format_address(value)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    return format_hex(int(value) & _UINT_MASK, upper=spec == "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Render *fmt* with the conversions %c %s %p %d %i %u %x %X and %%.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing '%' is dropped.
    """
    values = iter(args)
    chars = iter(strcpy(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if not spec:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered *fmt* to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    _out(stream).write(text)
    return len(text)


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character, given as a code or a one-character string."""
    _out(stream).write(_char_of(c))


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write the C string *text*."""
    _out(stream).write(strcpy(text))


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write the C string *text* followed by a newline."""
    _out(stream).write(strcpy(text) + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the signed decimal form of *n*."""
    _out(stream).write(str(int(n)))


def put_unbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of the non-negative integer *n*."""
    n = int(n)
    if n < 0:
        raise ValueError(f"put_unbr: negative value {n}")
    _out(stream).write(str(n))