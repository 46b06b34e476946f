"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    """Return the character code of *c*, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
        return chr(code) if isinstance(c, str) else code
    return c


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
        return chr(code) if isinstance(c, str) else code
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(int(n))