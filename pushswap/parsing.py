"""Turning the program's argument text into a list of integers."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    return [word for word in text.split(sep) if word]


def _wrap_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does, wrapping to 32 bits.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit, and text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def parse_stack(text: str) -> list[int]:
    """Parse space-separated numbers into a stack, top first."""
    return [parse_int(word) for word in split_words(text, " ")]