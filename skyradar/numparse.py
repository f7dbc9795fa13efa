"""Lenient number parsing and word splitting used by traffic scripts and saves."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = "0123456789"
_WORD = re.compile(r"[A-Za-z0-9.]+")


def parse_int(text: str) -> int:
    """Read the integer at the start of ``text``.

    Signs are accepted until the first non-zero digit (each ``-`` flips the
    sign); later signs are ignored. Reading stops at the first other
    character. A value outside the 32-bit signed range yields 0.
    """
    value = 0
    sign = 1
    for char in text:
        if char in _DIGITS:
            value = value * 10 + sign * int(char)
            if not INT_MIN <= value <= INT_MAX:
                return 0
        elif char == "-":
            if value == 0:
                sign = -sign
        elif char != "+":
            break
    return value


def parse_float(text: str) -> float:
    """Read a decimal number: an integer part, then optional ``.`` digits.

    The fractional digits are always added, so a negative integer part
    is moved towards zero by them.
    """
    whole = parse_int(text)
    result = float(whole)
    rest = text[len(str(whole)):]
    if not rest.startswith("."):
        return result
    for power, char in enumerate(rest[1:], start=1):
        if char not in _DIGITS:
            break
        result += int(char) / 10**power
    return result


def split_words(text: str) -> list[str]:
    """Split ``text`` into runs of letters, digits and dots."""
    return _WORD.findall(text)


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` holds only digits and dots."""
    return all(char in _DIGITS or char == "." for char in text)


def format_int(value: float) -> str:
    """Render ``value`` truncated towards zero as a decimal integer."""
    return str(int(value))