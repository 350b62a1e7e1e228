"""Exact decimal parsing into whole seconds and nanoseconds."""

from __future__ import annotations

import re

from pykhronos._constants import INT64_MAX, INT64_MIN, MAX_FRACTION_DIGITS

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DIGITS_RE = re.compile(r"[0-9]+")


def _parse_int64(s: str) -> int | None:
    if not _INTEGER_RE.fullmatch(s):
        return None
    value = int(s)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_decimal(s: str) -> tuple[int, int] | None:
    """Parse ``[sign]digits['.'digits]`` into integer and nano parts.

    At most nine fractional digits are used; further digits are dropped
    without rounding. The nano part counts forward from the integer part,
    so ``"-1.5"`` is ``(-1, 500_000_000)``.

    Returns:
        ``(integer, nanos)``, or None if ``s`` is not a decimal number or
        the integer part overflows a signed 64-bit value.
    """
    whole, point, fraction = s.partition(".")
    integer = _parse_int64(whole)
    if integer is None:
        return None
    if not point:
        return integer, 0

    fraction = fraction[:MAX_FRACTION_DIGITS]
    if not _DIGITS_RE.fullmatch(fraction):
        return None
    return integer, int(fraction) * 10 ** (MAX_FRACTION_DIGITS - len(fraction))
