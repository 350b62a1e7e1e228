"""Pattern matching for custom timestamp formats."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime

from pykhronos._constants import MAX_FRACTION_DIGITS
from pykhronos._errors import ERR_MSG_INVALID_PATTERN, InvalidPatternError
from pykhronos.timestamp import Timestamp

FRACTION_DIRECTIVE = "%.f"
"""Optional ``.`` followed by fractional seconds at nanosecond resolution."""

_DIRECTIVE_RE = re.compile(r"%(%|\.f|.)")
_FRACTION_RE = re.compile(r"\.([0-9]+)")

_DATE_DIRECTIVES = ("%c", "%x")
_YEAR_DIRECTIVES = ("%Y", "%y")
_MONTH_DIRECTIVES = ("%m", "%b", "%B")
_HOUR_DIRECTIVES = ("%H", "%I", "%X", "%c")
_MINUTE_DIRECTIVES = ("%M", "%X", "%c")


class PatternMatcher(ABC):
    """Matches a token against a caller-supplied timestamp pattern."""

    @abstractmethod
    def match(self, token: str, pattern: str) -> Timestamp | None:
        """Return the timestamp ``token`` denotes, or None if it does not conform."""


class StrptimeMatcher(PatternMatcher):
    """strptime directives plus ``%.f`` for nanosecond fractions."""

    def match(self, token: str, pattern: str) -> Timestamp | None:
        split = _split_fraction(pattern)
        if split is None:
            return _to_timestamp(_strptime(token, pattern), None)

        head, tail = split
        for start, end, nanos in _fraction_spans(token):
            # The cut must sit where %.f sits in the pattern.
            if _strptime(token[:start], head) is None:
                continue
            if _strptime(token[end:], tail) is None:
                continue
            dt = _strptime(token[:start] + token[end:], head + tail)
            if dt is not None:
                return _to_timestamp(dt, nanos)
        return _to_timestamp(_strptime(token, head + tail), 0)


def _directives(pattern: str) -> list[re.Match[str]]:
    return [m for m in _DIRECTIVE_RE.finditer(pattern) if m.group() != "%%"]


def _split_fraction(pattern: str) -> tuple[str, str] | None:
    """Split the pattern around its first ``%.f``, or None if it has none."""
    for m in _directives(pattern):
        if m.group() == FRACTION_DIRECTIVE:
            return pattern[: m.start()], pattern[m.end() :]
    return None


def _strptime(token: str, pattern: str) -> datetime | None:
    try:
        return datetime.strptime(token, pattern)
    except ValueError:
        return None


def _to_timestamp(dt: datetime | None, nanos: int | None) -> Timestamp | None:
    if dt is None:
        return None
    return Timestamp.from_datetime(dt, nanos)


def _fraction_spans(token: str) -> Iterator[tuple[int, int, int]]:
    """Yield ``(start, end, nanos)`` for every ``.digits`` run in the token."""
    for m in _FRACTION_RE.finditer(token):
        digits = m.group(1)[:MAX_FRACTION_DIGITS]
        nanos = int(digits) * 10 ** (MAX_FRACTION_DIGITS - len(digits))
        yield m.start(), m.end(), nanos


def validate_pattern(pattern: str) -> None:
    """Reject patterns lacking a date, an hour or a minute field.

    Escaped ``%%`` sequences are literal text, not directives.
    """
    found = {m.group() for m in _directives(pattern)}

    def has_any(directives: tuple[str, ...]) -> bool:
        return not found.isdisjoint(directives)

    fractions = [m for m in _directives(pattern) if m.group() == FRACTION_DIRECTIVE]
    if len(fractions) > 1:
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"pattern {pattern!r} has more than one {FRACTION_DIRECTIVE} directive",
        )

    has_date = has_any(_DATE_DIRECTIVES) or (
        has_any(_YEAR_DIRECTIVES)
        and ((has_any(_MONTH_DIRECTIVES) and "%d" in found) or "%j" in found)
    )
    if not has_date:
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"pattern {pattern!r} has no date field",
        )
    if not has_any(_HOUR_DIRECTIVES):
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"pattern {pattern!r} has no hour field",
        )
    if not has_any(_MINUTE_DIRECTIVES):
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"pattern {pattern!r} has no minute field",
        )
