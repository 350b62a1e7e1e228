"""Timestamp parsing and input format detection."""

from __future__ import annotations

from datetime import datetime

from pykhronos._constants import (
    ISO8601_RE,
    MAX_FRACTION_DIGITS,
    MILLIS_DETECTION_THRESHOLD,
    TOKEN_SEPARATORS,
)
from pykhronos._decimal import parse_decimal
from pykhronos._patterns import PatternMatcher, StrptimeMatcher
from pykhronos.formats import (
    Custom,
    EpochOffset,
    InputFormat,
    Iso8601,
    Unix,
    UnixMillis,
)
from pykhronos.timestamp import Timestamp

_default_matcher = StrptimeMatcher()


def split_token(line: str) -> int | None:
    """Return the index of the first space or tab, or None if there is none."""
    indexes = [i for i in (line.find(sep) for sep in TOKEN_SEPARATORS) if i >= 0]
    return min(indexes) if indexes else None


def parse_iso8601(token: str) -> Timestamp | None:
    """Parse ``YYYY-MM-DDThh:mm:ss[.fraction]``."""
    m = ISO8601_RE.fullmatch(token)
    if m is None:
        return None
    try:
        dt = datetime(
            int(m["year"]),
            int(m["month"]),
            int(m["day"]),
            int(m["hour"]),
            int(m["minute"]),
            int(m["second"]),
        )
    except ValueError:
        return None

    digits = (m["fraction"] or "")[:MAX_FRACTION_DIGITS]
    nanos = int(digits.ljust(MAX_FRACTION_DIGITS, "0"))
    return Timestamp.from_datetime(dt, nanos)


def _from_millis(token: str) -> Timestamp | None:
    parsed = parse_decimal(token)
    if parsed is None:
        return None
    millis, fraction = parsed
    seconds, rest = divmod(millis, 1000)
    return Timestamp(seconds, rest * 1_000_000 + fraction // 1000)


def parse_string(
    token: str,
    fmt: InputFormat,
    *,
    matcher: PatternMatcher | None = None,
) -> Timestamp | None:
    """Parse a token into a timestamp according to the given format.

    Args:
        token: The candidate timestamp text.
        fmt: How to interpret the token.
        matcher: Pattern matcher for :class:`Custom` formats. Defaults to
            :class:`StrptimeMatcher`.

    Returns:
        The timestamp, or None if the token does not conform to ``fmt`` or
        falls outside the years 1..9999.
    """
    if isinstance(fmt, Unix):
        parsed = parse_decimal(token)
        ts = Timestamp(*parsed) if parsed is not None else None
    elif isinstance(fmt, UnixMillis):
        ts = _from_millis(token)
    elif isinstance(fmt, EpochOffset):
        parsed = parse_decimal(token)
        ts = fmt.base.shift(*parsed) if parsed is not None else None
    elif isinstance(fmt, Iso8601):
        ts = parse_iso8601(token)
    elif isinstance(fmt, Custom):
        ts = (matcher or _default_matcher).match(token, fmt.pattern)
    else:
        raise TypeError(f"unsupported input format: {fmt!r}")

    if ts is None or not ts.is_representable():
        return None
    return ts


def parse_line(
    line: str,
    fmt: InputFormat,
    *,
    matcher: PatternMatcher | None = None,
) -> tuple[Timestamp | None, str]:
    """Split a line into its leading timestamp and the remainder.

    The timestamp must start the line, contain no space or tab, and be
    followed by a space or tab. That separator stays in the remainder.
    If no timestamp can be parsed the whole line is the remainder.
    """
    i = split_token(line)
    if i is None:
        return None, line
    ts = parse_string(line[:i], fmt, matcher=matcher)
    if ts is None:
        return None, line
    return ts, line[i:]


def detect_format(line: str) -> InputFormat | None:
    """Guess the input format from the leading token of a line.

    Only :class:`Iso8601`, :class:`UnixMillis` and :class:`Unix` are ever
    detected.
    """
    i = split_token(line)
    if i is None:
        return None
    token = line[:i]

    if parse_iso8601(token) is not None:
        return Iso8601()

    parsed = parse_decimal(token)
    if parsed is None:
        return None
    if parsed[0] > MILLIS_DETECTION_THRESHOLD:
        return UnixMillis()
    return Unix()
