"""Timestamp rendering with exact integer arithmetic."""

from __future__ import annotations

from pykhronos._constants import MAX_FRACTION_DIGITS, MAX_PRECISION, NANOS_PER_SECOND
from pykhronos.formats import Delta, Iso8601Output, OutputFormat, Unit, UnixEpoch
from pykhronos.timestamp import Timestamp


def format_fixed_point(seconds: int, nanos: int, unit: Unit, precision: int) -> str:
    """Render ``seconds + nanos / 1e9`` in ``unit`` with ``precision`` fraction digits.

    Fraction digits are truncated, never rounded, and zero-padded when the
    unit leaves fewer digits than requested. A negative value gets a single
    leading minus, even when every rendered digit is zero.
    """
    assert 0 <= precision <= MAX_PRECISION, f"precision out of range: {precision}"

    total = seconds * NANOS_PER_SECOND + nanos
    negative = total < 0
    seconds, nanos = divmod(abs(total), NANOS_PER_SECOND)

    scale = 1000 ** unit
    residue_scale = 1000 ** (3 - unit)
    whole = seconds * scale + nanos // residue_scale
    residue = nanos % residue_scale
    residue_digits = MAX_FRACTION_DIGITS - 3 * unit

    if precision == 0:
        text = str(whole)
    else:
        if precision <= residue_digits:
            fraction = residue // 10 ** (residue_digits - precision)
        else:
            fraction = residue * 10 ** (precision - residue_digits)
        text = f"{whole}.{fraction:0{precision}d}"

    return "-" + text if negative else text


def _format_iso8601(ts: Timestamp, precision: int, time_only: bool) -> str:
    assert 0 <= precision <= MAX_PRECISION, f"precision out of range: {precision}"

    dt = ts.to_datetime().replace(microsecond=0)
    text = dt.time().isoformat() if time_only else dt.isoformat()
    if precision == 0:
        return text
    fraction = f"{ts.nanos:09d}"[:precision]
    return f"{text}.{fraction}"


def write(fmt: OutputFormat, ts: Timestamp, previous: Timestamp | None = None) -> str:
    """Render a timestamp according to the output format.

    Args:
        fmt: The output format.
        ts: The timestamp to render.
        previous: The timestamp of the previous line, used by :class:`Delta`.
            A missing previous timestamp gives a zero delta.

    Returns:
        The rendered timestamp text.
    """
    if isinstance(fmt, Iso8601Output):
        return _format_iso8601(ts, fmt.precision, fmt.time_only)
    if isinstance(fmt, UnixEpoch):
        return format_fixed_point(ts.seconds, ts.nanos, fmt.unit, fmt.precision)
    if isinstance(fmt, Delta):
        delta = ts - (previous if previous is not None else ts)
        seconds, nanos = divmod(delta, NANOS_PER_SECOND)
        return format_fixed_point(seconds, nanos, fmt.unit, fmt.precision)
    raise TypeError(f"unsupported output format: {fmt!r}")
