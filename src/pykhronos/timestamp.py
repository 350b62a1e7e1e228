"""Naive timestamps with nanosecond resolution."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from pykhronos._constants import NANOS_PER_SECOND

EPOCH = datetime(1970, 1, 1)

_MIN_SECONDS = (datetime.min - EPOCH) // timedelta(seconds=1)
_MAX_SECONDS = (datetime.max.replace(microsecond=0) - EPOCH) // timedelta(seconds=1)


@dataclass(frozen=True, order=True)
class Timestamp:
    """A zone-less point in time: whole seconds since 1970-01-01 plus nanos.

    ``nanos`` always counts forward from ``seconds``, including before the
    epoch: half a second before the epoch is ``Timestamp(-1, 500_000_000)``.
    """

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(f"nanos out of range: {self.nanos}")

    @classmethod
    def from_nanos(cls, total: int) -> Timestamp:
        seconds, nanos = divmod(total, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_datetime(cls, dt: datetime, nanos: int | None = None) -> Timestamp:
        """Build a timestamp from a naive datetime.

        Args:
            dt: The calendar date and time. Any tzinfo is ignored.
            nanos: Sub-second nanoseconds overriding ``dt.microsecond``.
        """
        whole = dt.replace(microsecond=0, tzinfo=None)
        seconds = (whole - EPOCH) // timedelta(seconds=1)
        if nanos is None:
            nanos = dt.microsecond * 1000
        return cls(seconds, nanos)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def is_representable(self) -> bool:
        """Whether the timestamp falls within the calendar years 1..9999."""
        return _MIN_SECONDS <= self.seconds <= _MAX_SECONDS

    def shift(self, seconds: int, nanos: int = 0) -> Timestamp:
        """Return the timestamp moved by a signed offset."""
        return Timestamp.from_nanos(
            self.total_nanos + seconds * NANOS_PER_SECOND + nanos
        )

    def to_datetime(self) -> datetime:
        """Return the calendar datetime, truncated to microseconds.

        Raises:
            OverflowError: If the timestamp is outside the datetime range.
        """
        return EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)

    def __sub__(self, other: Timestamp) -> int:
        """Signed difference in nanoseconds."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.total_nanos - other.total_nanos
