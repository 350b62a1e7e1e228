"""Input and output format types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pykhronos.timestamp import Timestamp


class Unit(enum.IntEnum):
    """Output unit; the value is the power of 1000 relative to seconds."""

    SECONDS = 0
    MILLISECONDS = 1
    MICROSECONDS = 2
    NANOSECONDS = 3


# --- Input formats ---


@dataclass(frozen=True)
class Unix:
    """Seconds since 1970-01-01, optionally fractional."""


@dataclass(frozen=True)
class UnixMillis:
    """Milliseconds since 1970-01-01, optionally fractional."""


@dataclass(frozen=True)
class EpochOffset:
    """Seconds since an arbitrary base timestamp."""

    base: Timestamp


@dataclass(frozen=True)
class Iso8601:
    """``YYYY-MM-DDThh:mm:ss`` with optional fractional seconds."""


@dataclass(frozen=True)
class Custom:
    """A strptime pattern, e.g. ``"%Y-%m-%d_%H:%M"``.

    Date, hour and minute fields are mandatory.
    """

    pattern: str


InputFormat = Unix | UnixMillis | EpochOffset | Iso8601 | Custom


# --- Output formats ---


@dataclass(frozen=True)
class Iso8601Output:
    precision: int = 0
    time_only: bool = False


@dataclass(frozen=True)
class UnixEpoch:
    unit: Unit = Unit.SECONDS
    precision: int = 0


@dataclass(frozen=True)
class Delta:
    """Time since the previous timestamp."""

    unit: Unit = Unit.SECONDS
    precision: int = 0


OutputFormat = Iso8601Output | UnixEpoch | Delta
