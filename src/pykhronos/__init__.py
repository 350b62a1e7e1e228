"""pykhronos - Rewrite the leading timestamps of log lines."""

from __future__ import annotations

try:
    from pykhronos._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pykhronos._decimal import parse_decimal
from pykhronos._errors import (
    InvalidEpochError,
    InvalidFormatError,
    InvalidPatternError,
    InvalidPrecisionError,
    InvalidUnitError,
    KhronosError,
)
from pykhronos._options import parse_input_format, parse_output_format
from pykhronos._patterns import PatternMatcher, StrptimeMatcher
from pykhronos._reader import detect_format, parse_line, parse_string
from pykhronos._rewrite import RewrittenLine, rewrite_line, rewrite_lines
from pykhronos._writer import format_fixed_point, write
from pykhronos.formats import (
    Custom,
    Delta,
    EpochOffset,
    InputFormat,
    Iso8601,
    Iso8601Output,
    OutputFormat,
    Unit,
    Unix,
    UnixEpoch,
    UnixMillis,
)
from pykhronos.timestamp import EPOCH, Timestamp

__all__ = [
    "detect_format",
    "format_fixed_point",
    "parse_decimal",
    "parse_input_format",
    "parse_line",
    "parse_output_format",
    "parse_string",
    "rewrite_line",
    "rewrite_lines",
    "write",
    "EPOCH",
    "RewrittenLine",
    "Timestamp",
    "InputFormat",
    "OutputFormat",
    "Custom",
    "Delta",
    "EpochOffset",
    "Iso8601",
    "Iso8601Output",
    "Unit",
    "Unix",
    "UnixEpoch",
    "UnixMillis",
    "PatternMatcher",
    "StrptimeMatcher",
    "KhronosError",
    "InvalidEpochError",
    "InvalidFormatError",
    "InvalidPatternError",
    "InvalidPrecisionError",
    "InvalidUnitError",
]
