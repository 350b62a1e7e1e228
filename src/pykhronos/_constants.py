"""Numeric limits and fixed patterns for timestamp rewriting."""

import re

NANOS_PER_SECOND = 1_000_000_000

MAX_FRACTION_DIGITS = 9
"""Fractional digits kept when parsing; anything beyond is truncated."""

MAX_PRECISION = 9
"""Largest number of fractional digits the writer renders."""

MILLIS_DETECTION_THRESHOLD = 100_000_000_000
"""Integer parts above this are detected as milliseconds.

100 billion is 1973-03-03 read as milliseconds but 5138-11-16 read as
seconds.
"""

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ISO8601_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
)

TOKEN_SEPARATORS = (" ", "\t")
