"""Timestamp parsing and format detection tests."""

from datetime import datetime

import pytest

from pykhronos import (
    Custom,
    EpochOffset,
    Iso8601,
    Timestamp,
    Unix,
    UnixMillis,
    detect_format,
    parse_line,
    parse_string,
)
from pykhronos._patterns import PatternMatcher


def _at(*args, nanos=0):
    return Timestamp.from_datetime(datetime(*args), nanos)


class TestParseStringUnix:
    def test_integer(self):
        assert parse_string("1000", Unix()) == Timestamp(1000)

    def test_fraction(self):
        assert parse_string("1000.000123456", Unix()) == Timestamp(1000, 123456)

    def test_garbage(self):
        assert parse_string("abc", Unix()) is None

    def test_before_epoch(self):
        assert parse_string("-1.5", Unix()) == Timestamp(-1, 500_000_000)

    def test_outside_calendar(self):
        assert parse_string("9223372036854775807", Unix()) is None


class TestParseStringUnixMillis:
    def test_integer(self):
        assert parse_string("1234", UnixMillis()) == Timestamp(1, 234_000_000)

    def test_fraction(self):
        assert parse_string("1000.000123456", UnixMillis()) == Timestamp(1, 123)

    def test_sub_millisecond(self):
        assert parse_string("1.5", UnixMillis()) == Timestamp(0, 1_500_000)

    def test_negative(self):
        assert parse_string("-1", UnixMillis()) == Timestamp(-1, 999_000_000)

    def test_garbage(self):
        assert parse_string("abc", UnixMillis()) is None


class TestParseStringEpochOffset:
    def test_seconds(self, epoch_base):
        assert parse_string("86460", EpochOffset(epoch_base)) == _at(2000, 1, 2, 0, 1)

    def test_fraction(self, epoch_base):
        assert parse_string("86460.001", EpochOffset(epoch_base)) == _at(
            2000, 1, 2, 0, 1, nanos=1_000_000
        )

    def test_negative_offset(self, epoch_base):
        assert parse_string("-60", EpochOffset(epoch_base)) == _at(1999, 12, 31, 23, 59)

    def test_garbage(self, epoch_base):
        assert parse_string("abc", EpochOffset(epoch_base)) is None


class TestParseStringIso8601:
    def test_milliseconds(self):
        assert parse_string("2001-02-13T12:34:56.123", Iso8601()) == _at(
            2001, 2, 13, 12, 34, 56, nanos=123_000_000
        )

    def test_nanoseconds(self):
        assert parse_string("2001-02-13T12:34:56.123456789", Iso8601()) == _at(
            2001, 2, 13, 12, 34, 56, nanos=123_456_789
        )

    def test_extra_fraction_digits_truncated(self):
        assert parse_string("2001-02-13T12:34:56.1234567891", Iso8601()) == _at(
            2001, 2, 13, 12, 34, 56, nanos=123_456_789
        )

    def test_no_fraction(self):
        assert parse_string("2001-02-13T12:34:56", Iso8601()) == _at(
            2001, 2, 13, 12, 34, 56
        )

    @pytest.mark.parametrize(
        "token",
        [
            "2001-02-13 12:34:56",
            "2001-02-13",
            "2001-02-13T12:34",
            "2001-02-13T12:34:56.",
            "2001-13-13T12:34:56",
            "2001-02-30T12:34:56",
            "2001-02-13T24:00:00",
            "2001-02-13T12:34:56Z",
        ],
    )
    def test_rejects(self, token):
        assert parse_string(token, Iso8601()) is None


class TestParseStringCustom:
    def test_minutes(self):
        assert parse_string("2001-02-13 12:34", Custom("%Y-%m-%d %H:%M")) == _at(
            2001, 2, 13, 12, 34
        )

    def test_fraction_directive(self):
        fmt = Custom("%Y-%m-%d %H:%M:%S%.f")
        assert parse_string("2001-02-13 12:34:56.123456", fmt) == _at(
            2001, 2, 13, 12, 34, 56, nanos=123_456_000
        )

    def test_wrong_separators(self):
        assert parse_string("2001x02x13 12x34", Custom("%Y-%m-%d %H:%M")) is None

    def test_missing_time(self):
        assert parse_string("2001x02x13", Custom("%Y-%m-%d %H:%M")) is None

    def test_custom_matcher(self):
        class FixedMatcher(PatternMatcher):
            def match(self, token, pattern):
                return Timestamp(42) if token == pattern else None

        matcher = FixedMatcher()
        assert parse_string("abc", Custom("abc"), matcher=matcher) == Timestamp(42)
        assert parse_string("abd", Custom("abc"), matcher=matcher) is None


class TestParseLine:
    def test_space_separator(self):
        assert parse_line("123.4 Log message", Unix()) == (
            Timestamp(123, 400_000_000),
            " Log message",
        )

    def test_tab_separator(self):
        assert parse_line("123.4\tLog message", Unix()) == (
            Timestamp(123, 400_000_000),
            "\tLog message",
        )

    def test_first_separator_wins(self):
        assert parse_line("123.4\t Log message", Unix()) == (
            Timestamp(123, 400_000_000),
            "\t Log message",
        )

    def test_no_timestamp(self):
        assert parse_line("Log message", Unix()) == (None, "Log message")

    def test_no_whitespace(self):
        assert parse_line("Logmessage", Unix()) == (None, "Logmessage")

    def test_timestamp_without_whitespace(self):
        assert parse_line("123.4", Unix()) == (None, "123.4")

    def test_starts_with_space(self):
        assert parse_line(" Logmessage", Unix()) == (None, " Logmessage")

    def test_empty(self):
        assert parse_line("", Unix()) == (None, "")

    def test_iso(self):
        assert parse_line("2001-02-13T12:34:56 x", Iso8601()) == (
            _at(2001, 2, 13, 12, 34, 56),
            " x",
        )


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("982240496.123 Log message", Unix()),
            ("1650400500.123 Log message", Unix()),
            ("100000000000 Log message", Unix()),
            ("100000000001 Log message", UnixMillis()),
            ("982240496123.456 Log message", UnixMillis()),
            ("1650400500123.456 Log message", UnixMillis()),
            ("2001-12-13T12:34:56 Log message", Iso8601()),
            ("2001-12-13T12:34:56.123 Log message", Iso8601()),
        ],
    )
    def test_detects(self, line, expected):
        assert detect_format(line) == expected

    @pytest.mark.parametrize(
        "line",
        ["Log message", "Logmessage", " Logmessage", " ", "", "982240496.123"],
    )
    def test_no_format(self, line):
        assert detect_format(line) is None
