"""
ABOUTME: Unit tests for the duration literal parser
ABOUTME: Tests units, fractions, signs, malformed literals and range limits
"""

from datetime import timedelta

import pytest

from envlookup.durations import MAX_NANOSECONDS, parse_duration, parse_duration_ns


class TestParseDuration:
    """Test parsing duration literals into timedeltas."""

    def test_minutes_and_seconds(self):
        """Test the longest recorded track literal."""
        assert parse_duration("27m32s") == timedelta(minutes=27, seconds=32)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", timedelta(0)),
            ("-0", timedelta(0)),
            ("10h2m", timedelta(hours=10, minutes=2)),
            ("1.5h", timedelta(hours=1, minutes=30)),
            (".5s", timedelta(milliseconds=500)),
            ("1.s", timedelta(seconds=1)),
            ("300ms", timedelta(milliseconds=300)),
            ("-1m30s", -timedelta(minutes=1, seconds=30)),
            ("+45s", timedelta(seconds=45)),
            ("2us", timedelta(microseconds=2)),
            ("2µs", timedelta(microseconds=2)),
            ("2μs", timedelta(microseconds=2)),
            ("1h1h", timedelta(hours=2)),
        ],
    )
    def test_valid_literals(self, text, expected):
        assert parse_duration(text) == expected

    def test_sub_microsecond_values_truncate_toward_zero(self):
        """Test that nanosecond precision is truncated to microseconds."""
        assert parse_duration("1500ns") == timedelta(microseconds=1)
        assert parse_duration("-1500ns") == timedelta(microseconds=-1)
        assert parse_duration_ns("1500ns") == 1500

    @pytest.mark.parametrize("text", ["", "-", "s", ".s", "1.2.3s", "1 h", "h1"])
    def test_invalid_literals(self, text):
        with pytest.raises(ValueError):
            parse_duration(text)

    def test_missing_unit(self):
        with pytest.raises(ValueError, match='missing unit in duration "27"'):
            parse_duration("27")

    def test_unknown_unit(self):
        with pytest.raises(ValueError, match='unknown unit "d" in duration "3d"'):
            parse_duration("3d")

    def test_range_limits(self):
        """Test the signed 64-bit nanosecond bounds."""
        assert parse_duration_ns("9223372036854775807ns") == MAX_NANOSECONDS
        assert parse_duration_ns("-9223372036854775808ns") == -MAX_NANOSECONDS - 1
        with pytest.raises(ValueError, match="out of range"):
            parse_duration_ns("9223372036854775808ns")
        with pytest.raises(ValueError, match="out of range"):
            parse_duration("3000000h")
