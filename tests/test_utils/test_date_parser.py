"""Tests for timestamp parsing utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from sonar_issue_export.utils.date_parser import parse_timestamp, to_calendar_day


class TestParseTimestamp:
    """Test timestamp parsing functionality."""

    def test_parse_sonar_format(self) -> None:
        """Test SonarCloud's offset without colon."""
        result = parse_timestamp("2024-01-15T10:30:00+0000")
        assert result == datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)

    def test_parse_z_suffix(self) -> None:
        result = parse_timestamp("2024-01-15T10:30:00Z")
        assert result == datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)

    def test_parse_colon_offset(self) -> None:
        result = parse_timestamp("2024-01-15T10:30:00+01:00")
        assert result.utcoffset() == timedelta(hours=1)

    def test_parse_fractional_seconds(self) -> None:
        result = parse_timestamp("2024-01-15T10:30:00.250+0000")
        assert result.microsecond == 250000

    def test_parse_naive(self) -> None:
        assert parse_timestamp("2024-01-15T10:30:00") == datetime(2024, 1, 15, 10, 30)

    def test_parse_date_only(self) -> None:
        assert parse_timestamp("2024-01-15") == datetime(2024, 1, 15)

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Unable to parse timestamp"):
            parse_timestamp("yesterday")


class TestToCalendarDay:
    """Test calendar day truncation."""

    def test_utc_day(self) -> None:
        assert to_calendar_day("2024-01-15T10:30:00+0000") == "2024-01-15"

    def test_converted_to_utc(self) -> None:
        assert to_calendar_day("2024-01-15T01:30:00+0200") == "2024-01-14"

    def test_absent(self) -> None:
        assert to_calendar_day(None) == ""
        assert to_calendar_day("") == ""

    def test_unparseable_falls_back_to_prefix(self) -> None:
        assert to_calendar_day("2024-01-15 garbage") == "2024-01-15"
