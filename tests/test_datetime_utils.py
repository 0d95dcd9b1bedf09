"""Tests for the datetime_utils module."""

from __future__ import annotations

import datetime

import pytest

from deadline_triage.utils.datetime_utils import (
    parse_calendar_date,
    parse_client_datetime,
    wall_clock_date,
)


class TestParseCalendarDate:
    """Tests for parse_calendar_date function."""

    def test_none_input(self):
        """None input returns None."""
        assert parse_calendar_date(None) is None

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_string(self, value):
        """Empty-but-present fields are treated as absent."""
        assert parse_calendar_date(value) is None

    def test_iso_date(self):
        assert parse_calendar_date("2024-01-01") == datetime.date(2024, 1, 1)

    def test_surrounding_whitespace(self):
        assert parse_calendar_date(" 2024-01-01\n") == datetime.date(2024, 1, 1)

    def test_timestamp_keeps_written_date(self):
        assert parse_calendar_date("2024-01-01T23:59:59+09:00") == datetime.date(
            2024, 1, 1
        )

    def test_space_separated_timestamp(self):
        assert parse_calendar_date("2024-03-09 08:00") == datetime.date(2024, 3, 9)

    @pytest.mark.parametrize("value", ["soon", "2024-02-30", "next week"])
    def test_not_a_date(self, value):
        assert parse_calendar_date(value) is None

    @pytest.mark.parametrize(
        "value", ["2024", "2024-03", "2024-W10", "2024-W10-1", "20240301", "2024-03-09x"]
    )
    def test_partial_or_non_calendar_forms(self, value):
        """Only a complete YYYY-MM-DD date part names a calendar day."""
        assert parse_calendar_date(value) is None


class TestParseClientDatetime:
    """Tests for parse_client_datetime function."""

    def test_none_input(self):
        assert parse_client_datetime(None) is None

    def test_z_suffix(self):
        result = parse_client_datetime("2025-11-17T13:42:00Z")
        assert result is not None
        assert result.utcoffset() == datetime.timedelta(0)
        assert (result.year, result.month, result.day, result.hour) == (2025, 11, 17, 13)

    def test_offset_is_not_converted(self):
        result = parse_client_datetime("2025-11-17T23:42:00-05:00")
        assert result is not None
        assert result.hour == 23
        assert result.day == 17

    def test_naive_datetime(self):
        result = parse_client_datetime("2025-11-17T13:42:00")
        assert result is not None
        assert result.tzinfo is None

    def test_invalid_string(self):
        assert parse_client_datetime("invalid") is None


def test_wall_clock_date():
    assert wall_clock_date("2025-11-17T23:42:00-05:00") == datetime.date(2025, 11, 17)
    assert wall_clock_date("nope") is None
