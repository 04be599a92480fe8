"""Tests for date formatting helpers."""

from datetime import date

from utils.datetime import (
    format_local_timestamp,
    format_month_day,
    parse_bucket_date,
    parse_iso_timestamp,
)


def test_parse_bucket_date():
    assert parse_bucket_date("2024-01-15") == date(2024, 1, 15)
    assert parse_bucket_date("2024-01-15T23:30:00Z") == date(2024, 1, 15)
    assert parse_bucket_date("") is None
    assert parse_bucket_date("yesterday") is None


def test_format_month_day():
    assert format_month_day(date(2024, 1, 5)) == "Jan 5"
    assert format_month_day(date(2024, 9, 30)) == "Sep 30"


def test_parse_iso_timestamp_naive_is_utc():
    dt = parse_iso_timestamp("2024-01-15T10:00:00")

    assert dt.utcoffset().total_seconds() == 0


def test_format_local_timestamp():
    assert format_local_timestamp("2024-01-15T00:05:00Z") == "1/15/2024, 12:05:00 AM"
    assert format_local_timestamp("2024-07-04T12:00:00Z") == "7/4/2024, 12:00:00 PM"


def test_format_local_timestamp_converts_timezone():
    assert format_local_timestamp("2024-01-15T20:00:00Z", "Asia/Kolkata") == "1/16/2024, 1:30:00 AM"


def test_format_local_timestamp_unknown_zone_falls_back_to_utc():
    assert format_local_timestamp("2024-01-15T20:00:00Z", "Mars/Olympus") == "1/15/2024, 8:00:00 PM"


def test_format_local_timestamp_invalid_input():
    assert format_local_timestamp("not a time") == "not a time"
    assert format_local_timestamp("") == ""
