"""DateTime utilities for the project."""

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Fixed en-US month abbreviations; independent of the process locale
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_iso_timestamp(ts_iso: str) -> datetime:
    """Parse ISO timestamp string to a timezone-aware datetime (naive -> UTC)."""
    dt = datetime.fromisoformat(ts_iso.strip().replace('Z', '+00:00'))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_bucket_date(value: str) -> Optional[date]:
    """Parse a day bucket such as ``2024-01-15`` or a full ISO timestamp.

    Only the calendar date is kept, so a bucket never shifts to a
    neighbouring day because of the display timezone.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def format_month_day(day: date) -> str:
    """Format a date as a short en-US month/day label, e.g. ``Jan 5``."""
    return f"{MONTH_ABBR[day.month - 1]} {day.day}"


def format_local_timestamp(ts_iso: str, tz_name: str = "UTC") -> str:
    """Format an ISO timestamp as ``1/15/2024, 3:04:05 PM`` in ``tz_name``.

    Unparseable input is returned unchanged.
    """
    try:
        dt = parse_iso_timestamp(ts_iso)
    except (ValueError, AttributeError):
        return ts_iso
    try:
        dt = dt.astimezone(ZoneInfo(tz_name))
    except ZoneInfoNotFoundError:
        dt = dt.astimezone(timezone.utc)

    hour12 = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour12}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
