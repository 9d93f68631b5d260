"""
Date helpers for translating between calendar days and upstream time-unit boundaries.

The booking service starts each day at a property-specific anchor (the check-in
hour in the property's time zone), not at midnight UTC, and rejects boundary
timestamps that do not land exactly on that anchor.
"""
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, List
from zoneinfo import ZoneInfo

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_date_string(value) -> bool:
    return isinstance(value, str) and bool(DATE_PATTERN.fullmatch(value))


def boundary_timestamp(day: date, day_start: time, zone: ZoneInfo) -> str:
    """
    Start of the upstream time unit for a calendar day, as an ISO 8601 UTC string.

    Example: 2025-04-01 with a 14:00 anchor in Europe/Prague -> "2025-04-01T12:00:00Z"
    """
    local = datetime.combine(day, day_start, tzinfo=zone)
    return local.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def day_of_boundary(boundary: datetime, zone: ZoneInfo) -> date:
    """Calendar day a time-unit boundary belongs to, read in the property's zone."""
    if boundary.tzinfo is None:
        boundary = boundary.replace(tzinfo=timezone.utc)
    return boundary.astimezone(zone).date()


def format_day(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def consecutive_runs(days: Iterable[date]) -> List[List[date]]:
    """Split days into maximal runs of calendar-consecutive days, ascending."""
    runs: List[List[date]] = []
    for day in sorted(set(days)):
        if runs and runs[-1][-1] + timedelta(days=1) == day:
            runs[-1].append(day)
        else:
            runs.append([day])
    return runs
