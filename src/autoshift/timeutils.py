"""
Time-of-day and calendar helpers.

Times are "HH:MM" strings in 24-hour local time. Comparisons here are raw
minutes-since-midnight comparisons: nothing in this module unwraps intervals
that cross midnight, except ``hour_span`` which applies a single +24 bump.
"""

import re
from datetime import date, datetime, timedelta
from typing import List, Tuple

from .exceptions import InvalidDateFormatError, InvalidTimeFormatError

DAY_NAMES = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")


def parse_time(value: str) -> Tuple[int, int]:
    """
    Split an "HH:MM" string into (hour, minute).

    Raises:
        InvalidTimeFormatError: If the value is not a valid 24-hour time
    """
    if not isinstance(value, str):
        raise InvalidTimeFormatError(
            f"Time must be a string in HH:MM format, got: {value!r}"
        )

    match = _TIME_PATTERN.match(value.strip())
    if match is None:
        raise InvalidTimeFormatError(
            f"Time must be in 24-hour HH:MM format, got: {value!r}. Example: 09:30"
        )

    return int(match.group(1)), int(match.group(2))


def format_time(hour: int, minute: int) -> str:
    """Format an hour/minute pair as zero-padded "HH:MM"."""
    return f"{hour:02d}:{minute:02d}"


def is_valid_time(value: str) -> bool:
    """Check whether a value is a well-formed "HH:MM" time."""
    try:
        parse_time(value)
    except InvalidTimeFormatError:
        return False
    return True


def to_minutes(value: str) -> int:
    """Minutes since midnight for an "HH:MM" time."""
    hour, minute = parse_time(value)
    return hour * 60 + minute


def compare_time(first: str, second: str) -> int:
    """
    Compare two times as raw minutes since midnight.

    Returns a negative number, zero or a positive number when ``first`` is
    earlier than, equal to or later than ``second``. "00:00" is always the
    earliest time of day.
    """
    return to_minutes(first) - to_minutes(second)


def add_hours(value: str, hours: int) -> str:
    """
    Add whole hours to a time, wrapping the hour past 24:00 back to 00:00.

    Minutes are carried over unchanged.
    """
    hour, minute = parse_time(value)
    return format_time((hour + hours) % 24, minute)


def hour_span(start: str, end: str) -> int:
    """
    Whole-hour length of a shift, from the hour components only.

    An end hour lower than the start hour is taken to be on the next day.
    """
    start_hour, _ = parse_time(start)
    end_hour, _ = parse_time(end)
    if end_hour < start_hour:
        end_hour += 24
    return end_hour - start_hour


def is_valid_time_range(start: str, end: str) -> bool:
    """Check that both times are valid and ``end`` is strictly after ``start``."""
    if not is_valid_time(start) or not is_valid_time(end):
        return False
    return compare_time(end, start) > 0


def is_time_within_range(
    check_start: str, check_end: str, range_start: str, range_end: str
) -> bool:
    """Check that [check_start, check_end] lies inside [range_start, range_end]."""
    return (
        compare_time(check_start, range_start) >= 0
        and compare_time(check_end, range_end) <= 0
    )


def parse_date(value: date | str) -> date:
    """
    Accept a date or an ISO 8601 (YYYY-MM-DD) string.

    Raises:
        InvalidDateFormatError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidDateFormatError(
            f"Date must be in ISO 8601 format (YYYY-MM-DD), got: {value}. "
            f"Example: 2026-01-05"
        ) from None


def day_name(value: date | str) -> str:
    """Lower-case English weekday name for a date."""
    return DAY_NAMES[parse_date(value).weekday()]


def week_dates(start: date | str) -> List[date]:
    """Seven consecutive calendar days beginning at ``start``."""
    first = parse_date(start)
    return [first + timedelta(days=k) for k in range(7)]
