"""
Checks for manually entered shifts.
"""

from dataclasses import dataclass

from .exceptions import InvalidTimeFormatError
from .models import Employee
from .timeutils import is_time_within_range, is_valid_time_range, parse_time


@dataclass
class AvailabilityConflict:
    """Outcome of checking a shift against an employee's availability."""

    has_conflict: bool
    message: str | None = None


def validate_shift_times(start: str, end: str) -> None:
    """
    Validate the times of a manually entered shift.

    Raises:
        InvalidTimeFormatError: If either time is malformed or end is not after start
    """
    parse_time(start)
    parse_time(end)

    if not is_valid_time_range(start, end):
        raise InvalidTimeFormatError(
            f"Shift end time {end} must be after start time {start}"
        )


def check_availability_conflict(
    employee: Employee, day: str, start: str, end: str
) -> AvailabilityConflict:
    """
    Check a proposed shift against every availability window for the day.

    Unlike the generator, all of the day's windows are considered.
    """
    windows = employee.windows_on(day)
    if not windows:
        return AvailabilityConflict(
            has_conflict=True, message="Employee not available on this day"
        )

    for window in windows:
        if is_time_within_range(start, end, window.start, window.end):
            return AvailabilityConflict(has_conflict=False)

    return AvailabilityConflict(
        has_conflict=True, message="Shift time outside employee availability"
    )
