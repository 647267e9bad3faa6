"""
Data models for the shift scheduling system.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from .exceptions import ConfigurationError
from .timeutils import DAY_NAMES, compare_time, parse_time

AUTO_GENERATED_NOTE = "Auto-generated"

STATUS_OPTIMAL = "optimal"
STATUS_WARNING = "warning"
STATUS_CRITICAL = "critical"
STATUS_CLOSED = "closed"

ISSUE_ERROR = "error"
ISSUE_WARNING = "warning"


@dataclass(frozen=True)
class AvailabilityWindow:
    """A window of time an employee is willing to work on a given weekday."""

    start: str
    end: str

    def __post_init__(self):
        # Raises InvalidTimeFormatError (a ValueError) for malformed times
        parse_time(self.start)
        parse_time(self.end)

    @property
    def wraps_midnight(self) -> bool:
        """True when the window ends on the following calendar day."""
        return compare_time(self.end, self.start) < 0


@dataclass
class Employee:
    """Represents an employee with a single position and weekly availability."""

    id: str
    name: str
    position: str
    availability: Dict[str, List[AvailabilityWindow]] = field(default_factory=dict)

    def windows_on(self, day: str) -> List[AvailabilityWindow]:
        """Availability windows for a weekday name, in declared order."""
        return self.availability.get(day.lower()) or []

    def is_available_on(self, day: str) -> bool:
        """Check if the employee declared any availability for this weekday."""
        return len(self.windows_on(day)) > 0


@dataclass
class DayHours:
    """Opening hours for one weekday."""

    open: str
    close: str
    closed: bool = False

    def __post_init__(self):
        parse_time(self.open)
        parse_time(self.close)


@dataclass
class Requirement:
    """Minimum staffing for one position on one calendar day."""

    min_count: int
    min_hours: int

    def __post_init__(self):
        for label, value in (("min_count", self.min_count), ("min_hours", self.min_hours)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{label} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{label} must be >= 0, got {value}")

    @property
    def target_shift_hours(self) -> int:
        """Whole hours each scheduled employee should work to reach min_hours."""
        if self.min_count == 0:
            return 0
        return math.ceil(self.min_hours / self.min_count)


@dataclass
class Settings:
    """Opening hours and per-position staffing requirements."""

    opening_hours: Dict[str, DayHours]
    requirements: Dict[str, Requirement]

    @property
    def positions(self) -> List[str]:
        """Required positions in requirement order."""
        return list(self.requirements.keys())

    def hours_for(self, day: str) -> DayHours:
        """
        Get the opening hours for a weekday name.

        Raises:
            ConfigurationError: If the weekday has no opening hours entry
        """
        hours = self.opening_hours.get(day.lower())
        if hours is None:
            raise ConfigurationError(
                f"No opening hours configured for '{day}'. "
                f"Expected entries for: {', '.join(DAY_NAMES)}"
            )
        return hours

    def is_closed_on(self, day: str) -> bool:
        """Check if the business is closed on this weekday."""
        return self.hours_for(day).closed


@dataclass
class Shift:
    """A single employee assignment on one calendar day."""

    employee_id: str
    employee_name: str
    position: str
    date: date
    start_time: str
    end_time: str
    notes: str = ""

    @property
    def is_auto_generated(self) -> bool:
        """True for shifts produced by the schedule generator."""
        return self.notes == AUTO_GENERATED_NOTE

    def to_dict(self) -> Dict[str, Any]:
        """Plain record for handing to a persistence layer."""
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "position": self.position,
            "date": self.date.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "notes": self.notes,
        }


@dataclass
class CoverageIssue:
    """A staffing deficiency found by the coverage evaluator."""

    type: str  # "error" or "warning"
    message: str


@dataclass
class PositionStats:
    """Scheduled headcount and whole hours for one position."""

    count: int = 0
    hours: int = 0


@dataclass
class CoverageReport:
    """Staffing health of a single day."""

    status: str
    issues: List[CoverageIssue] = field(default_factory=list)
    stats: Dict[str, PositionStats] = field(default_factory=dict)
    message: str | None = None

    @property
    def has_errors(self) -> bool:
        return any(issue.type == ISSUE_ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(issue.type == ISSUE_WARNING for issue in self.issues)

    @property
    def is_closed(self) -> bool:
        return self.status == STATUS_CLOSED
