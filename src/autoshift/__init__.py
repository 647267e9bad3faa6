"""
autoshift - Automatic shift generation and staffing coverage checks.
"""

__version__ = "0.1.0"

from .config import ConfigLoader, SchedulingInput, default_settings
from .coverage import CoverageEvaluator, shifts_on, validate_daily_coverage
from .exceptions import (
    AutoshiftError,
    ConfigurationError,
    InvalidDateFormatError,
    InvalidTimeFormatError,
)
from .generator import (
    ScheduleGenerator,
    generate_daily_schedule,
    generate_weekly_schedule,
)
from .models import (
    AUTO_GENERATED_NOTE,
    AvailabilityWindow,
    CoverageIssue,
    CoverageReport,
    DayHours,
    Employee,
    PositionStats,
    Requirement,
    Settings,
    Shift,
)
from .reporter import ScheduleReporter
from .validators import AvailabilityConflict, check_availability_conflict

__all__ = [
    "AUTO_GENERATED_NOTE",
    "AutoshiftError",
    "AvailabilityConflict",
    "AvailabilityWindow",
    "ConfigLoader",
    "ConfigurationError",
    "CoverageEvaluator",
    "CoverageIssue",
    "CoverageReport",
    "DayHours",
    "Employee",
    "InvalidDateFormatError",
    "InvalidTimeFormatError",
    "PositionStats",
    "Requirement",
    "ScheduleGenerator",
    "ScheduleReporter",
    "SchedulingInput",
    "Settings",
    "Shift",
    "check_availability_conflict",
    "default_settings",
    "generate_daily_schedule",
    "generate_weekly_schedule",
    "shifts_on",
    "validate_daily_coverage",
]
