"""
Exception hierarchy for autoshift.
"""


class AutoshiftError(Exception):
    """Base class for all autoshift errors."""

    pass


class ConfigurationError(AutoshiftError):
    """Custom exception for configuration errors."""

    pass


class InvalidDateFormatError(ConfigurationError):
    """Raised when a date is not in ISO 8601 format (YYYY-MM-DD)."""

    pass


class InvalidTimeFormatError(ConfigurationError, ValueError):
    """Raised when a time of day is not in 24-hour HH:MM format."""

    pass
