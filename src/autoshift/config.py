"""
Configuration loader for parsing YAML scheduling input.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from datetime import date

from .exceptions import (
    ConfigurationError,
    InvalidDateFormatError,
    InvalidTimeFormatError,
)
from .models import (
    AvailabilityWindow,
    DayHours,
    Employee,
    Requirement,
    Settings,
    Shift,
)
from .timeutils import DAY_NAMES, format_time, parse_date, parse_time

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "InvalidDateFormatError",
    "InvalidTimeFormatError",
    "SchedulingInput",
    "default_settings",
]


def default_settings() -> Settings:
    """Settings used when a configuration file has none of its own."""
    opening_hours = {
        day: DayHours(open="11:00", close="04:00") for day in DAY_NAMES
    }
    opening_hours["sunday"] = DayHours(open="12:00", close="04:00")

    return Settings(
        opening_hours=opening_hours,
        requirements={
            "Server": Requirement(min_count=2, min_hours=8),
            "Bartender": Requirement(min_count=1, min_hours=8),
            "Kitchen": Requirement(min_count=2, min_hours=8),
            "Host": Requirement(min_count=1, min_hours=6),
            "Manager": Requirement(min_count=1, min_hours=8),
        },
    )


@dataclass
class SchedulingInput:
    """Everything read from a configuration file."""

    settings: Settings
    employees: List[Employee]
    shifts: List[Shift] = field(default_factory=list)
    start_date: date | None = None


class ConfigLoader:
    """Loads and validates scheduling configuration from YAML files."""

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a configuration file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: SchedulingInput | None = None
        self.warnings: List[str] = []

    def load(self) -> SchedulingInput:
        """
        Load and parse the configuration file.

        Returns:
            SchedulingInput with settings, roster and any persisted shifts

        Raises:
            InvalidDateFormatError: If dates are not in ISO 8601 format
            ConfigurationError: If configuration is invalid
        """
        with open(self.config_path, "r") as f:
            self._raw_config = yaml.safe_load(f) or {}

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(self._raw_config).__name__}"
            )

        self.warnings = []
        self._config = self._parse_config()
        self._validate()

        for message in self.warnings:
            print(f"Warning: {message}")

        return self._config

    @property
    def config(self) -> SchedulingInput:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> SchedulingInput:
        """Parse raw YAML data into a SchedulingInput object."""
        raw = self._raw_config

        planning = raw.get("planning") or {}
        start_date = planning.get("start_date")
        if start_date is not None and not isinstance(start_date, date):
            raise InvalidDateFormatError(
                f"start_date must be in ISO 8601 format (YYYY-MM-DD), got: {start_date}. "
                f"Example: 2026-01-05"
            )

        if "settings" in raw:
            settings = self._parse_settings(raw.get("settings"))
        else:
            settings = default_settings()

        employees = self._parse_employees(raw.get("employees") or [])
        shifts = self._parse_shifts(raw.get("shifts") or [])

        return SchedulingInput(
            settings=settings,
            employees=employees,
            shifts=shifts,
            start_date=start_date,
        )

    def _parse_settings(self, settings_raw: Any) -> Settings:
        """Parse and shape-check the settings section."""
        if not isinstance(settings_raw, dict):
            raise ConfigurationError("settings must be a mapping")

        if "opening_hours" not in settings_raw:
            raise ConfigurationError("settings is missing 'opening_hours'")
        if "requirements" not in settings_raw:
            raise ConfigurationError("settings is missing 'requirements'")

        opening_hours = self._parse_opening_hours(settings_raw["opening_hours"] or {})
        requirements = self._parse_requirements(settings_raw["requirements"] or {})

        return Settings(opening_hours=opening_hours, requirements=requirements)

    def _parse_opening_hours(self, hours_raw: Dict[str, Any]) -> Dict[str, DayHours]:
        """Parse opening hours keyed by day name."""
        opening_hours = {}

        for raw_day, day_data in hours_raw.items():
            day = self._normalize_day_name(raw_day)
            day_data = day_data or {}

            # A quoted "false" would otherwise close the day
            closed = day_data.get("closed", False)
            if not isinstance(closed, bool):
                raise ConfigurationError(
                    f"closed for {day} must be true or false, got {closed!r}"
                )

            try:
                opening_hours[day] = DayHours(
                    open=self._coerce_time(day_data.get("open", "00:00")),
                    close=self._coerce_time(day_data.get("close", "00:00")),
                    closed=closed,
                )
            except InvalidTimeFormatError as e:
                raise ConfigurationError(f"Invalid opening hours for {day}: {e}") from e

        missing = [day for day in DAY_NAMES if day not in opening_hours]
        if missing:
            raise ConfigurationError(
                f"opening_hours is missing entries for: {', '.join(missing)}"
            )

        return opening_hours

    def _parse_requirements(self, requirements_raw: Dict[str, Any]) -> Dict[str, Requirement]:
        """Parse per-position requirements, keeping their declared order."""
        requirements = {}

        for position, req_data in requirements_raw.items():
            req_data = req_data or {}
            try:
                requirements[str(position)] = Requirement(
                    min_count=req_data.get("min_count", 0),
                    min_hours=req_data.get("min_hours", 0),
                )
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid requirement for position '{position}': {e}"
                ) from e

        return requirements

    def _parse_employees(self, employees_raw: List[Dict[str, Any]]) -> List[Employee]:
        """Parse employees from raw config."""
        employees = []

        for index, emp_data in enumerate(employees_raw):
            if not isinstance(emp_data, dict):
                raise ConfigurationError(
                    f"Employee entry {index + 1} must be a mapping, got: {emp_data!r}"
                )

            name = emp_data.get("name")
            emp_id = emp_data.get("id", f"emp_{index + 1}")

            employees.append(
                Employee(
                    id=str(emp_id),
                    name=name,
                    position=emp_data.get("position"),
                    availability=self._parse_availability(
                        emp_data.get("availability") or {}, name
                    ),
                )
            )

        return employees

    def _parse_availability(
        self, availability_raw: Dict[str, Any], employee_name: str
    ) -> Dict[str, List[AvailabilityWindow]]:
        """
        Parse weekly availability for an employee.

        A malformed day, or an unknown day name, is dropped with a warning so
        one bad record doesn't abort the whole load; the employee is treated
        as unavailable that day. Availability that is not a mapping at all
        leaves the employee unavailable every day.
        """
        availability = {}

        if not isinstance(availability_raw, dict):
            self.warnings.append(
                f"{employee_name}'s availability must map day names to windows, "
                f"got {type(availability_raw).__name__}; treating as unavailable"
            )
            return availability

        for raw_day, windows_raw in availability_raw.items():
            day = raw_day
            try:
                day = self._normalize_day_name(raw_day)
                windows = [
                    AvailabilityWindow(
                        start=self._coerce_time(window["start"]),
                        end=self._coerce_time(window["end"]),
                    )
                    for window in windows_raw or []
                ]
            except (ConfigurationError, KeyError, TypeError, ValueError) as e:
                self.warnings.append(
                    f"{employee_name}'s availability on {day} is malformed ({e}); "
                    f"treating as unavailable"
                )
                continue

            availability[day] = windows

        return availability

    def _parse_shifts(self, shifts_raw: List[Dict[str, Any]]) -> List[Shift]:
        """Parse previously persisted shifts."""
        shifts = []

        for shift_data in shifts_raw:
            try:
                shift_date = parse_date(shift_data.get("date"))
                start = self._coerce_time(shift_data.get("start_time"))
                end = self._coerce_time(shift_data.get("end_time"))
                parse_time(start)
                parse_time(end)
            except InvalidTimeFormatError as e:
                raise ConfigurationError(
                    f"Invalid shift for {shift_data.get('employee_name')}: {e}"
                ) from e

            shifts.append(
                Shift(
                    employee_id=str(shift_data.get("employee_id", "")),
                    employee_name=shift_data.get("employee_name", ""),
                    position=shift_data.get("position", ""),
                    date=shift_date,
                    start_time=start,
                    end_time=end,
                    notes=shift_data.get("notes", ""),
                )
            )

        return shifts

    @staticmethod
    def _normalize_day_name(raw_day: Any) -> str:
        day = str(raw_day).lower()
        if day not in DAY_NAMES:
            raise ConfigurationError(
                f"Invalid day name: '{raw_day}'. Valid names: {', '.join(DAY_NAMES)}"
            )
        return day

    @staticmethod
    def _coerce_time(value: Any) -> Any:
        """
        Undo YAML 1.1 sexagesimal parsing of unquoted times.

        PyYAML reads ``11:00`` as the integer 660 but leaves ``04:00`` alone.
        """
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 24 * 60:
            return format_time(*divmod(value, 60))
        return value

    def _validate(self) -> None:
        """
        Validate that the configuration is internally consistent.

        Raises:
            ConfigurationError: If configuration has issues
        """
        config = self._config

        seen_ids = set()
        for emp in config.employees:
            if not emp.name:
                raise ConfigurationError(f"Employee '{emp.id}' has no name")
            if not emp.position:
                raise ConfigurationError(f"Employee '{emp.name}' has no position")
            if emp.id in seen_ids:
                raise ConfigurationError(f"Duplicate employee id '{emp.id}'")
            seen_ids.add(emp.id)

        self._check_untracked_positions()

    def _check_untracked_positions(self) -> None:
        """Warn about employees whose position has no staffing requirement."""
        config = self._config
        positions = set(config.settings.positions)

        for emp in config.employees:
            if emp.position not in positions:
                self.warnings.append(
                    f"{emp.name}'s position '{emp.position}' has no staffing "
                    f"requirement and will never be auto-scheduled"
                )

    def get_summary(self) -> str:
        """
        Get a summary of the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config
        settings = config.settings

        open_days = [
            day for day in DAY_NAMES if not settings.opening_hours[day].closed
        ]

        lines = [
            f"Configuration from: {self.config_path}",
            f"Open days: {', '.join(day.capitalize() for day in open_days) or 'none'}",
            f"Positions: {len(settings.requirements)}",
        ]

        for position, req in settings.requirements.items():
            emp_count = sum(1 for emp in config.employees if emp.position == position)
            lines.append(
                f"  - {position}: {emp_count} employees "
                f"(min {req.min_count} staff, {req.min_hours}h)"
            )

        lines.append(f"Total Employees: {len(config.employees)}")
        if config.shifts:
            lines.append(f"Persisted Shifts: {len(config.shifts)}")

        return "\n".join(lines)
