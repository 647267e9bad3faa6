"""Shared fixtures for autoshift tests."""

import pytest
from datetime import date

from autoshift.models import (
    AvailabilityWindow,
    DayHours,
    Employee,
    Requirement,
    Settings,
    Shift,
)
from autoshift.timeutils import DAY_NAMES

MONDAY = date(2026, 1, 5)


@pytest.fixture
def make_settings():
    """Factory for settings open 11:00-04:00 every day unless listed as closed."""

    def _make(requirements, closed_days=()):
        return Settings(
            opening_hours={
                day: DayHours(open="11:00", close="04:00", closed=day in closed_days)
                for day in DAY_NAMES
            },
            requirements={
                position: Requirement(min_count=count, min_hours=hours)
                for position, (count, hours) in requirements.items()
            },
        )

    return _make


@pytest.fixture
def make_employee():
    """Factory for employees; availability maps day -> [(start, end), ...]."""

    def _make(emp_id, position, availability, name=None):
        return Employee(
            id=emp_id,
            name=name or emp_id.capitalize(),
            position=position,
            availability={
                day: [AvailabilityWindow(start=s, end=e) for s, e in windows]
                for day, windows in availability.items()
            },
        )

    return _make


@pytest.fixture
def make_shift():
    """Factory for shifts on Monday 2026-01-05 unless a date is given."""

    def _make(position, start, end, emp_id="emp", shift_date=MONDAY, notes=""):
        return Shift(
            employee_id=emp_id,
            employee_name=emp_id.capitalize(),
            position=position,
            date=shift_date,
            start_time=start,
            end_time=end,
            notes=notes,
        )

    return _make


@pytest.fixture
def server_settings(make_settings) -> Settings:
    """One Server for 8 hours every day, closed Sunday."""
    return make_settings({"Server": (1, 8)}, closed_days=("sunday",))


@pytest.fixture
def restaurant_settings(make_settings) -> Settings:
    """Several positions, closed Sunday."""
    return make_settings(
        {
            "Server": (2, 16),
            "Bartender": (1, 8),
            "Kitchen": (2, 8),
        },
        closed_days=("sunday",),
    )


@pytest.fixture
def restaurant_roster(make_employee):
    """A small roster covering most positions on weekdays."""
    weekdays = ("monday", "tuesday", "wednesday", "thursday", "friday")
    return [
        make_employee("sarah", "Server", {d: [("11:00", "19:00")] for d in weekdays}),
        make_employee("harvey", "Server", {d: [("15:00", "23:00")] for d in weekdays}),
        make_employee("donna", "Server", {d: [("17:00", "23:30")] for d in weekdays}),
        make_employee("mike", "Bartender", {"monday": [("16:00", "04:00")]}),
        make_employee("louis", "Kitchen", {"monday": [("10:00", "00:00")]}),
        make_employee("rachel", "Host", {"monday": [("17:00", "02:00")]}),
    ]
