"""Tests for the schedule generator."""

import pytest
from collections import Counter
from datetime import date

from autoshift.exceptions import ConfigurationError, InvalidDateFormatError
from autoshift.generator import (
    ScheduleGenerator,
    generate_daily_schedule,
    generate_weekly_schedule,
)
from autoshift.models import AUTO_GENERATED_NOTE, DayHours, Settings
from autoshift.timeutils import compare_time

MONDAY = date(2026, 1, 5)
SUNDAY = date(2026, 1, 11)


def times(shift):
    return shift.start_time, shift.end_time


class TestGeneratorBasics:
    """Basic daily generation tests."""

    def test_full_length_shift_within_availability(self, server_settings, make_employee):
        """8 hours from 11:00 ends exactly at the availability end."""
        emp = make_employee("sarah", "Server", {"monday": [("11:00", "19:00")]})

        shifts = generate_daily_schedule(MONDAY, [emp], server_settings)

        assert len(shifts) == 1
        shift = shifts[0]
        assert shift.employee_id == "sarah"
        assert shift.employee_name == "Sarah"
        assert shift.position == "Server"
        assert shift.date == MONDAY
        assert times(shift) == ("11:00", "19:00")

    def test_short_availability_clamps_end(self, server_settings, make_employee):
        """A 4-hour window cuts the 8-hour target back to the window end."""
        emp = make_employee("sarah", "Server", {"monday": [("11:00", "15:00")]})

        shifts = generate_daily_schedule(MONDAY, [emp], server_settings)

        assert times(shifts[0]) == ("11:00", "15:00")

    def test_generated_shifts_marked_auto_generated(self, server_settings, make_employee):
        emp = make_employee("sarah", "Server", {"monday": [("11:00", "19:00")]})

        shift = generate_daily_schedule(MONDAY, [emp], server_settings)[0]

        assert shift.notes == AUTO_GENERATED_NOTE
        assert shift.is_auto_generated

    def test_accepts_iso_date_string(self, server_settings, make_employee):
        emp = make_employee("sarah", "Server", {"monday": [("11:00", "19:00")]})

        shifts = generate_daily_schedule("2026-01-05", [emp], server_settings)

        assert shifts[0].date == MONDAY

    def test_minutes_carried_from_start(self, server_settings, make_employee):
        """Duration is added to the hour only; minutes are kept."""
        emp = make_employee("sarah", "Server", {"monday": [("11:30", "20:00")]})

        shift = generate_daily_schedule(MONDAY, [emp], server_settings)[0]

        assert times(shift) == ("11:30", "19:30")

    @pytest.mark.parametrize(
        "min_count,min_hours,expected_end",
        [
            (1, 8, "18:00"),
            (2, 8, "14:00"),
            (3, 10, "14:00"),  # ceil(10 / 3) = 4
            (2, 7, "14:00"),  # ceil(7 / 2) = 4
            (1, 0, "10:00"),
        ],
    )
    def test_duration_derived_from_requirement(
        self, make_settings, make_employee, min_count, min_hours, expected_end
    ):
        """Shift length is ceil(min_hours / min_count), not the window length."""
        settings = make_settings({"Server": (min_count, min_hours)})
        emp = make_employee("sarah", "Server", {"monday": [("10:00", "23:00")]})

        shift = generate_daily_schedule(MONDAY, [emp], settings)[0]

        assert times(shift) == ("10:00", expected_end)

    def test_restaurant_monday(self, restaurant_settings, restaurant_roster):
        """Shifts follow requirement order, then roster order within a position."""
        shifts = generate_daily_schedule(MONDAY, restaurant_roster, restaurant_settings)

        assert [(s.employee_id, s.position, *times(s)) for s in shifts] == [
            ("sarah", "Server", "11:00", "19:00"),
            ("harvey", "Server", "15:00", "23:00"),
            ("mike", "Bartender", "16:00", "00:00"),
            ("louis", "Kitchen", "10:00", "00:00"),
        ]


class TestClosedDays:
    """Closed days produce no shifts."""

    def test_closed_day_returns_empty(self, server_settings, make_employee):
        emp = make_employee("sarah", "Server", {"sunday": [("11:00", "19:00")]})

        assert generate_daily_schedule(SUNDAY, [emp], server_settings) == []

    def test_closed_day_ignores_roster(self, restaurant_settings, restaurant_roster):
        assert generate_daily_schedule(SUNDAY, restaurant_roster, restaurant_settings) == []

    def test_missing_opening_hours_raises(self, make_employee):
        settings = Settings(
            opening_hours={"tuesday": DayHours(open="11:00", close="23:00")},
            requirements={},
        )

        with pytest.raises(ConfigurationError, match="monday"):
            generate_daily_schedule(MONDAY, [], settings)

    def test_bad_date_raises(self, server_settings):
        with pytest.raises(InvalidDateFormatError):
            generate_daily_schedule("05/01/2026", [], server_settings)


class TestSelection:
    """Which employees get picked."""

    def test_first_available_first_assigned(self, make_settings, make_employee):
        settings = make_settings({"Server": (2, 16)})
        roster = [
            make_employee(name, "Server", {"monday": [("11:00", "23:00")]})
            for name in ("ann", "ben", "cat", "dan")
        ]

        shifts = generate_daily_schedule(MONDAY, roster, settings)

        assert [s.employee_id for s in shifts] == ["ann", "ben"]

    def test_unavailable_employees_skipped(self, server_settings, make_employee):
        roster = [
            make_employee("ann", "Server", {"tuesday": [("11:00", "19:00")]}),
            make_employee("ben", "Server", {"monday": []}),
            make_employee("cat", "Server", {"monday": [("12:00", "20:00")]}),
        ]

        shifts = generate_daily_schedule(MONDAY, roster, server_settings)

        assert [s.employee_id for s in shifts] == ["cat"]

    def test_fewer_employees_than_min_count(self, make_settings, make_employee):
        """Too few bartenders yields fewer shifts, not an error."""
        settings = make_settings({"Bartender": (2, 16)})
        emp = make_employee("mike", "Bartender", {"monday": [("16:00", "23:00")]})

        shifts = generate_daily_schedule(MONDAY, [emp], settings)

        assert len(shifts) == 1

    def test_empty_roster(self, restaurant_settings):
        assert generate_daily_schedule(MONDAY, [], restaurant_settings) == []

    def test_no_matching_positions(self, restaurant_settings, make_employee):
        emp = make_employee("rachel", "Host", {"monday": [("17:00", "23:00")]})

        assert generate_daily_schedule(MONDAY, [emp], restaurant_settings) == []

    def test_zero_min_count_generates_nothing(self, make_settings, make_employee):
        settings = make_settings({"Server": (0, 8)})
        emp = make_employee("sarah", "Server", {"monday": [("11:00", "19:00")]})

        assert generate_daily_schedule(MONDAY, [emp], settings) == []

    def test_only_first_window_used(self, server_settings, make_employee):
        """Later windows on the same day are never considered."""
        emp = make_employee(
            "sarah", "Server", {"monday": [("09:00", "11:00"), ("12:00", "22:00")]}
        )

        shift = generate_daily_schedule(MONDAY, [emp], server_settings)[0]

        assert times(shift) == ("09:00", "11:00")

    def test_duplicate_roster_entry_assigned_once(self, make_settings, make_employee):
        settings = make_settings({"Server": (3, 24)})
        emp = make_employee("sarah", "Server", {"monday": [("11:00", "19:00")]})
        other = make_employee("ben", "Server", {"monday": [("11:00", "19:00")]})

        shifts = generate_daily_schedule(MONDAY, [emp, emp, other], settings)

        assert [s.employee_id for s in shifts] == ["sarah", "ben"]

    @pytest.mark.parametrize("min_count", [1, 2, 3, 4, 5, 6])
    def test_more_required_never_fewer_shifts(self, make_settings, make_employee, min_count):
        """Raising min_count grows the shift count up to the available headcount."""
        roster = [
            make_employee(f"s{i}", "Server", {"monday": [("11:00", "23:00")]})
            for i in range(4)
        ]

        fewer = generate_daily_schedule(MONDAY, roster, make_settings({"Server": (min_count, 8)}))
        more = generate_daily_schedule(
            MONDAY, roster, make_settings({"Server": (min_count + 1, 8)})
        )

        assert len(fewer) == min(min_count, 4)
        assert len(more) >= len(fewer)


class TestSingleAssignment:
    """No employee is scheduled twice on the same day."""

    def test_one_shift_per_employee_per_day(self, restaurant_settings, restaurant_roster):
        shifts = generate_weekly_schedule(MONDAY, restaurant_roster, restaurant_settings)

        per_day = Counter((s.employee_id, s.date) for s in shifts)
        assert all(count == 1 for count in per_day.values())

    def test_assigned_set_spans_positions(self, make_settings, make_employee):
        """An id already placed earlier in the day is excluded from later positions."""
        settings = make_settings({"Server": (1, 8), "Host": (1, 6)})
        roster = [
            make_employee("sarah", "Server", {"monday": [("11:00", "19:00")]}),
            make_employee("sarah", "Host", {"monday": [("11:00", "19:00")]}),
            make_employee("rachel", "Host", {"monday": [("17:00", "23:00")]}),
        ]

        shifts = generate_daily_schedule(MONDAY, roster, settings)

        assert [(s.employee_id, s.position) for s in shifts] == [
            ("sarah", "Server"),
            ("rachel", "Host"),
        ]


class TestOvernightAvailability:
    """
    The end-time clamp compares raw HH:MM values without unwrapping midnight.

    These cases pin that behavior down, including where it disagrees with
    wall-clock ordering.
    """

    @pytest.mark.parametrize(
        "window,min_hours,expected",
        [
            # Computed end wraps to 00:00, raw-earlier than 04:00: kept
            (("16:00", "04:00"), 8, ("16:00", "00:00")),
            # 15:00 is raw-later than 04:00: clamped to the window end
            (("11:00", "04:00"), 4, ("11:00", "04:00")),
            # 18:00 is raw-later than 00:00: clamped, giving a 14-hour shift
            (("10:00", "00:00"), 8, ("10:00", "00:00")),
            # 04:00 is raw-later than 02:00: clamped
            (("20:00", "02:00"), 8, ("20:00", "02:00")),
            # 02:00 is raw-earlier than 06:00: kept
            (("22:00", "06:00"), 4, ("22:00", "02:00")),
            # 02:00 is raw-later than 01:00: clamped
            (("22:00", "01:00"), 4, ("22:00", "01:00")),
        ],
    )
    def test_overnight_windows(self, make_settings, make_employee, window, min_hours, expected):
        settings = make_settings({"Bartender": (1, min_hours)})
        emp = make_employee("mike", "Bartender", {"monday": [window]})

        shift = generate_daily_schedule(MONDAY, [emp], settings)[0]

        assert times(shift) == expected

    def test_wrapped_end_not_clamped_to_same_day_window(self, make_settings, make_employee):
        """
        A same-day window whose shift runs past midnight is not cut back:
        02:00 compares earlier than 23:00, so the shift outlasts the window.
        """
        settings = make_settings({"Bartender": (1, 6)})
        emp = make_employee("mike", "Bartender", {"monday": [("20:00", "23:00")]})

        shift = generate_daily_schedule(MONDAY, [emp], settings)[0]

        assert times(shift) == ("20:00", "02:00")

    def test_end_never_raw_later_than_window_end(self, make_settings, make_employee):
        windows = [
            ("11:00", "15:00"),
            ("11:00", "04:00"),
            ("16:00", "04:00"),
            ("09:00", "17:00"),
            ("18:00", "23:59"),
        ]
        settings = make_settings({"Server": (len(windows), 8 * len(windows))})
        roster = [
            make_employee(f"s{i}", "Server", {"monday": [w]}) for i, w in enumerate(windows)
        ]

        shifts = generate_daily_schedule(MONDAY, roster, settings)

        for shift, (_, window_end) in zip(shifts, windows):
            assert compare_time(shift.end_time, window_end) <= 0


class TestWeeklyGeneration:
    """Tests for seven-day generation."""

    def test_week_concatenates_days(self, restaurant_settings, restaurant_roster):
        shifts = generate_weekly_schedule(MONDAY, restaurant_roster, restaurant_settings)

        per_day = Counter(s.date for s in shifts)
        assert per_day[MONDAY] == 4
        for offset in range(1, 5):
            assert per_day[date(2026, 1, 5 + offset)] == 2
        assert per_day[date(2026, 1, 10)] == 0
        assert per_day[SUNDAY] == 0
        assert len(shifts) == 12

    def test_week_is_chronological(self, restaurant_settings, restaurant_roster):
        shifts = generate_weekly_schedule(MONDAY, restaurant_roster, restaurant_settings)

        dates = [s.date for s in shifts]
        assert dates == sorted(dates)

    def test_week_can_start_midweek(self, server_settings, make_employee):
        """Seven consecutive days from any start date."""
        emp = make_employee(
            "sarah",
            "Server",
            {"thursday": [("11:00", "19:00")], "wednesday": [("11:00", "19:00")]},
        )

        shifts = generate_weekly_schedule(date(2026, 1, 8), [emp], server_settings)

        assert [s.date for s in shifts] == [date(2026, 1, 8), date(2026, 1, 14)]

    def test_days_generated_independently(self, server_settings, make_employee):
        """The same employee can work every open day of the week."""
        emp = make_employee(
            "sarah",
            "Server",
            {day: [("11:00", "19:00")] for day in ("monday", "tuesday", "sunday")},
        )

        shifts = ScheduleGenerator(server_settings).generate_week(MONDAY, [emp])

        assert [s.date for s in shifts] == [MONDAY, date(2026, 1, 6)]
