"""
Automatic shift generation from employee availability and staffing requirements.

Each day is generated independently. For every required position, in
requirement order, the first ``min_count`` available employees of that
position who are not yet scheduled that day get one shift each. A shift
starts at the beginning of the employee's first availability window and
lasts ``ceil(min_hours / min_count)`` hours, cut back to the window end
when the computed end is later under a plain HH:MM comparison.
"""

from datetime import date
from typing import Dict, List, Sequence

from .models import AUTO_GENERATED_NOTE, Employee, Settings, Shift
from .timeutils import add_hours, compare_time, day_name, parse_date, week_dates


class ScheduleGenerator:
    """Builds auto-generated shifts for a roster against a settings snapshot."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def generate_day(self, day: date | str, employees: Sequence[Employee]) -> List[Shift]:
        """
        Generate shifts for a single calendar day.

        Args:
            day: Target date (date object or YYYY-MM-DD string)
            employees: Roster to draw from, in preference order

        Returns:
            Generated shifts in requirement order, then selection order.
            Closed days and unstaffable positions simply yield fewer shifts.
        """
        target = parse_date(day)
        weekday = day_name(target)

        if self.settings.is_closed_on(weekday):
            return []

        by_position = self._group_by_position(
            emp for emp in employees if emp.is_available_on(weekday)
        )

        assigned_ids = set()
        shifts = []

        for position, requirement in self.settings.requirements.items():
            unassigned = [
                emp
                for emp in by_position.get(position, [])
                if emp.id not in assigned_ids
            ]
            if not unassigned or requirement.min_count == 0:
                continue

            duration = requirement.target_shift_hours

            for employee in unassigned[: requirement.min_count]:
                # Same id listed twice in the roster
                if employee.id in assigned_ids:
                    continue

                shifts.append(self._build_shift(employee, target, weekday, duration))
                assigned_ids.add(employee.id)

        return shifts

    def generate_week(
        self, week_start: date | str, employees: Sequence[Employee]
    ) -> List[Shift]:
        """Generate seven consecutive days starting at ``week_start``."""
        shifts = []
        for day in week_dates(week_start):
            shifts.extend(self.generate_day(day, employees))
        return shifts

    @staticmethod
    def _group_by_position(employees) -> Dict[str, List[Employee]]:
        """Group employees by position, keeping roster order within each group."""
        grouped: Dict[str, List[Employee]] = {}
        for emp in employees:
            grouped.setdefault(emp.position, []).append(emp)
        return grouped

    @staticmethod
    def _build_shift(
        employee: Employee, target: date, weekday: str, duration: int
    ) -> Shift:
        # Only the first window of the day is ever used
        window = employee.windows_on(weekday)[0]

        start_time = window.start
        end_time = add_hours(start_time, duration)

        # Raw comparison: an end that wrapped past midnight compares as early
        # and is kept even if the window itself ends before it on the clock.
        if compare_time(end_time, window.end) > 0:
            end_time = window.end

        return Shift(
            employee_id=employee.id,
            employee_name=employee.name,
            position=employee.position,
            date=target,
            start_time=start_time,
            end_time=end_time,
            notes=AUTO_GENERATED_NOTE,
        )


def generate_daily_schedule(
    day: date | str, employees: Sequence[Employee], settings: Settings
) -> List[Shift]:
    """Generate auto-assigned shifts for one day."""
    return ScheduleGenerator(settings).generate_day(day, employees)


def generate_weekly_schedule(
    week_start: date | str, employees: Sequence[Employee], settings: Settings
) -> List[Shift]:
    """Generate auto-assigned shifts for the seven days from ``week_start``."""
    return ScheduleGenerator(settings).generate_week(week_start, employees)
