"""
Reporting and output formatting for generated schedules and coverage.
"""

import pandas as pd
from datetime import date
from typing import Dict, List, Sequence

from .models import CoverageReport, Settings, Shift
from .timeutils import day_name, hour_span


class ScheduleReporter:
    """Formats and displays shifts alongside their daily coverage reports."""

    def __init__(
        self,
        shifts: Sequence[Shift],
        coverage: Dict[date, CoverageReport],
        settings: Settings,
    ):
        self.shifts = list(shifts)
        self.coverage = coverage
        self.settings = settings

    @property
    def critical_days(self) -> List[date]:
        """Days on which at least one headcount requirement is unmet."""
        return [day for day, report in self.coverage.items() if report.has_errors]

    def print_report(self, quiet: bool) -> None:
        """Print complete scheduling report."""
        self._print_header()
        self._print_daily_schedule()

        if not quiet:
            self._print_coverage_summary()
            self._print_issues()

    def _print_title(self, title: str) -> None:
        print("=" * 80)
        print(title)
        print("=" * 80)

    def _print_header(self) -> None:
        """Print report header."""
        self._print_title("SHIFT SCHEDULE")

        days = sorted(self.coverage)
        if days:
            print(f"\nPeriod: {days[0]} to {days[-1]}")
        print(f"Total Shifts: {len(self.shifts)}")
        print(f"Critical Days: {len(self.critical_days)}")
        print()

    def _print_daily_schedule(self) -> None:
        """Print day-by-day shift table."""
        self._print_title("DAILY SCHEDULE")

        if not self.shifts:
            print("\n  No shifts scheduled")
            print()
            return

        df = self.shifts_frame()
        print(df.to_string(index=False))
        print()

    def _print_coverage_summary(self) -> None:
        """Print per-day, per-position headcount and hours."""
        self._print_title("COVERAGE SUMMARY")

        df = self.coverage_frame()
        if df.empty:
            print("\n  Nothing to evaluate")
            print()
            return

        print(df.to_string(index=False))
        print()

    def _print_issues(self) -> None:
        """Print staffing issues by day."""
        self._print_title("STAFFING ISSUES")

        has_issues = False
        for day in sorted(self.coverage):
            report = self.coverage[day]
            if not report.issues:
                continue

            has_issues = True
            print(f"\n  {day} ({day.strftime('%a')}) [{report.status}]:")
            for issue in report.issues:
                print(f"    • {issue.type.upper()}: {issue.message}")

        if not has_issues:
            print("\n✓ All open days meet staffing requirements")

        print()

    def shifts_frame(self) -> pd.DataFrame:
        """Shifts as a DataFrame sorted by date, then start time."""
        data = [
            {
                "Date": shift.date,
                "Day": day_name(shift.date).capitalize()[:3],
                "Employee": shift.employee_name,
                "Position": shift.position,
                "Start": shift.start_time,
                "End": shift.end_time,
                "Hours": hour_span(shift.start_time, shift.end_time),
                "Notes": shift.notes,
            }
            for shift in self.shifts
        ]

        df = pd.DataFrame(
            data,
            columns=["Date", "Day", "Employee", "Position", "Start", "End", "Hours", "Notes"],
        )
        return df.sort_values(["Date", "Start"], kind="stable").reset_index(drop=True)

    def coverage_frame(self) -> pd.DataFrame:
        """One row per day and required position, closed days as a single row."""
        data = []

        for day in sorted(self.coverage):
            report = self.coverage[day]

            if report.is_closed:
                data.append(
                    {
                        "Date": day,
                        "Position": "-",
                        "Staff": 0,
                        "Min Staff": 0,
                        "Hours": 0,
                        "Min Hours": 0,
                        "Status": report.status,
                    }
                )
                continue

            for position, stats in report.stats.items():
                requirement = self.settings.requirements.get(position)
                data.append(
                    {
                        "Date": day,
                        "Position": position,
                        "Staff": stats.count,
                        "Min Staff": requirement.min_count if requirement else 0,
                        "Hours": stats.hours,
                        "Min Hours": requirement.min_hours if requirement else 0,
                        "Status": report.status,
                    }
                )

        return pd.DataFrame(
            data,
            columns=["Date", "Position", "Staff", "Min Staff", "Hours", "Min Hours", "Status"],
        )
