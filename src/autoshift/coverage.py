"""
Daily staffing coverage evaluation.
"""

from datetime import date
from typing import Dict, Iterable, List

from .models import (
    ISSUE_ERROR,
    ISSUE_WARNING,
    STATUS_CLOSED,
    STATUS_CRITICAL,
    STATUS_OPTIMAL,
    STATUS_WARNING,
    CoverageIssue,
    CoverageReport,
    PositionStats,
    Settings,
    Shift,
)
from .timeutils import day_name, hour_span, parse_date

CLOSED_MESSAGE = "Closed today"


class CoverageEvaluator:
    """Compares a day's shifts against the configured staffing requirements."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def evaluate(self, day: date | str, shifts: Iterable[Shift]) -> CoverageReport:
        """
        Evaluate staffing coverage for one day.

        The shifts are taken as given; callers filter them to the target day
        beforehand (see ``shifts_on``).

        Args:
            day: Date being evaluated (only its weekday matters)
            shifts: Shifts scheduled on that day

        Returns:
            CoverageReport with status, issues and per-position stats
        """
        weekday = day_name(day)

        if self.settings.is_closed_on(weekday):
            return CoverageReport(status=STATUS_CLOSED, message=CLOSED_MESSAGE)

        stats = self._collect_stats(shifts)
        issues = self._find_issues(stats)

        return CoverageReport(
            status=self._overall_status(issues), issues=issues, stats=stats
        )

    def _collect_stats(self, shifts: Iterable[Shift]) -> Dict[str, PositionStats]:
        """Headcount and whole hours per position."""
        stats = {position: PositionStats() for position in self.settings.requirements}

        for shift in shifts:
            if not shift.position:
                continue

            position_stats = stats.setdefault(shift.position, PositionStats())
            position_stats.count += 1
            position_stats.hours += hour_span(shift.start_time, shift.end_time)

        return stats

    def _find_issues(self, stats: Dict[str, PositionStats]) -> List[CoverageIssue]:
        issues = []

        for position, requirement in self.settings.requirements.items():
            actual = stats[position]

            if actual.count < requirement.min_count:
                missing = requirement.min_count - actual.count
                issues.append(
                    CoverageIssue(
                        type=ISSUE_ERROR, message=f"Need {missing} more {position}(s)"
                    )
                )

            if actual.hours < requirement.min_hours:
                issues.append(
                    CoverageIssue(
                        type=ISSUE_WARNING,
                        message=(
                            f"{position} hours low "
                            f"({actual.hours}/{requirement.min_hours})"
                        ),
                    )
                )

        return issues

    @staticmethod
    def _overall_status(issues: List[CoverageIssue]) -> str:
        if any(issue.type == ISSUE_ERROR for issue in issues):
            return STATUS_CRITICAL
        if any(issue.type == ISSUE_WARNING for issue in issues):
            return STATUS_WARNING
        return STATUS_OPTIMAL


def validate_daily_coverage(
    day: date | str, shifts: Iterable[Shift], settings: Settings
) -> CoverageReport:
    """Evaluate staffing coverage of ``shifts`` for one day."""
    return CoverageEvaluator(settings).evaluate(day, shifts)


def shifts_on(day: date | str, shifts: Iterable[Shift]) -> List[Shift]:
    """Select the shifts dated on ``day``."""
    target = parse_date(day)
    return [shift for shift in shifts if shift.date == target]
