"""
Schedule Validation
===================
Checks the structural invariants of a generated schedule.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Sequence

from nobet.models.dates import days_in_month, month_dates
from nobet.models.schedule import ScheduleEntry
from nobet.utils.logging_setup import RosterLogger

slog = RosterLogger("nobet.scheduler.validation")


@dataclass
class ValidationResult:
    """Outcome of validate_schedule()."""
    violations: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def add(self, message: str):
        self.violations.append(message)


def validate_schedule(
    schedule: Sequence[ScheduleEntry],
    year: int,
    month: int,
) -> ValidationResult:
    """
    Verify a non-empty schedule against its month.

    Checks:
        - one entry per calendar day, dates strictly increasing with no gaps
        - students assigned iff the day is working
        - holiday name present iff the day is a holiday
    """
    result = ValidationResult()
    slog.phase(f"Validation {year}-{month + 1:02d}")

    expected = days_in_month(year, month)
    ok = len(schedule) == expected
    slog.check("day_count", ok, f"{len(schedule)}/{expected}")
    if not ok:
        result.add(f"expected {expected} entries, got {len(schedule)}")

    dates = [e.date for e in schedule]
    ok = dates == month_dates(year, month)
    if not ok:
        for prev, cur in zip(dates, dates[1:]):
            if cur - prev != timedelta(days=1):
                result.add(f"gap or disorder between {prev} and {cur}")
                break
        else:
            result.add("dates do not cover the month")
    slog.check("date_sequence", ok)

    for e in schedule:
        assigned = bool(e.student1) and bool(e.student2)
        empty = not e.student1 and not e.student2
        if e.is_working and not assigned:
            result.add(f"{e.date}: working day without two students")
        elif not e.is_working and not empty:
            result.add(f"{e.date}: non-working day has assignments")
        if e.is_holiday and not e.holiday_name:
            result.add(f"{e.date}: holiday without a name")
        if not e.is_holiday and e.holiday_name:
            result.add(f"{e.date}: holiday name on a non-holiday")
    slog.check("assignments", result.is_valid, f"{len(result.violations)} violations")

    return result
