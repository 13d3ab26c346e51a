"""
Duty Roster Generation
======================
Round-robin assignment of two students per school day.

Every calendar day of the month gets one ScheduleEntry. Weekends and
holidays are flagged and left unassigned; each working day takes the next
two students of the rotation, which wraps around the roster and restarts
at the first student on every call.
"""
from datetime import date
from itertools import cycle
from typing import Dict, Iterable, List, Sequence, Union

from nobet.models.dates import check_month, check_year, date_key, is_weekend, month_dates
from nobet.models.holiday import Holiday
from nobet.models.schedule import ScheduleEntry
from nobet.models.student import Student
from nobet.utils.logging_setup import get_logger, log_function_call
from nobet.utils.structured_logging import get_structured_logger

logger = get_logger("nobet.scheduler.roster")
events = get_structured_logger("nobet.scheduler")


def _student_name(student: Union[Student, str]) -> str:
    if isinstance(student, Student):
        return student.name
    return str(student)


def build_holiday_map(holidays: Iterable[Holiday]) -> Dict[str, str]:
    """
    Map YYYY-MM-DD keys to descriptions.

    A later holiday on the same date overwrites an earlier one.
    """
    holiday_map: Dict[str, str] = {}
    for h in holidays:
        holiday_map[h.key] = h.description
    return holiday_map


def classify_day(d: date, holiday_map: Dict[str, str]) -> ScheduleEntry:
    """Unassigned entry for a day with its weekend/holiday flags set."""
    key = date_key(d)
    return ScheduleEntry(
        date=d,
        is_weekend=is_weekend(d),
        is_holiday=key in holiday_map,
        holiday_name=holiday_map.get(key),
    )


@log_function_call
def generate_schedule(
    year: int,
    month: int,
    students: Sequence[Union[Student, str]],
    holidays: Iterable[Holiday] = (),
) -> List[ScheduleEntry]:
    """
    Build the duty roster of one month.

    Args:
        year: Calendar year
        month: Zero-based month (0 = Ocak ... 11 = Aralık)
        students: Ordered roster; position drives the rotation
        holidays: Holidays in any order

    Returns:
        One ScheduleEntry per calendar day, in date order. Empty if the
        roster is empty.

    Raises:
        InvalidArgumentError: month outside 0-11 or year outside 1-9999
    """
    check_year(year)
    check_month(month)

    if not students:
        logger.info(f"Empty roster, no schedule for {year}-{month + 1:02d}")
        return []

    holiday_map = build_holiday_map(holidays)
    rotation = cycle([_student_name(s) for s in students])

    schedule: List[ScheduleEntry] = []
    for d in month_dates(year, month):
        entry = classify_day(d, holiday_map)
        if entry.is_working:
            first, second = next(rotation), next(rotation)
            entry = ScheduleEntry(date=d, student1=first, student2=second)
        logger.debug(f"{date_key(d)} {entry.kind} {entry.student1} {entry.student2}".rstrip())
        schedule.append(entry)

    working = sum(1 for e in schedule if e.is_working)
    logger.info(
        f"Schedule {year}-{month + 1:02d}: {len(schedule)} days, {working} duty days, "
        f"{len(students)} students"
    )
    events.info(
        "schedule_generated",
        year=year, month=month, days=len(schedule), duty_days=working, students=len(students),
    )
    return schedule
