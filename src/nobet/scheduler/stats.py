"""
Per-Student Duty Statistics
===========================
Single source of truth for duty counts shown by the web view, CLI and exports.
"""
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence, Union

from nobet.models.schedule import ScheduleEntry
from nobet.models.student import Student
from nobet.utils.logging_setup import get_logger

logger = get_logger("nobet.scheduler.stats")


@dataclass
class StudentStats:
    """Duty statistics for a single student."""
    name: str
    student_id: str = ""
    first_slot: int = 0    # times listed as 1. Öğrenci
    second_slot: int = 0   # times listed as 2. Öğrenci
    first_duty: Optional[date] = None
    last_duty: Optional[date] = None

    @property
    def total(self) -> int:
        return self.first_slot + self.second_slot


def calculate_student_stats(
    schedule: Sequence[ScheduleEntry],
    students: Sequence[Union[Student, str]],
) -> List[StudentStats]:
    """
    Count duties per student, in roster order.

    Working slot k of a generated schedule belongs to roster position
    k % len(students), so students sharing a name keep separate rows.
    Names that do not follow the rotation are counted by name and appended
    after the roster students.
    """
    stats = [
        StudentStats(name=s.name, student_id=s.id) if isinstance(s, Student) else StudentStats(name=str(s))
        for s in students
    ]
    extras: Dict[str, StudentStats] = {}

    slot_index = 0
    for entry in schedule:
        if not entry.is_working:
            continue
        for slot, name in ((1, entry.student1), (2, entry.student2)):
            st = stats[slot_index % len(stats)] if stats else None
            if st is None or st.name != name:
                st = extras.setdefault(name, StudentStats(name=name))
            slot_index += 1
            if slot == 1:
                st.first_slot += 1
            else:
                st.second_slot += 1
            if st.first_duty is None:
                st.first_duty = entry.date
            st.last_duty = entry.date

    stats.extend(extras.values())
    logger.debug(f"Stats for {len(stats)} students")
    return stats


def duty_day_count(schedule: Sequence[ScheduleEntry]) -> int:
    """Number of working days in a schedule."""
    return sum(1 for e in schedule if e.is_working)
