"""
Duty roster scheduler.

Example:
    >>> from nobet.scheduler import generate_schedule
    >>> schedule = generate_schedule(2026, 0, students, holidays)
"""
from .roster import build_holiday_map, classify_day, generate_schedule
from .stats import StudentStats, calculate_student_stats, duty_day_count
from .validation import ValidationResult, validate_schedule

__all__ = [
    "generate_schedule",
    "build_holiday_map",
    "classify_day",
    "StudentStats",
    "calculate_student_stats",
    "duty_day_count",
    "ValidationResult",
    "validate_schedule",
]
