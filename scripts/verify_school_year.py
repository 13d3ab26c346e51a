"""
Verification Script for the School Year
=======================================
Generates every month of the 2025-2026 school year with the default
holiday calendar and checks the schedule invariants.
"""
from nobet.models.dates import period_label
from nobet.models.holiday import default_holidays
from nobet.models.student import Student
from nobet.scheduler.stats import calculate_student_stats
from nobet.scheduler.roster import generate_schedule
from nobet.scheduler.validation import validate_schedule
from nobet.utils.logging_setup import setup_logging

# (year, zero-based month) from Eylül 2025 to Haziran 2026
SCHOOL_YEAR = [(2025, m) for m in range(8, 12)] + [(2026, m) for m in range(0, 6)]


def verify():
    setup_logging(level="WARNING", log_file=None)
    students = [Student(name=f"Öğrenci {i}") for i in range(1, 8)]
    holidays = default_holidays()

    failed = 0
    for year, month in SCHOOL_YEAR:
        schedule = generate_schedule(year, month, students, holidays)
        result = validate_schedule(schedule, year, month)
        duty_days = sum(1 for e in schedule if e.is_working)
        if result.is_valid:
            print(f"✅ {period_label(year, month)}: {duty_days} nöbet günü")
        else:
            failed += 1
            print(f"❌ {period_label(year, month)}:")
            for v in result.violations:
                print(f"  - {v}")

        counts = [s.total for s in calculate_student_stats(schedule, students)]
        print(f"   nöbet sayıları: min={min(counts)} max={max(counts)}")

    return failed


if __name__ == "__main__":
    raise SystemExit(1 if verify() else 0)
