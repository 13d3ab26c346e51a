"""Tests for duty statistics and schedule validation."""
from dataclasses import replace
from datetime import date

from nobet.models.student import Student
from nobet.scheduler.roster import generate_schedule
from nobet.scheduler.stats import calculate_student_stats, duty_day_count
from nobet.scheduler.validation import validate_schedule


class TestStudentStats:
    """Tests for per-student duty counts."""

    def test_counts_sum_to_slots(self, sample_students, new_year_holiday):
        schedule = generate_schedule(2026, 0, sample_students, new_year_holiday)
        stats = calculate_student_stats(schedule, sample_students)
        assert [s.name for s in stats] == [s.name for s in sample_students]
        assert sum(s.total for s in stats) == 2 * duty_day_count(schedule)

    def test_first_and_last_duty(self, two_students, new_year_holiday):
        schedule = generate_schedule(2026, 0, two_students, new_year_holiday)
        ali = calculate_student_stats(schedule, two_students)[0]
        assert ali.first_duty == date(2026, 1, 2)
        assert ali.last_duty == date(2026, 1, 30)
        assert ali.first_slot == duty_day_count(schedule)
        assert ali.second_slot == 0

    def test_student_without_duty(self):
        students = [Student(name="Ali"), Student(name="Veli"), Student(name="Can")]
        stats = calculate_student_stats([], students)
        assert all(s.total == 0 and s.first_duty is None for s in stats)

    def test_duplicate_names_counted_separately(self):
        roster = [Student(name="Ali"), Student(name="Veli"), Student(name="Ali")]
        schedule = generate_schedule(2026, 2, roster)
        stats = calculate_student_stats(schedule, roster)
        assert len(stats) == len(roster)
        assert [s.student_id for s in stats] == [s.id for s in roster]
        # 22 duty days -> 44 slots over 3 positions
        assert [s.total for s in stats] == [15, 15, 14]
        assert stats[0].first_duty == date(2026, 3, 2)
        assert stats[2].first_duty == date(2026, 3, 3)

    def test_unknown_name_appended(self, two_students):
        schedule = generate_schedule(2026, 0, two_students)
        schedule[1] = replace(schedule[1], student1="Can")
        stats = calculate_student_stats(schedule, two_students)
        assert [s.name for s in stats] == ["Ali", "Veli", "Can"]
        assert stats[2].total == 1

    def test_duty_days_january(self, two_students, new_year_holiday):
        schedule = generate_schedule(2026, 0, two_students, new_year_holiday)
        # 22 weekdays minus 1 Ocak
        assert duty_day_count(schedule) == 21


class TestValidation:
    """Tests for validate_schedule."""

    def test_generated_schedule_valid(self, sample_students):
        for month in range(12):
            schedule = generate_schedule(2025, month, sample_students)
            assert validate_schedule(schedule, 2025, month).is_valid

    def test_missing_day_detected(self, two_students):
        schedule = generate_schedule(2026, 0, two_students)
        del schedule[10]
        result = validate_schedule(schedule, 2026, 0)
        assert not result.is_valid
        assert any("expected 31" in v for v in result.violations)
        assert any("gap" in v for v in result.violations)

    def test_assignment_on_weekend_detected(self, two_students):
        schedule = generate_schedule(2026, 0, two_students)
        schedule[2] = replace(schedule[2], student1="Ali", student2="Veli")
        result = validate_schedule(schedule, 2026, 0)
        assert any("non-working day has assignments" in v for v in result.violations)

    def test_missing_assignment_detected(self, two_students):
        schedule = generate_schedule(2026, 0, two_students)
        schedule[1] = replace(schedule[1], student2="")
        result = validate_schedule(schedule, 2026, 0)
        assert any("without two students" in v for v in result.violations)

    def test_failed_check_logged_as_warning(self, two_students, caplog):
        schedule = generate_schedule(2026, 0, two_students)[:-1]
        with caplog.at_level("WARNING", logger="nobet"):
            validate_schedule(schedule, 2026, 0)
        assert "✗" in caplog.text
        assert "day_count" in caplog.text
