"""
Property-Based Tests with Hypothesis
====================================
Invariants of the scheduler and exporter for arbitrary valid inputs.
"""
import calendar
from datetime import date, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from nobet.io.xls_export import export_schedule
from nobet.models.holiday import Holiday
from nobet.models.student import Student
from nobet.scheduler.roster import generate_schedule

names = st.text(
    alphabet=st.characters(categories=("L",)),
    min_size=1,
    max_size=12,
)
rosters = st.lists(names, min_size=1, max_size=8).map(lambda ns: [Student(name=n) for n in ns])
years = st.integers(min_value=1900, max_value=2100)
months = st.integers(min_value=0, max_value=11)


@st.composite
def month_with_holidays(draw):
    year = draw(years)
    month = draw(months)
    last = calendar.monthrange(year, month + 1)[1]
    days = draw(st.lists(st.integers(min_value=1, max_value=last), max_size=10))
    holidays = [Holiday(date=date(year, month + 1, d), description=f"Tatil {d}") for d in days]
    return year, month, holidays


class TestSchedulerProperties:
    """Scheduler invariants."""

    @given(data=month_with_holidays(), students=rosters)
    @settings(max_examples=50, deadline=None)
    def test_one_entry_per_day(self, data, students):
        year, month, holidays = data
        schedule = generate_schedule(year, month, students, holidays)
        assert len(schedule) == calendar.monthrange(year, month + 1)[1]
        for prev, cur in zip(schedule, schedule[1:]):
            assert cur.date - prev.date == timedelta(days=1)

    @given(data=month_with_holidays(), students=rosters)
    @settings(max_examples=50, deadline=None)
    def test_round_robin_order(self, data, students):
        year, month, holidays = data
        schedule = generate_schedule(year, month, students, holidays)
        slots = [n for e in schedule if e.is_working for n in (e.student1, e.student2)]
        roster = [s.name for s in students]
        assert slots == [roster[i % len(roster)] for i in range(len(slots))]

    @given(data=month_with_holidays(), students=rosters)
    @settings(max_examples=30, deadline=None)
    def test_idempotent(self, data, students):
        year, month, holidays = data
        assert generate_schedule(year, month, students, holidays) == generate_schedule(
            year, month, students, holidays
        )

    @given(data=month_with_holidays())
    @settings(max_examples=30, deadline=None)
    def test_empty_roster_gives_empty_schedule(self, data):
        year, month, holidays = data
        assert generate_schedule(year, month, [], holidays) == []

    @given(data=month_with_holidays(), students=rosters)
    @settings(max_examples=50, deadline=None)
    def test_holiday_dates_flagged(self, data, students):
        year, month, holidays = data
        schedule = generate_schedule(year, month, students, holidays)
        holiday_dates = {h.date for h in holidays}
        for e in schedule:
            assert e.is_holiday == (e.date in holiday_dates)
            if e.is_holiday:
                assert e.holiday_name
            assert e.is_working == (not e.is_holiday and not e.is_weekend)
            assert bool(e.student1) == e.is_working
            assert bool(e.student2) == e.is_working


class TestExportProperties:
    """Exporter invariants."""

    @given(data=month_with_holidays(), students=rosters)
    @settings(max_examples=25, deadline=None)
    def test_row_count(self, data, students):
        year, month, holidays = data
        schedule = generate_schedule(year, month, students, holidays)
        text = export_schedule(schedule, "1D Sınıfı", "Ocak 2026").content.decode("utf-8")
        assert text.count("<tr>") == len(schedule) + 2
