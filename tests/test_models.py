"""Tests for data models and date helpers."""
from datetime import date

import pytest

from nobet.exceptions import InvalidArgumentError
from nobet.models.dates import (
    DAY_NAMES,
    MONTH_NAMES,
    date_key,
    day_name,
    days_in_month,
    format_date,
    is_weekend,
    parse_date_key,
    period_label,
    tr_upper,
)
from nobet.models.holiday import Holiday, default_holidays, holiday_range
from nobet.models.schedule import ScheduleEntry, schedule_to_dataframe
from nobet.models.student import Student


class TestDates:
    """Tests for calendar helpers."""

    def test_days_in_month(self):
        assert days_in_month(2026, 0) == 31
        assert days_in_month(2026, 3) == 30
        assert days_in_month(2026, 11) == 31

    def test_february_leap_years(self):
        assert days_in_month(2024, 1) == 29
        assert days_in_month(2025, 1) == 28
        assert days_in_month(2000, 1) == 29
        assert days_in_month(1900, 1) == 28

    @pytest.mark.parametrize("month", [-1, 12, 1.5, "0", True])
    def test_invalid_month(self, month):
        with pytest.raises(InvalidArgumentError):
            days_in_month(2026, month)

    def test_invalid_month_is_value_error(self):
        with pytest.raises(ValueError):
            days_in_month(2026, 12)

    def test_date_key_zero_padded(self):
        assert date_key(date(2026, 1, 5)) == "2026-01-05"
        assert date_key(date(987, 3, 9)) == "0987-03-09"

    def test_parse_date_key(self):
        assert parse_date_key("2026-01-01") == date(2026, 1, 1)
        assert parse_date_key(" 2026-5-1 ") == date(2026, 5, 1)
        assert parse_date_key(date(2026, 2, 2)) == date(2026, 2, 2)

    @pytest.mark.parametrize("value", ["", "2026/01/01", "2026-02-30", None, "abc"])
    def test_parse_date_key_invalid(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_date_key(value)

    def test_weekend(self):
        assert is_weekend(date(2026, 1, 3))       # Cumartesi
        assert is_weekend(date(2026, 1, 4))       # Pazar
        assert not is_weekend(date(2026, 1, 2))   # Cuma
        assert not is_weekend(date(2026, 1, 5))   # Pazartesi

    def test_turkish_display(self):
        d = date(2026, 1, 2)
        assert format_date(d) == "02.01.2026"
        assert day_name(d) == "Cuma"
        assert day_name(date(2026, 1, 5)) == "Pazartesi"
        assert len(DAY_NAMES) == 7
        assert len(MONTH_NAMES) == 12

    def test_tr_upper(self):
        assert tr_upper("1d sınıfı") == "1D SINIFI"
        assert tr_upper("şirin ilçe") == "ŞİRİN İLÇE"
        assert tr_upper("öğrenci") == "ÖĞRENCİ"

    def test_period_label(self):
        assert period_label(2026, 0) == "Ocak 2026"
        assert period_label(2025, 8) == "Eylül 2025"


class TestStudent:
    """Tests for Student dataclass."""

    def test_name_is_stripped(self):
        assert Student(name="  Ali ").name == "Ali"

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Student(name="   ")

    def test_ids_are_unique(self):
        assert Student(name="Ali").id != Student(name="Ali").id

    def test_dict_roundtrip(self):
        s = Student(name="Ayşe", id="abc")
        restored = Student.from_dict(s.to_dict())
        assert restored.id == "abc"
        assert restored.name == "Ayşe"

    def test_from_dict_without_id(self):
        assert Student.from_dict({"name": "Veli"}).id


class TestHoliday:
    """Tests for Holiday and the default calendar."""

    def test_date_string_parsed(self):
        h = Holiday(date="2026-04-23", description="23 Nisan")
        assert h.date == date(2026, 4, 23)
        assert h.key == "2026-04-23"

    def test_blank_description_defaults(self):
        assert Holiday(date="2026-04-23").description == "Resmi Tatil"

    def test_to_dict(self):
        d = Holiday(date="2026-01-01", description="Yılbaşı", id="x").to_dict()
        assert d == {"id": "x", "date": "2026-01-01", "description": "Yılbaşı"}

    def test_range_inclusive(self):
        days = holiday_range("2026-01-19", "2026-01-30", "Sömestir")
        assert len(days) == 12
        assert days[0].date == date(2026, 1, 19)
        assert days[-1].date == date(2026, 1, 30)

    def test_range_across_month(self):
        days = holiday_range("2025-12-30", "2026-01-02", "X")
        assert [h.key for h in days] == ["2025-12-30", "2025-12-31", "2026-01-01", "2026-01-02"]

    def test_default_holidays(self):
        holidays = default_holidays()
        keys = {h.key for h in holidays}
        assert "2026-01-01" in keys
        assert "2025-10-29" not in keys
        assert "2026-04-23" not in keys
        assert "2026-05-19" not in keys
        assert len(keys) == len(holidays)
        assert len(holidays) == 7 + 5 + 1 + 12 + 5 + 1 + 5 + 4


class TestScheduleEntry:
    """Tests for ScheduleEntry."""

    def test_working(self):
        e = ScheduleEntry(date=date(2026, 1, 2), student1="Ali", student2="Veli")
        assert e.is_working
        assert e.kind == "duty"

    def test_holiday_wins_over_weekend(self):
        e = ScheduleEntry(date=date(2026, 1, 24), is_weekend=True, is_holiday=True, holiday_name="Sömestir")
        assert not e.is_working
        assert e.kind == "holiday"

    def test_weekend(self):
        e = ScheduleEntry(date=date(2026, 1, 3), is_weekend=True)
        assert e.kind == "weekend"

    def test_dataframe(self):
        entries = [
            ScheduleEntry(date=date(2026, 1, 1), is_holiday=True, holiday_name="Yılbaşı"),
            ScheduleEntry(date=date(2026, 1, 2), student1="Ali", student2="Veli"),
        ]
        df = schedule_to_dataframe(entries)
        assert len(df) == 2
        assert df.loc[1, "student1"] == "Ali"
        assert df.loc[0, "date"] == "2026-01-01"

    def test_empty_dataframe(self):
        df = schedule_to_dataframe([])
        assert len(df) == 0
        assert "student1" in df.columns
