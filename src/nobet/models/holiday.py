"""Holiday model and the default academic calendar."""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Union

from .dates import date_key, parse_date_key
from .rules import RULES
from .student import new_id


@dataclass
class Holiday:
    """A non-working calendar day with a description."""

    date: date
    description: str = ""
    id: str = field(default_factory=new_id, compare=False)

    def __post_init__(self):
        self.date = parse_date_key(self.date)
        self.description = str(self.description or "").strip() or RULES.default_holiday_label
        self.id = str(self.id)

    @property
    def key(self) -> str:
        """YYYY-MM-DD key used for lookups and storage."""
        return date_key(self.date)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "date": self.key, "description": self.description}

    @classmethod
    def from_dict(cls, d: dict) -> "Holiday":
        """Create from dictionary."""
        if d.get("id"):
            return cls(date=d.get("date"), description=d.get("description", ""), id=d["id"])
        return cls(date=d.get("date"), description=d.get("description", ""))


def holiday_range(
    start: Union[str, date],
    end: Union[str, date],
    description: str,
) -> List[Holiday]:
    """One Holiday per day from start to end, both inclusive."""
    current = parse_date_key(start)
    last = parse_date_key(end)
    days = []
    while current <= last:
        days.append(Holiday(date=current, description=description))
        current += timedelta(days=1)
    return days


def default_holidays() -> List[Holiday]:
    """Holidays of the 2025-2026 school year (29 Ekim, 23 Nisan and 19 Mayıs are school days)."""
    holidays: List[Holiday] = []
    holidays += holiday_range("2025-09-01", "2025-09-07", "Yaz Tatili")
    holidays += holiday_range("2025-11-10", "2025-11-14", "1. Ara Tatil")
    holidays.append(Holiday(date="2026-01-01", description="Yılbaşı"))
    holidays += holiday_range("2026-01-19", "2026-01-30", "Yarıyıl Tatili (Sömestir)")
    holidays += holiday_range("2026-03-16", "2026-03-20", "2. Ara Tatil")
    holidays.append(Holiday(date="2026-05-01", description="Emek ve Dayanışma Günü"))
    holidays += holiday_range("2026-05-26", "2026-05-30", "Kurban Bayramı")
    holidays += holiday_range("2026-06-27", "2026-06-30", "Yaz Tatili")
    return holidays
