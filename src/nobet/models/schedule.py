"""Schedule entry model."""
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd

from .dates import date_key


@dataclass(frozen=True)
class ScheduleEntry:
    """One calendar day of the roster."""

    date: date
    student1: str = ""
    student2: str = ""
    is_weekend: bool = False
    is_holiday: bool = False
    holiday_name: Optional[str] = None

    @property
    def is_working(self) -> bool:
        """True if the day takes a duty assignment."""
        return not self.is_weekend and not self.is_holiday

    @property
    def kind(self) -> str:
        """Display kind; holiday takes precedence over weekend."""
        if self.is_holiday:
            return "holiday"
        if self.is_weekend:
            return "weekend"
        return "duty"

    def to_dict(self) -> dict:
        return {
            "date": date_key(self.date),
            "student1": self.student1,
            "student2": self.student2,
            "is_weekend": self.is_weekend,
            "is_holiday": self.is_holiday,
            "holiday_name": self.holiday_name,
        }


SCHEDULE_COLUMNS = ["date", "student1", "student2", "is_weekend", "is_holiday", "holiday_name"]


def schedule_to_dataframe(schedule: Sequence[ScheduleEntry]) -> pd.DataFrame:
    """Convert a schedule to a DataFrame, one row per day."""
    if not schedule:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    rows: List[dict] = [e.to_dict() for e in schedule]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
