"""Row rendering shared by the document exporters."""
from dataclasses import dataclass
from typing import List, Sequence

from nobet.models.dates import day_name, format_date
from nobet.models.rules import ROW_STYLES, RULES
from nobet.models.schedule import ScheduleEntry


@dataclass
class ExportRow:
    """Display values of one schedule entry."""
    date_text: str
    day_text: str
    student1: str
    student2: str
    status: str
    kind: str  # holiday, weekend, duty

    @property
    def css_class(self) -> str:
        style = ROW_STYLES.get(self.kind)
        return style.css_class if style else ""

    @property
    def is_duty(self) -> bool:
        return self.kind == "duty"

    def cells(self) -> List[str]:
        return [self.date_text, self.day_text, self.student1, self.student2, self.status]


def build_row(entry: ScheduleEntry) -> ExportRow:
    """Holiday wins over weekend; both read as the off status."""
    kind = entry.kind
    if kind == "holiday":
        label = entry.holiday_name or RULES.default_holiday_label
        s1 = s2 = label
        status = RULES.status_off
    elif kind == "weekend":
        s1 = s2 = RULES.weekend_label
        status = RULES.status_off
    else:
        s1, s2 = entry.student1, entry.student2
        status = RULES.status_duty
    return ExportRow(
        date_text=format_date(entry.date),
        day_text=day_name(entry.date),
        student1=s1,
        student2=s2,
        status=status,
        kind=kind,
    )


def build_rows(schedule: Sequence[ScheduleEntry]) -> List[ExportRow]:
    return [build_row(e) for e in schedule]
