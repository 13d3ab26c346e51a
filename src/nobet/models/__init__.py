# nobet/models - Data models for the duty roster
from .config import RosterConfig
from .holiday import Holiday, default_holidays, holiday_range
from .rules import RULES, RulesConfig
from .schedule import ScheduleEntry, schedule_to_dataframe
from .student import Student

__all__ = [
    "Student",
    "Holiday", "default_holidays", "holiday_range",
    "ScheduleEntry", "schedule_to_dataframe",
    "RosterConfig",
    "RULES", "RulesConfig",
]
