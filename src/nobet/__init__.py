"""Okul Nöbet Asistanı - monthly two-student duty roster for a school class."""
from nobet.io.xls_export import ExportDocument, export_schedule
from nobet.models.schedule import ScheduleEntry
from nobet.scheduler.roster import generate_schedule

__version__ = "1.2.0"

__all__ = [
    "generate_schedule",
    "export_schedule",
    "ExportDocument",
    "ScheduleEntry",
]
