# nobet/io - Input/output handling
from .bulk_import import load_students, parse_student_names
from .excel_export import export_to_csv, export_to_xlsx
from .store import RosterStore
from .xls_export import ExportDocument, export_schedule, save_document

__all__ = [
    "export_schedule", "ExportDocument", "save_document",
    "export_to_xlsx", "export_to_csv",
    "RosterStore",
    "load_students", "parse_student_names",
]
