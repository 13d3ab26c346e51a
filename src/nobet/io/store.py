"""
Roster Store - Persistent Lists
===============================
Key-value persistence for the class name, student list and holiday list,
stored as JSON values in a single SQLite table.

Usage:
    store = RosterStore(Path("data/nobet.db"))
    store.add_student("Ali")
    store.add_holiday("2026-04-23", "23 Nisan")
    students = store.load_students()
"""
import json
import sqlite3
from datetime import date
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from nobet.exceptions import DuplicateHolidayError
from nobet.models.dates import parse_date_key
from nobet.models.holiday import Holiday, default_holidays
from nobet.models.rules import RULES
from nobet.models.student import Student
from nobet.utils.logging_setup import get_logger

logger = get_logger("nobet.io.store")

DEFAULT_DB_PATH = Path("data/nobet.db")

KEY_CLASS_NAME = "className"
KEY_STUDENTS = "students"
KEY_HOLIDAYS = "holidays"


class RosterStore:
    """
    Persists the roster lists in SQLite.

    The holiday list starts as the default school-year calendar.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """Initialize with database path."""
        self.db_path = Path(db_path) if db_path else DEFAULT_DB_PATH
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Create the table if it doesn't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            """)
            conn.commit()
        logger.debug(f"Store initialized at {self.db_path}")

    # Raw key-value access

    def get(self, key: str, default: Any = None) -> Any:
        """Decoded JSON value of a key, or default if absent."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        if row is None:
            return default
        return json.loads(row[0])

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under a key."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                (key, json.dumps(value, ensure_ascii=False)),
            )
            conn.commit()
        logger.debug(f"Stored {key}")

    def has(self, key: str) -> bool:
        with sqlite3.connect(self.db_path) as conn:
            return conn.execute("SELECT 1 FROM kv WHERE key = ?", (key,)).fetchone() is not None

    # Class name

    def load_class_name(self) -> str:
        return self.get(KEY_CLASS_NAME) or RULES.default_class_name

    def save_class_name(self, class_name: str) -> None:
        self.set(KEY_CLASS_NAME, class_name)

    # Students

    def load_students(self) -> List[Student]:
        """Students in roster order."""
        return [Student.from_dict(d) for d in self.get(KEY_STUDENTS, [])]

    def save_students(self, students: Iterable[Student]) -> None:
        self.set(KEY_STUDENTS, [s.to_dict() for s in students])

    def add_student(self, name: str) -> Student:
        """Append one student to the end of the roster."""
        return self.add_students([name])[0]

    def add_students(self, names: Iterable[str]) -> List[Student]:
        """Append students in the given order; blank names are skipped."""
        new = [Student(name=n) for n in names if str(n).strip()]
        if new:
            self.save_students(self.load_students() + new)
            logger.info(f"Added {len(new)} students")
        return new

    def remove_student(self, student_id: str) -> bool:
        """Remove a student by id. Returns False if no such student."""
        students = self.load_students()
        kept = [s for s in students if s.id != student_id]
        if len(kept) == len(students):
            return False
        self.save_students(kept)
        logger.info(f"Removed student {student_id}")
        return True

    # Holidays

    def load_holidays(self) -> List[Holiday]:
        """Saved holidays; the default calendar is saved on first load."""
        if not self.has(KEY_HOLIDAYS):
            return self.reset_holidays()
        return [Holiday.from_dict(d) for d in self.get(KEY_HOLIDAYS, [])]

    def save_holidays(self, holidays: Iterable[Holiday]) -> None:
        self.set(KEY_HOLIDAYS, [h.to_dict() for h in holidays])

    def add_holiday(self, day: Union[str, date], description: str = "") -> Holiday:
        """
        Add a holiday, keeping the list sorted by date.

        Raises:
            DuplicateHolidayError: a holiday already exists on that date
        """
        d = parse_date_key(day)
        holidays = self.load_holidays()
        if any(h.date == d for h in holidays):
            raise DuplicateHolidayError(f"a holiday already exists on {d.isoformat()}")
        holiday = Holiday(date=d, description=description)
        self.save_holidays(sorted(holidays + [holiday], key=lambda h: h.date))
        logger.info(f"Added holiday {holiday.key} {holiday.description}")
        return holiday

    def remove_holiday(self, holiday_id: str) -> bool:
        """Remove a holiday by id. Returns False if no such holiday."""
        holidays = self.load_holidays()
        kept = [h for h in holidays if h.id != holiday_id]
        if len(kept) == len(holidays):
            return False
        self.save_holidays(kept)
        logger.info(f"Removed holiday {holiday_id}")
        return True

    def reset_holidays(self) -> List[Holiday]:
        """Replace the saved list with the default calendar."""
        holidays = default_holidays()
        self.save_holidays(holidays)
        return holidays
