"""Date helpers and Turkish (tr-TR) calendar display conventions."""
import calendar
from datetime import MAXYEAR, MINYEAR, date
from typing import List

from nobet.exceptions import InvalidArgumentError

# Month names, zero-based index like the month selector
MONTH_NAMES = [
    "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
    "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
]

# Full weekday names indexed by date.weekday() (Monday = 0)
DAY_NAMES = [
    "Pazartesi", "Salı", "Çarşamba", "Perşembe", "Cuma", "Cumartesi", "Pazar",
]

WEEKEND = (calendar.SATURDAY, calendar.SUNDAY)

# Turkish dotted/dotless i do not survive str.upper()
_TR_UPPER = str.maketrans({"i": "İ", "ı": "I"})


def check_month(month: int) -> int:
    """Validate a zero-based month index (0-11)."""
    if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
        raise InvalidArgumentError(f"month must be an integer in 0-11, got {month!r}")
    return month


def check_year(year: int) -> int:
    """Validate a calendar year representable by datetime.date."""
    if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgumentError(f"year must be an integer in {MINYEAR}-{MAXYEAR}, got {year!r}")
    return year


def days_in_month(year: int, month: int) -> int:
    """Number of days in a zero-based month, leap years included."""
    return calendar.monthrange(check_year(year), check_month(month) + 1)[1]


def month_dates(year: int, month: int) -> List[date]:
    """Every calendar date of a zero-based month, in order."""
    count = days_in_month(year, month)
    return [date(year, month + 1, day) for day in range(1, count + 1)]


def is_weekend(d: date) -> bool:
    """Saturday or Sunday."""
    return d.weekday() in WEEKEND


def date_key(d: date) -> str:
    """YYYY-MM-DD key built from the local calendar fields."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(value) -> date:
    """Parse a YYYY-MM-DD key (or pass a date through)."""
    if isinstance(value, date):
        return value
    try:
        y, m, d = (int(part) for part in str(value).strip().split("-"))
        return date(y, m, d)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def format_date(d: date) -> str:
    """Short tr-TR date (dd.MM.yyyy)."""
    return f"{d.day:02d}.{d.month:02d}.{d.year}"


def day_name(d: date) -> str:
    """Full Turkish weekday name."""
    return DAY_NAMES[d.weekday()]


def tr_upper(text: str) -> str:
    """Uppercase with Turkish casing rules (i -> İ, ı -> I)."""
    return str(text).translate(_TR_UPPER).upper()


def period_label(year: int, month: int) -> str:
    """Display label for a month, e.g. 'Ocak 2026'."""
    return f"{MONTH_NAMES[check_month(month)]} {year}"
