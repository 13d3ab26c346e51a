"""Bulk student import from pasted text, text/CSV files or DataFrames."""
import re
from pathlib import Path
from typing import List, Union

import pandas as pd

from nobet.utils.logging_setup import get_logger

logger = get_logger("nobet.io.bulk_import")

_SEPARATORS = re.compile(r"[\n,]")


def parse_student_names(text: str) -> List[str]:
    """
    Split pasted text into names.

    Names are separated by newlines or commas; whitespace is trimmed and
    empty items are dropped. Order is preserved.
    """
    return [n.strip() for n in _SEPARATORS.split(text or "") if n.strip()]


def load_students(source: Union[str, Path, pd.DataFrame]) -> List[str]:
    """
    Load student names from a DataFrame, a .txt/.csv file or raw text.

    Args:
        source: DataFrame with a 'name' column, path to an existing file,
            or pasted text

    Returns:
        Names in source order
    """
    if isinstance(source, pd.DataFrame):
        if "name" not in source.columns:
            raise ValueError("DataFrame must have a 'name' column")
        names = [str(v).strip() for v in source["name"].fillna("")]
        names = [n for n in names if n]
    else:
        path = Path(source) if isinstance(source, Path) else None
        if path is None and "\n" not in str(source) and len(str(source)) < 260:
            candidate = Path(str(source))
            if candidate.suffix.lower() in (".txt", ".csv") and candidate.is_file():
                path = candidate
        if path is not None:
            text = path.read_text(encoding="utf-8-sig")
        else:
            text = str(source)
        names = parse_student_names(text)

    logger.info(f"Loaded {len(names)} student names")
    return names
