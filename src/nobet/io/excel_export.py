"""Native Excel (xlsx) and CSV export for schedules."""
import io
from pathlib import Path
from typing import Sequence, Union

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from nobet.models.rules import ROW_STYLES, RULES
from nobet.models.schedule import ScheduleEntry
from nobet.utils.logging_setup import get_logger

from .rows import build_rows
from .xls_export import build_title

logger = get_logger("nobet.io.excel_export")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

BLACK_THIN = Side(border_style="thin", color="000000")
BLACK_MEDIUM = Side(border_style="medium", color="000000")
BORDER_THIN = Border(top=BLACK_THIN, bottom=BLACK_THIN, left=BLACK_THIN, right=BLACK_THIN)
BORDER_TITLE = Border(top=BLACK_MEDIUM, bottom=BLACK_MEDIUM, left=BLACK_MEDIUM, right=BLACK_MEDIUM)
HEADER_FILL = PatternFill(start_color="F0F0F0", end_color="F0F0F0", fill_type="solid")


def _hex(color: str) -> str:
    return color.lstrip("#").upper()


def export_to_xlsx(
    schedule: Sequence[ScheduleEntry],
    class_name: str,
    period_label: str,
    output: Union[str, Path, io.BytesIO],
) -> None:
    """
    Export schedule to an xlsx workbook.

    Same layout as the HTML workbook: merged title row, header row, one
    row per day with holiday/weekend fills.

    Args:
        schedule: Entries from generate_schedule()
        class_name: Class label
        period_label: Month label
        output: File path or BytesIO buffer
    """
    title = build_title(class_name, period_label)
    rows = build_rows(schedule)
    ncols = len(RULES.columns)

    wb = Workbook()
    ws = wb.active
    ws.title = RULES.sheet_name

    # Title
    ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=ncols)
    cell = ws.cell(row=1, column=1, value=title)
    cell.font = Font(bold=True, size=16)
    cell.alignment = Alignment(horizontal="center", vertical="center")
    cell.border = BORDER_TITLE
    ws.row_dimensions[1].height = 30

    # Header
    for j, label in enumerate(RULES.columns, start=1):
        cell = ws.cell(row=2, column=j, value=label)
        cell.font = Font(bold=True, size=14)
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center")
        cell.border = BORDER_THIN
        # px -> character width, roughly
        ws.column_dimensions[get_column_letter(j)].width = RULES.column_widths.get(label, 100) / 7

    # Entries
    for i, row in enumerate(rows, start=3):
        style = ROW_STYLES.get(row.kind)
        for j, value in enumerate(row.cells(), start=1):
            cell = ws.cell(row=i, column=j, value=value)
            cell.border = BORDER_THIN
            if style:
                cell.fill = PatternFill(
                    start_color=_hex(style.color_bg),
                    end_color=_hex(style.color_bg),
                    fill_type="solid",
                )
                cell.font = Font(
                    color=_hex(style.color_text),
                    bold=row.kind == "holiday",
                    italic=row.kind == "weekend",
                )
            elif j in (3, 4):
                cell.font = Font(bold=True)

    ws.freeze_panes = "A3"

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        wb.save(str(output))
    logger.info(f"Exported xlsx '{title}': {len(rows)} rows")


def schedule_to_export_frame(schedule: Sequence[ScheduleEntry]) -> pd.DataFrame:
    """Display rows as a DataFrame with the export column labels."""
    rows = build_rows(schedule)
    return pd.DataFrame([r.cells() for r in rows], columns=RULES.columns)


def export_to_csv(schedule: Sequence[ScheduleEntry], output: Union[str, Path, io.StringIO]) -> None:
    """Export display rows to CSV."""
    df = schedule_to_export_frame(schedule)
    if isinstance(output, io.StringIO):
        df.to_csv(output, index=False)
    else:
        df.to_csv(str(output), index=False, encoding="utf-8-sig")
    logger.info(f"Exported CSV: {len(df)} rows")
