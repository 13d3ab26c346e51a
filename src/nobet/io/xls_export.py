"""
Spreadsheet-compatible HTML workbook export.

The document is an HTML table wrapped in Office workbook hints, which Excel
and LibreOffice open as a worksheet when saved with the .xls extension.
"""
import html
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from nobet.models.dates import tr_upper
from nobet.models.rules import ROW_STYLES, RULES
from nobet.models.schedule import ScheduleEntry
from nobet.utils.logging_setup import get_logger
from nobet.utils.structured_logging import get_structured_logger

from .rows import ExportRow, build_rows

logger = get_logger("nobet.io.xls_export")
events = get_structured_logger("nobet.io")

XLS_MEDIA_TYPE = "application/vnd.ms-excel"

# Turkish capitals survive the filename filter
_FILENAME_STRIP = re.compile(r"[^A-Z0-9ÇĞİÖŞÜ ]")


@dataclass
class ExportDocument:
    """A downloadable file: name, media type and raw bytes."""
    filename: str
    media_type: str
    content: bytes

    @property
    def title(self) -> str:
        return Path(self.filename).stem


def build_title(class_name: str, period_label: str) -> str:
    """'<CLASS> <PERIOD> AYI NÖBET LİSTESİ' with Turkish uppercase."""
    upper_class = _FILENAME_STRIP.sub("", tr_upper(class_name))
    upper_period = tr_upper(period_label)
    return f"{upper_class} {upper_period} {RULES.filename_suffix}"


def _stylesheet() -> str:
    css = [
        "table { border-collapse: collapse; width: 100%; }",
        "th, td { border: 1px solid #000000; padding: 8px; text-align: left; font-family: Arial, sans-serif; }",
        ".header { background-color: #f0f0f0; font-weight: bold; text-align: center; font-size: 14px; }",
        ".title { font-size: 16px; font-weight: bold; text-align: center; height: 40px; border: 2px solid #000000; }",
        ".student { font-weight: bold; }",
    ]
    for style in ROW_STYLES.values():
        extra = "font-weight: bold;" if style.css_class == "holiday" else "font-style: italic;"
        css.append(
            f".{style.css_class} {{ background-color: {style.color_bg}; color: {style.color_text}; {extra} }}"
        )
    return "\n        ".join(css)


def _workbook_head() -> str:
    return f"""<head>
      <meta charset="UTF-8">
      <!--[if gte mso 9]>
      <xml>
        <x:ExcelWorkbook>
          <x:ExcelWorksheets>
            <x:ExcelWorksheet>
              <x:Name>{html.escape(RULES.sheet_name)}</x:Name>
              <x:WorksheetOptions>
                <x:DisplayGridlines/>
              </x:WorksheetOptions>
            </x:ExcelWorksheet>
          </x:ExcelWorksheets>
        </x:ExcelWorkbook>
      </xml>
      <![endif]-->
      <style>
        {_stylesheet()}
      </style>
    </head>"""


def _header_row() -> str:
    cells = "".join(
        f'<th class="header" style="width: {RULES.column_widths.get(c, 100)}px;">{html.escape(c)}</th>'
        for c in RULES.columns
    )
    return f"<tr>{cells}</tr>"


def _student_cell(row: ExportRow, name: str) -> str:
    if row.is_duty:
        return f'<span class="student">{html.escape(name)}</span>'
    return html.escape(name)


def _entry_row(row: ExportRow) -> str:
    values = [
        html.escape(row.date_text),
        html.escape(row.day_text),
        _student_cell(row, row.student1),
        _student_cell(row, row.student2),
        html.escape(row.status),
    ]
    cls = row.css_class
    cells = "".join(f'<td class="{cls}">{v}</td>' for v in values)
    return f"<tr>{cells}</tr>"


def render_workbook_html(rows: List[ExportRow], title: str) -> str:
    """Title row, header row, then one row per entry."""
    lines = [
        '<html xmlns:o="urn:schemas-microsoft-com:office:office" '
        'xmlns:x="urn:schemas-microsoft-com:office:excel" '
        'xmlns="http://www.w3.org/TR/REC-html40">',
        _workbook_head(),
        "<body>",
        "<table>",
        f'<tr><td colspan="{len(RULES.columns)}" class="title">{html.escape(title)}</td></tr>',
        _header_row(),
    ]
    lines.extend(_entry_row(r) for r in rows)
    lines += ["</table>", "</body>", "</html>"]
    return "\n".join(lines)


def export_schedule(
    schedule: Sequence[ScheduleEntry],
    class_name: str,
    period_label: str,
) -> ExportDocument:
    """
    Export a schedule as an Excel-readable HTML workbook.

    Args:
        schedule: Entries from generate_schedule()
        class_name: Class label, e.g. "1D Sınıfı"
        period_label: Month label, e.g. "Ocak 2026"

    Returns:
        ExportDocument named '<CLASS> <PERIOD> AYI NÖBET LİSTESİ.xls'
    """
    title = build_title(class_name, period_label)
    rows = build_rows(schedule)
    content = render_workbook_html(rows, title).encode("utf-8")
    logger.info(f"Exported '{title}.xls': {len(rows)} rows, {len(content)} bytes")
    events.info("document_exported", filename=f"{title}.xls", rows=len(rows), size=len(content))
    return ExportDocument(filename=f"{title}.xls", media_type=XLS_MEDIA_TYPE, content=content)


def save_document(document: ExportDocument, directory: Union[str, Path] = ".") -> Path:
    """Write an exported document into a directory; returns its path."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / document.filename
    path.write_bytes(document.content)
    logger.info(f"Saved {path}")
    return path
