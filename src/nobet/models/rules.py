"""
Display Rules and Labels
========================
Central source of truth for row statuses, labels and colors shared by the
HTML workbook, xlsx, CSV and Streamlit renderers.
"""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class RowStyle:
    css_class: str
    color_bg: str
    color_text: str


# Row styles by kind; working days are unstyled
ROW_STYLES = {
    "holiday": RowStyle("holiday", "#E6F3FF", "#0066CC"),
    "weekend": RowStyle("weekend", "#FFE6E6", "#CC0000"),
}


@dataclass
class RulesConfig:
    """Labels and defaults of the duty roster."""

    # Status column
    status_duty: str = "Nöbet"
    status_off: str = "Tatil"  # weekends share the holiday status

    # Student cells on non-working days
    weekend_label: str = "Hafta Sonu"
    default_holiday_label: str = "Resmi Tatil"

    # Export layout
    columns: List[str] = field(default_factory=lambda: [
        "Tarih", "Gün", "1. Öğrenci", "2. Öğrenci", "Durum",
    ])
    column_widths: Dict[str, int] = field(default_factory=lambda: {
        "Tarih": 120,
        "Gün": 100,
        "1. Öğrenci": 200,
        "2. Öğrenci": 200,
        "Durum": 150,
    })
    filename_suffix: str = "AYI NÖBET LİSTESİ"
    sheet_name: str = "Nöbet Listesi"

    # Defaults
    default_class_name: str = "1D Sınıfı"
    default_year: int = 2025
    default_month: int = 8  # Eylül
    year_choices: List[int] = field(default_factory=lambda: [2024, 2025, 2026, 2027])


RULES = RulesConfig()
