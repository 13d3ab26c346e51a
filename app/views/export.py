"""
Export View
===========
Handles file downloads (xls workbook, xlsx, CSV).
"""
import io

import streamlit as st

from app.state.session import SessionStateManager
from nobet.io.excel_export import XLSX_MEDIA_TYPE, export_to_csv, export_to_xlsx
from nobet.io.xls_export import export_schedule
from nobet.models.dates import period_label


def render_downloads(state: SessionStateManager):
    """Render the download buttons for the current schedule."""
    if not state.schedule:
        return

    label = period_label(state.year, state.month)
    doc = export_schedule(state.schedule, state.class_name, label)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "📥 Excel İndir",
            doc.content,
            doc.filename,
            doc.media_type,
        )

    with col2:
        xlsx_buffer = io.BytesIO()
        export_to_xlsx(state.schedule, state.class_name, label, xlsx_buffer)
        st.download_button(
            "📥 Excel (xlsx) İndir",
            xlsx_buffer.getvalue(),
            f"{doc.title}.xlsx",
            XLSX_MEDIA_TYPE,
        )

    with col3:
        csv_buffer = io.StringIO()
        export_to_csv(state.schedule, csv_buffer)
        st.download_button(
            "📥 CSV İndir",
            csv_buffer.getvalue(),
            f"{doc.title}.csv",
            "text/csv",
        )
