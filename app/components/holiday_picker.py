"""Holiday picker for Streamlit."""
from typing import List

import streamlit as st

from nobet.exceptions import DuplicateHolidayError
from nobet.io.store import RosterStore
from nobet.models.dates import format_date
from nobet.models.holiday import Holiday


def render_holiday_picker(holidays: List[Holiday], store: RosterStore) -> List[Holiday]:
    """Render the holiday list with add/remove; changes go to the store."""
    st.subheader("🏖️ Tatil Günleri")

    with st.form("holiday_add", clear_on_submit=True):
        col1, col2 = st.columns(2)
        day = col1.date_input("Tarih", value=None, format="DD.MM.YYYY")
        desc = col2.text_input("Açıklama", placeholder="Açıklama (örn: 23 Nisan)")
        if st.form_submit_button("➕ Ekle") and day is not None:
            try:
                store.add_holiday(day, desc)
            except DuplicateHolidayError:
                st.error("Bu tarih zaten ekli.")
            else:
                st.session_state["holidays"] = store.load_holidays()
                st.rerun()

    if not holidays:
        st.caption("Henüz tatil günü eklenmedi.")

    for h in holidays:
        col1, col2 = st.columns([5, 1])
        col1.write(f"**{format_date(h.date)}** {h.description}")
        if col2.button("✖", key=f"holiday_rm_{h.id}"):
            store.remove_holiday(h.id)
            st.session_state["holidays"] = store.load_holidays()
            st.rerun()

    if st.button("↺ Varsayılan tatilleri yükle", key="holiday_reset"):
        st.session_state["holidays"] = store.reset_holidays()
        st.rerun()

    return holidays
