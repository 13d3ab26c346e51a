"""
Input View (Sidebar)
====================
Class settings, student list and holiday list.
"""
import streamlit as st

from app.components.holiday_picker import render_holiday_picker
from app.components.student_list import render_student_list
from app.state.session import SessionStateManager
from nobet.io.store import RosterStore
from nobet.models.dates import MONTH_NAMES
from nobet.models.rules import RULES


def render_inputs(state: SessionStateManager, store: RosterStore):
    """Render the sidebar inputs and update state."""
    with st.sidebar:
        st.header("⚙️ Ayarlar")

        class_name = st.text_input("Sınıf Adı", value=state.class_name, placeholder="Örn: 1D Sınıfı")
        if class_name != state.class_name:
            state.class_name = class_name
            store.save_class_name(class_name)

        col1, col2 = st.columns(2)
        col1.selectbox("Yıl", RULES.year_choices, key="config_year")
        col2.selectbox(
            "Ay",
            list(range(12)),
            format_func=lambda i: MONTH_NAMES[i],
            key="config_month",
        )

        if st.button("🔄 Listeyi Oluştur", type="primary", width="stretch"):
            st.session_state.trigger_generate = True

        st.divider()
        render_student_list(state.students, store)

        st.divider()
        render_holiday_picker(state.holidays, store)
