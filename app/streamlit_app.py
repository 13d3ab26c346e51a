"""
Okul Nöbet Asistanı: Streamlit Web UI
=====================================
Monthly two-student duty roster for a school class.
"""
import os
import sys

import streamlit as st

# Add src and project root to python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from app.components.styling import apply_styling
from app.state.session import SessionStateManager
from app.views.export import render_downloads
from app.views.inputs import render_inputs
from app.views.schedule_table import render_schedule
from nobet.io.store import RosterStore
from nobet.models.config import RosterConfig
from nobet.scheduler.roster import generate_schedule
from nobet.utils.logging_setup import setup_logging


@st.cache_resource
def get_store() -> RosterStore:
    config = RosterConfig(store_path=os.environ.get("NOBET_STORE", RosterConfig.store_path))
    setup_logging(level=config.log_level, log_file=config.log_file)
    return RosterStore(config.store_path)


def main():
    # 1. Init
    store = get_store()
    SessionStateManager.init_state(store)
    state = SessionStateManager()
    apply_styling()

    st.markdown(
        '<div class="app-header"><h1>🎓 Okul Nöbet Asistanı</h1>'
        "<p>2025-2026 Eğitim Öğretim Yılı</p></div>",
        unsafe_allow_html=True,
    )

    # 2. Sidebar (Inputs)
    render_inputs(state, store)

    # 3. Generation (triggered from sidebar, or on first load with students)
    _handle_generate(state)

    # 4. Result
    render_schedule(state)
    render_downloads(state)

    st.markdown(
        '<div class="app-footer">Mahmut İŞİyok tarafından lisanslanmıştır</div>',
        unsafe_allow_html=True,
    )


def _handle_generate(state: SessionStateManager):
    """Generate the roster if triggered."""
    first_load = not st.session_state.get("auto_generated") and state.students and not state.schedule
    if st.session_state.get("trigger_generate") or first_load:
        st.session_state.trigger_generate = False
        st.session_state.auto_generated = True
        state.schedule = generate_schedule(state.year, state.month, state.students, state.holidays)
        if not state.schedule:
            st.warning("Öğrenci listesi boş.")


if __name__ == "__main__":
    main()
