"""
Session State Management
========================
Encapsulates all Streamlit session state interactions.
Lists are loaded from the RosterStore once per session and written back on
every change.
"""
from typing import TYPE_CHECKING, List, Optional

import streamlit as st

from nobet.io.store import RosterStore
from nobet.models.rules import RULES

if TYPE_CHECKING:
    from nobet.models.holiday import Holiday
    from nobet.models.schedule import ScheduleEntry
    from nobet.models.student import Student


class SessionStateManager:
    """Manages type-safe access to session state."""

    @staticmethod
    def init_state(store: Optional[RosterStore] = None):
        """Initialize default session state values."""
        defaults = {
            "schedule": [],
            "config_year": RULES.default_year,
            "config_month": RULES.default_month,
        }
        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value

        if store is not None and "students" not in st.session_state:
            st.session_state["class_name"] = store.load_class_name()
            st.session_state["students"] = store.load_students()
            st.session_state["holidays"] = store.load_holidays()
        for key, value in (
            ("class_name", RULES.default_class_name),
            ("students", []),
            ("holidays", []),
        ):
            if key not in st.session_state:
                st.session_state[key] = value

    @property
    def class_name(self) -> str:
        return st.session_state.get("class_name", RULES.default_class_name)

    @class_name.setter
    def class_name(self, value: str):
        st.session_state["class_name"] = value

    @property
    def year(self) -> int:
        return st.session_state.get("config_year", RULES.default_year)

    @property
    def month(self) -> int:
        return st.session_state.get("config_month", RULES.default_month)

    @property
    def students(self) -> List["Student"]:
        return st.session_state.get("students", [])

    @students.setter
    def students(self, value: List["Student"]):
        st.session_state["students"] = value

    @property
    def holidays(self) -> List["Holiday"]:
        return st.session_state.get("holidays", [])

    @holidays.setter
    def holidays(self, value: List["Holiday"]):
        st.session_state["holidays"] = value

    @property
    def schedule(self) -> List["ScheduleEntry"]:
        return st.session_state.get("schedule", [])

    @schedule.setter
    def schedule(self, value: List["ScheduleEntry"]):
        st.session_state["schedule"] = value

    def clear_results(self):
        """Drop the generated schedule."""
        st.session_state["schedule"] = []
