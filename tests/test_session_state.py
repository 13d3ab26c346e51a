"""
Tests for SessionStateManager
=============================
"""
from unittest.mock import MagicMock, patch

import pytest

from app.state.session import SessionStateManager


@pytest.fixture
def mock_streamlit():
    with patch("app.state.session.st") as mock_st:
        mock_st.session_state = {}
        yield mock_st


def test_init_state_defaults(mock_streamlit):
    SessionStateManager.init_state()

    assert mock_streamlit.session_state["schedule"] == []
    assert mock_streamlit.session_state["config_month"] == 8
    assert mock_streamlit.session_state["class_name"] == "1D Sınıfı"


def test_init_state_loads_store(mock_streamlit, store):
    store.add_students(["Ali", "Veli"])
    store.save_class_name("3C")
    SessionStateManager.init_state(store)
    state = SessionStateManager()

    assert [s.name for s in state.students] == ["Ali", "Veli"]
    assert state.class_name == "3C"
    assert len(state.holidays) > 0


def test_property_access(mock_streamlit):
    SessionStateManager.init_state()
    state = SessionStateManager()

    schedule = [MagicMock()]
    state.schedule = schedule
    assert mock_streamlit.session_state["schedule"] == schedule

    state.clear_results()
    assert state.schedule == []
