"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src and project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

import pytest

from nobet.io.store import RosterStore
from nobet.models.holiday import Holiday
from nobet.models.student import Student


@pytest.fixture
def two_students():
    """Two-student roster."""
    return [Student(name="Ali"), Student(name="Veli")]


@pytest.fixture
def sample_students():
    """A small class roster."""
    return [
        Student(name="Ali"),
        Student(name="Veli"),
        Student(name="Ayşe"),
        Student(name="Fatma"),
        Student(name="Mehmet"),
    ]


@pytest.fixture
def new_year_holiday():
    return [Holiday(date="2026-01-01", description="Yılbaşı")]


@pytest.fixture
def store(tmp_path):
    """Empty store in a temp directory."""
    return RosterStore(tmp_path / "nobet.db")


@pytest.fixture(autouse=True)
def reset_nobet_logging():
    """Drop handlers added by setup_logging() so they don't outlive the test."""
    yield
    logger = logging.getLogger("nobet")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
