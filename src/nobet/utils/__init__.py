"""Utilities package for Nöbet Asistanı."""
from .logging_setup import (
    TRACE,
    RosterLogger,
    get_logger,
    log_check,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_check",
    "RosterLogger",
    "TRACE",
]
