"""
Structured Logging
==================
structlog integration for machine-readable roster events.

setup_logging() configures structlog to hand rendered events to the stdlib
"nobet" logger hierarchy, so they share its handlers.

Usage:
    from nobet.utils.structured_logging import get_structured_logger

    log = get_structured_logger("nobet.scheduler")
    log.info("schedule_generated", year=2026, month=0, days=31)
"""
from typing import Any

import structlog


def configure_structlog(json_output: bool = False) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, render events as JSON (for production).
                    If False, render key=value pairs (for development).
    """
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.processors.KeyValueRenderer(
        key_order=["event"], sort_keys=True
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_structured_logger(name: str) -> Any:
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind context variables for all subsequent log calls.

    Args:
        **kwargs: Context values (e.g., class_name="1D Sınıfı")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
