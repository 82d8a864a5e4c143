"""
Logging setup using structlog.

Modules log through ``structlog.get_logger(__name__)``; call
``configure_logging`` once at application start.
"""

import logging

import structlog


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """
    Configure structlog processors and the log level.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json: Render JSON lines instead of console output
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
