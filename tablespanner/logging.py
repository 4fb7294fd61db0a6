"""Structured logging for the library and the CLI.

Module loggers always wrap a stdlib logger under the ``tablespanner``
namespace, so library callers that never call :func:`configure_logging` get
stdlib behaviour: nothing below WARNING, and nothing on stdout.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

ROOT_LOGGER_NAME = "tablespanner"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING") -> None:
    """Render events as JSON lines on stderr at ``level``; used by the CLI."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(format="%(message)s", level=numeric_level)
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.wrap_logger(logging.getLogger(name or ROOT_LOGGER_NAME))
