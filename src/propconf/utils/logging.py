"""Structured logging configuration using structlog.

propconf logs every resolution, and one debug record per environment
variable when an environment overlay is built. Until the host application
configures structlog, those records go to structlog's default logger, which
prints everything to stdout. Applications should call ``setup_logging`` (or
their own ``structlog.configure``) once at startup; with ``setup_logging``
the records go through stdlib logging under the ``propconf.*`` logger names
and obey the configured level.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Placeholder logged in place of a sensitive value.
HIDDEN_VALUE = "*****"


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog on top of stdlib logging for the propconf loggers.

    Resolvers log every lookup at INFO, so applications that only want
    failures should pass ``level="WARNING"``.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
