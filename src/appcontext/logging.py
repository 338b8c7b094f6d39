"""Structured logging for the bootstrap layer.

Every module logs through :func:`get_logger`, which tags events with
``component="appcontext"``. :func:`configure_logging` installs the pipeline;
``Bootstrapper`` calls it when given a ``log_level``.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

COMPONENT = "appcontext"


def configure_logging(level: int = logging.INFO, *, development: bool = False) -> None:
    """Route structlog through stdlib logging.

    Development mode renders human-readable console lines; otherwise events
    are emitted as JSON.
    """
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger(COMPONENT).setLevel(level)

    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if development
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a lazily bound logger tagged with the package component."""

    return structlog.get_logger(name, component=COMPONENT)


__all__ = ["COMPONENT", "configure_logging", "get_logger"]
