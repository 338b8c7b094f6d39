"""Structured logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest
import structlog

from appcontext import Bootstrapper
from appcontext.logging import COMPONENT, configure_logging, get_logger

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


def test_configure_logging_renders_json_by_default() -> None:
    configure_logging()

    assert structlog.is_configured()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_configure_logging_renders_console_in_development() -> None:
    configure_logging(logging.DEBUG, development=True)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert logging.getLogger(COMPONENT).level == logging.DEBUG


def test_get_logger_tags_component() -> None:
    with structlog.testing.capture_logs() as events:
        get_logger("appcontext.tests").info("lookup_event", detail=1)

    assert events == [
        {"event": "lookup_event", "detail": 1, "component": COMPONENT, "log_level": "info"}
    ]


def test_bootstrapper_configures_logging_when_level_given(tmp_path: Path) -> None:
    bootstrapper = Bootstrapper(environ={"DEVELOPMENT": "true"}, log_level=logging.INFO)
    bootstrapper.register_factory("app.py", lambda context: context)

    bootstrapper.create(tmp_path)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_bootstrapper_leaves_logging_alone_by_default(tmp_path: Path) -> None:
    bootstrapper = Bootstrapper(environ={})
    bootstrapper.register_factory("app.py", lambda context: context)

    bootstrapper.create(tmp_path)

    assert not structlog.is_configured()


def test_bootstrap_emits_configured_event(tmp_path: Path) -> None:
    bootstrapper = Bootstrapper(environ={})
    bootstrapper.register_factory("app.py", lambda context: context.with_name("api"))

    with structlog.testing.capture_logs() as events:
        bootstrapper.create(tmp_path)

    configured = [e for e in events if e["event"] == "application_context_configured"]
    assert configured == [
        {
            "event": "application_context_configured",
            "name": "api",
            "root": str(tmp_path),
            "component": COMPONENT,
            "log_level": "info",
        }
    ]
