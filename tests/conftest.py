from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from appcontext import Bootstrapper, ContextSettings

from tests.helpers.config_files import IDENTITY_PRIMARY


WriteConfig = Callable[[str, str], Path]


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Installation root with a ``config`` directory and an identity ``app.py``."""

    root = tmp_path / "srv" / "app"
    (root / "config").mkdir(parents=True)
    (root / "config" / "app.py").write_text(IDENTITY_PRIMARY, encoding="utf-8")
    return root


@pytest.fixture
def write_config(install_root: Path) -> WriteConfig:
    """Write a config file into the installation root's ``config`` directory."""

    def _write(filename: str, body: str) -> Path:
        path = install_root / "config" / filename
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings() -> ContextSettings:
    return ContextSettings()


@pytest.fixture
def bootstrapper(settings: ContextSettings) -> Bootstrapper:
    """Bootstrapper with an isolated cache and an empty environment."""

    return Bootstrapper(settings=settings, environ={})

