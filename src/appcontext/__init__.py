"""Immutable application context for bootstrapping server processes.

The context resolves the conventional directories under an installation
root, runs the primary config ``config/app.py`` and loads secondary config
files on demand, evaluating each at most once.
"""

from .bootstrap import Bootstrapper, create_context
from .cache import ConfigCache
from .context import ApplicationContext
from .core.config import ContextSettings
from .directories import DEFAULT_LAYOUT, DirectoryRole, default_directories
from .logging import configure_logging
from .exceptions import (
    AppContextError,
    ConfigContractViolation,
    ConfigError,
    EnvironmentNotConfiguredError,
    MissingConfigFileError,
    MissingEnvironmentVariableError,
)
from .sources import ConfigSource, FileConfigSource, InMemoryConfigSource, SourceRegistry

__all__ = [
    "AppContextError",
    "ApplicationContext",
    "Bootstrapper",
    "ConfigCache",
    "ConfigContractViolation",
    "ConfigError",
    "ConfigSource",
    "ContextSettings",
    "DEFAULT_LAYOUT",
    "DirectoryRole",
    "EnvironmentNotConfiguredError",
    "FileConfigSource",
    "InMemoryConfigSource",
    "MissingConfigFileError",
    "MissingEnvironmentVariableError",
    "SourceRegistry",
    "configure_logging",
    "create_context",
    "default_directories",
]
