"""Error hierarchy raised while bootstrapping an application context."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "AppContextError",
    "EnvironmentNotConfiguredError",
    "ConfigError",
    "MissingConfigFileError",
    "ConfigContractViolation",
    "MissingEnvironmentVariableError",
    "ensure_readable_file",
]


class AppContextError(Exception):
    """Base class for application context errors."""


class EnvironmentNotConfiguredError(AppContextError):
    """Raised when the installation root is not an existing directory."""


class ConfigError(AppContextError):
    """Base class for configuration source failures."""


class MissingConfigFileError(ConfigError):
    """Raised when a config file does not exist or cannot be read."""


class ConfigContractViolation(ConfigError):
    """Raised when a config source does not produce the required shape."""


class MissingEnvironmentVariableError(AppContextError, KeyError):
    """Raised when an environment key is absent and no default was supplied."""

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return str(self.args[0]) if self.args else ""


def ensure_readable_file(path: Path, *, kind: str = "config file") -> Path:
    """Return ``path`` if it is a readable regular file, else raise."""

    if not path.is_file():
        raise MissingConfigFileError(f"cannot find {kind}: {path}")
    try:
        with path.open("rb"):
            pass
    except OSError as exc:
        raise MissingConfigFileError(f"cannot read {kind}: {path}") from exc
    return path
