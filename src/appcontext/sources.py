"""Config sources and the registry that selects one per filename.

A config source turns an application context into a value. Two strategies
ship with the package: :class:`FileConfigSource` executes a Python file from
the ``config`` directory, :class:`InMemoryConfigSource` wraps a callable and
serves tests and programmatic wiring. :class:`SourceRegistry` is the
injection seam choosing between them.
"""

from __future__ import annotations

import runpy
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Protocol, runtime_checkable

from .directories import DirectoryRole
from .exceptions import ConfigContractViolation, MissingConfigFileError, ensure_readable_file
from .logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .context import ApplicationContext


logger = get_logger(__name__)

ConfigFactory = Callable[["ApplicationContext"], Any]


@runtime_checkable
class ConfigSource(Protocol):
    """Produces a config value for the given context."""

    def load(self, context: "ApplicationContext") -> Any:
        """Evaluate the source with ``context`` as its only input."""


@dataclass(frozen=True, slots=True)
class FileConfigSource:
    """Config source backed by a Python file.

    The file is executed in a fresh namespace that knows nothing about the
    context. It must define a module-level callable named ``entrypoint``;
    that callable receives the context and its return value is the config.
    """

    path: Path
    entrypoint: str = "configure"

    def load(self, context: "ApplicationContext") -> Any:
        factory = self._load_factory()
        return factory(context)

    def _load_factory(self) -> ConfigFactory:
        ensure_readable_file(self.path)
        namespace = runpy.run_path(
            str(self.path), run_name=f"appcontext.config.{self.path.stem}"
        )
        factory = namespace.get(self.entrypoint)
        if factory is None:
            raise ConfigContractViolation(
                f"config file must define '{self.entrypoint}' at: {self.path}"
            )
        if not callable(factory):
            raise ConfigContractViolation(
                f"'{self.entrypoint}' must be callable, got "
                f"{type(factory).__name__} at: {self.path}"
            )
        logger.debug("config_file_evaluated", path=str(self.path))
        return factory


@dataclass(frozen=True, slots=True)
class InMemoryConfigSource:
    """Config source wrapping a callable supplied in code."""

    factory: ConfigFactory
    label: str = "<memory>"

    def load(self, context: "ApplicationContext") -> Any:
        if not callable(self.factory):
            raise ConfigContractViolation(
                f"in-memory config source {self.label} must wrap a callable, "
                f"got {type(self.factory).__name__}"
            )
        return self.factory(context)


@dataclass(slots=True)
class SourceRegistry:
    """Select the config source serving a filename.

    Sources registered explicitly take precedence; any other filename falls
    back to a :class:`FileConfigSource` inside the context's ``config``
    directory. ``entrypoint`` overrides the callable name taken from the
    context settings.
    """

    entrypoint: str | None = None
    sources: Dict[str, ConfigSource] = field(default_factory=dict)

    def register(self, filename: str, source: ConfigSource) -> None:
        """Serve ``filename`` from ``source`` instead of the filesystem."""

        if not isinstance(source, ConfigSource):
            raise ConfigContractViolation(
                f"source registered for '{filename}' does not provide load(context)"
            )
        self.sources[filename] = source

    def register_factory(self, filename: str, factory: ConfigFactory) -> None:
        """Shortcut registering an :class:`InMemoryConfigSource`."""

        self.register(filename, InMemoryConfigSource(factory, label=filename))

    def resolve(self, context: "ApplicationContext", filename: str) -> ConfigSource:
        """Return the source for ``filename`` as seen from ``context``."""

        registered = self.sources.get(filename)
        if registered is not None:
            return registered

        config_dir = context.get_directory(DirectoryRole.CONFIG)
        if config_dir is None:
            raise MissingConfigFileError(
                f"cannot find config file {filename!r}: no 'config' directory configured"
            )
        entrypoint = self.entrypoint or context.settings.config_entrypoint
        return FileConfigSource(Path(config_dir) / filename, entrypoint=entrypoint)

    def snapshot(self) -> Mapping[str, ConfigSource]:
        """Copy of the explicitly registered sources."""

        return dict(self.sources)


__all__ = [
    "ConfigFactory",
    "ConfigSource",
    "FileConfigSource",
    "InMemoryConfigSource",
    "SourceRegistry",
]
