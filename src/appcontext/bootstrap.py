"""Bootstrap coordinator owning the collaborators shared by contexts."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from .cache import ConfigCache
from .context import ApplicationContext
from .core.config import ContextSettings
from .logging import configure_logging, get_logger
from .sources import ConfigFactory, ConfigSource, SourceRegistry


logger = get_logger(__name__)


@dataclass(slots=True)
class Bootstrapper:
    """Create application contexts that share one cache and source registry.

    A process normally builds a single ``Bootstrapper`` at startup; tests
    build one per case to get an isolated cache. ``log_level`` opts in to
    configuring logging before the first context is built.
    """

    settings: ContextSettings = field(default_factory=ContextSettings.build_default)
    cache: ConfigCache = field(default_factory=ConfigCache)
    sources: SourceRegistry = field(default_factory=SourceRegistry)
    environ: Mapping[str, str] | None = None
    log_level: int | None = None

    def register_source(self, filename: str, source: ConfigSource) -> None:
        self.sources.register(filename, source)

    def register_factory(self, filename: str, factory: ConfigFactory) -> None:
        self.sources.register_factory(filename, factory)

    def create(self, base_path: str | os.PathLike[str]) -> ApplicationContext:
        """Bootstrap a context rooted at ``base_path``.

        With ``log_level`` set, logging is configured first; console output
        when the development key reads ``"true"``, JSON otherwise.
        """

        if self.log_level is not None:
            environ = os.environ if self.environ is None else self.environ
            development = environ.get(self.settings.development_env_key) == "true"
            configure_logging(self.log_level, development=development)
        logger.debug("bootstrap_started", base_path=os.fspath(base_path))
        return ApplicationContext.create(
            base_path,
            settings=self.settings,
            cache=self.cache,
            sources=self.sources,
            environ=self.environ,
        )


def create_context(base_path: str | os.PathLike[str], **kwargs: Any) -> ApplicationContext:
    """Bootstrap with a fresh :class:`Bootstrapper` built from ``kwargs``."""

    return Bootstrapper(**kwargs).create(base_path)


__all__ = ["Bootstrapper", "create_context"]
