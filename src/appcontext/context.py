"""Immutable application context built once at process start.

``ApplicationContext.create`` resolves the installation root, installs the
conventional directory layout and hands the context to the primary config,
which returns the context the process runs with. Every builder method
returns a new instance; the receiver never changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .cache import ConfigCache
from .core.config import ContextSettings
from .directories import DirectoryRole, default_directories, role_key
from .exceptions import (
    ConfigContractViolation,
    EnvironmentNotConfiguredError,
    MissingEnvironmentVariableError,
)
from .logging import get_logger
from .sources import SourceRegistry


logger = get_logger(__name__)


def _frozen_directories(dirs: Mapping[Any, str]) -> Mapping[str, str]:
    return MappingProxyType({role_key(role): path for role, path in dirs.items()})


@dataclass(frozen=True)
class ApplicationContext:
    """Named set of directories plus access to environment and config files.

    Contexts derived from one another share the config cache, the source
    registry and the environment mapping.
    """

    name: str = ""
    directories: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    settings: ContextSettings = field(
        default_factory=ContextSettings.build_default, repr=False, compare=False
    )
    cache: ConfigCache = field(default_factory=ConfigCache, repr=False, compare=False)
    sources: SourceRegistry = field(default_factory=SourceRegistry, repr=False, compare=False)
    environ: Mapping[str, str] = field(
        default_factory=lambda: os.environ, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # always a private read-only copy
        object.__setattr__(self, "directories", _frozen_directories(self.directories))

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.directories.items()))))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        base_path: str | os.PathLike[str],
        *,
        settings: ContextSettings | None = None,
        cache: ConfigCache | None = None,
        sources: SourceRegistry | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ApplicationContext":
        """Bootstrap a context rooted at ``base_path``.

        Raises :class:`EnvironmentNotConfiguredError` when ``base_path`` is
        not an existing directory. The primary config is evaluated on every
        call and never cached; it must return an ``ApplicationContext``.
        """

        if not Path(base_path).is_dir():
            raise EnvironmentNotConfiguredError(
                f"environment not configured correctly: directory does not exist: {os.fspath(base_path)}"
            )

        if settings is None:
            settings = ContextSettings.build_default()
        context = cls(
            settings=settings,
            cache=cache if cache is not None else ConfigCache(),
            sources=sources if sources is not None else SourceRegistry(),
            environ=os.environ if environ is None else environ,
        ).configure_directories(default_directories(base_path))
        logger.debug("context_root_resolved", root=context.get_directory(DirectoryRole.ROOT))
        return context._configure_from_primary()

    def _configure_from_primary(self) -> "ApplicationContext":
        filename = self.settings.primary_config_filename
        configured = self.sources.resolve(self, filename).load(self)
        if not isinstance(configured, ApplicationContext):
            raise ConfigContractViolation(
                f"primary config {filename!r} must return an instance of "
                f"{ApplicationContext.__qualname__}, got {type(configured).__name__}"
            )
        # the bootstrap collaborators stay bound whatever context the config built
        configured = replace(
            configured,
            settings=self.settings,
            cache=self.cache,
            sources=self.sources,
            environ=self.environ,
        )
        logger.info(
            "application_context_configured",
            name=configured.name,
            root=configured.get_directory(DirectoryRole.ROOT),
        )
        return configured

    def configure_directories(self, dirs: Mapping[Any, str]) -> "ApplicationContext":
        """Return a copy whose directory mapping is exactly ``dirs``."""

        return replace(self, directories=dirs)

    def with_name(self, name: str) -> "ApplicationContext":
        """Return a copy named ``name``."""

        return replace(self, name=name)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_directory(self, role: str | DirectoryRole) -> str | None:
        return self.directories.get(role_key(role))

    def get_from_environment(self, key: str, default: Any = None) -> Any:
        """Return the environment value for ``key``.

        A present key is returned verbatim, even when empty. For an absent
        key any default other than ``None`` is returned, falsy ones included;
        without one :class:`MissingEnvironmentVariableError` is raised.
        """

        if key in self.environ:
            return self.environ[key]
        if default is not None:
            return default
        raise MissingEnvironmentVariableError(f"missing environment variable: {key}")

    def in_development(self) -> bool:
        """True when the development key is exactly ``"true"``.

        The key is required; an unset key raises
        :class:`MissingEnvironmentVariableError`.
        """

        return self.get_from_environment(self.settings.development_env_key) == "true"

    def get_config_from_file(self, filename: str) -> Any:
        """Return the value produced by the config file ``filename``.

        The file is evaluated at most once per cache; later calls, from this
        context or any copy of it, return the stored value untouched.
        """

        return self.cache.get_or_load(
            filename, lambda: self.sources.resolve(self, filename).load(self)
        )


__all__ = ["ApplicationContext"]
