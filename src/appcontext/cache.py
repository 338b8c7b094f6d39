"""Single-evaluation cache for secondary config values."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from .exceptions import ConfigContractViolation
from .logging import get_logger


logger = get_logger(__name__)

_MISSING = object()


class ConfigCache:
    """Filename-keyed store evaluating each loader at most once.

    Entries are never evicted. A loader that raises stores nothing, so the
    next request for the same filename evaluates it again. Each filename has
    its own lock; loading one file never blocks readers of another.

    Loaders may request other filenames. A request that would wait, directly
    or through other threads, on a load it is itself part of raises
    :class:`ConfigContractViolation` instead of deadlocking.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self._locks: Dict[str, threading.Lock] = {}
        # filename -> thread running its loader
        self._loading: Dict[str, int] = {}
        # thread -> filename it is blocked on
        self._waiting: Dict[int, str] = {}
        self._guard = threading.Lock()

    def __contains__(self, filename: object) -> bool:
        return filename in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ConfigCache({sorted(self._values)!r})"

    def get(self, filename: str, default: Any = None) -> Any:
        return self._values.get(filename, default)

    def get_or_load(self, filename: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value for ``filename``, loading it on first use."""

        value = self._values.get(filename, _MISSING)
        if value is not _MISSING:
            return value

        lock = self._enter_wait(filename)
        with lock:
            with self._guard:
                self._waiting.pop(threading.get_ident(), None)
                value = self._values.get(filename, _MISSING)
                if value is not _MISSING:
                    return value
                self._loading[filename] = threading.get_ident()
            try:
                value = loader()
                self._values[filename] = value
            finally:
                with self._guard:
                    self._loading.pop(filename, None)
            logger.debug("config_cached", filename=filename)
            return value

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only copy of the cached values."""

        return MappingProxyType(dict(self._values))

    def _enter_wait(self, filename: str) -> threading.Lock:
        me = threading.get_ident()
        with self._guard:
            chain = [filename]
            owner = self._loading.get(filename)
            while owner is not None:
                if owner == me:
                    raise ConfigContractViolation(
                        "circular config dependency: " + " -> ".join(chain)
                    )
                blocked_on = self._waiting.get(owner)
                if blocked_on is None:
                    break
                chain.append(blocked_on)
                owner = self._loading.get(blocked_on)
            self._waiting[me] = filename
            lock = self._locks.get(filename)
            if lock is None:
                lock = self._locks[filename] = threading.Lock()
            return lock


__all__ = ["ConfigCache"]
