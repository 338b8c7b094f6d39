"""Conventional directory layout of an installation root."""

from __future__ import annotations

import os
from enum import Enum
from typing import Dict, Mapping


class DirectoryRole(str, Enum):
    """Built-in directory roles derived from the installation root."""

    ROOT = "root"
    WEB = "web"
    BIN = "bin"
    RUNTIME = "runtime"
    CACHE = "cache"
    TEMP = "temp"
    LOGS = "logs"
    CONFIG = "config"
    RESOURCES = "resources"
    STORAGE = "storage"
    BACKUPS = "backups"
    DATA = "data"
    THEMES = "themes"


# Path segment under the root for every role except ``root`` itself.
DEFAULT_LAYOUT: Mapping[DirectoryRole, str] = {
    DirectoryRole.WEB: "public",
    DirectoryRole.BIN: "bin",
    DirectoryRole.RUNTIME: "runtime",
    DirectoryRole.CACHE: "cache",
    DirectoryRole.TEMP: "temp",
    DirectoryRole.LOGS: "logs",
    DirectoryRole.CONFIG: "config",
    DirectoryRole.RESOURCES: "resources",
    DirectoryRole.STORAGE: "storage",
    DirectoryRole.BACKUPS: "backups",
    DirectoryRole.DATA: "data",
    DirectoryRole.THEMES: "themes",
}


def role_key(role: str | DirectoryRole) -> str:
    """Return the plain mapping key for ``role``."""

    return role.value if isinstance(role, DirectoryRole) else role


def default_directories(base_path: str | os.PathLike[str]) -> Dict[str, str]:
    """Return the built-in role mapping for ``base_path``."""

    root = os.fspath(base_path)
    if len(root) > 1:
        root = root.rstrip("/") or "/"
    prefix = "" if root == "/" else root
    directories = {DirectoryRole.ROOT.value: root}
    for role, segment in DEFAULT_LAYOUT.items():
        directories[role.value] = f"{prefix}/{segment}"
    return directories


__all__ = ["DEFAULT_LAYOUT", "DirectoryRole", "default_directories", "role_key"]
