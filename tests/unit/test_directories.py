"""Default directory layout derived from an installation root."""

from __future__ import annotations

import pytest

from appcontext import DEFAULT_LAYOUT, DirectoryRole, default_directories

pytestmark = pytest.mark.unit


def test_default_directories_cover_all_builtin_roles() -> None:
    dirs = default_directories("/srv/app")

    assert len(dirs) == 13
    assert set(dirs) == {role.value for role in DirectoryRole}
    assert dirs["root"] == "/srv/app"
    assert dirs["cache"] == "/srv/app/cache"
    assert dirs["web"] == "/srv/app/public"
    assert dirs["themes"] == "/srv/app/themes"


def test_layout_has_a_segment_for_every_role_but_root() -> None:
    assert DirectoryRole.ROOT not in DEFAULT_LAYOUT
    assert len(DEFAULT_LAYOUT) == len(DirectoryRole) - 1


@pytest.mark.parametrize(
    ("base_path", "root", "config"),
    [
        ("/srv/app/", "/srv/app", "/srv/app/config"),
        ("/", "/", "/config"),
        ("relative/app", "relative/app", "relative/app/config"),
    ],
)
def test_default_directories_normalise_trailing_separator(
    base_path: str, root: str, config: str
) -> None:
    dirs = default_directories(base_path)

    assert dirs["root"] == root
    assert dirs["config"] == config
