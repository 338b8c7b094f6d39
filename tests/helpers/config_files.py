"""Config file bodies and helpers shared by the bootstrap tests."""

from __future__ import annotations

from pathlib import Path

IDENTITY_PRIMARY = """
def configure(context):
    return context
"""

COUNTING_SECONDARY = """
from pathlib import Path


def configure(context):
    marker = Path(context.get_directory("root")) / "evaluations.log"
    with marker.open("a", encoding="utf-8") as handle:
        handle.write("evaluated\\n")
    return {"dsn": "sqlite:///" + context.get_directory("data") + "/app.db"}
"""


def evaluation_count(root: Path) -> int:
    """Number of times a counting config has been evaluated under ``root``."""

    marker = root / "evaluations.log"
    if not marker.exists():
        return 0
    return len(marker.read_text(encoding="utf-8").splitlines())
