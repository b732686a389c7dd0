from __future__ import annotations

"""High-level orchestration services (transpilation, watching)."""

from .transpile_service import Transpiler, scaffold_destination  # noqa: F401
from .watch_service import ProjectWatcher  # noqa: F401

__all__: list[str] = [
    "Transpiler",
    "scaffold_destination",
    "ProjectWatcher",
]
