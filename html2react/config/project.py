from __future__ import annotations

"""Per-project settings: where the markup lives and where React code goes.

The project file is plain JSON or YAML with two keys::

    {"src_dir": "site", "dest_dir": "react-app"}

Relative paths are resolved against the directory holding the project file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from html2react.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = ["ProjectSettings", "load_project_settings"]


@dataclass(frozen=True)
class ProjectSettings:
    """Source and destination roots of one project."""

    src_dir: Path
    dest_dir: Path


def load_project_settings(path: str | Path = "config.json") -> ProjectSettings:
    """Read *path* and return resolved :class:`ProjectSettings`.

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable or lacks ``src_dir``/``dest_dir``.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Project config not found: {path}", file_path=path)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Could not parse project config: {exc}", file_path=path, cause=exc) from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Project config must be a mapping", file_path=path)

    missing = [key for key in ("src_dir", "dest_dir") if not data.get(key)]
    if missing:
        raise ConfigurationError(f"Project config missing keys: {', '.join(missing)}", file_path=path)

    base = path.resolve().parent
    settings = ProjectSettings(
        src_dir=(base / str(data["src_dir"])).resolve(),
        dest_dir=(base / str(data["dest_dir"])).resolve(),
    )
    logger.debug("Project settings loaded from %s: %s", path, settings)
    return settings
