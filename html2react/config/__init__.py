"""Configuration files (YAML) and helpers.

`ConfigManager` reads the default files from this folder and merges them with
user overrides; `load_project_settings` reads the per-project source and
destination roots.
"""

from .manager import ConfigManager
from .project import ProjectSettings, load_project_settings

__all__ = [
    "ConfigManager",
    "ProjectSettings",
    "load_project_settings",
]
