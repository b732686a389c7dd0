"""Test configuration and shared fixtures for html2react.

Provides temporary project trees (source + generated destination), an
isolated user-config directory and ready-made transpiler objects.  All test
files should use the fixtures defined here for consistency.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from html2react.config import ConfigManager, ProjectSettings
from html2react.core.models import TranspilationContext
from html2react.core.services import Transpiler

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class ProjectTree:
    """A throwaway markup project with a generated React destination."""

    def __init__(self, root: Path):
        self.root = root
        self.src = root / "site"
        self.dest = root / "react-app"
        self.src.mkdir()
        (self.dest / "src").mkdir(parents=True)

    def write(self, relative: str, text: str = "") -> Path:
        path = self.src / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def write_bytes(self, relative: str, data: bytes = b"\x89PNG") -> Path:
        path = self.src / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    def output(self, relative: str) -> str:
        return (self.dest / "src" / relative).read_text(encoding="utf-8")

    @property
    def settings(self) -> ProjectSettings:
        return ProjectSettings(src_dir=self.src, dest_dir=self.dest)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config overrides and logs inside the test's temp dir."""
    monkeypatch.setenv("HTML2REACT_CONFIG_DIR", str(tmp_path / "user_config"))
    monkeypatch.setenv("HTML2REACT_LOG_DIR", str(tmp_path / "logs"))
    ConfigManager.reset()
    yield tmp_path / "user_config"
    ConfigManager.reset()


@pytest.fixture
def props_map():
    return {
        "class": "className",
        "for": "htmlFor",
        "tabindex": "tabIndex",
        "charset": "charSet",
    }


@pytest.fixture
def project(tmp_path):
    return ProjectTree(tmp_path)


@pytest.fixture
def context(project):
    """Per-file context for a document at the source root."""
    return TranspilationContext(source_root=project.src, destination_root=project.dest)


@pytest.fixture
def transpiler(project, props_map):
    return Transpiler(project.settings, props_map=props_map, config={})
