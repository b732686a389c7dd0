"""Application version detection utilities.

Provides a single public function, ``get_app_version()``, which reads the
installed distribution metadata and falls back to ``"vdev"`` when the package
is run from an uninstalled source checkout.
"""

from __future__ import annotations

from importlib import metadata
from typing import Optional

_CACHED_VERSION: Optional[str] = None


def get_app_version() -> str:
    """Return the application version string (e.g., ``v0.3.0``)."""
    global _CACHED_VERSION
    if _CACHED_VERSION:
        return _CACHED_VERSION

    try:
        _CACHED_VERSION = f"v{metadata.version('html2react')}"
    except metadata.PackageNotFoundError:
        _CACHED_VERSION = "vdev"
    return _CACHED_VERSION
