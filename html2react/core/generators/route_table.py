from __future__ import annotations

"""Route accumulation for one batch pass.

The batch driver owns a :class:`RouteTable`, registers one entry per
non-entry page while transpiling, and flushes it exactly once at the end of
the pass into the aggregate entry module.
"""

import logging
import posixpath
from typing import List

from html2react.core.models import RouteEntry
from html2react.core.utils import component_name, route_path, safe_name
from .react_module import render_entry_module

logger = logging.getLogger(__name__)

__all__ = ["RouteTable", "ROUTE_IDENTIFIER_PREFIX"]

ROUTE_IDENTIFIER_PREFIX = "Page_"


class RouteTable:
    """Ordered collection of :class:`RouteEntry` for one project pass.

    Not safe for concurrent or reentrant batch passes; callers serialize them.
    """

    def __init__(self, entry_component: str = "App") -> None:
        self.entry_component = entry_component
        self.entries: List[RouteEntry] = []
        self._flushed = False

    def __len__(self) -> int:
        return len(self.entries)

    def reset(self) -> None:
        self.entries.clear()
        self._flushed = False

    def add_entry(self, relative_dir: str, filename_no_ext: str) -> RouteEntry:
        """Register the page *filename_no_ext* found in *relative_dir*."""
        relative_dir = (relative_dir or "").replace("\\", "/").strip("/")
        module = component_name(filename_no_ext)
        module_path = "./" + posixpath.join(relative_dir, module) if relative_dir else f"./{module}"
        entry = RouteEntry(route_path=route_path(relative_dir, filename_no_ext), module_path=module_path)
        self.entries.append(entry)
        logger.debug("Route registered: %s -> %s", entry.route_path, entry.module_path)
        return entry

    @staticmethod
    def identifier_for(entry: RouteEntry) -> str:
        """Uppercase-prefixed identifier used to import *entry*'s module."""
        return ROUTE_IDENTIFIER_PREFIX + safe_name(entry.module_path[2:]).lstrip("_")

    def flush(self) -> str:
        """Return the aggregate entry module text for all registered routes."""
        if self._flushed:
            logger.warning("Route table flushed more than once in the same pass")
        self._flushed = True
        identifiers = [self.identifier_for(entry) for entry in self.entries]
        logger.info("Writing route table with %d routes", len(self.entries))
        return render_entry_module(
            self.entries,
            identifiers,
            entry_component=self.entry_component,
            entry_module_path=f"./{self.entry_component}",
        )
