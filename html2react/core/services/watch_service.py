from __future__ import annotations

"""Watcher that re-runs the transpiler on source changes.

File events map to transpiler operations:

- created file  -> full project pass
- modified file -> single-file transpilation (or asset copy)
- deleted file  -> project pass without asset copy, then removal of the
  generated counterpart
- moved file    -> deletion of the old path, creation of the new one

Directory events are ignored.  Every handler logs and swallows its own
failures so the observer thread keeps running.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .transpile_service import Transpiler

logger = logging.getLogger(__name__)

__all__ = ["ProjectWatcher"]


def _event_path(raw: str | bytes) -> Path:
    return Path(os.fsdecode(raw))


class _SourceEventHandler(FileSystemEventHandler):
    """Forward watchdog file events to a :class:`ProjectWatcher`."""

    def __init__(self, watcher: "ProjectWatcher") -> None:
        super().__init__()
        self.watcher = watcher

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.watcher.on_created(_event_path(event.src_path))

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.watcher.on_modified(_event_path(event.src_path))

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.watcher.on_deleted(_event_path(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        self.watcher.on_deleted(_event_path(event.src_path))
        self.watcher.on_created(_event_path(event.dest_path))


class ProjectWatcher:
    """Watch a project's source tree and keep its React output in sync."""

    def __init__(self, transpiler: Transpiler) -> None:
        self.transpiler = transpiler
        self.event_handler = _SourceEventHandler(self)
        self._observer: Optional[Observer] = None

    # ------------------------------------------------------------------
    # Observer control
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._observer is not None and self._observer.is_alive():
            return
        self._observer = Observer()
        self._observer.schedule(self.event_handler, str(self.transpiler.src_dir), recursive=True)
        self._observer.start()
        logger.info("Started watching for changes on path %s", self.transpiler.src_dir)

    def stop(self, timeout: Optional[float] = None) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout)
        self._observer = None
        logger.info("Stopped watching %s", self.transpiler.src_dir)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_created(self, path: Path) -> None:
        logger.info("%s has been created", path)
        try:
            report = self.transpiler.transpile_project()
            for failed, message in report.failures.items():
                logger.warning("Transpile failed for %s: %s", failed, message)
        except Exception as exc:
            logger.error("Transpile project failed: %s", exc, exc_info=True)

    def on_modified(self, path: Path) -> None:
        logger.info("%s has been modified", path)
        try:
            if self.transpiler.is_markup(path):
                self.transpiler.transpile_file(path)
            else:
                self.transpiler.copy_asset(path)
        except Exception as exc:
            logger.error("Transpiler failed for %s: %s", path, exc, exc_info=True)

    def on_deleted(self, path: Path) -> None:
        logger.info("%s has been deleted", path)
        try:
            self.transpiler.transpile_project(copy_static=False)
        except Exception as exc:
            logger.error("Transpile project failed: %s", exc, exc_info=True)
        try:
            self.transpiler.remove_output(path)
        except Exception as exc:
            logger.error("Could not remove output for %s: %s", path, exc, exc_info=True)
