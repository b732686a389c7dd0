from __future__ import annotations

"""High-level transpilation service for HTML to React projects.

Entry-point for any front-end (CLI, watch service, tests) that needs to turn
a tree of markup documents into a React project.  Provides single-file and
whole-project operations plus the destination bootstrap.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

from html2react.config import ConfigManager, ProjectSettings
from html2react.core.converter import PageAssembler, TagAttributeMapper
from html2react.core.exceptions import (
    ConfigurationError,
    MissingEntryPointError,
    ScaffoldError,
    TranspilerError,
)
from html2react.core.generators import RouteTable
from html2react.core.models import TranspilationContext, TranspileReport
from html2react.core.parser import extract_tag_records, read_document
from html2react.core.utils import component_name, write_text_file

logger = logging.getLogger(__name__)

__all__ = ["Transpiler", "scaffold_destination"]


_DEFAULTS: Dict[str, Any] = {
    "entry_document": "index.html",
    "entry_component": "App",
    "route_module": "index.js",
    "module_extension": ".js",
    "markup_extensions": [".html", ".htm"],
    "output_subdir": "src",
    "scaffold_enabled": False,
    "scaffold_commands": [],
}


def scaffold_destination(dest_dir: Path, commands: List[List[str]]) -> None:
    """Create a fresh React project at *dest_dir* by running *commands*.

    ``{dest}`` inside any argument is replaced with the destination path.
    """
    if not commands:
        raise ScaffoldError("No scaffold commands configured", file_path=dest_dir)

    for command in commands:
        argv = [str(arg).replace("{dest}", str(dest_dir)) for arg in command]
        logger.info("Scaffold: %s", " ".join(argv))
        try:
            subprocess.run(argv, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ScaffoldError(f"Scaffold command failed: {exc}", file_path=dest_dir,
                                command=argv, cause=exc) from exc


class Transpiler:
    """Business-logic façade converting one project's markup tree."""

    def __init__(self, settings: ProjectSettings, props_map: Optional[Mapping[str, str]] = None,
                 config: Optional[Mapping[str, Any]] = None) -> None:
        if config is None:
            config = ConfigManager().get_transpiler_config()
        cfg = {**_DEFAULTS, **dict(config)}

        self.src_dir = Path(settings.src_dir)
        self.dest_dir = Path(settings.dest_dir)
        self.entry_document: str = cfg["entry_document"]
        self.entry_component: str = cfg["entry_component"]
        self.route_module: str = cfg["route_module"]
        self.module_extension: str = cfg["module_extension"]
        self.markup_extensions = {ext.lower() for ext in cfg["markup_extensions"]}
        self.output_dir = self.dest_dir / cfg["output_subdir"]
        self.props_map: Dict[str, str] = (
            dict(props_map) if props_map is not None else ConfigManager().get_props_map()
        )

        self._check_roots(bool(cfg["scaffold_enabled"]), cfg["scaffold_commands"])

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def is_markup(self, path: str | Path) -> bool:
        return Path(path).suffix.lower() in self.markup_extensions

    def relative_path(self, path: str | Path) -> Path:
        """Return *path* relative to the source root."""
        path = Path(path)
        if not path.is_absolute():
            path = self.src_dir / path
        try:
            return path.resolve().relative_to(self.src_dir.resolve())
        except ValueError as exc:
            raise ConfigurationError("File is outside the source directory", file_path=path, cause=exc) from exc

    def is_entry(self, path: str | Path) -> bool:
        return self.relative_path(path).as_posix() == self.entry_document

    def destination_path_for(self, path: str | Path) -> Path:
        """Mirrored output path of the source file (or directory) *path*."""
        relative = self.relative_path(path)
        if not self.is_markup(relative):
            return self.output_dir / relative
        if relative.as_posix() == self.entry_document:
            return self.output_dir / f"{self.entry_component}{self.module_extension}"
        filename = component_name(relative.stem) + self.module_extension
        return self.output_dir / relative.parent / filename

    def transpile_file(self, path: str | Path, route_table: Optional[RouteTable] = None) -> Path:
        """Convert one markup document and write its React module.

        Registers a route on *route_table* for every non-entry document.
        Errors propagate to the caller; an unreadable document raises
        :class:`TranspilerError`.

        Returns:
            Path of the written module
        """
        path = Path(path)
        relative = self.relative_path(path)
        relative_dir = relative.parent.as_posix()
        if relative_dir == ".":
            relative_dir = ""
        is_entry = relative.as_posix() == self.entry_document
        function_name = self.entry_component if is_entry else component_name(relative.stem)

        logger.info("Transpiling %s", relative.as_posix())
        try:
            document = read_document(self.src_dir / relative)
        except OSError as exc:
            raise TranspilerError(f"Cannot read document: {exc}", file_path=relative.as_posix(),
                                  cause=exc) from exc
        records = extract_tag_records(document)

        context = TranspilationContext(
            source_root=self.src_dir,
            destination_root=self.dest_dir,
            relative_dir=relative_dir,
        )
        outcome = TagAttributeMapper(context, self.props_map).map(records)
        module_text = PageAssembler(relative.as_posix()).assemble(document, records, outcome, function_name)

        out_path = self.destination_path_for(path)
        write_text_file(out_path, module_text)

        if route_table is not None and not is_entry:
            route_table.add_entry(relative_dir, relative.stem)
        return out_path

    def transpile_project(self, copy_static: bool = True,
                          route_table: Optional[RouteTable] = None) -> TranspileReport:
        """Convert every document of the project and write the route module.

        One failing document does not stop the pass; failures are collected
        in the returned report.

        Raises:
            MissingEntryPointError: If the entry document does not exist
        """
        entry_path = self.src_dir / self.entry_document
        if not entry_path.is_file():
            raise MissingEntryPointError(f"Entry document {self.entry_document} not found",
                                         file_path=entry_path)

        if route_table is None:
            route_table = RouteTable(self.entry_component)
        route_table.reset()

        report = TranspileReport()
        logger.info("Transpile project: %s -> %s", self.src_dir, self.output_dir)

        for path in self._iter_source_files():
            relative = path.relative_to(self.src_dir).as_posix()
            if self.is_markup(path):
                try:
                    self.transpile_file(path, route_table)
                    report.pages_transpiled += 1
                except Exception as exc:
                    logger.error("Transpile failed for %s: %s", relative, exc, exc_info=True)
                    report.failures[relative] = str(exc)
            elif copy_static:
                self.copy_asset(path)
                report.assets_copied += 1

        entry_module = self.output_dir / self.route_module
        write_text_file(entry_module, route_table.flush())
        report.entry_module = entry_module

        logger.info(
            "Transpile project done: %d pages, %d assets, %d failures",
            report.pages_transpiled, report.assets_copied, len(report.failures),
        )
        return report

    def copy_asset(self, path: str | Path) -> Path:
        """Copy a non-markup file verbatim into the mirrored destination."""
        target = self.destination_path_for(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, target)
        logger.debug("Copied asset %s -> %s", path, target)
        return target

    def remove_output(self, path: str | Path) -> Optional[Path]:
        """Delete the generated counterpart of the (deleted) source *path*."""
        target = self.destination_path_for(path)
        if target.is_dir():
            shutil.rmtree(target)
        elif target.exists() or target.is_symlink():
            target.unlink()
        else:
            logger.debug("Nothing to remove for %s", path)
            return None
        logger.info("Removed %s", target)
        return target

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    def _iter_source_files(self) -> Iterator[Path]:
        for root, dirs, files in os.walk(self.src_dir):
            dirs.sort()
            for name in sorted(files):
                yield Path(root) / name

    def _check_roots(self, scaffold_enabled: bool, scaffold_commands: List[List[str]]) -> None:
        if not self.src_dir.is_dir():
            raise ConfigurationError("Source directory doesn't exist", file_path=self.src_dir)

        if not self.dest_dir.exists():
            if not scaffold_enabled:
                raise ConfigurationError("Destination directory doesn't exist", file_path=self.dest_dir)
            scaffold_destination(self.dest_dir, scaffold_commands)

        if not self.output_dir.is_dir():
            raise ScaffoldError(
                f"Destination has no '{self.output_dir.name}' directory; "
                "is it a generated React project?",
                file_path=self.dest_dir,
            )

