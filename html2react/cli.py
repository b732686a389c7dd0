# -*- coding: utf-8 -*-
"""Command-line front-end for html2react.

Usage:
  html2react build
  html2react --config site.json build --no-static
  html2react file about/team.html
  html2react watch
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Optional, Sequence

from html2react.config import load_project_settings
from html2react.core.exceptions import TranspilerError
from html2react.core.services import ProjectWatcher, Transpiler
from html2react.logging_config import setup_logging
from html2react.version import get_app_version

logger = logging.getLogger(__name__)

__all__ = ["main", "build_parser"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="html2react", description="Convert a static HTML site into a React app")
    parser.add_argument("--config", default="config.json", help="Project file with src_dir and dest_dir")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output on the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")

    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Transpile the whole project")
    build.add_argument("--no-static", action="store_true", help="Do not copy non-HTML assets")

    single = sub.add_parser("file", help="Transpile one HTML document")
    single.add_argument("path", help="Document path, relative to src_dir or absolute")

    sub.add_parser("watch", help="Build, then rebuild on every change")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        transpiler = Transpiler(load_project_settings(args.config))

        if args.command == "file":
            out_path = transpiler.transpile_file(args.path)
            print(f"Wrote {out_path}")
            return 0

        report = transpiler.transpile_project(copy_static=not getattr(args, "no_static", False))
        print(f"Transpiled {report.pages_transpiled} pages, copied {report.assets_copied} assets")
        for path, message in report.failures.items():
            print(f"  FAILED {path}: {message}")

        if args.command == "watch":
            watcher = ProjectWatcher(transpiler)
            watcher.start()
            try:
                while True:
                    time.sleep(1)
            except KeyboardInterrupt:
                watcher.stop()
            return 0

        return 0 if report.ok else 1
    except TranspilerError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
