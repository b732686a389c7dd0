from __future__ import annotations

"""Source text generation for React modules.

Produces the final text of page components and of the aggregate entry module
that wires every page into the router.  No formatting pass is applied; the
output is valid JSX laid out with fixed indentation.
"""

import logging
from typing import Iterable, Sequence

from html2react.core.models import RouteEntry
from html2react.core.utils import escape_template_literal

logger = logging.getLogger(__name__)

__all__ = [
    "REACT_IMPORT",
    "REACT_EFFECT_IMPORT",
    "HELMET_IMPORT",
    "HEAD_TAG",
    "render_style_block",
    "render_effect_block",
    "render_page_module",
    "render_entry_module",
]

REACT_IMPORT = 'import React from "react";'
REACT_EFFECT_IMPORT = 'import React, { useEffect } from "react";'
HELMET_IMPORT = 'import { Helmet } from "react-helmet";'
HEAD_TAG = "Helmet"

_INDENT = "  "


def render_style_block(styles: Sequence[str]) -> str:
    """Embed CSS verbatim as a template literal inside a ``<style>`` element."""
    css = "\n".join(styles)
    return "<style>{`%s`}</style>" % escape_template_literal(css)


def render_effect_block(scripts: Sequence[str]) -> str:
    """Wrap inline script bodies in a run-once ``useEffect`` hook."""
    body = "\n".join(script.strip("\n") for script in scripts)
    return f"{_INDENT}useEffect(() => {{\n{body}\n{_INDENT}}}, []);\n"


def render_page_module(imports: Iterable[str], function_name: str, content: str,
                       effect_block: str = "") -> str:
    """Return the full text of one page component module."""
    lines = list(imports)
    head = "\n".join(lines)
    return (
        f"{head}\n\n"
        f"function {function_name}() {{\n"
        f"{effect_block}"
        f"{_INDENT}return (\n"
        f"{_INDENT * 2}<>\n"
        f"{content}\n"
        f"{_INDENT * 2}</>\n"
        f"{_INDENT});\n"
        f"}}\n\n"
        f"export default {function_name};\n"
    )


def render_entry_module(entries: Sequence[RouteEntry], identifiers: Sequence[str],
                        entry_component: str, entry_module_path: str) -> str:
    """Return the aggregate entry module declaring one route per page.

    *identifiers* is parallel to *entries*; the fallback route always points
    at *entry_component*.
    """
    imports = [
        REACT_IMPORT,
        'import ReactDOM from "react-dom/client";',
        'import { BrowserRouter, Routes, Route } from "react-router-dom";',
        f'import {entry_component} from "{entry_module_path}";',
    ]
    imports.extend(
        f'import {identifier} from "{entry.module_path}";'
        for entry, identifier in zip(entries, identifiers)
    )

    pad = _INDENT * 3
    routes = [
        f'{pad}<Route path="{entry.route_path}" element={{<{identifier} />}} />'
        for entry, identifier in zip(entries, identifiers)
    ]
    routes.append(f'{pad}<Route path="*" element={{<{entry_component} />}} />')

    return (
        "\n".join(imports)
        + "\n\n"
        + 'const root = ReactDOM.createRoot(document.getElementById("root"));\n'
        + "root.render(\n"
        + f"{_INDENT}<BrowserRouter>\n"
        + f"{_INDENT * 2}<Routes>\n"
        + "\n".join(routes)
        + "\n"
        + f"{_INDENT * 2}</Routes>\n"
        + f"{_INDENT}</BrowserRouter>\n"
        + ");\n"
    )
