from __future__ import annotations

"""Modules responsible for generating React source text."""

from .react_module import render_page_module, render_entry_module  # noqa: F401
from .route_table import RouteTable  # noqa: F401

__all__: list[str] = [
    "render_page_module",
    "render_entry_module",
    "RouteTable",
]
