from __future__ import annotations

"""Markup parser helpers.

Currently provides document loading and the flat tag extraction used by the
conversion pipeline.
"""

from .markup_utils import (  # noqa: F401
    load_document,
    read_document,
    extract_tag_records,
    extract_style_contents,
    extract_inline_scripts,
    locate_element,
)

__all__: list[str] = [
    "load_document",
    "read_document",
    "extract_tag_records",
    "extract_style_contents",
    "extract_inline_scripts",
    "locate_element",
]
