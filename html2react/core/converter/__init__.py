from __future__ import annotations

"""HTML to React conversion logic.

The pipeline for one document:

1. Extraction: flat, document-order tag records (``core.parser``)
2. Mapping: generic attribute rewrite plus tag-specific handlers
   (:class:`TagAttributeMapper`, backed by :class:`LinkResolver`)
3. Assembly: structural edits on the live tree and module serialization
   (:class:`PageAssembler`)

Key modules:
- link_resolver: internal/external link classification and asset imports
- tag_mapper: attribute rename table and tag handlers
- page_assembler: head/body/script/style reconstruction
"""

from .link_resolver import LinkResolver
from .tag_mapper import HandlerKind, TagAttributeMapper, rewrite_attributes
from .page_assembler import PageAssembler

__all__ = [
    "LinkResolver",
    "HandlerKind",
    "TagAttributeMapper",
    "rewrite_attributes",
    "PageAssembler",
]
