from __future__ import annotations

"""Tag and attribute mapping from HTML to React.

Every tag goes through a generic attribute pass (drop ``style`` and ``on*``
handlers, rename through the props map).  Five tag kinds then get a
dedicated handler:

- ``<a>``: internal targets become router links (``to`` instead of ``href``)
- ``<img>``: internal ``src`` becomes an imported asset reference
- ``<script>``: external ``src`` is resolved like images, inline bodies are
  removed here and re-injected by the page assembler
- ``<style>``: removed here, its CSS is moved into the page head
- ``<link rel="stylesheet">``: becomes a side-effect import and is removed

A handler may return the deletion sentinel (see
:meth:`MappingResult.delete`), which removes the whole node.
"""

from enum import Enum
import logging
import posixpath
from typing import Callable, Dict, Iterable, Mapping, Optional

from html2react.core.models import (
    LinkKind,
    MappingOutcome,
    MappingResult,
    TagRecord,
    TranspilationContext,
)
from html2react.core.utils import normalize_route, route_path
from .link_resolver import LinkResolver

logger = logging.getLogger(__name__)

__all__ = [
    "HandlerKind",
    "TagAttributeMapper",
    "rewrite_attributes",
    "LINK_IMPORT",
    "NAVIGATION_TAG",
    "NAVIGATION_ATTR",
]

LINK_IMPORT = 'import { Link } from "react-router-dom";'
NAVIGATION_TAG = "Link"
NAVIGATION_ATTR = "to"


class HandlerKind(Enum):
    HYPERLINK = "a"
    IMAGE = "img"
    SCRIPT = "script"
    STYLE = "style"
    STYLESHEET_LINK = "link"


def _get_ci(attributes: Mapping[str, str], name: str) -> Optional[str]:
    for key, value in attributes.items():
        if key.lower() == name:
            return value
    return None


def rewrite_attributes(attributes: Mapping[str, str], props_map: Mapping[str, str]) -> Dict[str, str]:
    """Apply the generic attribute pass to one attribute mapping.

    ``style`` and every ``on*`` attribute are dropped, the remaining names are
    renamed through *props_map* when listed there.  Values are never touched
    and source order is kept.
    """
    rewritten: Dict[str, str] = {}
    for name, value in attributes.items():
        lowered = name.lower()
        if lowered == "style" or lowered.startswith("on"):
            continue
        rewritten[props_map.get(lowered, name)] = value
    return rewritten


class TagAttributeMapper:
    """Convert one document's tag records into mapping results.

    An instance belongs to a single file's conversion; its import and
    variable accumulators live on the :class:`TranspilationContext`.
    """

    def __init__(self, context: TranspilationContext, props_map: Mapping[str, str]) -> None:
        self.context = context
        self.props_map = dict(props_map)
        self.resolver = LinkResolver(context)
        self._handlers: Dict[HandlerKind, Callable[[TagRecord, Dict[str, str]], MappingResult]] = {
            HandlerKind.HYPERLINK: self._map_hyperlink,
            HandlerKind.IMAGE: self._map_image,
            HandlerKind.SCRIPT: self._map_script,
            HandlerKind.STYLE: self._map_style,
            HandlerKind.STYLESHEET_LINK: self._map_stylesheet_link,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @staticmethod
    def handler_kind(record: TagRecord) -> Optional[HandlerKind]:
        """Return the handler responsible for *record*, ``None`` for pass-through."""
        tag = record.tag.lower()
        if tag == "link":
            rel = (_get_ci(record.attributes, "rel") or "").strip().lower()
            return HandlerKind.STYLESHEET_LINK if rel == "stylesheet" else None
        try:
            return HandlerKind(tag)
        except ValueError:
            return None

    def map_record(self, record: TagRecord) -> MappingResult:
        attributes = rewrite_attributes(record.attributes, self.props_map)
        kind = self.handler_kind(record)
        if kind is None:
            return MappingResult(record.tag, attributes)
        return self._handlers[kind](record, attributes)

    def map(self, records: Iterable[TagRecord]) -> MappingOutcome:
        """Map *records* in order; the result list is parallel to the input."""
        results = [self.map_record(record) for record in records]
        logger.debug(
            "Mapped %d tags (%d deleted), %d imports",
            len(results), sum(1 for r in results if r.is_delete), len(self.context.imports),
        )
        return MappingOutcome(
            results=results,
            imports=list(self.context.imports),
            variables=list(self.context.variables),
        )

    # ------------------------------------------------------------------
    # Tag handlers
    # ------------------------------------------------------------------
    def _map_hyperlink(self, record: TagRecord, attributes: Dict[str, str]) -> MappingResult:
        href = attributes.get("href")
        if not href or not self.resolver.exists(href):
            return MappingResult(record.tag, attributes)

        route = self._route_for(href)
        rewritten = {
            (NAVIGATION_ATTR if name == "href" else name): (route if name == "href" else value)
            for name, value in attributes.items()
        }
        if not self.context.link_imported:
            self.context.add_import(LINK_IMPORT)
            self.context.link_imported = True
        return MappingResult(record.tag, rewritten)

    def _map_image(self, record: TagRecord, attributes: Dict[str, str]) -> MappingResult:
        self._resolve_src(attributes)
        return MappingResult(record.tag, attributes)

    def _map_script(self, record: TagRecord, attributes: Dict[str, str]) -> MappingResult:
        if "src" not in attributes:
            # Inline body is re-injected by the page assembler
            return MappingResult.delete(record.tag)
        self._resolve_src(attributes)
        return MappingResult(record.tag, attributes)

    def _map_style(self, record: TagRecord, attributes: Dict[str, str]) -> MappingResult:
        return MappingResult.delete(record.tag)

    def _map_stylesheet_link(self, record: TagRecord, attributes: Dict[str, str]) -> MappingResult:
        resolution = self.resolver.resolve(attributes.get("href"), import_only=True)
        if resolution.kind is LinkKind.EXTERNAL:
            logger.warning("Dropping external stylesheet %s", resolution.value)
        return MappingResult.delete(record.tag)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _resolve_src(self, attributes: Dict[str, str]) -> None:
        resolution = self.resolver.resolve(attributes.get("src"))
        if resolution.kind is LinkKind.INTERNAL:
            attributes["src"] = resolution.attribute_value

    def _route_for(self, href: str) -> str:
        target = self.resolver.relative_target(href)
        if self.resolver.is_directory_index(href):
            return normalize_route(target)
        stem = posixpath.splitext(target)[0]
        directory, name = posixpath.split(stem)
        return route_path(directory, name)
