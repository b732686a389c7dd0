from __future__ import annotations

"""Low-level markup utilities shared by the converter.

Wraps ``lxml.html`` so the rest of the pipeline deals with one parser
configuration, and provides the flat, document-order extraction the mapper
consumes.
"""

from pathlib import Path
from typing import List
import logging

import lxml.html
from lxml import etree as ET

from html2react.core.models import TagRecord

logger = logging.getLogger(__name__)

__all__ = [
    "load_document",
    "read_document",
    "extract_tag_records",
    "extract_style_contents",
    "extract_inline_scripts",
    "locate_element",
]

# Comments and processing instructions have no JSX equivalent.
_PARSER = lxml.html.HTMLParser(encoding="utf-8", remove_comments=True, remove_pis=True)

_JS_TYPES = {
    "",
    "text/javascript",
    "application/javascript",
    "application/ecmascript",
    "text/ecmascript",
    "module",
}

_EMPTY_DOCUMENT = "<html><body></body></html>"


def load_document(text: str) -> lxml.html.HtmlElement:
    """Parse *text* into a full ``<html>`` tree.

    Encoding declarations inside *text* are tolerated because parsing happens
    on UTF-8 bytes.
    """
    if not text or not text.strip():
        text = _EMPTY_DOCUMENT
    return lxml.html.document_fromstring(text.encode("utf-8"), parser=_PARSER)


def read_document(path: str | Path) -> lxml.html.HtmlElement:
    path = Path(path)
    logger.debug("Loading markup document: %s", path)
    return load_document(path.read_text(encoding="utf-8", errors="replace"))


def extract_tag_records(root: ET._Element) -> List[TagRecord]:
    """Return one :class:`TagRecord` per element of *root*, in document order.

    The walk is flat (pre-order); nesting is not represented.  Each record
    keeps a handle on its node so later stages can mutate it directly.
    """
    records: List[TagRecord] = []
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        records.append(TagRecord(tag=element.tag.lower(), attributes=dict(element.attrib), element=element))
    return records


def extract_style_contents(root: ET._Element) -> List[str]:
    """Return the verbatim text of every ``<style>`` element."""
    return [el.text for el in root.iter("style") if el.text and el.text.strip()]


def extract_inline_scripts(root: ET._Element) -> List[str]:
    """Return the bodies of ``<script>`` elements that have no ``src``.

    Non-JavaScript payloads (JSON-LD, templates, ...) are skipped since they
    cannot run inside an effect hook.
    """
    bodies: List[str] = []
    for el in root.iter("script"):
        if el.get("src") is not None:
            continue
        script_type = (el.get("type") or "").strip().lower()
        if script_type not in _JS_TYPES:
            logger.debug("Skipping inline script of type %r", script_type)
            continue
        if el.text and el.text.strip():
            bodies.append(el.text)
    return bodies


def locate_element(root: ET._Element, record: TagRecord):
    """Find the node described by *record* when it carries no handle.

    Tag names and attribute names are compared case-insensitively since
    source markup casing is not guaranteed.  Returns ``None`` when nothing
    matches.
    """
    wanted_tag = record.tag.lower()
    wanted = {k.lower(): v for k, v in record.attributes.items()}
    for element in root.iter():
        if not isinstance(element.tag, str) or element.tag.lower() != wanted_tag:
            continue
        attrs = {k.lower(): v for k, v in element.attrib.items()}
        if attrs == wanted:
            return element
    return None
