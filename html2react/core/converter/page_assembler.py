from __future__ import annotations

"""Reassembly of one mapped document into a React page component.

The assembler applies the mapper's results to the live ``lxml`` tree, moves
``<head>`` content and page CSS into a ``Helmet`` section, re-injects inline
scripts through a run-once effect hook and serializes the component module.

Ordering matters: style and script bodies are captured before the tree is
mutated because the mapper deletes those nodes.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape as _escape_text

from lxml import etree as ET

from html2react.core.exceptions import ConsistencyError
from html2react.core.models import MappingOutcome, MappingResult, TagRecord
from html2react.core.parser import extract_inline_scripts, extract_style_contents, locate_element
from html2react.core.utils import escape_jsx_text, jsx_string_expression
from html2react.core.generators.react_module import (
    HEAD_TAG,
    HELMET_IMPORT,
    REACT_EFFECT_IMPORT,
    REACT_IMPORT,
    render_effect_block,
    render_page_module,
    render_style_block,
)
from .tag_mapper import NAVIGATION_ATTR, NAVIGATION_TAG

logger = logging.getLogger(__name__)

__all__ = ["PageAssembler"]


def _inner_markup(element: ET._Element) -> str:
    """Serialize the children of *element* without its own tags."""
    parts = [_escape_text(element.text or "")]
    for child in element:
        parts.append(ET.tostring(child, method="xml", encoding="unicode", with_tail=True))
    return "".join(parts)


def _escape_braces(root: ET._Element) -> None:
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        if element.tag == "title" and len(element) == 0:
            # Helmet needs the title as one string child
            element.text = jsx_string_expression(element.text)
        elif element.text:
            element.text = escape_jsx_text(element.text)
        if element.tail:
            element.tail = escape_jsx_text(element.tail)


class PageAssembler:
    """Turn a mapped document into the text of one page component module."""

    def __init__(self, file_path: Optional[str | Path] = None) -> None:
        self.file_path = file_path

    def assemble(self, document: ET._Element, records: Sequence[TagRecord],
                 outcome: MappingOutcome, function_name: str) -> str:
        """Apply *outcome* to *document* and return the module source.

        Raises
        ------
        ConsistencyError
            If *records* and ``outcome.results`` disagree on a tag name at
            the same position.  *document* may be partially edited by then.
        """
        styles = extract_style_contents(document)
        scripts = extract_inline_scripts(document)

        self._apply_results(document, records, outcome.results)

        _escape_braces(document)

        head_markup = self._head_markup(document, styles)
        body = document.find("body")
        body_markup = _inner_markup(body) if body is not None else ""
        content = head_markup + body_markup

        for variable in outcome.variables:
            content = content.replace('"{%s}"' % variable, "{%s}" % variable)

        imports: List[str] = [REACT_EFFECT_IMPORT if scripts else REACT_IMPORT]
        if head_markup:
            imports.append(HELMET_IMPORT)
        imports.extend(outcome.imports)

        effect_block = render_effect_block(scripts) if scripts else ""
        logger.debug(
            "Assembled %s: %d imports, %d styles, %d inline scripts",
            function_name, len(imports), len(styles), len(scripts),
        )
        return render_page_module(imports, function_name, content, effect_block)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def _apply_results(self, document: ET._Element, records: Sequence[TagRecord],
                       results: Sequence[MappingResult]) -> None:
        for index in range(max(len(records), len(results))):
            if index >= len(records) or index >= len(results):
                expected = records[index].tag if index < len(records) else "<end>"
                actual = results[index].tag if index < len(results) else "<end>"
                raise ConsistencyError(index, expected, actual, file_path=self.file_path)

            record, result = records[index], results[index]
            if record.tag.lower() != result.tag.lower():
                raise ConsistencyError(index, record.tag, result.tag, file_path=self.file_path)

            element = record.element if record.element is not None else locate_element(document, record)
            if element is None:
                logger.warning("No node found for <%s> at position %d; skipping", record.tag, index)
                continue

            if result.is_delete:
                if element.getparent() is not None:
                    element.drop_tree()
                continue

            element.attrib.clear()
            for name, value in result.attributes.items():
                try:
                    element.set(name, value)
                except ValueError:
                    logger.warning("Dropping attribute %r on <%s>: not a valid name", name, record.tag)
            if record.tag.lower() == "a" and NAVIGATION_ATTR in result.attributes:
                element.tag = NAVIGATION_TAG

    def _head_markup(self, document: ET._Element, styles: Sequence[str]) -> str:
        """Return the ``Helmet`` section, or ``""`` when there is nothing to put in it."""
        head = document.find("head")
        has_content = head is not None and (len(head) > 0 or bool((head.text or "").strip()))
        if not has_content and not styles:
            return ""
        if head is None:
            head = document.makeelement("head", {})
            document.insert(0, head)
        head.tag = HEAD_TAG
        style_markup = render_style_block(styles) if styles else ""
        return f"<{HEAD_TAG}>{_inner_markup(head)}{style_markup}</{HEAD_TAG}>"
