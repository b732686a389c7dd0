from __future__ import annotations

"""Shared data structures used across the html2react core.

This module is intentionally free of I/O code so that the contained objects
can be reused in any context (unit-tests, CLI, watch service, etc.).
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

__all__ = [
    "TagRecord",
    "MappingResult",
    "MappingOutcome",
    "LinkKind",
    "LinkResolution",
    "RouteEntry",
    "TranspilationContext",
    "TranspileReport",
]


@dataclass
class TagRecord:
    """One tag of a document, extracted in document order.

    Attributes
    ----------
    tag
        Lower-cased tag name as reported by the parser.
    attributes
        Attribute name -> value, in source order.
    element
        The live ``lxml`` node the record was read from, when available.
        Records built by hand (tests, external extractors) leave it ``None``
        and the assembler falls back to locating the node by tag/attributes.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    element: Optional[Any] = field(default=None, repr=False, compare=False)


@dataclass
class MappingResult:
    """Outcome of mapping one :class:`TagRecord`.

    ``attributes is None`` is the deletion sentinel: the whole node goes away,
    not just its attributes.
    """

    tag: str
    attributes: Optional[Dict[str, str]] = None

    @classmethod
    def delete(cls, tag: str) -> "MappingResult":
        return cls(tag=tag, attributes=None)

    @property
    def is_delete(self) -> bool:
        return self.attributes is None


@dataclass
class MappingOutcome:
    """Everything the mapper produced for one document."""

    results: List[MappingResult] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    variables: List[str] = field(default_factory=list)


class LinkKind(Enum):
    EMPTY = "empty"
    EXTERNAL = "external"
    INTERNAL = "internal"
    IMPORT_ONLY = "import_only"


@dataclass(frozen=True)
class LinkResolution:
    """Classification of one referenced path."""

    kind: LinkKind
    value: Optional[str] = None

    @property
    def attribute_value(self) -> Optional[str]:
        """Value to write back into the attribute slot.

        Internal references are written as ``{ident}`` placeholders; the page
        assembler later strips the surrounding quotes so the attribute becomes
        a JSX expression.  Import-only links keep no value at all.
        """
        if self.kind is LinkKind.INTERNAL:
            return "{%s}" % self.value
        if self.kind is LinkKind.IMPORT_ONLY:
            return None
        return self.value


@dataclass(frozen=True)
class RouteEntry:
    route_path: str
    module_path: str


@dataclass
class TranspilationContext:
    """Per-file state owned by exactly one transpilation pass.

    Attributes
    ----------
    source_root
        Root directory of the markup tree.
    destination_root
        Root directory of the generated React project.
    relative_dir
        Directory of the current document relative to *source_root*
        (POSIX separators, ``""`` for the root).
    imports
        Import statements discovered while mapping, in discovery order.
    variables
        Identifiers bound by those imports, in discovery order.
    link_imported
        Whether the navigation primitive import was already added.
    """

    source_root: Path
    destination_root: Path
    relative_dir: str = ""
    imports: List[str] = field(default_factory=list)
    variables: List[str] = field(default_factory=list)
    link_imported: bool = False
    _bindings: Dict[str, str] = field(default_factory=dict, repr=False)

    def add_import(self, statement: str) -> None:
        if statement not in self.imports:
            self.imports.append(statement)

    def bind(self, specifier: str, identifier: str) -> str:
        """Bind *specifier* to a document-unique identifier and return it.

        The same specifier always yields the same identifier; two different
        specifiers that sanitize to the same name get numeric suffixes.
        """
        if specifier in self._bindings:
            return self._bindings[specifier]
        unique = identifier
        suffix = 2
        while unique in self.variables:
            unique = f"{identifier}_{suffix}"
            suffix += 1
        self._bindings[specifier] = unique
        self.variables.append(unique)
        return unique


@dataclass
class TranspileReport:
    """Summary of one batch pass."""

    pages_transpiled: int = 0
    assets_copied: int = 0
    failures: Dict[str, str] = field(default_factory=dict)
    entry_module: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return not self.failures
