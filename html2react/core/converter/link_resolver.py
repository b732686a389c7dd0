from __future__ import annotations

"""Classification of referenced paths as project-internal or external.

A link is internal when it names something that exists under the source
root, either directly or as a directory holding an ``index.html``.  Internal
assets are turned into ES module imports; everything else is left alone.
"""

import logging
import os
import posixpath

from html2react.core.models import LinkKind, LinkResolution, TranspilationContext
from html2react.core.utils import import_specifier, safe_name

logger = logging.getLogger(__name__)

__all__ = ["LinkResolver", "INDEX_DOCUMENT"]

INDEX_DOCUMENT = "index.html"


class LinkResolver:
    """Resolve links found in one document.

    Import statements and bound identifiers are recorded on the
    :class:`TranspilationContext` passed in, which belongs to exactly one
    file's conversion.
    """

    def __init__(self, context: TranspilationContext) -> None:
        self.context = context

    # ------------------------------------------------------------------
    # Filesystem checks
    # ------------------------------------------------------------------
    def relative_target(self, link: str) -> str:
        """POSIX path of *link* relative to the source root.

        A leading ``/`` anchors the link at the source root; otherwise it is
        relative to the current document's directory.
        """
        if link.startswith("/"):
            return posixpath.normpath(link.lstrip("/") or ".")
        return posixpath.normpath(posixpath.join(self.context.relative_dir, link))

    def target_path(self, link: str) -> str:
        """Absolute filesystem path *link* points at from the current document."""
        return os.path.join(str(self.context.source_root), *self.relative_target(link).split("/"))

    def exists(self, link: str) -> bool:
        target = self.target_path(link)
        return os.path.exists(target) or os.path.exists(os.path.join(target, INDEX_DOCUMENT))

    def is_directory_index(self, link: str) -> bool:
        """True when *link* names a directory served by its ``index.html``."""
        target = self.target_path(link)
        return os.path.isdir(target) and os.path.exists(os.path.join(target, INDEX_DOCUMENT))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def resolve(self, link: str | None, import_only: bool = False) -> LinkResolution:
        """Classify *link* and record any import side effects.

        Returns
        -------
        LinkResolution
            ``EMPTY`` for a missing/empty link, ``EXTERNAL`` carrying the
            literal link when nothing exists under the source root,
            ``IMPORT_ONLY`` when *import_only* and the target exists,
            ``INTERNAL`` carrying the bound identifier otherwise.
        """
        if not link:
            return LinkResolution(LinkKind.EMPTY, link)

        if not self.exists(link):
            logger.debug("External link: %s", link)
            return LinkResolution(LinkKind.EXTERNAL, link)

        specifier = import_specifier(link, self.context.relative_dir)
        if import_only:
            self.context.add_import(f'import "{specifier}";')
            logger.debug("Internal side-effect import: %s", specifier)
            return LinkResolution(LinkKind.IMPORT_ONLY)

        identifier = self.context.bind(specifier, safe_name(link))
        self.context.add_import(f'import {identifier} from "{specifier}";')
        logger.debug("Internal link %s bound to %s", link, identifier)
        return LinkResolution(LinkKind.INTERNAL, identifier)
