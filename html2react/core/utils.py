from __future__ import annotations

"""Simple reusable helper functions.

Naming, path and escaping helpers shared by the mapper, the assembler and the
route table.  Only :func:`write_text_file` touches the disk.
"""

from pathlib import Path
import json
import logging
import posixpath
import re

__all__ = [
    "safe_name",
    "component_name",
    "normalize_route",
    "route_path",
    "import_specifier",
    "escape_jsx_text",
    "jsx_string_expression",
    "escape_template_literal",
    "write_text_file",
]

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")
_JSX_BRACES = re.compile(r"[{}]")


def safe_name(link: str) -> str:
    """Return a JavaScript identifier derived from *link*.

    Every character outside ``[0-9A-Za-z]`` becomes ``_``; a leading digit
    is prefixed with ``_``.

    Examples:
        >>> safe_name("images/logo.png")
        'images_logo_png'
        >>> safe_name("404.html")
        '_404_html'
    """
    name = _NON_ALNUM.sub("_", link or "")
    if not name or name[0].isdigit():
        name = "_" + name
    return name


def component_name(filename_no_ext: str) -> str:
    """Return the React component name for a markup file base name."""
    name = safe_name(filename_no_ext)
    return name[0].upper() + name[1:]


def normalize_route(path: str) -> str:
    """Normalise a relative document path into a route.

    Separators become ``/``, ``.``/``..`` segments are collapsed and
    surrounding slashes dropped.  The root maps to ``"/"``.
    """
    path = (path or "").replace("\\", "/")
    if path:
        path = posixpath.normpath(path)
    path = path.strip("/")
    if path in ("", "."):
        return "/"
    return path


def route_path(relative_dir: str, filename_no_ext: str) -> str:
    """Route for a document named *filename_no_ext* inside *relative_dir*.

    Examples:
        >>> route_path("", "index")
        '/'
        >>> route_path("about", "team")
        'about/team'
        >>> route_path("blog", "index")
        'blog'
    """
    if filename_no_ext == "index":
        return normalize_route(relative_dir)
    return normalize_route(posixpath.join(relative_dir, filename_no_ext))


def import_specifier(link: str, relative_dir: str) -> str:
    """Return the module specifier used to import *link* from a page.

    A leading ``/`` means "relative to the source root"; everything else is
    already relative to the page's own directory.
    """
    if link.startswith("/"):
        specifier = posixpath.relpath(link.lstrip("/") or ".", relative_dir or ".")
    else:
        specifier = link
    if not specifier.startswith(("./", "../")):
        specifier = "./" + specifier
    return specifier


def escape_jsx_text(text: str) -> str:
    """Make literal braces in JSX text render as characters."""
    if not text:
        return text
    return _JSX_BRACES.sub(lambda m: "{'%s'}" % m.group(0), text)


def jsx_string_expression(text: str) -> str:
    """Return *text* as one JSX child; braces turn it into a string expression.

    Examples:
        >>> jsx_string_expression("Home")
        'Home'
        >>> jsx_string_expression("a {b}")
        '{"a {b}"}'
    """
    if not text or not _JSX_BRACES.search(text):
        return text
    return "{%s}" % json.dumps(text, ensure_ascii=False)


def escape_template_literal(text: str) -> str:
    """Escape *text* for embedding inside a JavaScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def write_text_file(path: str | Path, text: str) -> None:
    """Write *text* to *path*, creating parent directories as needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote module path=%s chars=%d", path, len(text))
    except OSError:
        # Caller context handles user feedback; file handler captures traceback
        logger.error("I/O FAIL: write module path=%s", path, exc_info=True)
        raise
