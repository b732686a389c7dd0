"""Top-level package for html2react.

Converts a tree of static HTML documents into a React project: one component
module per page, router links for internal hyperlinks and a single entry
module declaring every page as a route.  Front-ends (CLI, watch service)
should only depend on the public API exposed here.
"""

from .core.models import MappingResult, RouteEntry, TagRecord, TranspileReport  # re-export for convenience

__all__: list[str] = [
    "MappingResult",
    "RouteEntry",
    "TagRecord",
    "TranspileReport",
]
