from __future__ import annotations

"""Transpiler exception classes.

Every failure raised by the conversion pipeline derives from
:class:`TranspilerError` so that batch drivers and the watch service can
isolate one file's failure from the rest of the project.
"""

from pathlib import Path
from typing import Optional


class TranspilerError(Exception):
    """Base exception for all transpilation errors."""

    def __init__(self, message: str, file_path: Optional[str | Path] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.file_path = str(file_path) if file_path is not None else None
        self.cause = cause

    def __str__(self) -> str:
        if self.file_path:
            return f"[{self.file_path}] {super().__str__()}"
        return super().__str__()


class ConfigurationError(TranspilerError):
    """Raised when the source or destination root is missing or misconfigured."""
    pass


class MissingEntryPointError(TranspilerError):
    """Raised when the designated entry document is absent from the source root."""
    pass


class ConsistencyError(TranspilerError):
    """Raised when the tag records and mapping results drift apart.

    The two sequences are correlated by position; a different tag name at the
    same index means the mapping no longer describes the document.
    """

    def __init__(self, index: int, expected: str, actual: str,
                 file_path: Optional[str | Path] = None) -> None:
        message = f"Tag mismatch at position {index}: expected <{expected}>, got <{actual}>"
        super().__init__(message, file_path)
        self.index = index
        self.expected = expected
        self.actual = actual


class ScaffoldError(TranspilerError):
    """Raised when the destination tree cannot be created or lacks its generated layout."""

    def __init__(self, message: str, file_path: Optional[str | Path] = None,
                 command: Optional[list[str]] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, file_path, cause)
        self.command = command or []


__all__ = [
    "TranspilerError",
    "ConfigurationError",
    "MissingEntryPointError",
    "ConsistencyError",
    "ScaffoldError",
]
