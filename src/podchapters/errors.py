"""
Podchapters exception hierarchy.

Exception Hierarchy:
    ChaptersError (base)
    ├── DocumentError - JSON chapters document cannot be parsed
    ├── DescriptionError - Chapters cannot be rendered as a description
    ├── TagError - ID3 tag load, parse or save failures
    └── ChapterIOError - File copy failures
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ChaptersError(Exception):
    """Base exception for all podchapters errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize podchapters exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class DocumentError(ChaptersError):
    """Structural or field-level failure in a JSON chapters document."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if index is not None:
            details["index"] = index
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.index = index
        self.field = field


class DescriptionError(ChaptersError):
    """Chapters cannot be rendered as a free-text description."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if index is not None:
            details["index"] = index
        super().__init__(message, details=details)
        self.index = index


class TagError(ChaptersError):
    """ID3 tag could not be loaded, interpreted or saved."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details=details)
        self.path = path


class ChapterIOError(ChaptersError):
    """Copying the source audio to its destination failed."""

    def __init__(
        self,
        message: str,
        *,
        source: Path | str | None = None,
        destination: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if source:
            details["source"] = str(source)
        if destination:
            details["destination"] = str(destination)
        super().__init__(message, details=details)
        self.source = source
        self.destination = destination
