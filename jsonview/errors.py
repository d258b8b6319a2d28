"""
Exception types raised by jsonview.

Sink write failures (``OSError``) and terminal driver failures are not wrapped;
they propagate unchanged to the caller.
"""

from __future__ import annotations


class JsonViewError(Exception):
    """Base class for all jsonview errors."""


class SourceError(JsonViewError):
    """The document could not be read or parsed.

    Attributes:
        path: Path of the document, or None when parsing in-memory text.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class RenderError(JsonViewError):
    """Rendering a document was aborted."""


class RenderDepthError(RenderError):
    """The document nests deeper than the configured maximum depth."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Document nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth
