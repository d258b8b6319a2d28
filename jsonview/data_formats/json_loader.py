"""
JSON document loader.

This module provides the JSONLoader class for reading a single JSON document
from disk. Parsing is delegated to the standard ``json`` module; numbers are
parsed into ``JsonInt`` / ``JsonFloat`` so the renderer can print the exact
literal that appeared in the file.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from jsonview.errors import SourceError

logger = logging.getLogger(__name__)


class JsonInt(int):
    """An int that remembers the literal it was parsed from."""

    def __new__(cls, literal: str) -> JsonInt:
        number = super().__new__(cls, literal)
        number.literal = literal
        return number


class JsonFloat(float):
    """A float that remembers the literal it was parsed from.

    ``1.50`` and ``1e5`` keep their spelling instead of becoming ``1.5``
    and ``100000.0``.
    """

    def __new__(cls, literal: str) -> JsonFloat:
        number = super().__new__(cls, literal)
        number.literal = literal
        return number


def _reject_constant(name: str) -> Any:
    """Refuse the NaN/Infinity extensions the json module accepts by default."""
    raise ValueError(f"{name} is not a valid JSON value")


class JSONLoader:
    """Loader for JSON documents.

    The document may be any JSON value: an object, an array or a bare
    scalar. The file name is only used in error messages; any extension is
    read as JSON.
    """

    def loads(self, text: str, path: str | None = None) -> Any:
        """Parse JSON text into a document.

        Args:
            text: The JSON text.
            path: Where the text came from, used in error messages.

        Returns:
            The parsed document.

        Raises:
            SourceError: If the text is not valid JSON.
        """
        source = path or "<string>"
        try:
            return json.loads(
                text,
                parse_int=JsonInt,
                parse_float=JsonFloat,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as e:
            raise SourceError(
                f"Invalid JSON in {source}: {e.msg} (line {e.lineno}, column {e.colno})",
                path,
            ) from e
        except ValueError as e:
            raise SourceError(f"Invalid JSON in {source}: {e}", path) from e
        except RecursionError as e:
            raise SourceError(f"Invalid JSON in {source}: document nests too deeply", path) from e

    def load(self, filename: str) -> Any:
        """Read and parse a JSON document from a file.

        Args:
            filename: Path to the JSON file.

        Returns:
            The parsed document.

        Raises:
            SourceError: If the file cannot be read or does not contain valid JSON.

        Examples:
            >>> loader = JSONLoader()
            >>> doc = loader.load("package.json")
            >>> doc["name"]
            'jsonview'
        """
        if not os.path.exists(filename):
            raise SourceError(f"Path not found: {filename}", filename)
        if os.path.isdir(filename):
            raise SourceError(f"Path is a directory: {filename}", filename)

        try:
            with open(filename, "r", encoding="utf-8-sig") as f:
                text = f.read()
        except PermissionError as e:
            raise SourceError(f"Permission denied: {filename}", filename) from e
        except UnicodeDecodeError as e:
            raise SourceError(f"File is not valid UTF-8: {filename}", filename) from e
        except OSError as e:
            raise SourceError(f"Cannot read {filename}: {e.strerror or e}", filename) from e

        logger.debug("Read %d characters from %s", len(text), filename)
        return self.loads(text, filename)


def load_document(filename: str) -> Any:
    """Load a JSON document from a file with the default loader."""
    return JSONLoader().load(filename)
