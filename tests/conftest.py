"""Pytest configuration and shared fixtures for jsonview tests."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Callable

import pytest

from jsonview.render import Sink, TextSink, render_json

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from rendered output."""
    return ANSI_ESCAPE.sub("", text)


def render_plain(value: Any, **kwargs: Any) -> str:
    """Render a value and return the text without styles."""
    sink = TextSink()
    render_json(value, sink, **kwargs)
    return sink.text.plain


class FailingSink(Sink):
    """Sink that raises BrokenPipeError after a number of writes."""

    def __init__(self, fail_after: int) -> None:
        self.fail_after = fail_after
        self.written: list[str] = []

    def write(self, text, style=None) -> None:
        if len(self.written) >= self.fail_after:
            raise BrokenPipeError("terminal went away")
        self.written.append(text)


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """Return a document exercising every JSON kind."""
    return {
        "name": "jsonview",
        "version": 3,
        "ratio": 0.25,
        "enabled": True,
        "deprecated": False,
        "parent": None,
        "tags": ["cli", "json", []],
        "owner": {"login": "octo", "repos": [1, 2, {"archived": {}}]},
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes JSON text (or a value) to a temp file."""

    def _write(content: Any, name: str = "document.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
