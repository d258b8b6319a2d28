"""Rendering of JSON values into styled terminal text."""

from jsonview.render.palette import DEFAULT_PALETTE, PLAIN_PALETTE, Palette
from jsonview.render.renderer import (
    DEFAULT_MAX_DEPTH,
    INDENT_STEP,
    RenderCursor,
    format_number,
    render_json,
    render_to_text,
)
from jsonview.render.sinks import LineEnding, Sink, StreamSink, TextSink

__all__ = [
    # Renderer
    "render_json",
    "render_to_text",
    "format_number",
    "RenderCursor",
    "INDENT_STEP",
    "DEFAULT_MAX_DEPTH",
    # Palette
    "Palette",
    "DEFAULT_PALETTE",
    "PLAIN_PALETTE",
    # Sinks
    "Sink",
    "TextSink",
    "StreamSink",
    "LineEnding",
]
