"""
Recursive JSON renderer.

Converts a parsed JSON value into colored, indented text written to a
``Sink``. Layout rules:

    - Empty arrays and objects render inline as ``[]`` and ``{}``.
    - Non-empty containers open on the current line, put one element per line
      indented by two more columns, and close on their own line at the
      container's indentation. No trailing comma after the last element.
    - Object entries keep the document's insertion order.

Strings are written verbatim between double quotes. Embedded quotes, backslashes
and control characters are NOT re-escaped, so a string containing ``"`` does not
survive a round trip through a JSON parser. This is a known limitation.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from rich.style import Style
from rich.text import Text

from jsonview.errors import RenderDepthError
from jsonview.render.palette import DEFAULT_PALETTE, Palette
from jsonview.render.sinks import Sink, TextSink

# Columns added per nesting level
INDENT_STEP = 2

# Deepest container nesting rendered before giving up; keeps well clear of
# the interpreter's recursion limit
DEFAULT_MAX_DEPTH = 256


class RenderCursor:
    """Current indentation, in columns, of one render pass.

    Attributes:
        depth: Number of spaces written before each element line.
    """

    def __init__(self, depth: int = 0) -> None:
        if depth < 0:
            raise ValueError(f"Indentation cannot be negative (got {depth})")
        self.depth = depth

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Indent by one step for the duration of the block."""
        self.depth += INDENT_STEP
        try:
            yield
        finally:
            self.depth -= INDENT_STEP


def format_number(value: int | float) -> str:
    """Return the textual form of a JSON number.

    Numbers loaded by ``JSONLoader`` carry their source literal; plain Python
    numbers fall back to ``str()`` for ints and ``repr()`` for floats.
    """
    literal = getattr(value, "literal", None)
    if literal is not None:
        return literal
    if isinstance(value, float):
        return repr(value)
    return str(value)


def render_json(
    value: Any,
    sink: Sink,
    cursor: RenderCursor | None = None,
    *,
    palette: Palette = DEFAULT_PALETTE,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> None:
    """Render a JSON value into a sink.

    Nothing is written before the value or after it; the caller decides what
    surrounds the document (e.g. a final line ending).

    Args:
        value: The parsed JSON value (None, bool, int, float, str, list, dict).
        sink: Where styled text is written.
        cursor: Indentation to start from. A fresh cursor at column 0 is used
            if omitted. On return, or on error, it is back at its entry depth.
        palette: Styles for each token kind.
        max_depth: Maximum container nesting below ``value``, or None for no
            limit. Counted from the value, not from the cursor's starting column.

    Raises:
        RenderDepthError: If containers nest deeper than ``max_depth``.
        TypeError: If the value contains something that is not JSON.
        OSError: If the sink rejects a write. Output already written is left
            as is.
    """
    if cursor is None:
        cursor = RenderCursor()
    _render_value(value, sink, cursor, palette, max_depth, 0)


def render_to_text(
    value: Any,
    *,
    palette: Palette = DEFAULT_PALETTE,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> Text:
    """Render a JSON value into a ``rich.text.Text``."""
    sink = TextSink()
    render_json(value, sink, palette=palette, max_depth=max_depth)
    return sink.text


def _render_value(
    value: Any,
    sink: Sink,
    cursor: RenderCursor,
    palette: Palette,
    max_depth: int | None,
    level: int,
) -> None:
    # bool before number: bool is a subclass of int
    if value is None:
        sink.write("null", palette.null)
    elif isinstance(value, bool):
        sink.write("true" if value else "false", palette.boolean)
    elif isinstance(value, (int, float)):
        sink.write(format_number(value), palette.number)
    elif isinstance(value, str):
        _render_string(value, sink, palette.string)
    elif isinstance(value, (list, tuple)):
        _render_container(value, sink, cursor, palette, max_depth, level, "[", "]")
    elif isinstance(value, dict):
        _render_container(value, sink, cursor, palette, max_depth, level, "{", "}")
    else:
        raise TypeError(f"Cannot render value of type {type(value).__name__} as JSON")


def _render_string(value: str, sink: Sink, style: Style) -> None:
    sink.write(f'"{value}"', style)


def _render_container(
    container: list[Any] | tuple[Any, ...] | dict[str, Any],
    sink: Sink,
    cursor: RenderCursor,
    palette: Palette,
    max_depth: int | None,
    level: int,
    opener: str,
    closer: str,
) -> None:
    if not container:
        sink.write(opener + closer)
        return

    if max_depth is not None and level >= max_depth:
        raise RenderDepthError(max_depth)

    is_object = isinstance(container, dict)
    sink.write(opener)
    sink.newline()
    with cursor.indented():
        remaining = len(container)
        for item in container.items() if is_object else container:
            sink.write(" " * cursor.depth)
            if is_object:
                key, item = item
                _render_string(key, sink, palette.key)
                sink.write(": ")
            _render_value(item, sink, cursor, palette, max_depth, level + 1)
            remaining -= 1
            if remaining:
                sink.write(",")
            sink.newline()
    sink.write(" " * cursor.depth)
    sink.write(closer)
