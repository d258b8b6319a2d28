"""
Output sinks for the JSON renderer.

A sink receives text fragments, each with an optional style, and decides how
to materialise them: ``TextSink`` builds a ``rich.text.Text`` for the Textual
viewer, ``StreamSink`` writes ANSI escape sequences to a text stream.

The line terminator is a property of the sink, not of the renderer. Raw-mode
terminals need ``LineEnding.CRLF``; everything else uses ``LineEnding.LF``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TextIO

from rich.color import ColorSystem
from rich.style import Style
from rich.text import Text


class LineEnding(str, Enum):
    """Line terminator written by ``Sink.newline()``."""

    LF = "\n"
    CRLF = "\r\n"


class Sink(ABC):
    """Abstract base class for render targets."""

    line_ending: LineEnding = LineEnding.LF

    @abstractmethod
    def write(self, text: str, style: Style | None = None) -> None:
        """Write a text fragment.

        Args:
            text: The characters to write, emitted verbatim.
            style: Style for the fragment, or None for unstyled text.

        Raises:
            OSError: If the underlying stream rejects the write.
        """
        pass

    def newline(self) -> None:
        """Terminate the current line."""
        self.write(self.line_ending.value)


class TextSink(Sink):
    """Sink that accumulates a ``rich.text.Text``.

    Lines are never wrapped; the viewer scrolls horizontally instead.
    """

    def __init__(self) -> None:
        self.text = Text(no_wrap=True, end="")

    def write(self, text: str, style: Style | None = None) -> None:
        self.text.append(text, style)


class StreamSink(Sink):
    """Sink that writes ANSI-styled text to a stream.

    Args:
        file: Writable text stream (e.g. ``sys.stdout``).
        line_ending: Line terminator policy.
        color_system: Color system used to render styles, or None for plain text.
    """

    def __init__(
        self,
        file: TextIO,
        line_ending: LineEnding = LineEnding.LF,
        color_system: ColorSystem | None = ColorSystem.STANDARD,
    ) -> None:
        self.file = file
        self.line_ending = line_ending
        self.color_system = color_system

    def write(self, text: str, style: Style | None = None) -> None:
        if style and self.color_system is not None:
            text = style.render(text, color_system=self.color_system)
        self.file.write(text)

    def flush(self) -> None:
        self.file.flush()
