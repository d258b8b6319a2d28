"""
Main Textual application for jsonview.

This is the entry point for the viewer. The app owns the terminal session:
``App.run()`` switches the terminal to raw input and the alternate screen, and
restores both when the app exits, whether by a quit chord or an error.

Usage:
    uv run python -m jsonview data/config.json
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from jsonview.config import ViewerConfig, configure_logging, parse_args
from jsonview.data_formats import load_document
from jsonview.errors import JsonViewError, SourceError
from jsonview.render import DEFAULT_MAX_DEPTH, StreamSink, render_json, render_to_text
from jsonview.tui.keys import KEYMAP, Action, Chord, InputLoop
from jsonview.tui.widgets import DocumentView

logger = logging.getLogger(__name__)

# Marks an app started without a file; distinct from a document that is `null`
NO_DOCUMENT: Any = object()

# Keys Textual binds on every App that must not bypass the input loop
SHADOWED_APP_KEYS = ("ctrl+q",)

ACTION_LABELS = {
    Action.SCROLL_DOWN: "Down",
    Action.SCROLL_UP: "Up",
    Action.STOP: "Quit",
}


def chord_bindings(keymap: dict[Chord, Action] = KEYMAP) -> list[Binding]:
    """Mirror the keymap as priority bindings routed to ``action_chord``.

    Priority bindings are checked before any widget sees the key, so every
    chord in the keymap reaches the input loop. Keys Textual binds itself
    (ctrl+q quits by default) are routed to the loop too, which ignores them.
    """
    return [
        Binding(
            chord.key,
            f"chord({chord.key!r})",
            ACTION_LABELS[action],
            show=not chord.modifiers,
            priority=True,
        )
        for chord, action in keymap.items()
        if action is not Action.IGNORE
    ] + [
        Binding(key, f"chord({key!r})", show=False, priority=True)
        for key in SHADOWED_APP_KEYS
        if key not in {chord.key for chord in keymap}
    ]


class JsonViewerApp(App):
    """A Textual app that shows one JSON document and scrolls it with j/k."""

    TITLE = "jsonview"

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }
    """

    BINDINGS = chord_bindings()

    def __init__(
        self,
        document: Any = NO_DOCUMENT,
        *,
        filename: str | None = None,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize the app with a parsed document.

        Args:
            document: The parsed JSON value. Omit to open an empty view.
            filename: Name of the file the document came from, shown in the header.
            max_depth: Maximum container nesting to render, or None for no limit.
        """
        super().__init__()
        self.document = document
        self.filename = filename
        self.max_depth = max_depth
        self.input_loop: InputLoop | None = None

    @property
    def has_document(self) -> bool:
        return self.document is not NO_DOCUMENT

    def compose(self) -> ComposeResult:
        yield Header()
        yield DocumentView(self._render_document(), id="document-view")
        yield Footer()

    def on_mount(self) -> None:
        """Start listening for chords once the view exists."""
        if self.filename:
            self.title = f"jsonview - {os.path.basename(self.filename)}"
        self.input_loop = InputLoop(self.query_one(DocumentView))
        logger.info("Viewer session started")

    def _render_document(self) -> Text:
        """Render the document once, for the whole session."""
        if not self.has_document:
            return Text()
        text = render_to_text(self.document, max_depth=self.max_depth)
        logger.info("Rendered %d lines", len(text.plain.splitlines()))
        return text

    def action_chord(self, key: str) -> None:
        """Feed a chord to the input loop and exit once it stops."""
        if self.input_loop is None:
            return
        if not self.input_loop.feed(Chord.parse(key)):
            logger.info("Viewer session stopped by %s", key)
            self.exit()

    def action_quit(self) -> None:
        """Send Textual's own quit action through the input loop as well."""
        self.action_chord("ctrl+q")


def stdout_is_terminal() -> bool:
    """Whether stdout is an interactive terminal the viewer can take over."""
    return sys.stdout.isatty()


def print_document(document: Any, config: ViewerConfig, file: TextIO | None = None) -> None:
    """Render a document straight to a stream, without the viewer.

    Args:
        document: The parsed JSON value.
        config: Color, line ending and depth settings.
        file: Output stream, stdout if omitted.

    Raises:
        RenderError: If the document nests deeper than ``config.max_depth``.
        OSError: If the stream rejects a write.
    """
    file = file if file is not None else sys.stdout
    if config.color == "always":
        color_system = ColorSystem.STANDARD
    elif config.color == "never":
        color_system = None
    else:
        console = Console(file=file)
        use_color = console.color_system is not None and not console.no_color
        color_system = ColorSystem.STANDARD if use_color else None

    sink = StreamSink(file, line_ending=config.line_ending, color_system=color_system)
    render_json(document, sink, max_depth=config.max_depth)
    sink.newline()
    sink.flush()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the viewer."""
    config = parse_args(argv)
    configure_logging(config.log_file)

    document = NO_DOCUMENT
    if config.path is not None:
        try:
            document = load_document(config.path)
        except SourceError as e:
            logger.error("%s", e)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        logger.info("Loaded %s", config.path)

    if config.print_only or not stdout_is_terminal():
        if document is NO_DOCUMENT:
            return
        try:
            print_document(document, config)
        except BrokenPipeError:
            # Keep the interpreter from failing again when it flushes stdout at exit
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            print("Error: Output closed before the document was written", file=sys.stderr)
            sys.exit(1)
        except JsonViewError as e:
            logger.error("%s", e)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return

    app = JsonViewerApp(document, filename=config.path, max_depth=config.max_depth)
    app.run()
    if app.return_code:
        logger.error("Viewer exited with return code %s", app.return_code)
        sys.exit(app.return_code)
