"""
Document view widget.

Holds the fully rendered document in a single ``Static`` inside a scrollable
container. The whole document is rendered up front; there is no
virtualization.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static


class DocumentView(VerticalScroll, can_focus=False):
    """Scrollable view of a rendered JSON document.

    The view never takes focus, so key chords always reach the app's bindings
    instead of the container's own scrolling keys.
    """

    DEFAULT_CSS = """
    DocumentView {
        height: 1fr;
        overflow-x: auto;
        background: $surface;
        padding: 0 1;
    }

    DocumentView > #document {
        width: auto;
    }
    """

    def __init__(
        self,
        text: Text | None = None,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            text: The rendered document. An empty view if omitted.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(id=id, classes=classes)
        self._text = text if text is not None else Text()

    def compose(self) -> ComposeResult:
        yield Static(self._text, id="document")

    @property
    def text(self) -> Text:
        """The rendered document currently shown."""
        return self._text

    def scroll_lines(self, delta: int) -> None:
        """Scroll by whole lines; positive moves towards the end of the document."""
        self.scroll_relative(y=delta, animate=False, immediate=True)
