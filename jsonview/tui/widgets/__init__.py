"""Custom widgets for the viewer."""

from jsonview.tui.widgets.document_view import DocumentView

__all__ = ["DocumentView"]
