"""
Textual viewer for JSON documents.

Usage:
    uv run python -m jsonview data/config.json

Components:
    - JsonViewerApp: Main application class, owns the terminal session
    - DocumentView: Scrollable widget holding the rendered document
    - InputLoop: Key chord state machine (j/k scroll, q/Ctrl+C quit)
"""
