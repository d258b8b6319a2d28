"""
jsonview - a terminal viewer for JSON documents.

Loads a JSON document, renders it with syntax-aware coloring and indentation,
and lets the user scroll through it until they quit.

Usage:
    jsonview data/config.json
    uv run python -m jsonview data/config.json --print

Components:
    - JSONLoader: Reads and parses a document, preserving number literals
    - render_json: Recursive renderer writing styled text to a sink
    - InputLoop: Key chord state machine driving the viewport
    - JsonViewerApp: Textual application hosting the terminal session
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
