"""
Data formats module for reading JSON documents.

Usage:
    from jsonview.data_formats import load_document

    document = load_document("data.json")
"""

from jsonview.data_formats.json_loader import JsonFloat, JsonInt, JSONLoader, load_document

__all__ = [
    "JSONLoader",
    "JsonFloat",
    "JsonInt",
    "load_document",
]
