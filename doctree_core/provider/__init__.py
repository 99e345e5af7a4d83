"""Content provider protocols and the in-memory provider.

@public
"""

from .columns import (
    CHILD_PROJECTION,
    COLUMN_DISPLAY_NAME,
    COLUMN_DOCUMENT_ID,
    COLUMN_FLAGS,
    COLUMN_MIME_TYPE,
    MIME_TYPE_PROJECTION,
)
from .memory import MemoryContentProvider, MemoryCursor, MemoryDocument
from .protocol import ContentProvider, Cursor, NameRegistry

__all__ = [
    "CHILD_PROJECTION",
    "COLUMN_DISPLAY_NAME",
    "COLUMN_DOCUMENT_ID",
    "COLUMN_FLAGS",
    "COLUMN_MIME_TYPE",
    "MIME_TYPE_PROJECTION",
    "ContentProvider",
    "Cursor",
    "MemoryContentProvider",
    "MemoryCursor",
    "MemoryDocument",
    "NameRegistry",
]
