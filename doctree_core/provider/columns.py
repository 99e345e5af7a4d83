"""Column names of the provider's document table."""

COLUMN_DOCUMENT_ID = "document_id"
COLUMN_MIME_TYPE = "mime_type"
COLUMN_DISPLAY_NAME = "_display_name"
COLUMN_FLAGS = "flags"

CHILD_PROJECTION = (COLUMN_DOCUMENT_ID, COLUMN_MIME_TYPE, COLUMN_FLAGS)
MIME_TYPE_PROJECTION = (COLUMN_MIME_TYPE,)

__all__ = [
    "CHILD_PROJECTION",
    "COLUMN_DISPLAY_NAME",
    "COLUMN_DOCUMENT_ID",
    "COLUMN_FLAGS",
    "COLUMN_MIME_TYPE",
    "MIME_TYPE_PROJECTION",
]
