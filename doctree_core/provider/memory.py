"""In-memory content provider for testing.

Simple dict-based provider implementing the ContentProvider protocol for one
authority. Understands single document URIs, tree document URIs and
``.../children`` URIs, plus flat tables registered under an arbitrary URI.
Not for production use.
"""

import re
from dataclasses import dataclass
from typing import Any

from doctree_core.documents._types import Authority
from doctree_core.documents.uri import DocumentUri, TreeHandle, build_document_uri_using_tree
from doctree_core.exceptions import DocumentUriError
from doctree_core.provider.columns import (
    COLUMN_DISPLAY_NAME,
    COLUMN_DOCUMENT_ID,
    COLUMN_FLAGS,
    COLUMN_MIME_TYPE,
)
from doctree_core.settings import DIRECTORY_MIME_TYPE

_SELECTION_PATTERN = re.compile(r"^\s*(\w+)\s*=\s*\?\s*$")


@dataclass(slots=True)
class MemoryDocument:
    """One document row of the in-memory provider."""

    document_id: str
    mime_type: str
    flags: int = 0

    @property
    def display_name(self) -> str:
        if "/" in self.document_id:
            return self.document_id.rsplit("/", 1)[1]
        return self.document_id.split(":", 1)[-1]

    def column(self, name: str) -> Any:
        if name == COLUMN_DOCUMENT_ID:
            return self.document_id
        if name == COLUMN_MIME_TYPE:
            return self.mime_type
        if name == COLUMN_FLAGS:
            return self.flags
        if name == COLUMN_DISPLAY_NAME:
            return self.display_name
        raise ValueError(f"Unknown column: {name}")


class MemoryCursor:
    """List-backed cursor. Tracks how many times it was closed."""

    def __init__(self, rows: list[tuple[Any, ...]]) -> None:
        self._rows = rows
        self._position = -1
        self.close_count = 0

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    def _current(self) -> tuple[Any, ...]:
        if self.closed:
            raise RuntimeError("Cursor is closed")
        if not 0 <= self._position < len(self._rows):
            raise IndexError(f"Cursor position {self._position} out of range ({len(self._rows)} rows)")
        return self._rows[self._position]

    def move_to_first(self) -> bool:
        self._position = 0
        return bool(self._rows)

    def move_to_next(self) -> bool:
        if self._position < len(self._rows):
            self._position += 1
        return self._position < len(self._rows)

    def get_string(self, column_index: int) -> str | None:
        value = self._current()[column_index]
        return None if value is None else str(value)

    def get_int(self, column_index: int) -> int:
        # Null reads as 0, like a platform cursor
        value = self._current()[column_index]
        return 0 if value is None else int(value)

    def get_count(self) -> int:
        return len(self._rows)

    def close(self) -> None:
        self.close_count += 1


class MemoryContentProvider:
    """Dict-based content provider for unit tests.

    Storage layout: documents by id + ordered child ids per parent + tables by URI.
    Every cursor handed out is kept in ``cursors`` so tests can check release.
    """

    def __init__(self, authority: str) -> None:
        self.authority = Authority(authority)
        self._documents: dict[str, MemoryDocument] = {}
        self._children: dict[str, list[str]] = {}  # parent id -> child ids
        self._tables: dict[str, list[dict[str, Any]]] = {}  # uri -> rows
        self.queries: list[str] = []
        self.cursors: list[MemoryCursor] = []

    def add_document(self, document_id: str, mime_type: str, *, parent_id: str | None = None, flags: int = 0) -> MemoryDocument:
        """Register a document, optionally as the last child of ``parent_id``."""
        document = MemoryDocument(document_id=document_id, mime_type=mime_type, flags=flags)
        self._documents[document_id] = document
        if parent_id is not None:
            self._children.setdefault(parent_id, []).append(document_id)
        return document

    def add_directory(self, document_id: str, *, parent_id: str | None = None, flags: int = 0) -> MemoryDocument:
        """Register a directory document."""
        document = self.add_document(document_id, DIRECTORY_MIME_TYPE, parent_id=parent_id, flags=flags)
        self._children.setdefault(document_id, [])
        return document

    def add_table(self, uri: str, rows: list[dict[str, Any]]) -> None:
        """Register a flat table answered for queries on exactly ``uri``."""
        self._tables[uri] = list(rows)

    def document_uri(self, tree_id: str, document_id: str) -> DocumentUri:
        """URI of a document inside the tree rooted at ``tree_id``."""
        return build_document_uri_using_tree(TreeHandle(self.authority, tree_id), document_id)  # type: ignore[arg-type]

    def query(
        self,
        uri: str,
        projection: list[str],
        selection: str,
        selection_args: list[str],
        sort_order: str,
    ) -> MemoryCursor | None:
        """Answer a query, or return None for unknown URIs and documents."""
        _ = sort_order
        self.queries.append(uri)

        if uri in self._tables:
            rows = self._select(self._tables[uri], selection, selection_args)
            return self._cursor([tuple(row.get(col) for col in projection) for row in rows])

        try:
            parsed = DocumentUri.parse(uri)
            document_id = parsed.document_id
        except DocumentUriError:
            return None
        if parsed.authority != self.authority or document_id not in self._documents:
            return None

        trailing = parsed.segments[4 if parsed.is_tree_uri else 2 :]
        if trailing == ["children"]:
            documents = [self._documents[child] for child in self._children.get(document_id, [])]
        elif not trailing:
            documents = [self._documents[document_id]]
        else:
            return None
        return self._cursor([tuple(doc.column(col) for col in projection) for doc in documents])

    @staticmethod
    def _select(rows: list[dict[str, Any]], selection: str, selection_args: list[str]) -> list[dict[str, Any]]:
        if not selection:
            return rows
        match = _SELECTION_PATTERN.match(selection)
        if match is None or len(selection_args) != 1:
            raise ValueError(f"Unsupported selection: {selection!r}")
        column = match.group(1)
        return [row for row in rows if row.get(column) == selection_args[0]]

    def _cursor(self, rows: list[tuple[Any, ...]]) -> MemoryCursor:
        cursor = MemoryCursor(rows)
        self.cursors.append(cursor)
        return cursor
