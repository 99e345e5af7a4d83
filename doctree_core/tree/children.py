"""Enumeration of the direct children of a document.

@public

``list_children`` issues one provider query and hands back a lazy iterator
that owns the provider cursor. The cursor is released exactly once: when the
iterator is exhausted, when reading a row fails, on ``close()``, or when a
``with`` block around the iterator exits.

Example:
    >>> with list_children(provider, uri) as children:
    ...     for entry in children:
    ...         print(entry.file_name, entry.is_dir)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType

from doctree_core.documents._types import DocumentId
from doctree_core.documents.uri import (
    DocumentUri,
    TreeHandle,
    build_child_documents_uri_using_tree,
    build_document_uri_using_tree,
    doc_path_file_name,
    file_stem,
    resolve_tree,
)
from doctree_core.exceptions import DocumentUriError, ProviderUnavailableError
from doctree_core.logging import get_pipeline_logger
from doctree_core.provider.columns import CHILD_PROJECTION
from doctree_core.provider.protocol import ContentProvider, Cursor
from doctree_core.settings import DIRECTORY_MIME_TYPE, settings

logger = get_pipeline_logger(__name__)


@dataclass(frozen=True, slots=True)
class ChildEntry:
    """One direct child of a document, as reported by the provider.

    @public

    Attributes:
        document_id: Provider id of the child.
        mime_type: Provider-reported media type.
        flags: Provider-defined capability bitmask, not interpreted here.
        uri: Tree-scoped URI of the child.
        directory_mime_type: Media type ``is_dir`` compares against.
    """

    document_id: DocumentId
    mime_type: str
    flags: int
    uri: DocumentUri
    directory_mime_type: str = field(default=DIRECTORY_MIME_TYPE, repr=False, compare=False)

    @property
    def is_dir(self) -> bool:
        return self.mime_type == self.directory_mime_type

    @property
    def file_name(self) -> str:
        """Name of the file or directory of this entry."""
        return doc_path_file_name(self.document_id)

    @property
    def file_stem(self) -> str:
        return file_stem(self.file_name)


class ChildEntryIterator:
    """Lazy, forward-only, single-pass iterator over child rows.

    @public

    Owns the provider cursor it reads from. Not restartable.
    """

    def __init__(
        self,
        cursor: Cursor,
        tree: TreeHandle,
        has_row: bool,
        *,
        directory_mime_type: str | None = None,
    ) -> None:
        self._cursor: Cursor | None = cursor
        self._tree = tree
        self._has_row = has_row
        self._directory_mime_type = settings.directory_mime_type if directory_mime_type is None else directory_mime_type

    @property
    def closed(self) -> bool:
        return self._cursor is None

    def __iter__(self) -> ChildEntryIterator:
        return self

    def __next__(self) -> ChildEntry:
        cursor = self._cursor
        if cursor is None or not self._has_row:
            self.close()
            raise StopIteration
        try:
            entry = self._read_row(cursor)
            self._has_row = cursor.move_to_next()
        except BaseException:
            self.close()
            raise
        return entry

    def _read_row(self, cursor: Cursor) -> ChildEntry:
        document_id = cursor.get_string(0)
        if document_id is None:
            raise ProviderUnavailableError("Provider returned a child row without a document id")
        return ChildEntry(
            document_id=DocumentId(document_id),
            mime_type=cursor.get_string(1) or "",
            flags=cursor.get_int(2),
            uri=build_document_uri_using_tree(self._tree, document_id),
            directory_mime_type=self._directory_mime_type,
        )

    def close(self) -> None:
        """Release the provider cursor. Further calls are no-ops."""
        cursor, self._cursor = self._cursor, None
        if cursor is not None:
            cursor.close()

    def __enter__(self) -> ChildEntryIterator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


def _parent_document_id(uri: DocumentUri) -> str:
    # A bare tree URI stands for the root document of its tree
    try:
        return uri.document_id
    except DocumentUriError:
        return uri.tree_id


def list_children(
    provider: ContentProvider,
    uri: DocumentUri,
    *,
    directory_mime_type: str | None = None,
) -> ChildEntryIterator:
    """List the direct children of a document within its tree.

    @public

    Args:
        provider: Content provider to query.
        uri: Tree document URI of the parent, as issued by the provider.
        directory_mime_type: Media type that marks an entry as a directory.
            Defaults to ``settings.directory_mime_type``.

    Returns:
        Iterator positioned at the first child. Empty when the document has
        no children.

    Raises:
        ProviderUnavailableError: If the provider returned no result set.
    """
    tree = resolve_tree(uri)
    children_uri = build_child_documents_uri_using_tree(tree, _parent_document_id(uri))
    logger.debug(f"Querying children of {uri}")

    cursor = provider.query(str(children_uri), list(CHILD_PROJECTION), "", [], "")
    if cursor is None:
        raise ProviderUnavailableError(f"Failed to query children of {uri}")

    try:
        has_row = cursor.move_to_first()
    except BaseException:
        cursor.close()
        raise
    return ChildEntryIterator(cursor, tree, has_row, directory_mime_type=directory_mime_type)
