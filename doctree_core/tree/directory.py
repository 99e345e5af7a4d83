"""Directory handle over a provider document tree.

@public

Reads only: listing entries, looking names up and composing child URIs.
Creating or opening documents is left to the caller.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from doctree_core.documents.uri import DocumentUri, join
from doctree_core.provider.protocol import ContentProvider
from doctree_core.tree.children import ChildEntry, ChildEntryIterator, list_children
from doctree_core.tree.classify import is_directory


class DocumentDirectory:
    """A directory in a provider's document tree.

    @public

    Example:
        >>> directory = DocumentDirectory.open(provider, uri)
        >>> if directory is not None and not directory.file_exists("work.ics"):
        ...     target = directory.child_uri("work.ics")
    """

    def __init__(
        self,
        provider: ContentProvider,
        uri: DocumentUri,
        *,
        directory_mime_type: str | None = None,
    ) -> None:
        """Wrap ``uri`` without checking that it is a directory. Prefer ``open``.

        ``directory_mime_type`` overrides ``settings.directory_mime_type`` for
        every classification made through this handle and its subdirectories.
        """
        self.provider = provider
        self.uri = uri
        self.directory_mime_type = directory_mime_type

    @classmethod
    def open(
        cls,
        provider: ContentProvider,
        uri: DocumentUri,
        *,
        directory_mime_type: str | None = None,
    ) -> DocumentDirectory | None:
        """Return a handle for ``uri``, or None if it is not a directory.

        Raises:
            ProviderUnavailableError: If the provider returned no result set.
        """
        if not is_directory(provider, uri, directory_mime_type=directory_mime_type):
            return None
        return cls(provider, uri, directory_mime_type=directory_mime_type)

    def _children(self) -> ChildEntryIterator:
        return list_children(self.provider, self.uri, directory_mime_type=self.directory_mime_type)

    def entries(self) -> list[ChildEntry]:
        """All direct children, in provider order."""
        with self._children() as children:
            return list(children)

    def find(self, name: str) -> ChildEntry | None:
        """First child whose file name is ``name``."""
        with self._children() as children:
            for entry in children:
                if entry.file_name == name:
                    return entry
        return None

    def file_exists(self, name: str) -> bool:
        return self.find(name) is not None

    def subdirectory(self, name: str) -> DocumentDirectory | None:
        """Handle for the child directory ``name``, or None if there is no such child.

        Raises:
            NotADirectoryError: If the child exists but is a file.
        """
        entry = self.find(name)
        if entry is None:
            return None
        if not entry.is_dir:
            raise NotADirectoryError(f"A file named {name!r} already exists, and is not a directory")
        return DocumentDirectory(self.provider, entry.uri, directory_mime_type=self.directory_mime_type)

    def child_uri(self, path: str) -> DocumentUri:
        """URI of ``path`` appended to this directory's URI as one encoded segment.

        Raises:
            ValueError: If ``path`` is empty or absolute.
        """
        if not path:
            raise ValueError("Path must not be empty")
        if PurePosixPath(path).is_absolute():
            raise ValueError("Path argument must be a relative path; provided absolute path")
        return join(self.uri, path)

    def __repr__(self) -> str:
        return f"DocumentDirectory({str(self.uri)!r})"
