"""Document URIs, tree handles and path composition.

@public

A document URI has the textual form ``content://{authority}{path}`` where the
path follows the provider's convention ``/tree/{tree-id}/document/{doc-id}``
(tree-scoped access) or ``/document/{doc-id}`` (single document). Identifiers
inside the path are percent-encoded; ``DocumentUri`` keeps the encoded path
verbatim so that the textual form round-trips exactly.

Example:
    >>> uri = DocumentUri.from_tree_uri(
    ...     "content://com.example.docs/tree/root/document/root%2Fsub"
    ... )
    >>> resolve_tree(uri)
    TreeHandle(authority='com.example.docs', tree_id='root')
    >>> str(join(uri, "My File.txt"))
    'content://com.example.docs/tree/root/document/root%2Fsub/My%20File.txt'
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, unquote, urlsplit

from doctree_core.documents._types import Authority, DocumentId, TreeId
from doctree_core.exceptions import DocumentUriError

CONTENT_SCHEME = "content"

# Characters left as-is besides ASCII letters, digits and "_.-~"
_UNRESERVED_MARKS = "!'()*"


def encode_segment(segment: str) -> str:
    """Percent-encode a path segment over its UTF-8 bytes.

    @public

    Every character outside ``A-Z a-z 0-9 _ - ! . ~ ' ( ) *`` is escaped,
    including ``/``, so the result is always a single path component.

    Args:
        segment: Arbitrary text.

    Returns:
        The encoded segment. Deterministic; unreserved text is returned unchanged.
    """
    try:
        return quote(segment, safe=_UNRESERVED_MARKS, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise AssertionError(f"Text could not be encoded as UTF-8: {segment!r}") from e


def doc_path_file_name(document_id: str) -> str:
    """Get the file name out of a document id.

    Takes the part after the last ``/``. Single-component ids such as
    ``primary:Calendars`` have their volume prefix stripped instead.
    """
    if "/" in document_id:
        return document_id.rsplit("/", 1)[1]
    if ":" in document_id:
        return document_id.split(":", 1)[1]
    return document_id


def file_stem(file_name: str) -> str:
    """Get the file name without its extension.

    A leading ``.`` is not treated as an extension separator.

    Examples:
        >>> file_stem("work.ics")
        'work'
        >>> file_stem(".hidden")
        '.hidden'
        >>> file_stem("archive.tar.gz")
        'archive.tar'
    """
    stripped = file_name[1:] if file_name.startswith(".") else file_name
    stem, dot, _ = stripped.rpartition(".")
    if not dot:
        return file_name
    return stem


@dataclass(frozen=True, slots=True)
class DocumentUri:
    """Immutable reference to a document issued by a content provider.

    @public

    Attributes:
        authority: Namespace of the provider.
        path: Percent-encoded path, starting with ``/``.

    Having a valid URI does not mean the document exists.
    """

    authority: Authority
    path: str

    @classmethod
    def parse(cls, text: str) -> DocumentUri:
        """Parse any ``content://`` URI with an authority.

        Raises:
            DocumentUriError: If the scheme is not ``content``, the authority
                is missing, or the URI carries a query or fragment.
        """
        parts = urlsplit(text)
        if parts.scheme != CONTENT_SCHEME:
            raise DocumentUriError(f"Unsupported scheme in document URI: {text!r}")
        if not parts.netloc:
            raise DocumentUriError(f"Document URI has no authority: {text!r}")
        if parts.query or parts.fragment:
            raise DocumentUriError(f"Document URI must not have a query or fragment: {text!r}")
        return cls(Authority(parts.netloc), parts.path)

    @classmethod
    def from_tree_uri(cls, text: str) -> DocumentUri:
        """Parse a URI with access to a document tree and a document within it.

        The path must start with ``/tree/{tree-id}/document/{doc-id}``.

        Raises:
            DocumentUriError: If the URI is not a tree document URI.
        """
        uri = cls.parse(text)
        segments = uri.segments
        if not segments or segments[0] != "tree":
            raise DocumentUriError("Document URI must have a document tree")
        if len(segments) < 2:
            raise DocumentUriError("Document URI has a document tree, but no value for it")
        if len(segments) < 3 or segments[2] != "document":
            raise DocumentUriError("Document URI must have a document path")
        if len(segments) < 4:
            raise DocumentUriError("Document URI has a document path, but no value for it")
        return uri

    @classmethod
    def from_doc_uri(cls, text: str) -> DocumentUri:
        """Parse a URI that only has a document path (``/document/{doc-id}``).

        Raises:
            DocumentUriError: If the URI is not a single document URI.
        """
        uri = cls.parse(text)
        segments = uri.segments
        if not segments or segments[0] != "document":
            raise DocumentUriError("Document URI must have a document path")
        if len(segments) < 2:
            raise DocumentUriError("Document URI has a document path, but no value for it")
        return uri

    @property
    def segments(self) -> list[str]:
        """Decoded path segments; empty segments are skipped."""
        return [unquote(s) for s in self.path.split("/") if s]

    @property
    def is_tree_uri(self) -> bool:
        segments = self.segments
        return len(segments) >= 2 and segments[0] == "tree"

    @property
    def tree_id(self) -> TreeId:
        """Tree id embedded in a ``/tree/{tree-id}/...`` URI.

        Raises:
            DocumentUriError: If the URI has no tree segment.
        """
        segments = self.segments
        if len(segments) >= 2 and segments[0] == "tree":
            return TreeId(segments[1])
        raise DocumentUriError(f"Document URI has no document tree: {self}")

    @property
    def document_id(self) -> DocumentId:
        """Document id of a single document or tree document URI.

        Raises:
            DocumentUriError: If the URI has no document segment.
        """
        segments = self.segments
        if len(segments) >= 2 and segments[0] == "document":
            return DocumentId(segments[1])
        if len(segments) >= 4 and segments[0] == "tree" and segments[2] == "document":
            return DocumentId(segments[3])
        raise DocumentUriError(f"Document URI has no document path: {self}")

    @property
    def last_path_segment(self) -> str | None:
        segments = self.segments
        return segments[-1] if segments else None

    @property
    def file_name(self) -> str:
        """Name of the file or directory this URI points at."""
        last = self.last_path_segment
        if last is None:
            raise DocumentUriError(f"Document URI has an empty path: {self}")
        return doc_path_file_name(last)

    @property
    def file_stem(self) -> str:
        return file_stem(self.file_name)

    def __str__(self) -> str:
        return f"{CONTENT_SCHEME}://{self.authority}{self.path}"


@dataclass(frozen=True, slots=True)
class TreeHandle:
    """Canonical root-of-tree form of a document URI.

    @public

    Scopes every children query. Derived with ``resolve_tree``; never stored.
    """

    authority: Authority
    tree_id: TreeId

    def as_uri(self) -> DocumentUri:
        """Render ``content://{authority}/tree/{tree-id}``."""
        return build_tree_document_uri(self.authority, self.tree_id)


def resolve_tree(uri: DocumentUri) -> TreeHandle:
    """Derive the tree handle of any document URI belonging to that tree.

    @public

    Pure and total for URIs obtained from the provider. The shape of other
    URIs is not validated here; a URI without a tree segment raises
    ``DocumentUriError`` but callers must not rely on that.
    """
    return TreeHandle(uri.authority, uri.tree_id)


def build_tree_document_uri(authority: Authority, tree_id: str) -> DocumentUri:
    """Build ``content://{authority}/tree/{tree-id}``."""
    return DocumentUri(authority, f"/tree/{encode_segment(tree_id)}")


def build_document_uri_using_tree(tree: TreeHandle, document_id: str) -> DocumentUri:
    """Build the URI of a document inside a tree, keeping the tree's access grant."""
    return DocumentUri(
        tree.authority,
        f"{tree.as_uri().path}/document/{encode_segment(document_id)}",
    )


def build_child_documents_uri_using_tree(tree: TreeHandle, parent_document_id: str) -> DocumentUri:
    """Build the URI that lists the children of a document inside a tree."""
    parent = build_document_uri_using_tree(tree, parent_document_id)
    return DocumentUri(tree.authority, f"{parent.path}/children")


def join(uri: DocumentUri, segment: str) -> DocumentUri:
    """Append an encoded path segment to a document URI.

    @public

    The result's textual form is ``str(uri) + "/" + encode_segment(segment)``.
    This is a raw textual append: ``"a/b"`` becomes the single component
    ``a%2Fb``, and nothing checks that ``uri`` denotes a directory.
    """
    return DocumentUri.parse(f"{uri}/{encode_segment(segment)}")
