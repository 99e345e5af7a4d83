"""Document URIs and tree handles.

@public
"""

from ._types import Authority, DocumentId, TreeId
from .uri import (
    DocumentUri,
    TreeHandle,
    build_child_documents_uri_using_tree,
    build_document_uri_using_tree,
    build_tree_document_uri,
    encode_segment,
    file_stem,
    join,
    resolve_tree,
)

__all__ = [
    "Authority",
    "DocumentId",
    "DocumentUri",
    "TreeHandle",
    "TreeId",
    "build_child_documents_uri_using_tree",
    "build_document_uri_using_tree",
    "build_tree_document_uri",
    "encode_segment",
    "file_stem",
    "join",
    "resolve_tree",
]
