"""doctree-core - navigation layer over provider-issued document trees.

@public

Given an opaque document URI issued by an external content provider
(``content://{authority}/tree/{tree-id}/document/{doc-id}``), doctree-core
resolves it to its tree handle, lists children under it, classifies entries
as directories or files, joins encoded path segments onto it, and checks
candidate names against a registry before new items are created.

Every operation is synchronous, stateless and performs at most one provider
round-trip. Failures surface as typed exceptions from ``doctree_core.exceptions``.

Quick Start:
    >>> from doctree_core import DocumentUri, is_directory, join, list_children
    >>>
    >>> uri = DocumentUri.from_tree_uri(picked_uri)
    >>> if is_directory(provider, uri):
    ...     with list_children(provider, uri) as children:
    ...         names = [entry.file_name for entry in children]
    ...     target = join(uri, "My File.txt")

Environment Variables:
    - DOCTREE_DIRECTORY_MIME_TYPE: Media type reported for directories
    - DOCTREE_REGISTRY_NAME_COLUMN: Name column of the registry table
    - DOCTREE_LOG_LEVEL: Log level for doctree_core loggers
"""

from .documents import (
    Authority,
    DocumentId,
    DocumentUri,
    TreeHandle,
    TreeId,
    encode_segment,
    join,
    resolve_tree,
)
from .exceptions import (
    DocTreeCoreError,
    DocumentUriError,
    IndeterminateAnswerError,
    NativeFaultError,
    ProviderUnavailableError,
)
from .logging import LoggingConfig, get_pipeline_logger, setup_logging
from .native import NativeFault, NativeSuccess, call_native
from .provider import ContentProvider, Cursor, MemoryContentProvider, NameRegistry
from .registry import ProviderNameRegistry, is_name_unique
from .settings import Settings, settings
from .tree import (
    ChildEntry,
    ChildEntryIterator,
    DirectoryProbe,
    DocumentDirectory,
    ProbeStatus,
    is_directory,
    list_children,
    probe_directory,
)

__version__ = "0.1.0"

__all__ = [
    # Documents
    "Authority",
    "DocumentId",
    "DocumentUri",
    "TreeHandle",
    "TreeId",
    "encode_segment",
    "join",
    "resolve_tree",
    # Tree navigation
    "ChildEntry",
    "ChildEntryIterator",
    "DirectoryProbe",
    "DocumentDirectory",
    "ProbeStatus",
    "is_directory",
    "list_children",
    "probe_directory",
    # Provider
    "ContentProvider",
    "Cursor",
    "MemoryContentProvider",
    "NameRegistry",
    # Registry
    "ProviderNameRegistry",
    "is_name_unique",
    # Native boundary
    "NativeFault",
    "NativeSuccess",
    "call_native",
    # Errors
    "DocTreeCoreError",
    "DocumentUriError",
    "IndeterminateAnswerError",
    "NativeFaultError",
    "ProviderUnavailableError",
    # Config and logging
    "LoggingConfig",
    "Settings",
    "get_pipeline_logger",
    "settings",
    "setup_logging",
]
