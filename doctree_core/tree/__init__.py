"""Tree navigation: children enumeration, classification and directory handles.

@public
"""

from .children import ChildEntry, ChildEntryIterator, list_children
from .classify import DirectoryProbe, ProbeStatus, is_directory, probe_directory
from .directory import DocumentDirectory

__all__ = [
    "ChildEntry",
    "ChildEntryIterator",
    "DirectoryProbe",
    "DocumentDirectory",
    "ProbeStatus",
    "is_directory",
    "list_children",
    "probe_directory",
]
