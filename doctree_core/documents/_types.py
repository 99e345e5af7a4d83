"""Domain-specific types for provider document identifiers."""

from typing import NewType

Authority = NewType("Authority", str)
"""Namespace of the provider that issued a document URI (e.g. ``com.android.externalstorage.documents``)."""

TreeId = NewType("TreeId", str)
"""Identifier of the document tree a URI grants access to, e.g. ``primary:Calendars``."""

DocumentId = NewType("DocumentId", str)
"""Provider-specific identifier of a single document, e.g. ``primary:Calendars/work.ics``."""

__all__ = ["Authority", "DocumentId", "TreeId"]
