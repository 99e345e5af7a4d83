"""Uniqueness checks against an external name registry."""

from doctree_core.documents.uri import DocumentUri
from doctree_core.exceptions import IndeterminateAnswerError
from doctree_core.logging import get_pipeline_logger
from doctree_core.provider.protocol import ContentProvider, NameRegistry
from doctree_core.settings import settings

logger = get_pipeline_logger(__name__)


class ProviderNameRegistry:
    """NameRegistry backed by one query on a provider table.

    A name exists when the table has at least one row whose ``name_column``
    equals it. A provider that returns no result set yields None.
    """

    def __init__(
        self,
        provider: ContentProvider,
        registry_uri: DocumentUri | str,
        *,
        name_column: str | None = None,
    ) -> None:
        self.provider = provider
        self.registry_uri = str(registry_uri)
        self.name_column = name_column or settings.registry_name_column

    def check_name_exists(self, name: str) -> bool | None:
        cursor = self.provider.query(
            self.registry_uri,
            [self.name_column],
            f"{self.name_column} = ?",
            [name],
            "",
        )
        if cursor is None:
            return None
        try:
            return cursor.move_to_first()
        finally:
            cursor.close()


def is_name_unique(registry: NameRegistry, name: str) -> bool:
    """Check that no registry entry already uses ``name``.

    @public

    Args:
        registry: Registry consulted with a single lookup.
        name: Candidate name.

    Returns:
        True if the name is free.

    Raises:
        IndeterminateAnswerError: If the registry could not tell whether the name exists.
    """
    exists = registry.check_name_exists(name)
    if exists is None:
        raise IndeterminateAnswerError(f"Failed to check whether {name!r} is already in use")
    logger.debug(f"Name {name!r} {'is taken' if exists else 'is free'}")
    return not exists
