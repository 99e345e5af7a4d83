"""Directory classification of a single document.

@public

``probe_directory`` reports exactly what happened during the single-document
query as a tagged ``DirectoryProbe``. ``is_directory`` collapses that into a
boolean with one deliberate asymmetry: a query that raises counts as "not a
directory", while a query that returns no result set is a hard failure.
"""

from dataclasses import dataclass
from enum import StrEnum

from doctree_core.documents.uri import DocumentUri
from doctree_core.exceptions import ProviderUnavailableError
from doctree_core.logging import get_pipeline_logger
from doctree_core.provider.columns import MIME_TYPE_PROJECTION
from doctree_core.provider.protocol import ContentProvider
from doctree_core.settings import settings

logger = get_pipeline_logger(__name__)


class ProbeStatus(StrEnum):
    """Outcome of a directory probe."""

    DIRECTORY = "directory"
    NOT_DIRECTORY = "not_directory"
    EMPTY = "empty"
    NO_RESULT = "no_result"
    QUERY_FAILED = "query_failed"


@dataclass(frozen=True, slots=True)
class DirectoryProbe:
    """Tagged result of a single-document media type query.

    @public

    Attributes:
        status: What the query produced.
        mime_type: Media type of the first row, when one was read.
        error: Message of the exception raised by the query, for QUERY_FAILED.
    """

    status: ProbeStatus
    mime_type: str | None = None
    error: str | None = None


def probe_directory(
    provider: ContentProvider,
    uri: DocumentUri,
    *,
    directory_mime_type: str | None = None,
) -> DirectoryProbe:
    """Query the media type of ``uri`` and compare it to the directory media type.

    @public

    Never raises for provider failures; they are reported in the result.
    """
    dir_mime = settings.directory_mime_type if directory_mime_type is None else directory_mime_type
    logger.debug(f"Querying media type of {uri}")
    try:
        cursor = provider.query(str(uri), list(MIME_TYPE_PROJECTION), "", [], "")
        if cursor is None:
            return DirectoryProbe(ProbeStatus.NO_RESULT)
        try:
            if not cursor.move_to_first():
                return DirectoryProbe(ProbeStatus.EMPTY)
            mime_type = cursor.get_string(0)
        finally:
            cursor.close()
    except Exception as e:
        return DirectoryProbe(ProbeStatus.QUERY_FAILED, error=str(e) or type(e).__name__)

    status = ProbeStatus.DIRECTORY if mime_type == dir_mime else ProbeStatus.NOT_DIRECTORY
    return DirectoryProbe(status, mime_type=mime_type)


def is_directory(
    provider: ContentProvider,
    uri: DocumentUri,
    *,
    directory_mime_type: str | None = None,
) -> bool:
    """Check whether ``uri`` denotes a directory.

    @public

    Returns False when the query raises or the result set is empty.

    Raises:
        ProviderUnavailableError: If the provider returned no result set.
    """
    probe = probe_directory(provider, uri, directory_mime_type=directory_mime_type)
    if probe.status is ProbeStatus.NO_RESULT:
        raise ProviderUnavailableError(f"Provider returned no result for {uri}")
    if probe.status is ProbeStatus.QUERY_FAILED:
        logger.warning(f"Could not classify {uri}, treating it as a file: {probe.error}")
        return False
    return probe.status is ProbeStatus.DIRECTORY
