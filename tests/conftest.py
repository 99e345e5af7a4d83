"""Common fixtures: an in-memory provider holding a small document tree.

Tree layout (authority ``com.example.docs``, tree id ``root``)::

    root/
        sub/
            notes.txt
        work.ics
        .hidden
        empty/
"""

import logging
from collections.abc import Iterator

import pytest

from doctree_core.documents.uri import DocumentUri
from doctree_core.logging.logging_config import PACKAGE_LOGGER
from doctree_core.provider.memory import MemoryContentProvider

AUTHORITY = "com.example.docs"
TREE_ID = "root"


@pytest.fixture
def provider() -> MemoryContentProvider:
    provider = MemoryContentProvider(AUTHORITY)
    provider.add_directory("root")
    provider.add_directory("root/sub", parent_id="root", flags=0x8)
    provider.add_document("root/sub/notes.txt", "text/plain", parent_id="root/sub", flags=0x2)
    provider.add_document("root/work.ics", "text/calendar", parent_id="root", flags=0x6)
    provider.add_document("root/.hidden", "application/octet-stream", parent_id="root")
    provider.add_directory("root/empty", parent_id="root")
    return provider


@pytest.fixture
def root_uri(provider: MemoryContentProvider) -> DocumentUri:
    return provider.document_uri(TREE_ID, "root")


@pytest.fixture
def sub_uri(provider: MemoryContentProvider) -> DocumentUri:
    return provider.document_uri(TREE_ID, "root/sub")


@pytest.fixture
def package_logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """caplog wired to the package logger, which does not propagate to root."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
