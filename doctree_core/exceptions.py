"""Exception hierarchy for doctree-core.

This module defines the exception hierarchy used throughout the doctree-core library.
All exceptions inherit from DocTreeCoreError, providing a consistent error handling interface.
"""


class DocTreeCoreError(Exception):
    """Base exception for all doctree-core errors."""


class ProviderUnavailableError(DocTreeCoreError):
    """Raised when a provider query that should return a result set returned none."""


class IndeterminateAnswerError(DocTreeCoreError):
    """Raised when a boolean external check could not produce a definite answer."""


class DocumentUriError(DocTreeCoreError, ValueError):
    """Raised when a document URI does not have the shape the provider issues."""


class NativeFaultError(DocTreeCoreError):
    """Raised when the native library faults while serving a call.

    Attributes:
        message: Diagnostic message recovered from the fault, if any.
    """

    DEFAULT_MESSAGE = "native library panicked, but no panic data could be obtained"

    def __init__(self, message: str | None = None):
        self.message = message
        super().__init__(message or self.DEFAULT_MESSAGE)
