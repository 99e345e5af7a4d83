"""Configuration settings for document tree navigation.

@public

Settings are loaded from environment variables with .env file support via
pydantic-settings. Every variable uses the ``DOCTREE_`` prefix.

Environment variables:
    DOCTREE_DIRECTORY_MIME_TYPE: MIME type the provider reports for directories
    DOCTREE_REGISTRY_NAME_COLUMN: Column holding entry names in the name registry

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from doctree_core.settings import settings
    >>> print(settings.directory_mime_type)
    vnd.android.document/directory

Note:
    Settings are loaded once at module import and frozen. Operations that
    read them also accept explicit overrides, which is what tests use.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DIRECTORY_MIME_TYPE = "vnd.android.document/directory"
CALENDAR_DISPLAY_NAME_COLUMN = "calendar_displayName"


class Settings(BaseSettings):
    """Configuration for provider-facing operations.

    @public

    Attributes:
        directory_mime_type: Reserved MIME type the provider reports for
                             directory documents. Compared for exact
                             equality when classifying entries.

        registry_name_column: Column of the name registry table that holds
                              the names checked for uniqueness.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    directory_mime_type: str = DIRECTORY_MIME_TYPE
    registry_name_column: str = CALENDAR_DISPLAY_NAME_COLUMN


settings = Settings()
"""Global settings instance used as the default by every operation.

@public
"""
