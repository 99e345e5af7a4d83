"""Provider-side protocols consumed by the navigation layer.

Defines the query interface of a content provider, the positioned result set
it returns, and the name registry used for uniqueness checks. The navigation
layer never writes through any of them.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Cursor(Protocol):
    """Positioned result set returned by a provider query.

    Implementations: MemoryCursor (testing), or an adapter over a platform cursor.
    """

    def move_to_first(self) -> bool:
        """Move to the first row. Returns False if the result set is empty."""
        ...

    def move_to_next(self) -> bool:
        """Move to the next row. Returns False when past the last row."""
        ...

    def get_string(self, column_index: int) -> str | None:
        """Read a text column of the current row."""
        ...

    def get_int(self, column_index: int) -> int:
        """Read an integer column of the current row."""
        ...

    def get_count(self) -> int:
        """Number of rows in the result set."""
        ...

    def close(self) -> None:
        """Release the provider resource held by this cursor."""
        ...


@runtime_checkable
class ContentProvider(Protocol):
    """Query interface of an external content provider.

    Implementations: MemoryContentProvider (testing), or an adapter over a
    platform content resolver.
    """

    def query(
        self,
        uri: str,
        projection: list[str],
        selection: str,
        selection_args: list[str],
        sort_order: str,
    ) -> Cursor | None:
        """Run one query. Returns None when the provider produced no result set."""
        ...


@runtime_checkable
class NameRegistry(Protocol):
    """External registry of names already in use."""

    def check_name_exists(self, name: str) -> bool | None:
        """Return True if an entry already uses ``name``, None if that cannot be determined."""
        ...
