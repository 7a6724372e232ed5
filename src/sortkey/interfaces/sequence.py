"""Protocol definition for ordered sequences keyed by SortKey."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import SortKey


class KeyedSequence(Protocol):
    """Ordered collection whose positions are SortKeys."""

    def append(self, value: Any) -> SortKey:
        """Insert value after the last item and return its key."""
        ...

    def prepend(self, value: Any) -> SortKey:
        """Insert value before the first item and return its key."""
        ...

    def insert_after(self, key: SortKey, value: Any) -> SortKey:
        """Insert value directly after key and return the new key."""
        ...

    def insert_before(self, key: SortKey, value: Any) -> SortKey:
        """Insert value directly before key and return the new key."""
        ...

    def remove(self, key: SortKey) -> Any:
        """Remove key and return its value."""
        ...

    def keys(self) -> Iterator[SortKey]:
        """Iterate keys in order."""
        ...
