"""In-memory ordered sequence keyed by SortKey.

Uses sortedcontainers.SortedDict so keys stay in byte order and neighbours
are found by bisection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sortedcontainers import SortedDict

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.keyset import KeySet
    from ..core.types import SortKey

logger = logging.getLogger(__name__)


class OrderedSequence:
    """Ordered list that never renumbers existing items.

    Each insert asks the KeySet for a key between the new item's neighbours.

    Args:
        keyset: KeySet used to generate keys
        long_key_warning: Key length above which inserts log a warning

    Invariants:
        - Iteration order equals byte order of keys
        - Existing keys are never changed by an insert
    """

    def __init__(self, keyset: KeySet, long_key_warning: int = 64):
        self.keyset = keyset
        self.long_key_warning = long_key_warning
        self._data: SortedDict = SortedDict()

    def _insert(self, lower: SortKey, upper: SortKey, value: Any) -> SortKey:
        key = self.keyset.between(lower, upper)
        self._data[key] = value
        logger.debug(f"Inserted {key!r} between {lower!r} and {upper!r}")
        if len(key) > self.long_key_warning:
            logger.warning(
                f"Key {key!r} is {len(key)} characters long; "
                f"repeated inserts at one position keep growing keys"
            )
        return key

    def _require(self, key: SortKey) -> int:
        if key not in self._data:
            raise KeyError(key)
        return self._data.index(key)

    def append(self, value: Any) -> SortKey:
        """Insert value after the last item and return its key."""
        lower = self._data.peekitem(-1)[0] if self._data else ""
        return self._insert(lower, "", value)

    def prepend(self, value: Any) -> SortKey:
        """Insert value before the first item and return its key."""
        upper = self._data.peekitem(0)[0] if self._data else ""
        return self._insert("", upper, value)

    def insert_after(self, key: SortKey, value: Any) -> SortKey:
        """Insert value directly after key and return the new key."""
        pos = self._require(key)
        upper = self._data.peekitem(pos + 1)[0] if pos + 1 < len(self._data) else ""
        return self._insert(key, upper, value)

    def insert_before(self, key: SortKey, value: Any) -> SortKey:
        """Insert value directly before key and return the new key."""
        pos = self._require(key)
        lower = self._data.peekitem(pos - 1)[0] if pos > 0 else ""
        return self._insert(lower, key, value)

    def get(self, key: SortKey, default: Any = None) -> Any:
        return self._data.get(key, default)

    def remove(self, key: SortKey) -> Any:
        """Remove key and return its value."""
        self._require(key)
        return self._data.pop(key)

    def first(self) -> tuple[SortKey, Any] | None:
        return self._data.peekitem(0) if self._data else None

    def last(self) -> tuple[SortKey, Any] | None:
        return self._data.peekitem(-1) if self._data else None

    def keys(self) -> Iterator[SortKey]:
        """Iterate keys in order."""
        yield from self._data.keys()

    def values(self) -> Iterator[Any]:
        yield from self._data.values()

    def items(self) -> Iterator[tuple[SortKey, Any]]:
        """Iterate (key, value) pairs in key order."""
        yield from self._data.items()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return self.values()

    def __contains__(self, key: SortKey) -> bool:
        return key in self._data
