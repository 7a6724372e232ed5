"""sortkey - densely interleavable, lexicographically ordered string keys."""

from .components.parsed import ParsedKey
from .components.sequence import OrderedSequence
from .core.alphabets import ALPHA, BASE10, BASE62, BASE95, NO_VOWELS
from .core.config import KeySetConfig
from .core.errors import (
    SortKeyError,
    ConfigError,
    InvalidValueError,
    KeyOverflowError,
    KeyUnderflowError,
    OrderingError,
)
from .core.keyset import KeySet, new_keyset
from .core.types import SortKey

__all__ = [
    "ALPHA",
    "NO_VOWELS",
    "BASE10",
    "BASE62",
    "BASE95",
    "KeySetConfig",
    "SortKeyError",
    "ConfigError",
    "InvalidValueError",
    "KeyOverflowError",
    "KeyUnderflowError",
    "OrderingError",
    "KeySet",
    "new_keyset",
    "OrderedSequence",
    "ParsedKey",
    "SortKey",
]
