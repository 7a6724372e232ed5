"""KeySet - alphabet configuration and the public ``between`` operation.

Orchestrates parsing, band arithmetic and fractional midpoints.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .config import KeySetConfig
from .errors import ConfigError, InvalidValueError, KeyUnderflowError, OrderingError
from .types import SortKey
from ..components.bands import decrement_integer, increment_integer
from ..components.midpoint import midpoint
from ..components.parsed import ParsedKey

logger = logging.getLogger(__name__)


def _validate_alphabet(symbols: str, kind: str) -> None:
    """Check that ``symbols`` is strictly increasing ASCII."""
    prev = None
    for ch in symbols:
        if ord(ch) >= 128:
            raise ConfigError(f"non-ascii {kind}: {ch!r}")
        if prev is not None and prev >= ch:
            raise ConfigError(f"unsorted {kind}: {ch!r}")
        prev = ch


def validate_digits(digits: str) -> None:
    """Raise ConfigError unless ``digits`` is 2+ increasing ASCII symbols."""
    if len(digits) < 2:
        raise ConfigError("too few digits")
    _validate_alphabet(digits, "digit")


def validate_sigils(sigils: str) -> None:
    """Raise ConfigError unless ``sigils`` is increasing ASCII; empty is allowed."""
    _validate_alphabet(sigils, "sigil")


class KeySet:
    """Immutable key space built from a sigil alphabet and a digit alphabet.

    Args:
        sigils: Band markers in increasing byte order; may be empty
        digits: Digit alphabet in increasing byte order, at least two symbols

    Public API:
        - between(a, b): key strictly between a and b ("" = open bound)
        - between_n(a, b, n): n increasing keys strictly between a and b
        - parse(key): decompose a key into sigil, integer and fraction
        - is_valid(key): whether parse accepts a key

    Invariants:
        - Band width is smallest (2) at the middle sigil and grows by one
          per step away from it in either direction
        - Produced keys never end their fraction in the smallest digit
        - Nothing is mutated after construction
    """

    __slots__ = (
        "_sigils",
        "_digits",
        "_digit_index",
        "_sigil_index",
        "_band_width",
        "_smallest",
        "_zero",
    )

    def __init__(self, sigils: str, digits: str):
        validate_sigils(sigils)
        validate_digits(digits)

        self._sigils = sigils
        self._digits = digits
        self._digit_index = MappingProxyType({d: i for i, d in enumerate(digits)})
        self._sigil_index = MappingProxyType({s: i for i, s in enumerate(sigils)})

        middle = len(sigils) // 2
        widths = {}
        for i, sigil in enumerate(sigils):
            if i < middle:
                widths[sigil] = middle - i + 1
            else:
                widths[sigil] = 2 + i - middle
        self._band_width = MappingProxyType(widths)

        if sigils:
            first = sigils[0]
            self._smallest = first + digits[0] * (widths[first] - 1)
            self._zero = sigils[middle] + digits[0]
        else:
            self._smallest = digits[0]
            self._zero = digits[0]

        logger.debug(
            f"Initialized KeySet: {len(sigils)} sigils, base {len(digits)}, "
            f"zero={self._zero!r}, smallest={self._smallest!r}"
        )

    @classmethod
    def from_config(cls, config: KeySetConfig) -> KeySet:
        return cls(config.sigils, config.digits)

    def __setattr__(self, name, value):
        if hasattr(self, "_zero"):
            raise AttributeError("KeySet is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"KeySet(sigils={self._sigils!r}, digits={self._digits!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeySet):
            return NotImplemented
        return (self._sigils, self._digits) == (other._sigils, other._digits)

    def __hash__(self) -> int:
        return hash((self._sigils, self._digits))

    @property
    def sigils(self) -> str:
        return self._sigils

    @property
    def digits(self) -> str:
        return self._digits

    @property
    def digit_index(self) -> Mapping[str, int]:
        return self._digit_index

    @property
    def sigil_index(self) -> Mapping[str, int]:
        return self._sigil_index

    @property
    def zero(self) -> SortKey:
        """Key returned by ``between("", "")``."""
        return self._zero

    @property
    def smallest(self) -> SortKey:
        """Smallest sigil and integer; nothing sorts below it but its own fractions."""
        return self._smallest

    def band_width(self, sigil: str) -> int:
        """Return the encoded length of sigil plus integer for ``sigil``'s band.

        With no sigils configured the single implicit band has one digit.
        """
        if not self._sigils:
            return 1
        return self._band_width[sigil]

    def parse(self, key: SortKey) -> ParsedKey:
        """Decompose ``key`` into sigil, integer and fraction.

        Raises:
            InvalidValueError: if the key is empty, too short for its band,
                uses an unknown sigil or digit, or ends in a trailing zero
        """
        if not key:
            raise InvalidValueError(f"sortkey too short: {key!r}")

        if self._sigils:
            sigil = key[0]
            n = self._band_width.get(sigil)
            if n is None:
                raise InvalidValueError(f"invalid sigil: {sigil!r}")
            if len(key) < n:
                raise InvalidValueError(f"sortkey too short: {key!r}")
            parsed = ParsedKey(sigil, key[1:n], key[n:])
        else:
            parsed = ParsedKey("", key[:1], key[1:])

        for ch in parsed.integer:
            if ch not in self._digit_index:
                raise InvalidValueError(f"invalid integer part: {parsed.integer!r}")
        for ch in parsed.fraction:
            if ch not in self._digit_index:
                raise InvalidValueError(f"invalid fractional part: {parsed.fraction!r}")
        if parsed.fraction.endswith(self._digits[0]):
            raise InvalidValueError(f"trailing zero: {self._digits[0]!r}")
        return parsed

    def is_valid(self, key: SortKey) -> bool:
        try:
            self.parse(key)
        except InvalidValueError:
            return False
        return True

    def between(self, a: SortKey, b: SortKey) -> SortKey:
        """Return a key strictly between ``a`` and ``b``.

        An empty ``a`` means no lower bound; an empty ``b`` means no upper
        bound.

        Raises:
            InvalidValueError: if either key is malformed
            KeyOverflowError: if no band above ``a`` exists
            KeyUnderflowError: if nothing below ``b`` exists
            OrderingError: if both keys are given and ``a >= b``
        """
        if not a:
            if not b:
                return self._zero
            return self._before(self.parse(b)).value()

        pa = self.parse(a)
        if not b:
            return increment_integer(self, pa.integer_only()).value()

        pb = self.parse(b)
        if pa >= pb:
            raise OrderingError(f"improperly ordered: {a!r} >= {b!r}")

        if pa.sigil == pb.sigil and pa.integer == pb.integer:
            pa.fraction = midpoint(self, pa.fraction, pb.fraction)
            return pa.value()

        ai = increment_integer(self, pa.integer_only())
        if ai < pb:
            return ai.value()

        # Advancing the integer would reach b; extend a's fraction instead
        pa.fraction = midpoint(self, pa.fraction, "")
        return pa.value()

    def _before(self, pb: ParsedKey) -> ParsedKey:
        if pb.sigil + pb.integer == self._smallest:
            # The integer cannot go lower, so descend through the fraction.
            # TODO: raise KeyUnderflowError here as well instead of growing
            # the fraction of the smallest band downward.
            if not pb.fraction:
                raise KeyUnderflowError()
            pb.fraction = midpoint(self, "", pb.fraction)
            return pb
        if pb.fraction:
            return pb.integer_only()
        return decrement_integer(self, pb)

    def between_n(self, a: SortKey, b: SortKey, n: int) -> list[SortKey]:
        """Return ``n`` increasing keys strictly between ``a`` and ``b``.

        Bounded ranges are filled by bisection so keys stay short; open
        ranges are filled by successive appends or prepends.
        """
        if n <= 0:
            return []
        if a and b:
            mid = self.between(a, b)
            left = (n - 1) // 2
            return (
                self.between_n(a, mid, left)
                + [mid]
                + self.between_n(mid, b, n - 1 - left)
            )
        if b:
            keys = []
            upper = b
            for _ in range(n):
                upper = self.between("", upper)
                keys.append(upper)
            keys.reverse()
            return keys

        keys = []
        lower = a
        for _ in range(n):
            lower = self.between(lower, "")
            keys.append(lower)
        return keys


def new_keyset(sigils: str, digits: str) -> KeySet:
    """Build a KeySet, raising ConfigError for invalid alphabets."""
    return KeySet(sigils, digits)
