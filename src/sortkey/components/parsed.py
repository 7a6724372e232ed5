"""Parsed representation of a sort key.

A key is ``sigil + integer + fraction``. The sigil is empty when the
KeySet has no sigil alphabet.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.types import SortKey


@dataclass(order=True)
class ParsedKey:
    """Scratch decomposition of a key used while computing a neighbour.

    Field order matters: comparison runs sigil, then integer, then fraction,
    which matches byte order of the serialized key because every integer in
    a band has the same width.

    Invariants:
        - len(integer) is fixed by the sigil's band width
        - fraction never ends in the smallest digit
    """

    sigil: str
    integer: str
    fraction: str = ""

    def integer_only(self) -> ParsedKey:
        """Return a copy without the fractional part."""
        return replace(self, fraction="")

    def value(self) -> SortKey:
        return self.sigil + self.integer + self.fraction

    def __str__(self) -> str:
        return self.value()
