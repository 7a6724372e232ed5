"""Fractional midpoint between two digit sequences.

Sequences compare as if right-padded with the smallest digit to infinite
length. An empty upper bound means unbounded above.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.errors import OrderingError

if TYPE_CHECKING:
    from ..core.keyset import KeySet


def midpoint(keyset: KeySet, a: str, b: str) -> str:
    """Return the shortest digit sequence strictly between ``a`` and ``b``.

    Args:
        keyset: KeySet supplying the digit alphabet
        a: Lower bound; empty means the integer boundary itself
        b: Upper bound; empty means unbounded

    Raises:
        OrderingError: if ``b`` is non-empty and ``a >= b``
    """
    zero = keyset.digits[0]
    if b:
        width = max(len(a), len(b))
        if a.ljust(width, zero) >= b.ljust(width, zero):
            raise OrderingError(f"improperly ordered: {a!r} >= {b!r}")

    # Any midpoint starts with the prefix a and b share
    n = 0
    while n < len(b):
        ca = a[n] if n < len(a) else zero
        if ca != b[n]:
            break
        n += 1

    return b[:n] + _suffix(keyset, a[n:], b[n:])


def _suffix(keyset: KeySet, a: str, b: str) -> str:
    digits = keyset.digits
    index = keyset.digit_index
    out: list[str] = []
    while True:
        digit_a = index[a[0]] if a else 0
        digit_b = index[b[0]] if b else len(digits)

        if digit_b - digit_a > 1:
            # Round half away from zero; both operands are non-negative
            out.append(digits[(digit_a + digit_b + 1) // 2])
            return "".join(out)

        if len(b) > 1:
            out.append(b[0])
            return "".join(out)

        out.append(digits[digit_a])
        a = a[1:]
        b = ""
