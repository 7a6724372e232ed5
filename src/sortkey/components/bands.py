"""Integer arithmetic across magnitude bands.

The integer part of a key is a fixed-width big-endian numeral in the digit
alphabet's base. When a carry or borrow runs out of the most significant
digit, the key moves to the adjacent sigil, whose band is one digit wider
or narrower.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from ..core.errors import KeyOverflowError, KeyUnderflowError

if TYPE_CHECKING:
    from ..core.keyset import KeySet
    from .parsed import ParsedKey

logger = logging.getLogger(__name__)


def increment_integer(keyset: KeySet, parsed: ParsedKey) -> ParsedKey:
    """Return ``parsed`` with its integer part increased by one.

    The fraction is carried over unchanged.

    Raises:
        KeyOverflowError: if the integer is at the maximum of the last band
    """
    digits = keyset.digits
    index = keyset.digit_index
    chars = list(parsed.integer)

    carry = True
    for i in range(len(chars) - 1, -1, -1):
        nxt = index[chars[i]] + 1
        if nxt == len(digits):
            chars[i] = digits[0]
        else:
            chars[i] = digits[nxt]
            carry = False
            break

    sigil = parsed.sigil
    if carry:
        if not sigil:
            raise KeyOverflowError()
        pos = keyset.sigil_index[sigil] + 1
        if pos == len(keyset.sigils):
            raise KeyOverflowError()

        sigil = keyset.sigils[pos]
        _resize(chars, keyset.band_width(sigil), digits[0])
        logger.debug(f"Band transition {parsed.sigil!r} -> {sigil!r}")

    return replace(parsed, sigil=sigil, integer="".join(chars))


def decrement_integer(keyset: KeySet, parsed: ParsedKey) -> ParsedKey:
    """Return ``parsed`` with its integer part decreased by one.

    The fraction is carried over unchanged.

    Raises:
        KeyUnderflowError: if the integer is at the minimum of the first band
    """
    digits = keyset.digits
    index = keyset.digit_index
    chars = list(parsed.integer)

    borrow = True
    for i in range(len(chars) - 1, -1, -1):
        prev = index[chars[i]] - 1
        if prev < 0:
            chars[i] = digits[-1]
        else:
            chars[i] = digits[prev]
            borrow = False
            break

    sigil = parsed.sigil
    if borrow:
        if not sigil:
            raise KeyUnderflowError()
        pos = keyset.sigil_index[sigil] - 1
        if pos < 0:
            raise KeyUnderflowError()

        sigil = keyset.sigils[pos]
        _resize(chars, keyset.band_width(sigil), digits[-1])
        logger.debug(f"Band transition {parsed.sigil!r} -> {sigil!r}")

    return replace(parsed, sigil=sigil, integer="".join(chars))


def _resize(chars: list[str], width: int, fill: str) -> None:
    """Fit a fully carried/borrowed integer into a band of ``width``.

    Every digit already equals ``fill``, so only the length changes.
    Adjacent bands differ in width by at most one.
    """
    n = len(chars) + 1
    if n < width:
        chars.append(fill)
    elif n > width:
        del chars[0]
