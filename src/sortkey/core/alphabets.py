"""Predefined alphabets for sigils and digits.

Every alphabet is printable ASCII and strictly increasing by byte value.
"""

from __future__ import annotations

# Sigil alphabets
ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
NO_VOWELS = "BCDFGHJKLMNPQRSTVWXZbcdfghjklmnpqrstvwxz"

# Digit alphabets
BASE10 = "0123456789"
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE95 = "".join(chr(c) for c in range(ord(" "), ord("~") + 1))
