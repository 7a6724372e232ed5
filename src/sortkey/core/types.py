"""Common type definitions for sortkey.

Defines fundamental types used across all components.
"""

from __future__ import annotations

# Keys are ASCII strings; str ordering matches byte ordering for ASCII
SortKey = str
