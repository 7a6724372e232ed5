"""Configuration for sortkey.

Defines the alphabets a KeySet is built from, optionally loaded from TOML.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from .alphabets import ALPHA, BASE62
from .errors import ConfigError


@dataclass
class KeySetConfig:
    """Configuration parameters for a KeySet.

    Attributes:
        sigils: Band markers, strictly increasing ASCII (may be empty)
        digits: Digit alphabet, strictly increasing ASCII, at least 2 symbols
        long_key_warning: Key length above which OrderedSequence logs a warning
    """

    sigils: str = ALPHA
    digits: str = BASE62
    long_key_warning: int = 64

    @classmethod
    def from_toml(cls, path: Path) -> KeySetConfig:
        """Load the ``[sortkey]`` table of a TOML file.

        Missing keys keep their defaults. Unknown keys, wrongly typed values
        and malformed TOML raise ConfigError.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML in {path}: {e}") from e
        table = data.get("sortkey", {})
        if not isinstance(table, dict):
            raise ConfigError(f"[sortkey] must be a table in {path}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(table) - known)
        if unknown:
            raise ConfigError(f"unknown config keys in {path}: {', '.join(unknown)}")

        for name in ("sigils", "digits"):
            if name in table and not isinstance(table[name], str):
                raise ConfigError(f"{name} must be a string in {path}")
        warning = table.get("long_key_warning", 0)
        if isinstance(warning, bool) or not isinstance(warning, int):
            raise ConfigError(f"long_key_warning must be an integer in {path}")
        return cls(**table)
