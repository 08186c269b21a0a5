"""Interned string names identified by their CRC-32 hash."""

from __future__ import annotations

import zlib

from .uassert import ensure

_name_table: dict[int, str] = {}


def crc32(data: str | bytes) -> int:
    """Return the CRC-32 (polynomial 0xEDB88320) of ``data``; text is UTF-8 encoded."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return zlib.crc32(data) & 0xFFFFFFFF


def _intern(text: str) -> int:
    hash_value = crc32(text)
    _name_table.setdefault(hash_value, text)
    return hash_value


class SName:
    """A string stored once in a global table and compared by hash."""

    __slots__ = ("_hash_value",)

    def __init__(self, text: str = "") -> None:
        # Names end at the first NUL character.
        text = text.split("\0", 1)[0]
        self._hash_value = _intern(text)

    @classmethod
    def empty(cls) -> SName:
        """Return the name of the empty string."""
        return cls()

    @property
    def hash_value(self) -> int:
        """The CRC-32 hash that identifies this name."""
        return self._hash_value

    @property
    def text(self) -> str:
        """The interned string for this name."""
        ensure(self._hash_value in _name_table, "Something terrible has happened :(")
        return _name_table[self._hash_value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SName):
            return NotImplemented
        return self._hash_value == other._hash_value

    def __hash__(self) -> int:
        return self._hash_value

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SName({self.text!r})"