"""Combining hashes of several values into one 64-bit seed."""

from __future__ import annotations

from collections.abc import Iterable

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B9


def _hash_of(value: object) -> int:
    try:
        return hash(value)
    except TypeError:
        if isinstance(value, Iterable):
            return hash(tuple(_hash_of(item) for item in value))
        raise


def hash_combine(seed: int, *args: object) -> int:
    """Fold the hashes of ``args`` into ``seed`` and return the new 64-bit seed.

    Unhashable sequences such as lists or arrays are hashed by their items.
    """
    seed &= _MASK
    for value in args:
        value_hash = _hash_of(value) & _MASK
        seed ^= (value_hash + _GOLDEN + ((seed << 6) & _MASK) + (seed >> 2)) & _MASK
    return seed