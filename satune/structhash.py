"""Hash functions for the composite keys stored in hash sets and tables."""

from __future__ import annotations

from typing import Iterable

_MASK32 = 0xFFFFFFFF


def _hash_next(h: int, value: int) -> int:
    h = (h + value) & _MASK32
    h = (h + (h << 10)) & _MASK32
    return h ^ (h >> 6)


def _hash_final(h: int) -> int:
    h = (h + (h << 3)) & _MASK32
    h ^= h >> 11
    return (h + (h << 15)) & _MASK32


def mix_hash(values: Iterable[int]) -> int:
    """Combine a sequence of integers into one 32-bit hash.

    Each value contributes only its low 32 bits.  The result depends on the
    order of the values.
    """
    h = 0
    for value in values:
        h = _hash_next(h, value & _MASK32)
    return _hash_final(h)


def pair_hash(first: int, second: int) -> int:
    """Hash an ordered pair of integers."""
    return mix_hash((first, second))


def tunable_setting_hash(has_var: int, type1: int, type2: int, param: int) -> int:
    """Hash the fields that identify a tunable setting."""
    return (int(has_var) ^ type1 ^ type2 ^ param) & _MASK32