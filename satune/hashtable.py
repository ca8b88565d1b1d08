"""Open-addressing hash table with pluggable hash and equality functions."""

from __future__ import annotations

import operator
import random
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterator, Optional

_MASK32 = 0xFFFFFFFF
_TOMBSTONE = object()


@dataclass(slots=True)
class _Slot:
    key: Any
    value: Any
    hashcode: int


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


class HashTable:
    """Linear-probing hash table.

    The capacity is always a power of two.  The table doubles once the number
    of entries exceeds ``capacity * load_factor``.  ``None`` is accepted as a
    key and is kept in a dedicated slot outside the probe table.
    """

    def __init__(
        self,
        initial_capacity: int = 1024,
        load_factor: float = 0.5,
        hash_function: Optional[Callable[[Any], int]] = None,
        equals: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        if not _is_power_of_two(initial_capacity):
            raise ValueError("initial capacity must be a positive power of two")
        if not 0 < load_factor < 1:
            raise ValueError("load factor must lie strictly between 0 and 1")
        self._hash_function: Callable[[Any], int] = hash_function or hash
        self._equals: Callable[[Any, Any], bool] = equals or operator.eq
        self._load_factor = load_factor
        self._zero: Optional[_Slot] = None
        self._size = 0
        self._tombstones = 0
        self._allocate(initial_capacity)

    def _allocate(self, capacity: int) -> None:
        self._table: list[Any] = [None] * capacity
        self._capacity = capacity
        self._mask = capacity - 1
        self._threshold = int(capacity * self._load_factor)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._load_factor

    @property
    def hash_function(self) -> Callable[[Any], int]:
        return self._hash_function

    @property
    def equals(self) -> Callable[[Any, Any], bool]:
        return self._equals

    def _hashcode(self, key: Any) -> int:
        return self._hash_function(key) & _MASK32

    def _find(self, key: Any, hashcode: int) -> Optional[int]:
        index = hashcode & self._mask
        for _ in range(self._capacity):
            slot = self._table[index]
            if slot is None:
                return None
            if (
                slot is not _TOMBSTONE
                and slot.hashcode == hashcode
                and self._equals(slot.key, key)
            ):
                return index
            index = (index + 1) & self._mask
        return None

    def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if key is None:
            if self._zero is None:
                self._zero = _Slot(key, value, 0)
                self._size += 1
            else:
                self._zero.value = value
            return

        if self._size > self._threshold:
            self.resize(self._capacity << 1)
        elif self._size + self._tombstones > self._threshold:
            self.resize(self._capacity)

        hashcode = self._hashcode(key)
        found = self._find(key, hashcode)
        if found is not None:
            self._table[found].value = value
            return

        index = hashcode & self._mask
        while True:
            slot = self._table[index]
            if slot is None or slot is _TOMBSTONE:
                if slot is _TOMBSTONE:
                    self._tombstones -= 1
                self._table[index] = _Slot(key, value, hashcode)
                self._size += 1
                return
            index = (index + 1) & self._mask

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or ``None`` if absent."""
        if key is None:
            return None if self._zero is None else self._zero.value
        found = self._find(key, self._hashcode(key))
        return None if found is None else self._table[found].value

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value, or ``None`` if absent."""
        if key is None:
            if self._zero is None:
                return None
            value = self._zero.value
            self._zero = None
            self._size -= 1
            return value
        found = self._find(key, self._hashcode(key))
        if found is None:
            return None
        value = self._table[found].value
        self._table[found] = _TOMBSTONE
        self._tombstones += 1
        self._size -= 1
        return value

    def contains(self, key: Any) -> bool:
        if key is None:
            return self._zero is not None
        return self._find(key, self._hashcode(key)) is not None

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self._size

    def reset(self) -> None:
        """Remove every entry, keeping the current capacity."""
        self._table = [None] * self._capacity
        self._zero = None
        self._size = 0
        self._tombstones = 0

    def resize(self, new_capacity: int) -> None:
        """Rebuild the probe table with ``new_capacity`` slots."""
        if not _is_power_of_two(new_capacity):
            raise ValueError("capacity must be a positive power of two")
        live = [s for s in self._table if s is not None and s is not _TOMBSTONE]
        if len(live) >= new_capacity:
            raise ValueError("capacity too small for the stored entries")
        self._allocate(new_capacity)
        self._tombstones = 0
        for slot in live:
            index = slot.hashcode & self._mask
            while self._table[index] is not None:
                index = (index + 1) & self._mask
            self._table[index] = slot

    def random_value(self, rng: Optional[random.Random] = None) -> Any:
        """Return the value of a randomly chosen entry of the probe table.

        The entry stored under ``None`` is never chosen.
        """
        if not any(s is not None and s is not _TOMBSTONE for s in self._table):
            raise LookupError("no entries to choose from")
        source = rng if rng is not None else random
        while True:
            slot = self._table[source.getrandbits(32) & self._mask]
            if slot is not None and slot is not _TOMBSTONE:
                return slot.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield every ``(key, value)`` pair."""
        if self._zero is not None:
            yield self._zero.key, self._zero.value
        for slot in self._table:
            if slot is not None and slot is not _TOMBSTONE:
                yield slot.key, slot.value

    def __repr__(self) -> str:
        return f"HashTable(size={self._size}, capacity={self._capacity})"


__all__ = ["HashTable", "Hashable"]