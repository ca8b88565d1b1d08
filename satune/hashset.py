"""Insertion-ordered hash set with pluggable hash and equality functions."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable, Iterator, Optional

from satune.hashtable import HashTable


class _Link:
    __slots__ = ("key", "prev", "next")

    def __init__(self, key: Any, prev: Optional["_Link"]) -> None:
        self.key = key
        self.prev = prev
        self.next: Optional[_Link] = None


class HashSet:
    """A set that remembers insertion order.

    Keys are compared with ``equals`` and hashed with ``hash_function``; the
    originally added key is kept and can be fetched with :meth:`get`.
    Removing the element currently yielded by an iteration is allowed.
    """

    def __init__(
        self,
        initial_capacity: int = 16,
        load_factor: float = 0.5,
        hash_function: Optional[Callable[[Any], int]] = None,
        equals: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._table = HashTable(initial_capacity, load_factor, hash_function, equals)
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None

    def add(self, key: Any) -> bool:
        """Add ``key``; return ``False`` if an equal key is already present."""
        if self._table.contains(key):
            return False
        node = _Link(key, self._tail)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._table.put(key, node)
        return True

    def add_all(self, items: Iterable[Any]) -> None:
        for item in items:
            self.add(item)

    def get(self, key: Any) -> Any:
        """Return the stored key equal to ``key``, or ``None``."""
        node = self._table.get(key)
        return None if node is None else node.key

    def contains(self, key: Any) -> bool:
        return self._table.contains(key)

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return ``False`` if it was not present."""
        node = self._table.remove(key)
        if node is None:
            return False
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        return True

    def first(self) -> Any:
        """Return the earliest added key still in the set."""
        if self._head is None:
            raise KeyError("set is empty")
        return self._head.key

    def random_element(self, rng: Optional[random.Random] = None) -> Any:
        """Return a random member, or ``None`` when the set is empty."""
        size = len(self)
        if size == 0:
            return None
        source = rng if rng is not None else random
        if size < 6:
            node = self._head
            for _ in range(source.randrange(size)):
                node = node.next
            return node.key
        return self._table.random_value(source).key

    def copy(self) -> "HashSet":
        clone = HashSet(
            self._table.capacity,
            self._table.load_factor,
            self._table.hash_function,
            self._table.equals,
        )
        clone.add_all(self)
        return clone

    def reset(self) -> None:
        self._head = self._tail = None
        self._table.reset()

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            following = node.next
            yield node.key
            node = following

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"HashSet({list(self)!r})"