"""Growable sequence with explicit capacity management."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

DEFAULT_CAPACITY = 8


class Vector:
    """A growable array.

    The vector tracks a capacity that doubles when a push finds it full, and
    grows to exactly the requested size when enlarged with :meth:`set_size`.
    Slots added by enlarging are filled with ``fill``.
    """

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        capacity: Optional[int] = None,
        fill: Any = None,
    ) -> None:
        self._items: list[Any] = list(items) if items is not None else []
        if capacity is None:
            capacity = len(self._items) if items is not None else DEFAULT_CAPACITY
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = max(capacity, len(self._items))
        self._fill = fill

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def fill(self) -> Any:
        return self._fill

    def push(self, item: Any) -> None:
        """Append ``item``, doubling the capacity when full."""
        if len(self._items) >= self._capacity:
            self._capacity = max(1, self._capacity << 1)
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def last(self) -> Any:
        if not self._items:
            raise IndexError("last of empty vector")
        return self._items[-1]

    def set_size(self, size: int) -> None:
        """Truncate to ``size`` or grow to it, filling new slots."""
        if size < 0:
            raise ValueError("size must not be negative")
        current = len(self._items)
        if size <= current:
            del self._items[size:]
            return
        if size > self._capacity:
            self._capacity = size
        self._items.extend([self._fill] * (size - current))

    def set_expand(self, index: int, item: Any) -> None:
        """Store ``item`` at ``index``, growing the vector if needed."""
        if index < 0:
            raise IndexError("index must not be negative")
        if index >= len(self._items):
            self.set_size(index + 1)
        self._items[index] = item

    def insert_at(self, index: int, item: Any) -> None:
        """Insert ``item`` before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert index out of range")
        self.set_size(len(self._items) + 1)
        self._items[index + 1:] = self._items[index:-1]
        self._items[index] = item

    def remove_at(self, index: int) -> Any:
        """Remove and return the item at ``index``, shifting later items down."""
        if not 0 <= index < len(self._items):
            raise IndexError("remove index out of range")
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, item: Any) -> None:
        self._items[index] = item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"