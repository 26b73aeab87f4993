"""A list kept in order by a user-supplied three-way comparison function."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterator
from functools import cmp_to_key
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


class SortedList(Generic[T]):
    """Ordered collection of unique items; ``compare`` decides both order and identity."""

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._key = cmp_to_key(compare)
        self._items: list[T] = []

    def _locate(self, key: Any) -> tuple[int, bool]:
        index = bisect_left(self._items, self._key(key), key=self._key)
        found = index < len(self._items) and self._compare(key, self._items[index]) == 0
        return index, found

    def add(self, item: T, on_duplicate: Optional[Callable[[T], None]] = None) -> bool:
        """Insert ``item`` in order.

        Returns True when inserted. When an equal item is already present,
        ``on_duplicate`` is called with the stored item and False is returned.
        """
        if item is None:
            raise ValueError("cannot add None")
        index, found = self._locate(item)
        if found:
            if on_duplicate is not None:
                on_duplicate(self._items[index])
            return False
        self._items.insert(index, item)
        return True

    def remove(self, key: Any) -> T:
        """Remove and return the item equal to ``key``; raise KeyError if absent."""
        index, found = self._locate(key)
        if not found:
            raise KeyError(key)
        return self._items.pop(index)

    def search(self, key: Any) -> Optional[T]:
        """Return the stored item equal to ``key``, or None."""
        index, found = self._locate(key)
        return self._items[index] if found else None

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[T]:
        return reversed(list(self._items))

    def __contains__(self, key: Any) -> bool:
        return self._locate(key)[1]