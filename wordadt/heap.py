"""A max-heap ordered by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


class Heap(Generic[T]):
    """Array-backed max-heap: ``pop`` returns the largest item under ``compare``."""

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._items: list[T] = []

    def _reheap_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(items[index], items[parent]) <= 0:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _reheap_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            if left >= size:
                break
            larger = left
            if right < size and self._compare(items[left], items[right]) < 0:
                larger = right
            if self._compare(items[larger], items[index]) <= 0:
                break
            items[index], items[larger] = items[larger], items[index]
            index = larger

    def push(self, item: T) -> None:
        """Add ``item`` to the heap."""
        if item is None:
            raise ValueError("cannot push None")
        self._items.append(item)
        self._reheap_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the largest item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._reheap_down(0)
        return top

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield items in heap-array order."""
        return iter(list(self._items))