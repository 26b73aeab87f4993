"""An unbalanced binary search tree ordered by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


@dataclass
class _Node(Generic[T]):
    item: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """Binary search tree of unique items; ``compare`` decides order and identity."""

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._root: Optional[_Node[T]] = None
        self._count = 0

    def insert(self, item: T, on_duplicate: Optional[Callable[[T], None]] = None) -> bool:
        """Insert ``item``.

        Returns True when a new node was added. When an equal item exists,
        ``on_duplicate`` is called with the stored item and False is returned.
        """
        new = _Node(item)
        if self._root is None:
            self._root = new
            self._count += 1
            return True
        node = self._root
        while True:
            comp = self._compare(item, node.item)
            if comp == 0:
                if on_duplicate is not None:
                    on_duplicate(node.item)
                return False
            if comp < 0:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
        self._count += 1
        return True

    def _find(self, key: Any) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        parent = None
        node = self._root
        while node is not None:
            comp = self._compare(key, node.item)
            if comp == 0:
                break
            parent = node
            node = node.left if comp < 0 else node.right
        return parent, node

    def _replace_child(self, parent: Optional[_Node[T]], old: _Node[T],
                       new: Optional[_Node[T]]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, key: Any) -> T:
        """Remove and return the item equal to ``key``; raise KeyError if absent."""
        parent, node = self._find(key)
        if node is None:
            raise KeyError(key)
        removed = node.item
        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.item = succ.item
            self._replace_child(succ_parent, succ, succ.right)
        else:
            self._replace_child(parent, node, node.left if node.left is not None else node.right)
        self._count -= 1
        return removed

    def search(self, key: Any) -> Optional[T]:
        """Return the stored item equal to ``key``, or None."""
        _, node = self._find(key)
        return node.item if node is not None else None

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def _walk(self, reverse: bool) -> Iterator[tuple[_Node[T], int]]:
        stack: list[tuple[_Node[T], int]] = []
        node, level = self._root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                node = node.right if reverse else node.left
                level += 1
            node, level = stack.pop()
            yield node, level
            node = node.left if reverse else node.right
            level += 1

    def render(self, formatter: Callable[[T], str]) -> str:
        """Draw the tree sideways: right subtree on top, four spaces per level."""
        return "".join(
            "    " * level + formatter(node.item) + "\n"
            for node, level in self._walk(reverse=True)
        )

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return (node.item for node, _ in self._walk(reverse=False))

    def __reversed__(self) -> Iterator[T]:
        return (node.item for node, _ in self._walk(reverse=True))

    def __contains__(self, key: Any) -> bool:
        return self._find(key)[1] is not None