"""Double-threaded binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["ThreadedNode", "ThreadedBST"]


@dataclass(eq=False)
class ThreadedNode:
    """Node whose empty child links point to its inorder neighbours.

    When ``left_thread`` is true, ``left`` is the inorder predecessor
    rather than a child; likewise ``right_thread`` and the successor.
    """

    data: Any
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    left_thread: bool = True
    right_thread: bool = True


class ThreadedBST:
    """Binary search tree with inorder threads and unique keys."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: ThreadedNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> ThreadedNode:
        """Insert ``key`` and return its node; raise ValueError on a duplicate."""
        parent: ThreadedNode | None = None
        node = self.root
        while node is not None:
            if key == node.data:
                raise ValueError(f"Duplicate key: {key!r}")
            parent = node
            if key < node.data:
                if node.left_thread:
                    break
                node = node.left
            else:
                if node.right_thread:
                    break
                node = node.right

        new = ThreadedNode(key)
        if parent is None:
            self.root = new
        elif key < parent.data:
            new.left = parent.left
            new.right = parent
            parent.left_thread = False
            parent.left = new
        else:
            new.left = parent
            new.right = parent.right
            parent.right_thread = False
            parent.right = new
        return new

    def successor(self, node: ThreadedNode) -> ThreadedNode | None:
        """Return the node after ``node`` in inorder, or None."""
        if node.right_thread:
            return node.right
        current = node.right
        while not current.left_thread:
            current = current.left
        return current

    def predecessor(self, node: ThreadedNode) -> ThreadedNode | None:
        """Return the node before ``node`` in inorder, or None."""
        if node.left_thread:
            return node.left
        current = node.left
        while not current.right_thread:
            current = current.right
        return current

    def inorder(self) -> Iterator[Any]:
        """Yield the keys in ascending order by following threads."""
        node = self.root
        if node is None:
            return
        while not node.left_thread:
            node = node.left
        while node is not None:
            yield node.data
            node = self.successor(node)

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"ThreadedBST({list(self)!r})"