"""Binary trees and binary search trees built from linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Node",
    "build_from_preorder",
    "insert",
    "build_bst",
    "search",
    "min_node",
    "max_node",
    "delete",
    "ancestors",
    "copy_tree",
    "trees_equal",
    "height",
    "count_nodes",
    "count_leaves",
    "inorder",
    "preorder",
    "postorder",
    "level_order",
]


@dataclass(eq=False)
class Node:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def build_from_preorder(values: Iterable[Any]) -> Node | None:
    """Build a binary tree from values listed in preorder.

    A value of 0 stands for a missing child. Values left over once the
    tree is complete are ignored.
    """
    stream = iter(values)

    def build() -> Node | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError(
                "preorder sequence ended before the tree was complete"
            ) from None
        if value == 0:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def insert(root: Node | None, key: Any) -> Node:
    """Insert ``key`` into the search tree at ``root`` and return the root.

    Keys equal to a node's key go into its right subtree.
    """
    new = Node(key)
    if root is None:
        return new
    node = root
    while True:
        if key < node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def build_bst(values: Iterable[Any]) -> Node | None:
    """Build a search tree by inserting ``values`` in order."""
    root: Node | None = None
    for value in values:
        root = insert(root, value)
    return root


def search(root: Node | None, key: Any) -> Node | None:
    """Return the node holding ``key`` in a search tree, or None."""
    node = root
    while node is not None and node.data != key:
        node = node.left if key < node.data else node.right
    return node


def min_node(root: Node | None) -> Node | None:
    """Return the leftmost node of the tree, or None if it is empty."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def max_node(root: Node | None) -> Node | None:
    """Return the rightmost node of the tree, or None if it is empty."""
    node = root
    while node is not None and node.right is not None:
        node = node.right
    return node


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove one node holding ``key`` from a search tree and return the root.

    A node with two children takes the value of its inorder successor,
    which is then removed from the right subtree. A missing key leaves
    the tree unchanged.
    """
    if root is None:
        return None
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        assert successor is not None
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def ancestors(root: Node | None, key: Any) -> list[Any]:
    """Return the values above ``key``, nearest ancestor first.

    The whole tree is searched, so it need not be a search tree.
    Raises KeyError if no node holds ``key``.
    """

    def path(node: Node | None) -> list[Any] | None:
        if node is None:
            return None
        if node.data == key:
            return []
        for child in (node.left, node.right):
            found = path(child)
            if found is not None:
                found.append(node.data)
                return found
        return None

    result = path(root)
    if result is None:
        raise KeyError(key)
    return result


def copy_tree(root: Node | None) -> Node | None:
    """Return a deep copy of the tree's structure."""
    if root is None:
        return None
    return Node(root.data, copy_tree(root.left), copy_tree(root.right))


def trees_equal(first: Node | None, second: Node | None) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    return (
        first.data == second.data
        and trees_equal(first.left, second.left)
        and trees_equal(first.right, second.right)
    )


def height(root: Node | None) -> int:
    """Return the number of levels in the tree; an empty tree has height 0."""
    levels = 0
    level = [root] if root is not None else []
    while level:
        levels += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _nodes(root: Node | None) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def count_nodes(root: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(root))


def count_leaves(root: Node | None) -> int:
    """Return the number of nodes that have no children."""
    return sum(
        1 for node in _nodes(root) if node.left is None and node.right is None
    )


def inorder(root: Node | None) -> Iterator[Any]:
    """Yield the tree's values in left, node, right order."""
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def preorder(root: Node | None) -> Iterator[Any]:
    """Yield the tree's values in node, left, right order."""
    for node in _nodes(root):
        yield node.data


def postorder(root: Node | None) -> Iterator[Any]:
    """Yield the tree's values in left, right, node order."""
    stack = [root] if root is not None else []
    reversed_order: list[Any] = []
    while stack:
        node = stack.pop()
        reversed_order.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_order)


def level_order(root: Node | None) -> Iterator[Any]:
    """Yield the tree's values level by level, left to right."""
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        yield node.data
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)