"""Binary search tree insertion and binary tree traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node that also links back to its parent."""

    value: Any
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)
    parent: Node | None = field(default=None, repr=False)


def insert(root: Node | None, value: Any) -> Node:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    A value already present is left alone.
    """
    if root is None:
        return Node(value)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, parent=current)
                return root
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, parent=current)
                return root
            current = current.right
        else:
            return root


def _inorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: Node | None) -> list[Any]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def preorder(root: Node | None) -> list[Any]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Node | None) -> list[Any]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: Node | None) -> list[Any]:
    """Values level by level from the root, left to right within a level."""
    values: list[Any] = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        values.append(node.value)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return values


def height(root: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))