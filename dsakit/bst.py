"""Binary search tree with iterative and recursive operations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    data: int
    left: BSTNode | None = field(default=None, repr=False)
    right: BSTNode | None = field(default=None, repr=False)


def inorder_predecessor(node: BSTNode | None) -> BSTNode | None:
    """Return the rightmost node of the subtree rooted at ``node``."""
    while node is not None and node.right is not None:
        node = node.right
    return node


def inorder_successor(node: BSTNode | None) -> BSTNode | None:
    """Return the leftmost node of the subtree rooted at ``node``."""
    while node is not None and node.left is not None:
        node = node.left
    return node


def _height(node: BSTNode | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


class BinarySearchTree:
    """A binary search tree of distinct integer keys."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def __iter__(self) -> Iterator[int]:
        def walk(node: BSTNode | None) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return walk(self.root)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def insert(self, key: int) -> None:
        """Insert ``key`` iteratively; a key already present is ignored."""
        if self.root is None:
            self.root = BSTNode(key)
            return
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = BSTNode(key)
                    return
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = BSTNode(key)
                    return
                node = node.right
            else:
                return

    def insert_recursive(self, key: int) -> None:
        """Insert ``key`` recursively; a key already present is ignored."""

        def place(node: BSTNode | None) -> BSTNode:
            if node is None:
                return BSTNode(key)
            if key < node.data:
                node.left = place(node.left)
            elif key > node.data:
                node.right = place(node.right)
            return node

        self.root = place(self.root)

    def search(self, key: int) -> BSTNode | None:
        """Return the node holding ``key``, or None, searching iteratively."""
        node = self.root
        while node is not None:
            if key == node.data:
                return node
            node = node.left if key < node.data else node.right
        return None

    def search_recursive(self, key: int) -> BSTNode | None:
        """Return the node holding ``key``, or None, searching recursively."""

        def find(node: BSTNode | None) -> BSTNode | None:
            if node is None or key == node.data:
                return node
            return find(node.left if key < node.data else node.right)

        return find(self.root)

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(self)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return _height(self.root)

    def delete(self, key: int) -> None:
        """Remove ``key`` from the tree.

        A node with children takes the value of its in-order predecessor
        when its left subtree is taller, otherwise of its in-order successor.

        Raises:
            KeyError: if ``key`` is not in the tree.
        """
        if self.search(key) is None:
            raise KeyError(key)

        def remove(node: BSTNode | None, target: int) -> BSTNode | None:
            if node is None:
                return None
            if target < node.data:
                node.left = remove(node.left, target)
            elif target > node.data:
                node.right = remove(node.right, target)
            elif node.left is None and node.right is None:
                return None
            elif _height(node.left) > _height(node.right):
                replacement = inorder_predecessor(node.left)
                assert replacement is not None
                node.data = replacement.data
                node.left = remove(node.left, replacement.data)
            else:
                replacement = inorder_successor(node.right)
                assert replacement is not None
                node.data = replacement.data
                node.right = remove(node.right, replacement.data)
            return node

        self.root = remove(self.root, key)

    @classmethod
    def from_preorder(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build the tree whose preorder traversal is ``values``.

        Raises:
            ValueError: if a value occurs more than once.
        """
        tree = cls()
        stream = iter(values)
        try:
            first = next(stream)
        except StopIteration:
            return tree
        tree.root = current = BSTNode(first)
        seen = {first}
        stack: list[BSTNode] = []
        for value in stream:
            if value in seen:
                raise ValueError(f"duplicate value {value} in preorder sequence")
            seen.add(value)
            while True:
                if value < current.data:
                    current.left = BSTNode(value)
                    stack.append(current)
                    current = current.left
                    break
                bound = stack[-1].data if stack else math.inf
                if current.data < value < bound:
                    current.right = BSTNode(value)
                    current = current.right
                    break
                current = stack.pop()
        return tree