"""Height-tracking AVL tree that corrects left-heavy imbalance."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; ``height`` counts a leaf as 1."""

    data: int
    height: int = 1
    left: AVLNode | None = field(default=None, repr=False)
    right: AVLNode | None = field(default=None, repr=False)


def _child_heights(node: AVLNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left = node.left.height if node.left is not None else 0
    right = node.right.height if node.right is not None else 0
    return left, right


def node_height(node: AVLNode) -> int:
    """Height of ``node`` computed from the stored heights of its children."""
    return max(_child_heights(node)) + 1


def balance_factor(node: AVLNode | None) -> int:
    """Left child height minus right child height; 0 for no node."""
    left, right = _child_heights(node)
    return left - right


def _ll_rotation(p: AVLNode) -> AVLNode:
    pl = p.left
    assert pl is not None
    p.left = pl.right
    pl.right = p
    p.height = node_height(p)
    pl.height = node_height(pl)
    return pl


def _lr_rotation(p: AVLNode) -> AVLNode:
    pl = p.left
    assert pl is not None
    plr = pl.right
    assert plr is not None
    pl.right = plr.left
    p.left = plr.right
    plr.left = pl
    plr.right = p
    pl.height = node_height(pl)
    p.height = node_height(p)
    plr.height = node_height(plr)
    return plr


class AVLTree:
    """A search tree of distinct keys rebalanced by LL and LR rotations.

    Only a left-heavy node is rotated; right-heavy subtrees stay as built.
    """

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def __iter__(self) -> Iterator[int]:
        def walk(node: AVLNode | None) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return walk(self.root)

    def insert(self, key: int) -> None:
        """Insert ``key``; a key already present is ignored."""

        def place(node: AVLNode | None) -> AVLNode:
            if node is None:
                return AVLNode(key)
            if key < node.data:
                node.left = place(node.left)
            elif key > node.data:
                node.right = place(node.right)
            node.height = node_height(node)
            if balance_factor(node) == 2:
                child_balance = balance_factor(node.left)
                if child_balance == 1:
                    return _ll_rotation(node)
                if child_balance == -1:
                    return _lr_rotation(node)
            return node

        self.root = place(self.root)

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(self)

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return self.root.height if self.root is not None else 0