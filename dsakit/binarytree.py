"""Binary tree built level by level, with its traversals and height."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

NO_CHILD = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


class BinaryTree:
    """A binary tree of integers."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    @classmethod
    def from_level_values(cls, values: Iterable[int]) -> BinaryTree:
        """Build a tree from values given in level order.

        The first value is the root; then for each node in turn come its
        left and right child, where -1 means no child. Children missing
        at the end of ``values`` are treated as absent.
        """
        stream = iter(values)
        try:
            first = next(stream)
        except StopIteration:
            return cls()
        root = TreeNode(first)
        queue = deque([root])
        while queue:
            node = queue.popleft()
            left = next(stream, NO_CHILD)
            if left != NO_CHILD:
                node.left = TreeNode(left)
                queue.append(node.left)
            right = next(stream, NO_CHILD)
            if right != NO_CHILD:
                node.right = TreeNode(right)
                queue.append(node.right)
        return cls(root)

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""

        def walk(node: TreeNode | None) -> Iterator[int]:
            if node is not None:
                yield node.data
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self.root))

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""

        def walk(node: TreeNode | None) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return list(walk(self.root))

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""

        def walk(node: TreeNode | None) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.data

        return list(walk(self.root))

    def level_order(self) -> list[int]:
        """Values level by level, left to right."""
        if self.root is None:
            return []
        order = [self.root.data]
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            for child in (node.left, node.right):
                if child is not None:
                    order.append(child.data)
                    queue.append(child)
        return order

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""

        def measure(node: TreeNode | None) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self.root)


def _ints(stream: Iterable[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read level-order values and print the traversals and height."""
    parser = argparse.ArgumentParser(
        prog="dsakit-tree",
        description="Build a binary tree from level-order values (-1 for no child).",
    )
    parser.add_argument("input", nargs="?", help="file to read (default: stdin)")
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            tree = BinaryTree.from_level_values(_ints(sys.stdin))
        else:
            with open(args.input, encoding="utf-8") as stream:
                tree = BinaryTree.from_level_values(_ints(stream))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    def line(values: list[int]) -> str:
        return " ".join(str(value) for value in values)

    print(f"Preorder: {line(tree.preorder())}")
    print(f"Inorder: {line(tree.inorder())}")
    print(f"Postorder: {line(tree.postorder())}")
    print(f"Levelorder: {line(tree.level_order())}")
    print(f"Height: {tree.height()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())