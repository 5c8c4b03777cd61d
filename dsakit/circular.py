"""Circular singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dsakit.linkedlist import Node


class CircularList:
    """A singly linked list whose last node links back to the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        last: Node | None = None
        for value in values:
            node = Node(value)
            if last is None:
                self.head = node
            else:
                last.next = node
            last = node
        if last is not None:
            last.next = self.head

    def _nodes(self) -> Iterator[Node]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.next
            if node is self.head or node is None:
                break

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(str(v) for v in self)}])"

    def _node_at(self, position: int) -> Node:
        for i, node in enumerate(self._nodes()):
            if i == position:
                return node
        raise IndexError(position)

    def _tail(self) -> Node:
        tail: Node | None = None
        for node in self._nodes():
            tail = node
        if tail is None:
            raise IndexError("list is empty")
        return tail

    def display(self) -> str:
        """Return the values once round the circle, separated by spaces."""
        return " ".join(str(value) for value in self)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it is preceded by ``index`` nodes.

        Inserting at index 0 makes the new node the head.
        """
        if index < 0 or index > len(self):
            raise IndexError(f"insert index {index} out of range")
        node = Node(value)
        if self.head is None:
            node.next = node
            self.head = node
            return
        if index == 0:
            tail = self._tail()
            tail.next = node
            node.next = self.head
            self.head = node
            return
        before = self._node_at(index - 1)
        node.next = before.next
        before.next = node

    def delete(self, index: int) -> int:
        """Remove the node at 1-based ``index`` and return its value."""
        if index < 1 or index > len(self):
            raise IndexError(f"delete index {index} out of range")
        head = self.head
        assert head is not None
        if index == 1:
            tail = self._tail()
            if tail is head:
                self.head = None
            else:
                tail.next = head.next
                self.head = head.next
            return head.data
        before = self._node_at(index - 2)
        removed = before.next
        assert removed is not None
        before.next = removed.next
        return removed.data