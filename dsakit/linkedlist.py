"""Singly linked list of integers and the algorithms that work on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: int
    next: Node | None = field(default=None, repr=False)


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list built from nodes that can be relinked in place."""

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

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __reversed__(self) -> Iterator[int]:
        return reversed(list(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{self.display(', ')}])"

    def display(self, separator: str = " ") -> str:
        """Return the values joined by ``separator``."""
        return separator.join(str(value) for value in self)

    def _node_at(self, position: int) -> Node:
        """Return the node at a zero-based position known to be valid."""
        for i, node in enumerate(_nodes(self.head)):
            if i == position:
                return node
        raise IndexError(position)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it is preceded by ``index`` nodes."""
        if index < 0 or index > len(self):
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.head = Node(value, self.head)
            return
        before = self._node_at(index - 1)
        before.next = Node(value, before.next)

    def delete(self, index: int) -> int:
        """Remove the node at 1-based ``index`` and return its value."""
        if index < 1 or index > len(self):
            raise IndexError(f"delete index {index} out of range")
        if index == 1:
            removed = self.head
            assert removed is not None
            self.head = removed.next
            return removed.data
        before = self._node_at(index - 2)
        removed = before.next
        assert removed is not None
        before.next = removed.next
        return removed.data

    def is_sorted(self) -> bool:
        """Whether the values never decrease from head to tail."""
        previous: int | None = None
        for value in self:
            if previous is not None and value < previous:
                return False
            previous = value
        return True

    def remove_duplicates(self) -> None:
        """Drop every node whose value equals that of the node before it."""
        if self.head is None:
            return
        p = self.head
        q = p.next
        while q is not None:
            if p.data != q.data:
                p = q
            else:
                p.next = q.next
            q = p.next

    def reverse_values(self) -> None:
        """Reverse the order by rewriting node data, keeping the links."""
        values = list(self)
        for node, value in zip(_nodes(self.head), reversed(values)):
            node.data = value

    def reverse(self) -> None:
        """Reverse the order by relinking nodes with three sliding pointers."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the order by relinking nodes recursively."""

        def relink(q: Node | None, p: Node | None) -> None:
            if p is not None:
                relink(p, p.next)
                p.next = q
            else:
                self.head = q

        relink(None, self.head)

    def has_loop(self) -> bool:
        """Whether following the links from the head ever revisits a node."""
        return has_loop(self.head)


def has_loop(head: Node | None) -> bool:
    """Detect a cycle reachable from ``head`` with slow and fast pointers."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Merge two sorted lists by relinking their nodes.

    The nodes move into the returned list and both inputs are left empty.
    On equal values the node from ``second`` comes first.
    """
    p, q = first.head, second.head
    first.head = second.head = None
    merged = LinkedList()
    last: Node | None = None
    while p is not None and q is not None:
        if p.data < q.data:
            node, p = p, p.next
        else:
            node, q = q, q.next
        node.next = None
        if last is None:
            merged.head = node
        else:
            last.next = node
        last = node
    rest = p if p is not None else q
    if last is None:
        merged.head = rest
    else:
        last.next = rest
    return merged