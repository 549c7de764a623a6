"""A minimal singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

__all__ = ["LinkedList"]


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list supporting insertion at either end."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def push_front(self, data: Any) -> None:
        """Insert a value at the head of the list."""
        self._head = _Node(data, self._head)

    def append(self, data: Any) -> None:
        """Insert a value at the tail of the list."""
        node = _Node(data)
        if self._head is None:
            self._head = node
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def render(self) -> str:
        """Return the list as 'a->b->...->NULL'."""
        return "".join(f"{value}->" for value in self) + "NULL"

    def __str__(self) -> str:
        return self.render()