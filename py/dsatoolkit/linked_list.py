"""Singly linked list keeping a head reference only."""
from typing import Any, Iterator, List, Optional

from .types import NOT_FOUND, ConcurrentModificationError, EmptyContainerError
from .utils import check_index, check_position, join_values, values_equal


class _Node:
    """A list cell: one value and the link to the next cell."""
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional["_Node"] = None):
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"_Node({self.value!r})"


class SinglyLinkedList:
    """Node chain with O(1) head operations and O(N) tail operations.

    There is no tail cache, so push_back, pop_back and last() walk the
    whole chain. Size is maintained incrementally.
    """

    def __init__(self):
        self._head: Optional[_Node] = None
        self._size = 0
        self._generation = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    def push_front(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._size += 1
        self._generation += 1

    def push_back(self, value: Any) -> None:
        """Append at the tail. O(N): walks the chain."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1
        self._generation += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert value so that it ends up at position index."""
        check_position(index, self._size)
        if index == 0:
            self.push_front(value)
            return

        prev = self._node_at(index - 1)
        prev.next = _Node(value, prev.next)
        self._size += 1
        self._generation += 1

    def delete(self, value: Any) -> bool:
        """Unlink the first node holding value. Returns True if found."""
        if self._head is None:
            return False

        if values_equal(self._head.value, value):
            self._head = self._head.next
            self._size -= 1
            self._generation += 1
            return True

        current = self._head
        while current.next is not None:
            if values_equal(current.next.value, value):
                current.next = current.next.next
                self._size -= 1
                self._generation += 1
                return True
            current = current.next
        return False

    def delete_at(self, index: int) -> Any:
        """Unlink the node at index and return its value."""
        check_index(index, self._size)
        if index == 0:
            return self.pop_front()

        prev = self._node_at(index - 1)
        removed = prev.next
        prev.next = removed.next
        self._size -= 1
        self._generation += 1
        return removed.value

    def pop_front(self) -> Any:
        if self._head is None:
            raise EmptyContainerError("Cannot delete from empty list")
        value = self._head.value
        self._head = self._head.next
        self._size -= 1
        self._generation += 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the tail value. O(N)."""
        if self._head is None:
            raise EmptyContainerError("Cannot delete from empty list")
        if self._head.next is None:
            return self.pop_front()

        current = self._head
        while current.next.next is not None:
            current = current.next
        value = current.next.value
        current.next = None
        self._size -= 1
        self._generation += 1
        return value

    def get(self, index: int) -> Any:
        check_index(index, self._size)
        return self._node_at(index).value

    def set(self, index: int, value: Any) -> Any:
        """Replace the value at index and return the previous one."""
        check_index(index, self._size)
        node = self._node_at(index)
        old = node.value
        node.value = value
        return old

    def index_of(self, value: Any) -> int:
        index = 0
        current = self._head
        while current is not None:
            if values_equal(current.value, value):
                return index
            current = current.next
            index += 1
        return NOT_FOUND

    def contains(self, value: Any) -> bool:
        return self.index_of(value) != NOT_FOUND

    def first(self) -> Any:
        if self._head is None:
            raise EmptyContainerError("List is empty")
        return self._head.value

    def last(self) -> Any:
        if self._head is None:
            raise EmptyContainerError("List is empty")
        return self._node_at(self._size - 1).value

    def clear(self) -> None:
        self._head = None
        self._size = 0
        self._generation += 1

    def reverse(self) -> None:
        """Reverse the chain in place by rewiring each next link."""
        prev = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = prev
            prev = current
            current = following
        self._head = prev
        self._generation += 1

    def to_list(self) -> List[Any]:
        values = []
        current = self._head
        while current is not None:
            values.append(current.value)
            current = current.next
        return values

    def to_visual_string(self) -> str:
        if self._head is None:
            return "Empty list: NULL"
        cells = " -> ".join(f"[{v}]" for v in self.to_list())
        return f"HEAD -> {cells} -> NULL"

    def _node_at(self, index: int) -> _Node:
        current = self._head
        for _ in range(index):
            current = current.next
        return current

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        return self._iterate(self._head, self._generation)

    def _iterate(self, node: Optional[_Node], expected: int) -> Iterator[Any]:
        while True:
            if self._generation != expected:
                raise ConcurrentModificationError("list modified during iteration")
            if node is None:
                return
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return f"[{join_values(self.to_list())}]"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.to_list()!r})"
