"""LIFO stack backed by DynamicArray."""
from typing import Any, Iterator, List, Optional

from .dynamic_array import DynamicArray
from .types import NOT_FOUND, ConcurrentModificationError, EmptyContainerError
from .utils import join_values, truncate, values_equal

# Cell width of the visual rendering
_CELL_WIDTH = 7


class Stack:
    """Thin LIFO adapter; the top of the stack is the end of the array."""

    def __init__(self, initial_capacity: Optional[int] = None):
        self._items = DynamicArray(initial_capacity)
        self._generation = 0

    def push(self, value: Any) -> None:
        self._items.append(value)
        self._generation += 1

    def pop(self) -> Any:
        if self.is_empty():
            raise EmptyContainerError("Stack is empty")
        value = self._items.remove_at(self._items.size() - 1)
        self._generation += 1
        return value

    def peek(self) -> Any:
        if self.is_empty():
            raise EmptyContainerError("Stack is empty")
        return self._items.get(self._items.size() - 1)

    def top(self) -> Any:
        return self.peek()

    def search(self, value: Any) -> int:
        """1-based distance of value from the top, or NOT_FOUND."""
        size = self._items.size()
        for i in range(size - 1, -1, -1):
            if values_equal(value, self._items.get(i)):
                return size - i
        return NOT_FOUND

    def contains(self, value: Any) -> bool:
        return self._items.contains(value)

    def size(self) -> int:
        return self._items.size()

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def clear(self) -> None:
        self._items.clear()
        self._generation += 1

    def to_list(self) -> List[Any]:
        """Elements from bottom to top."""
        return self._items.to_list()

    def copy(self) -> "Stack":
        clone = Stack()
        for value in self._items:
            clone.push(value)
        return clone

    def to_visual_string(self) -> str:
        if self.is_empty():
            return "Stack is empty\n|_____|\n"

        lines = ["Stack (top to bottom):", "┌─────────┐"]
        for i, value in enumerate(self):
            line = f"│ {truncate(value, _CELL_WIDTH):<{_CELL_WIDTH}} │"
            if i == 0:
                line += " ← top"
            lines.append(line)
        lines.append("└─────────┘")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return self._iterate(self._generation)

    def _iterate(self, expected: int) -> Iterator[Any]:
        index = self._items.size() - 1
        while True:
            if self._generation != expected:
                raise ConcurrentModificationError("stack modified during iteration")
            if index < 0:
                return
            yield self._items.get(index)
            index -= 1

    def __str__(self) -> str:
        if self.is_empty():
            return "Stack: [] (empty)"
        return f"Stack: [{join_values(self.to_list())}] (top: {self.peek()})"

    def __repr__(self) -> str:
        return f"Stack({self.to_list()!r})"
