"""FIFO queue backed by collections.deque."""
from collections import deque
from typing import Any, Deque, Iterator, List

from .types import ConcurrentModificationError, EmptyContainerError
from .utils import join_values, truncate, values_equal

_CELL_WIDTH = 8
_END = object()


class Queue:
    """Thin FIFO adapter: enqueue at the back, dequeue from the front."""

    def __init__(self):
        self._items: Deque[Any] = deque()
        self._generation = 0

    def enqueue(self, value: Any) -> None:
        self._items.append(value)
        self._generation += 1

    def offer(self, value: Any) -> None:
        self.enqueue(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise EmptyContainerError("Queue is empty")
        self._generation += 1
        return self._items.popleft()

    def poll(self) -> Any:
        """Like dequeue, but returns None on an empty queue."""
        if not self._items:
            return None
        return self.dequeue()

    def peek_front(self) -> Any:
        if not self._items:
            raise EmptyContainerError("Queue is empty")
        return self._items[0]

    def peek_back(self) -> Any:
        if not self._items:
            raise EmptyContainerError("Queue is empty")
        return self._items[-1]

    def front(self) -> Any:
        """Like peek_front, but returns None on an empty queue."""
        return self._items[0] if self._items else None

    def contains(self, value: Any) -> bool:
        return any(values_equal(value, item) for item in self._items)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()
        self._generation += 1

    def to_list(self) -> List[Any]:
        """Elements from front to back."""
        return list(self._items)

    def copy(self) -> "Queue":
        clone = Queue()
        clone._items = deque(self._items)
        return clone

    def to_visual_string(self) -> str:
        if not self._items:
            return "Queue is empty\nFRONT [                    ] REAR\n"
        cells = "|".join(f" {truncate(v, _CELL_WIDTH)} " for v in self._items)
        return f"Queue (front to rear):\nFRONT [{cells}] REAR\n"

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return self._iterate(iter(self._items), self._generation)

    def _iterate(self, values: Iterator[Any], expected: int) -> Iterator[Any]:
        while True:
            # Checked before next() so deque's own RuntimeError never fires first
            if self._generation != expected:
                raise ConcurrentModificationError("queue modified during iteration")
            value = next(values, _END)
            if value is _END:
                return
            yield value

    def __str__(self) -> str:
        if not self._items:
            return "Queue: [] (empty)"
        return (f"Queue: [{join_values(self._items)}] "
                f"(front: {self.peek_front()}, rear: {self.peek_back()})")

    def __repr__(self) -> str:
        return f"Queue({self.to_list()!r})"
