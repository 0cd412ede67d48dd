"""Growable array with 1.5x growth and shrink-on-underuse."""
import logging
from typing import Any, Iterator, List, Optional

from .config import DEFAULT_CAPACITY, GROWTH_FACTOR, SHRINK_THRESHOLD
from .types import NOT_FOUND, ConcurrentModificationError, InvalidArgumentError
from .utils import check_index, check_position, join_values, values_equal

logger = logging.getLogger(__name__)


class DynamicArray:
    """Array-backed sequence that resizes itself as elements come and go.

    The backing store is a fixed-length list of slots; only the first
    ``size()`` slots hold live elements. Appends are amortized O(1),
    insertion and removal at index i cost O(N - i).
    """

    def __init__(self, initial_capacity: Optional[int] = None):
        """Create an empty array.

        Args:
            initial_capacity: Starting number of slots (default 10). Zero is
                raised to one slot.

        Raises:
            InvalidArgumentError: If initial_capacity is negative.
        """
        if initial_capacity is None:
            capacity = DEFAULT_CAPACITY
        elif initial_capacity < 0:
            raise InvalidArgumentError(
                f"Initial capacity cannot be negative: {initial_capacity}")
        else:
            capacity = max(initial_capacity, 1)

        self._slots: List[Any] = [None] * capacity
        self._size = 0
        self._generation = 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        self._ensure_capacity()
        self._slots[self._size] = value
        self._size += 1
        self._generation += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert a value at index, shifting the suffix right."""
        check_position(index, self._size)
        self._ensure_capacity()

        for i in range(self._size, index, -1):
            self._slots[i] = self._slots[i - 1]
        self._slots[index] = value
        self._size += 1
        self._generation += 1

    def get(self, index: int) -> Any:
        check_index(index, self._size)
        return self._slots[index]

    def set(self, index: int, value: Any) -> Any:
        """Replace the value at index and return the previous one."""
        check_index(index, self._size)
        old = self._slots[index]
        self._slots[index] = value
        return old

    def remove_at(self, index: int) -> Any:
        """Remove and return the value at index, shifting the suffix left."""
        check_index(index, self._size)
        removed = self._slots[index]

        for i in range(index, self._size - 1):
            self._slots[i] = self._slots[i + 1]
        self._size -= 1
        self._slots[self._size] = None
        self._generation += 1

        self._shrink_if_needed()
        return removed

    def remove(self, value: Any) -> bool:
        """Remove the first occurrence of value. Returns True if found."""
        index = self.index_of(value)
        if index == NOT_FOUND:
            return False
        self.remove_at(index)
        return True

    def index_of(self, value: Any) -> int:
        for i in range(self._size):
            if values_equal(value, self._slots[i]):
                return i
        return NOT_FOUND

    def contains(self, value: Any) -> bool:
        return self.index_of(value) != NOT_FOUND

    def clear(self) -> None:
        """Drop every element and fall back to the default capacity."""
        for i in range(self._size):
            self._slots[i] = None
        self._size = 0
        self._generation += 1
        if len(self._slots) > DEFAULT_CAPACITY:
            self._resize(DEFAULT_CAPACITY)

    def to_list(self) -> List[Any]:
        return self._slots[:self._size]

    def _ensure_capacity(self) -> None:
        capacity = len(self._slots)
        if self._size >= capacity:
            # int(1 * 1.5) == 1, so always grow by at least one slot
            self._resize(max(int(capacity * GROWTH_FACTOR), capacity + 1))

    def _shrink_if_needed(self) -> None:
        capacity = len(self._slots)
        if self._size <= capacity * SHRINK_THRESHOLD and capacity > DEFAULT_CAPACITY:
            self._resize(max(int(capacity / GROWTH_FACTOR), DEFAULT_CAPACITY))

    def _resize(self, new_capacity: int) -> None:
        logger.debug("resizing array from %d to %d slots (size=%d)",
                     len(self._slots), new_capacity, self._size)
        new_slots: List[Any] = [None] * new_capacity
        new_slots[:self._size] = self._slots[:self._size]
        self._slots = new_slots

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        return self._iterate(self._generation)

    def _iterate(self, expected: int) -> Iterator[Any]:
        index = 0
        while True:
            if self._generation != expected:
                raise ConcurrentModificationError("array modified during iteration")
            if index >= self._size:
                return
            yield self._slots[index]
            index += 1

    def __str__(self) -> str:
        return f"[{join_values(self.to_list())}]"

    def __repr__(self) -> str:
        return f"DynamicArray(size={self._size}, capacity={len(self._slots)}, items={self.to_list()!r})"
