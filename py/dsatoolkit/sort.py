"""Stable merge sort, top-down and bottom-up."""
import logging
from typing import Any, Callable, Iterable, List, MutableSequence, Optional

from .types import SortStats
from .utils import require_sequence

logger = logging.getLogger(__name__)

KeyFunc = Optional[Callable[[Any], Any]]


class _Merger:
    """Merges adjacent sorted runs of items through one shared buffer."""

    def __init__(self, items: MutableSequence[Any], key: KeyFunc):
        self.items = items
        self.keys = [key(v) for v in items] if key is not None else None
        self.buffer: List[Any] = [None] * len(items)
        self.key_buffer: List[Any] = [None] * len(items) if key is not None else []
        self.comparisons = 0
        self.merges = 0

    def _key(self, index: int) -> Any:
        return self.keys[index] if self.keys is not None else self.items[index]

    def merge(self, left: int, mid: int, right: int) -> None:
        """Merge items[left:mid] and items[mid:right] (half-open ranges)."""
        self.merges += 1
        i, j, k = left, mid, left

        while i < mid and j < right:
            self.comparisons += 1
            # <= keeps equal elements from the left run first (stability)
            if self._key(i) <= self._key(j):
                self._take(i, k)
                i += 1
            else:
                self._take(j, k)
                j += 1
            k += 1

        while i < mid:
            self._take(i, k)
            i += 1
            k += 1
        while j < right:
            self._take(j, k)
            j += 1
            k += 1

        self.items[left:right] = self.buffer[left:right]
        if self.keys is not None:
            self.keys[left:right] = self.key_buffer[left:right]

    def _take(self, source: int, target: int) -> None:
        self.buffer[target] = self.items[source]
        if self.keys is not None:
            self.key_buffer[target] = self.keys[source]

    def stats(self) -> SortStats:
        return {"comparisons": self.comparisons, "merges": self.merges}


def merge_sort(items: MutableSequence[Any], key: KeyFunc = None) -> SortStats:
    """Sort items in place, stably, in O(n log n).

    Args:
        items: A mutable sequence (typically a list) to sort.
        key: Optional one-argument function extracting the comparison key,
            with the same meaning as for sorted().

    Returns:
        Counters for the comparisons and merges performed.

    Raises:
        InvalidArgumentError: If items is None.
    """
    require_sequence(items, "items")
    merger = _Merger(items, key)
    if len(items) > 1:
        _sort_range(merger, 0, len(items))
    logger.debug("merge_sort: n=%d comparisons=%d merges=%d",
                 len(items), merger.comparisons, merger.merges)
    return merger.stats()


def _sort_range(merger: _Merger, left: int, right: int) -> None:
    if right - left < 2:
        return
    mid = left + (right - left) // 2
    _sort_range(merger, left, mid)
    _sort_range(merger, mid, right)
    merger.merge(left, mid, right)


def merge_sort_iterative(items: MutableSequence[Any], key: KeyFunc = None) -> SortStats:
    """Bottom-up merge sort: merge runs of width 1, 2, 4, ... in place.

    Produces exactly the same ordering as merge_sort.
    """
    require_sequence(items, "items")
    merger = _Merger(items, key)
    n = len(items)

    width = 1
    while width < n:
        for left in range(0, n - width, 2 * width):
            merger.merge(left, left + width, min(left + 2 * width, n))
        width *= 2

    logger.debug("merge_sort_iterative: n=%d comparisons=%d merges=%d",
                 n, merger.comparisons, merger.merges)
    return merger.stats()


def sorted_copy(values: Iterable[Any], key: KeyFunc = None) -> List[Any]:
    """Return a new stably sorted list, leaving the input untouched."""
    require_sequence(values, "values")
    items = list(values)
    merge_sort(items, key=key)
    return items
