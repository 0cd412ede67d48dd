"""Searching over sequences: the binary search family plus linear search.

Every binary search routine assumes the input is sorted ascending and does
not verify it; use ``is_sorted`` when in doubt. A ``None`` sequence is an
``InvalidArgumentError``; an empty sequence is simply a miss.
"""
from typing import Any, Sequence

from .types import NOT_FOUND
from .utils import require_sequence


def binary_search(seq: Sequence[Any], target: Any) -> int:
    """Index of some element equal to target, or NOT_FOUND.

    With duplicates, which matching index is returned is unspecified.
    """
    require_sequence(seq)
    left, right = 0, len(seq) - 1

    while left <= right:
        mid = left + (right - left) // 2
        if seq[mid] == target:
            return mid
        elif seq[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return NOT_FOUND


def binary_search_recursive(seq: Sequence[Any], target: Any) -> int:
    """Recursive formulation of binary_search."""
    require_sequence(seq)
    return _binary_search_range(seq, target, 0, len(seq) - 1)


def _binary_search_range(seq: Sequence[Any], target: Any, left: int, right: int) -> int:
    if left > right:
        return NOT_FOUND

    mid = left + (right - left) // 2
    if seq[mid] == target:
        return mid
    if seq[mid] < target:
        return _binary_search_range(seq, target, mid + 1, right)
    return _binary_search_range(seq, target, left, mid - 1)


def find_first(seq: Sequence[Any], target: Any) -> int:
    """Leftmost index of target, or NOT_FOUND."""
    require_sequence(seq)
    left, right = 0, len(seq) - 1
    result = NOT_FOUND

    while left <= right:
        mid = left + (right - left) // 2
        if seq[mid] == target:
            result = mid
            # Keep looking in the left half
            right = mid - 1
        elif seq[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return result


def find_last(seq: Sequence[Any], target: Any) -> int:
    """Rightmost index of target, or NOT_FOUND."""
    require_sequence(seq)
    left, right = 0, len(seq) - 1
    result = NOT_FOUND

    while left <= right:
        mid = left + (right - left) // 2
        if seq[mid] == target:
            result = mid
            # Keep looking in the right half
            left = mid + 1
        elif seq[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return result


def count_occurrences(seq: Sequence[Any], target: Any) -> int:
    """Number of elements equal to target, in O(log n)."""
    first = find_first(seq, target)
    if first == NOT_FOUND:
        return 0
    return find_last(seq, target) - first + 1


def find_insertion_point(seq: Sequence[Any], target: Any) -> int:
    """Leftmost index where target can be inserted keeping seq sorted."""
    require_sequence(seq)
    left, right = 0, len(seq) - 1

    while left <= right:
        mid = left + (right - left) // 2
        if seq[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return left


def search_rotated(seq: Sequence[Any], target: Any) -> int:
    """Binary search in an ascending sequence rotated at an unknown pivot.

    At each step one of the two halves around mid is internally sorted;
    comparing seq[left] to seq[mid] tells which, and the search continues in
    whichever half can contain target.
    """
    require_sequence(seq)
    left, right = 0, len(seq) - 1

    while left <= right:
        mid = left + (right - left) // 2
        if seq[mid] == target:
            return mid

        if seq[left] <= seq[mid]:
            # Left half is sorted
            if seq[left] <= target < seq[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            # Right half is sorted
            if seq[mid] < target <= seq[right]:
                left = mid + 1
            else:
                right = mid - 1

    return NOT_FOUND


def linear_search(seq: Sequence[Any], target: Any) -> int:
    require_sequence(seq)
    for i, value in enumerate(seq):
        if value == target:
            return i
    return NOT_FOUND


def is_sorted(seq: Sequence[Any]) -> bool:
    """True if seq is in non-decreasing order."""
    require_sequence(seq)
    for i in range(1, len(seq)):
        if seq[i] < seq[i - 1]:
            return False
    return True
