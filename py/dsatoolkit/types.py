"""Type definitions and errors for the dsatoolkit library."""
from typing import Dict, List, Optional, TypedDict


# Returned by lookups that miss (index_of, search, degree, ...)
NOT_FOUND = -1


class BFSResult(TypedDict):
    """Breadth-first traversal with level and parent bookkeeping."""
    order: List[int]
    levels: Dict[int, int]
    parent: Dict[int, int]


class DFSResult(TypedDict):
    """Depth-first traversal with discovery/finish timestamps."""
    order: List[int]
    discovery: Dict[int, int]
    finish: Dict[int, int]
    parent: Dict[int, int]


class PathResult(TypedDict):
    """Result of a shortest path query."""
    exists: bool
    path: List[int]
    distance: int


class SortStats(TypedDict):
    """Work counters reported by the merge sort routines."""
    comparisons: int
    merges: int


# Errors
class DSAError(Exception):
    """Base error for dsatoolkit operations."""
    pass


class InvalidArgumentError(DSAError, ValueError):
    """A required argument was missing or malformed."""
    pass


class OutOfRangeError(DSAError, IndexError):
    """Index outside the valid bounds of a container."""

    def __init__(self, index: int, size: int, message: Optional[str] = None):
        self.index = index
        self.size = size
        super().__init__(message or f"Index: {index}, Size: {size}")


class EmptyContainerError(DSAError, LookupError):
    """Pop/peek style operation on an empty container."""
    pass


class ConcurrentModificationError(DSAError, RuntimeError):
    """Container was structurally modified while being iterated."""
    pass
