"""Data structures and algorithms toolkit - public API."""

from .types import (
    NOT_FOUND, BFSResult, DFSResult, PathResult, SortStats,
    DSAError, InvalidArgumentError, OutOfRangeError,
    EmptyContainerError, ConcurrentModificationError,
)

from .dynamic_array import DynamicArray
from .linked_list import SinglyLinkedList
from .stack import Stack
from .queue import Queue
from .graph import Graph

from .traversal import bfs, dfs, bfs_tree, dfs_tree
from .paths import has_path, shortest_path, connected_components

from .search import (
    binary_search, binary_search_recursive, find_first, find_last,
    count_occurrences, find_insertion_point, search_rotated,
    linear_search, is_sorted,
)
from .sort import merge_sort, merge_sort_iterative, sorted_copy

__all__ = [
    # Types
    "NOT_FOUND", "BFSResult", "DFSResult", "PathResult", "SortStats",
    "DSAError", "InvalidArgumentError", "OutOfRangeError",
    "EmptyContainerError", "ConcurrentModificationError",
    # Containers
    "DynamicArray", "SinglyLinkedList", "Stack", "Queue", "Graph",
    # Graph algorithms
    "bfs", "dfs", "bfs_tree", "dfs_tree",
    "has_path", "shortest_path", "connected_components",
    # Searching
    "binary_search", "binary_search_recursive", "find_first", "find_last",
    "count_occurrences", "find_insertion_point", "search_rotated",
    "linear_search", "is_sorted",
    # Sorting
    "merge_sort", "merge_sort_iterative", "sorted_copy",
]
