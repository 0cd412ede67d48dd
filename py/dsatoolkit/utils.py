"""Utility functions shared by the containers."""
from typing import Any, Iterable

from .types import InvalidArgumentError, OutOfRangeError


def values_equal(a: Any, b: Any) -> bool:
    """Null-safe equality: None only equals None, everything else uses ==."""
    if a is None or b is None:
        return a is b
    return a == b


def check_index(index: int, size: int) -> None:
    """Validate an index for read/update/delete access (0 <= index < size)."""
    if index < 0 or index >= size:
        raise OutOfRangeError(index, size)


def check_position(index: int, size: int) -> None:
    """Validate an index for insertion (0 <= index <= size)."""
    if index < 0 or index > size:
        raise OutOfRangeError(index, size)


def require_sequence(seq: Any, name: str = "sequence") -> None:
    """Reject a missing sequence reference."""
    if seq is None:
        raise InvalidArgumentError(f"{name} cannot be None")


def truncate(value: Any, width: int) -> str:
    """Render a value, shortening it with '...' if longer than width."""
    text = str(value)
    if len(text) > width:
        return text[:width - 3] + "..."
    return text


def join_values(values: Iterable[Any], sep: str = ", ") -> str:
    """Join values with their str() rendering."""
    return sep.join(str(v) for v in values)
