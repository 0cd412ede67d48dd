"""Tests for the growable array."""

import pytest


class TestBasics:
    """Append, get, set and sizing."""

    def test_empty_array(self, lib):
        """New array is empty with the default capacity."""
        arr = lib.DynamicArray()
        assert arr.size() == 0
        assert arr.is_empty()
        assert arr.capacity() == 10
        assert str(arr) == "[]"

    def test_append_and_get(self, lib):
        """Appended values are readable in order."""
        arr = lib.DynamicArray()
        for i in range(5):
            arr.append(i * 10)
        assert arr.size() == 5
        assert [arr.get(i) for i in range(5)] == [0, 10, 20, 30, 40]
        assert arr[3] == 30

    def test_set_returns_previous(self, lib):
        """set() returns the old value and get() sees the new one."""
        arr = lib.DynamicArray()
        arr.append("a")
        arr.append("b")
        assert arr.set(1, "z") == "b"
        assert arr.get(1) == "z"

    def test_setitem(self, lib):
        """Subscript assignment goes through set()."""
        arr = lib.DynamicArray()
        arr.append(1)
        arr[0] = 2
        assert arr.to_list() == [2]

    def test_negative_initial_capacity(self, lib):
        """Negative initial capacity is rejected."""
        with pytest.raises(lib.InvalidArgumentError):
            lib.DynamicArray(-1)

    def test_zero_initial_capacity(self, lib):
        """Zero initial capacity still accepts appends."""
        arr = lib.DynamicArray(0)
        assert arr.capacity() == 1
        arr.append("x")
        arr.append("y")
        assert arr.to_list() == ["x", "y"]
        assert arr.capacity() >= 2

    def test_str(self, lib):
        """String form lists the elements."""
        arr = lib.DynamicArray()
        for v in ("Apple", "Banana"):
            arr.append(v)
        assert str(arr) == "[Apple, Banana]"


class TestCapacity:
    """Growth and shrink policy."""

    def test_grows_by_half(self, lib):
        """Overflowing the default capacity grows it 1.5x."""
        arr = lib.DynamicArray()
        for i in range(10):
            arr.append(i)
        assert arr.capacity() == 10
        arr.append(10)
        assert arr.capacity() == 15
        for i in range(11, 16):
            arr.append(i)
        assert arr.capacity() == 22
        assert arr.size() == 16

    def test_size_after_many_appends(self, lib):
        """After N appends size is N and capacity covers it."""
        arr = lib.DynamicArray()
        for i in range(1000):
            arr.append(i)
        assert arr.size() == 1000
        assert arr.capacity() >= 1000
        assert arr.get(999) == 999

    def test_shrinks_when_underused(self, lib):
        """Removing down to a quarter of capacity shrinks the store."""
        arr = lib.DynamicArray()
        for i in range(11):
            arr.append(i)
        assert arr.capacity() == 15
        while arr.size() > 3:
            arr.remove_at(arr.size() - 1)
        assert arr.capacity() == 10
        assert arr.to_list() == [0, 1, 2]

    def test_shrinks_on_value_removal(self, lib):
        """remove(value) shrinks the store the same way remove_at does."""
        arr = lib.DynamicArray()
        for i in range(11):
            arr.append(i)
        assert arr.capacity() == 15
        for v in range(10, 2, -1):
            assert arr.remove(v) is True
        assert arr.size() == 3
        assert arr.capacity() == 10
        assert arr.to_list() == [0, 1, 2]

    def test_never_shrinks_below_default(self, lib):
        """Capacity stays at the default floor."""
        arr = lib.DynamicArray()
        for i in range(5):
            arr.append(i)
        while not arr.is_empty():
            arr.remove_at(0)
        assert arr.capacity() == 10

    def test_set_does_not_shrink(self, lib):
        """set() never changes capacity."""
        arr = lib.DynamicArray()
        for i in range(11):
            arr.append(i)
        arr.set(0, None)
        assert arr.capacity() == 15

    def test_clear_resets_capacity(self, lib):
        """clear() drops elements and returns to the default capacity."""
        arr = lib.DynamicArray()
        for i in range(50):
            arr.append(i)
        arr.clear()
        assert arr.size() == 0
        assert arr.capacity() == 10
        assert arr.to_list() == []


class TestInsertRemove:
    """Index-shifting operations."""

    def test_insert_middle(self, lib):
        """Insert shifts the suffix right."""
        arr = lib.DynamicArray()
        for v in ("Apple", "Banana", "Cherry"):
            arr.append(v)
        arr.insert(1, "Avocado")
        assert arr.to_list() == ["Apple", "Avocado", "Banana", "Cherry"]

    def test_insert_at_end(self, lib):
        """Inserting at index == size appends."""
        arr = lib.DynamicArray()
        arr.append(1)
        arr.insert(1, 2)
        assert arr.to_list() == [1, 2]

    def test_insert_triggers_growth(self, lib):
        """Insert into a full array grows it first."""
        arr = lib.DynamicArray(2)
        arr.append(1)
        arr.append(3)
        arr.insert(1, 2)
        assert arr.to_list() == [1, 2, 3]
        assert arr.capacity() == 3

    def test_remove_at_shifts(self, lib):
        """After remove_at(i), index i holds the old successor."""
        arr = lib.DynamicArray()
        for v in range(6):
            arr.append(v)
        assert arr.remove_at(2) == 2
        assert arr.get(2) == 3
        assert arr.size() == 5

    def test_remove_value(self, lib):
        """remove() deletes the first match only."""
        arr = lib.DynamicArray()
        for v in (1, 2, 1):
            arr.append(v)
        assert arr.remove(1) is True
        assert arr.to_list() == [2, 1]
        assert arr.remove(99) is False

    def test_none_equality(self, lib):
        """None matches None but no other value."""
        arr = lib.DynamicArray()
        arr.append(0)
        arr.append(None)
        assert arr.index_of(None) == 1
        assert arr.contains(None)
        assert arr.remove(None) is True
        assert not arr.contains(None)
        assert arr.index_of(0) == 0

    def test_index_of_missing(self, lib):
        """Missing value yields the not-found sentinel."""
        arr = lib.DynamicArray()
        arr.append("x")
        assert arr.index_of("y") == lib.NOT_FOUND
        assert "x" in arr
        assert "y" not in arr


class TestBounds:
    """Out-of-range access."""

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_get_out_of_range(self, lib, index):
        """Reads outside [0, size) fail."""
        arr = lib.DynamicArray()
        for v in range(3):
            arr.append(v)
        with pytest.raises(lib.OutOfRangeError):
            arr.get(index)

    def test_insert_past_end(self, lib):
        """Insertion allows index == size but not beyond."""
        arr = lib.DynamicArray()
        with pytest.raises(lib.OutOfRangeError):
            arr.insert(1, "x")

    def test_remove_at_empty(self, lib):
        """Removing from an empty array fails."""
        arr = lib.DynamicArray()
        with pytest.raises(IndexError):
            arr.remove_at(0)

    def test_error_message(self, lib):
        """Error reports both the index and the size."""
        arr = lib.DynamicArray()
        with pytest.raises(lib.OutOfRangeError, match="Index: 5, Size: 0"):
            arr.set(5, 1)


class TestIteration:
    """Fail-fast iteration."""

    def test_iterates_in_order(self, lib):
        """Iteration yields live elements only."""
        arr = lib.DynamicArray()
        for v in "abc":
            arr.append(v)
        assert list(arr) == ["a", "b", "c"]

    def test_modification_during_iteration(self, lib):
        """Appending mid-loop raises ConcurrentModificationError."""
        arr = lib.DynamicArray()
        for v in range(3):
            arr.append(v)
        with pytest.raises(lib.ConcurrentModificationError):
            for v in arr:
                arr.append(v)

    def test_modification_between_creation_and_first_step(self, lib):
        """The generation is captured when the iterator is created."""
        arr = lib.DynamicArray()
        arr.append(1)
        it = iter(arr)
        arr.remove_at(0)
        with pytest.raises(lib.ConcurrentModificationError):
            next(it)

    def test_set_during_iteration(self, lib):
        """Replacing values in place does not invalidate the iterator."""
        arr = lib.DynamicArray()
        for v in [1, 2, 3]:
            arr.append(v)
        for i, v in enumerate(arr):
            arr.set(i, v * 10)
        assert arr.to_list() == [10, 20, 30]
