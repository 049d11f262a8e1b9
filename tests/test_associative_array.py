"""Tests for the linear-scan associative array."""

from __future__ import annotations

import pytest

from aacboard.structures.associative_array import (
    DEFAULT_CAPACITY,
    AssociativeArray,
    KeyNotFoundError,
    KVPair,
)


@pytest.fixture
def arr() -> AssociativeArray[str, str]:
    a: AssociativeArray[str, str] = AssociativeArray()
    a.set("a", "apple")
    a.set("b", "banana")
    a.set("c", "cherry")
    return a


class TestConstruction:
    def test_empty(self):
        a = AssociativeArray()
        assert a.size() == 0
        assert len(a) == 0
        assert a.capacity == DEFAULT_CAPACITY
        assert len(a.pairs) == DEFAULT_CAPACITY
        assert a.keys() == []

    def test_str_empty(self):
        assert str(AssociativeArray()) == "{}"

    def test_str(self, arr):
        assert str(arr) == "{ a: apple, b: banana, c: cherry }"


class TestSetGet:
    def test_set_then_get(self, arr):
        assert arr.get("b") == "banana"
        assert arr.has_key("b")

    def test_missing_key(self, arr):
        with pytest.raises(KeyNotFoundError):
            arr.get("zzz")
        assert not arr.has_key("zzz")

    def test_key_not_found_is_key_error(self, arr):
        with pytest.raises(KeyError):
            arr.get("zzz")

    def test_update_keeps_size_and_position(self, arr):
        arr.set("b", "blueberry")
        assert arr.size() == 3
        assert arr.get("b") == "blueberry"
        assert arr.keys() == ["a", "b", "c"]

    def test_set_twice_idempotent(self, arr):
        arr.set("d", "date")
        size = arr.size()
        arr.set("d", "date")
        assert arr.size() == size
        assert arr.get("d") == "date"

    def test_update_replaces_pair(self, arr):
        before = arr.pairs[0]
        arr.set("a", "avocado")
        assert arr.pairs[0] is not before
        assert before == KVPair("a", "apple")

    def test_none_key_rejected(self, arr):
        with pytest.raises(ValueError):
            arr.set(None, "x")
        with pytest.raises(ValueError):
            arr.get(None)
        assert arr.size() == 3

    def test_has_key_none(self, arr):
        assert arr.has_key(None) is False
        assert None not in arr

    def test_none_value_allowed(self, arr):
        arr.set("n", None)
        assert arr.has_key("n")
        assert arr.get("n") is None

    def test_contains(self, arr):
        assert "a" in arr
        assert "z" not in arr


class TestGrowth:
    def test_seventeen_keys(self):
        a = AssociativeArray()
        for i in range(DEFAULT_CAPACITY + 1):
            a.set(f"k{i}", i)
        assert a.size() == DEFAULT_CAPACITY + 1
        assert a.capacity == DEFAULT_CAPACITY * 2
        for i in range(DEFAULT_CAPACITY + 1):
            assert a.get(f"k{i}") == i

    def test_no_growth_at_exact_capacity(self):
        a = AssociativeArray()
        for i in range(DEFAULT_CAPACITY):
            a.set(i, i)
        assert a.capacity == DEFAULT_CAPACITY

    def test_capacity_never_shrinks(self):
        a = AssociativeArray()
        for i in range(40):
            a.set(i, i)
        for i in range(40):
            a.remove(i)
        assert a.size() == 0
        assert a.capacity == 64


class TestRemove:
    def test_remove_middle(self, arr):
        arr.remove("b")
        assert not arr.has_key("b")
        assert arr.size() == 2
        assert arr.keys() == ["a", "c"]
        assert arr.get("c") == "cherry"

    def test_remove_first_and_last(self, arr):
        arr.remove("a")
        arr.remove("c")
        assert arr.keys() == ["b"]

    def test_clears_trailing_slot(self, arr):
        arr.remove("a")
        assert arr.pairs[2] is None
        assert len(arr.pairs) == arr.capacity

    def test_remove_absent_is_noop(self, arr):
        arr.remove("zzz")
        arr.remove(None)
        assert arr.size() == 3

    def test_reinsert_after_remove_appends(self, arr):
        arr.remove("a")
        arr.set("a", "apricot")
        assert arr.keys() == ["b", "c", "a"]


class TestKeys:
    def test_keys_is_a_copy(self, arr):
        keys = arr.keys()
        keys.append("x")
        assert arr.keys() == ["a", "b", "c"]

    def test_items(self, arr):
        assert arr.items() == [("a", "apple"), ("b", "banana"), ("c", "cherry")]

    def test_iter(self, arr):
        assert list(arr) == ["a", "b", "c"]

    def test_find(self, arr):
        assert arr.find("c") == 2
        with pytest.raises(KeyNotFoundError):
            arr.find("zzz")


class TestClone:
    def test_same_contents(self, arr):
        copy = arr.clone()
        assert copy.size() == arr.size()
        assert copy.capacity == arr.capacity
        assert copy.items() == arr.items()

    def test_fresh_pairs(self, arr):
        copy = arr.clone()
        assert all(copy.pairs[i] is not arr.pairs[i] for i in range(arr.size()))

    def test_independent(self, arr):
        copy = arr.clone()
        copy.set("d", "date")
        copy.set("a", "avocado")
        copy.remove("b")
        assert arr.size() == 3
        assert arr.keys() == ["a", "b", "c"]
        assert arr.get("a") == "apple"

    def test_original_mutation_does_not_leak(self, arr):
        copy = arr.clone()
        arr.set("z", "zucchini")
        assert not copy.has_key("z")

    def test_clone_of_grown_array(self):
        a = AssociativeArray()
        for i in range(20):
            a.set(i, str(i))
        copy = a.clone()
        assert copy.capacity == 32
        copy.set(99, "x")
        assert a.size() == 20
