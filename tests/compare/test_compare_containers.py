"""Tests for compare.containers: contains, subset and same elements."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

import numpy as np
import pytest

from assertkit.compare import (
    TypeMismatch,
    Unhashable,
    UnsupportedType,
    contains,
    deep_equal,
    is_subset,
    same_elements,
)


class Plain:
    def __init__(self, value):
        self.value = value


@dataclass
class Pair:
    left: object
    right: object


class Slotted:
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


class Token:
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, Token) and self.text.lower() == other.text.lower()

    def __hash__(self):
        return hash(self.text.lower())


class TestContains:
    def test_substring(self):
        assert contains("hello world", "world") is True
        assert contains("hello world", "moon") is False

    def test_string_requires_string_item(self):
        with pytest.raises(TypeMismatch, match="got int"):
            contains("hello", 1)

    def test_bytes(self):
        assert contains(b"abc", b"b") is True
        with pytest.raises(TypeMismatch):
            contains(b"abc", "b")

    def test_sequence(self):
        assert contains([1, 2, 3], 2) is True
        assert contains([1, 2, 3], 4) is False
        assert contains([[1], [2]], [2]) is True
        assert contains((1, 2), 1) is True

    def test_sequence_is_type_strict(self):
        assert contains([1, 2], 1.0) is False

    def test_array(self):
        assert contains(np.array([1, 2, 3]), 2) is True
        assert contains(np.array([1, 2, 3]), 5) is False

    def test_mapping_checks_keys(self):
        assert contains({"a": 1}, "a") is True
        assert contains({"a": 1}, 1) is False

    def test_mapping_unhashable_item(self):
        with pytest.raises(Unhashable):
            contains({"a": 1}, ["a"])

    def test_set(self):
        assert contains({1, 2}, 2) is True
        assert contains(frozenset({1}), 3) is False

    @pytest.mark.parametrize("container", [5, 1.5, None, object()])
    def test_unsupported(self, container):
        with pytest.raises(UnsupportedType, match="unsupported container type"):
            contains(container, 1)


class TestIsSubset:
    def test_scenarios(self):
        assert is_subset([1, 2, 3], [4, 5]) is False
        assert is_subset([1, 2, 3], [1, 3]) is True
        assert is_subset([1, 2, 3], []) is True

    def test_sequence_checks_existence_not_counts(self):
        # duplicates in the subset need a single occurrence in the superset
        assert is_subset([1, 2, 3], [1, 1, 1]) is True
        assert same_elements([1, 2, 3], [1, 1, 1]) is False

    def test_nested_elements(self):
        assert is_subset([[1], [2]], [[2]]) is True

    def test_mapping(self):
        assert is_subset({"a": 1, "b": 2}, {"a": 1}) is True
        assert is_subset({"a": 1}, {"a": 2}) is False
        assert is_subset({"a": 1}, {"c": 1}) is False
        assert is_subset({"a": [1, 2]}, {"a": [1, 2]}) is True

    def test_set(self):
        assert is_subset({1, 2, 3}, {1, 2}) is True
        assert is_subset({1, 2, 3}, [3, 4]) is False

    def test_kind_mismatch(self):
        with pytest.raises(TypeMismatch):
            is_subset({"a": 1}, [1])
        with pytest.raises(TypeMismatch):
            is_subset([1], {"a": 1})

    def test_unsupported(self):
        with pytest.raises(UnsupportedType, match="unsupported type for subset"):
            is_subset("abc", "a")

    @pytest.mark.parametrize("superset, subset", [
        ([1, 2, 3], [3, 1]),
        ([[1], "x", 2.5], ["x", [1]]),
        ({1, 2}, [2]),
    ])
    def test_members_are_contained(self, superset, subset):
        assert is_subset(superset, subset) is True
        for element in subset:
            assert contains(superset, element) is True


class TestSameElements:
    def test_scenarios(self):
        assert same_elements([1, 2, 3], [3, 2, 1]) is True
        assert same_elements([1, 2, 2], [1, 2, 3]) is False

    def test_counts_matter(self):
        assert same_elements([1, 1, 2], [1, 2, 2]) is False
        assert same_elements(["a", "a", "b"], ["a", "b", "a"]) is True

    def test_length_mismatch(self):
        assert same_elements([1, 2], [1, 2, 2]) is False
        # lengths are compared before elements are keyed
        assert same_elements([[1]], [[1], [2]]) is False

    def test_types_are_distinguished(self):
        assert same_elements([1, True], [1, 1]) is False
        assert same_elements([1, 1.0], [1.0, 1]) is True

    def test_tuples(self):
        assert same_elements([(1, 2), (3,)], [(3,), (1, 2)]) is True
        assert same_elements([(1, 2)], [(1.0, 2)]) is False

    def test_arrays(self):
        assert same_elements(np.array([3, 1, 2]), [1, 2, 3]) is True

    @pytest.mark.parametrize("a, b", [
        ([1, 2, 3], [3, 2, 1]),
        ([1, 2, 2], [1, 2, 3]),
        (["x"], ["y"]),
        ([], []),
    ])
    def test_symmetric(self, a, b):
        assert same_elements(a, b) == same_elements(b, a)

    def test_any_permutation(self):
        values = [1, "a", (2, 3), 1, None]
        for perm in itertools.permutations(values):
            assert same_elements(values, list(perm)) is True

    def test_unhashable_elements(self):
        with pytest.raises(Unhashable, match="list"):
            same_elements([1, [2]], [[2], 1])
        with pytest.raises(Unhashable):
            same_elements([{"a": 1}], [{"a": 1}])
        with pytest.raises(Unhashable):
            same_elements([(1, [2])], [(1, [2])])

    def test_arguments_must_be_sequences(self):
        with pytest.raises(UnsupportedType, match="first argument"):
            same_elements("abc", [1])
        with pytest.raises(UnsupportedType, match="second argument"):
            same_elements([1], {"a": 1})


class TestSameElementsStructs:
    def test_plain_objects_counted_by_fields(self):
        assert same_elements([Plain(1), Plain(2)], [Plain(2), Plain(1)]) is True
        assert same_elements([Plain(1), Plain(1)], [Plain(1), Plain(2)]) is False

    def test_dataclasses_counted_by_fields(self):
        assert same_elements([Pair(1, "a"), Pair(2, "b")], [Pair(2, "b"), Pair(1, "a")]) is True
        assert same_elements([Pair(1, "a")], [Pair("a", 1)]) is False
        assert same_elements([Pair(1, (2, 3))], [Pair(1, (2, 3))]) is True

    def test_slotted_objects(self):
        assert same_elements([Slotted(1), Slotted(2)], [Slotted(2), Slotted(1)]) is True
        assert same_elements([Slotted(1)], [Slotted(3)]) is False

    def test_field_types_are_strict(self):
        assert same_elements([Plain(1)], [Plain(1.0)]) is False
        assert same_elements([Pair(1, True)], [Pair(1, 1)]) is False

    def test_custom_eq_and_hash_used(self):
        assert same_elements([Token("A"), Token("b")], [Token("B"), Token("a")]) is True

    @pytest.mark.parametrize("a, b", [
        (Plain(1), Plain(1)),
        (Plain(1), Plain(2)),
        (Pair(1, 2), Pair(1, 2)),
        (Pair(1, 2), Pair(1, 2.0)),
        (Slotted("x"), Slotted("x")),
    ])
    def test_counting_agrees_with_deep_equal(self, a, b):
        assert same_elements([a], [b]) is deep_equal(a, b)

    def test_unhashable_field(self):
        with pytest.raises(Unhashable, match="list"):
            same_elements([Plain([1])], [Plain([1])])
        with pytest.raises(Unhashable, match="dict"):
            same_elements([Pair(1, {"k": 2})], [Pair(1, {"k": 2})])

    def test_self_referencing_element(self):
        node = Plain(None)
        node.value = node
        with pytest.raises(Unhashable, match="cyclic"):
            same_elements([node], [node])
