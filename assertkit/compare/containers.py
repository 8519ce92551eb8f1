"""Containment, subset and multiset comparison."""

from __future__ import annotations

from collections import Counter

from .equality import deep_equal
from .kinds import element_key, elements, kind_of
from .types import Kind, TypeMismatch, Unhashable, UnsupportedType, type_name


def _has_key(container, item) -> bool:
    try:
        return item in container
    except TypeError as exc:
        raise Unhashable(f"unhashable item for {type_name(container)} lookup: {type_name(item)}") from exc


def _in_sequence(items: list, item: object) -> bool:
    return any(deep_equal(element, item) for element in items)


def contains(container: object, item: object) -> bool:
    """Whether *container* includes *item*.

    Strings and bytes do a substring search; sequences scan with deep
    equality; mappings check key presence; sets check membership.

    Raises:
        TypeMismatch: *item* is not a string for a string container (or not
            bytes-like for a bytes container).
        Unhashable: *item* cannot be looked up in a mapping or set.
        UnsupportedType: *container* is not a supported container kind.
    """
    kind = kind_of(container)

    if kind is Kind.STRING:
        if not isinstance(item, str):
            raise TypeMismatch(
                f"item must be a string when container is a string, got {type_name(item)}"
            )
        return item in container
    if kind is Kind.BYTES:
        if not isinstance(item, (bytes, bytearray)):
            raise TypeMismatch(
                f"item must be bytes when container is bytes, got {type_name(item)}"
            )
        return item in container
    if kind is Kind.SEQUENCE:
        return _in_sequence(elements(container), item)
    if kind in (Kind.MAPPING, Kind.SET):
        return _has_key(container, item)

    raise UnsupportedType(f"unsupported container type: {type_name(container)}")


def is_subset(superset: object, subset: object) -> bool:
    """Whether every member of *subset* is found in *superset*.

    For sequences this is an existence check: a value repeated in *subset*
    needs to occur only once in *superset*. Use :func:`same_elements` for
    counted comparison. For mappings every key of *subset* must be present
    in *superset* with a deeply equal value.
    """
    kind = kind_of(superset)
    sub_kind = kind_of(subset)

    if kind is Kind.SEQUENCE:
        if sub_kind not in (Kind.SEQUENCE, Kind.SET):
            raise TypeMismatch(
                f"subset must be a sequence, got {type_name(subset)} for {type_name(superset)}"
            )
        items = elements(superset)
        return all(_in_sequence(items, element) for element in elements(subset))

    if kind is Kind.MAPPING:
        if sub_kind is not Kind.MAPPING:
            raise TypeMismatch(
                f"subset must be a mapping, got {type_name(subset)} for {type_name(superset)}"
            )
        for key, value in subset.items():
            if not _has_key(superset, key):
                return False
            if not deep_equal(superset[key], value):
                return False
        return True

    if kind is Kind.SET:
        if sub_kind not in (Kind.SEQUENCE, Kind.SET):
            raise TypeMismatch(
                f"subset must be a set or sequence, got {type_name(subset)} for {type_name(superset)}"
            )
        return all(_has_key(superset, element) for element in elements(subset))

    raise UnsupportedType(f"unsupported type for subset: {type_name(superset)}")


def same_elements(a: object, b: object) -> bool:
    """Whether two sequences hold the same elements with the same counts.

    Order is ignored. Sequences of different lengths are unequal without
    looking at the elements.

    Raises:
        UnsupportedType: either argument is not a sequence.
        Unhashable: an element cannot serve as a distinguishing key.
    """
    if kind_of(a) is not Kind.SEQUENCE:
        raise UnsupportedType(f"first argument must be a sequence, got {type_name(a)}")
    if kind_of(b) is not Kind.SEQUENCE:
        raise UnsupportedType(f"second argument must be a sequence, got {type_name(b)}")

    items_a = elements(a)
    items_b = elements(b)
    if len(items_a) != len(items_b):
        return False

    counts_a = Counter(element_key(v) for v in items_a)
    counts_b = Counter(element_key(v) for v in items_b)
    return counts_a == counts_b
