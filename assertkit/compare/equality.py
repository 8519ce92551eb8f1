"""
Deep structural equality

One recursive comparator shared by equality, containment, subset and
multiset checks. Values of different types are never equal, even when they
are numerically equivalent (``1`` vs ``1.0`` vs ``True``).
"""

from __future__ import annotations

import dataclasses
import weakref
from collections import Counter

import numpy as np

from .kinds import element_key, has_custom_eq, is_alive, kind_of, struct_fields
from .types import Kind, Unhashable


def deep_equal(a: object, b: object) -> bool:
    """Recursively compare *a* and *b* by type, shape and contents."""
    return _deep_equal(a, b, set())


def _deep_equal(a: object, b: object, visited: set) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    kind = kind_of(a)

    if kind in (Kind.SEQUENCE, Kind.MAPPING, Kind.STRUCT):
        # Already being compared further up: assume equal to break the cycle
        pair = (id(a), id(b))
        if pair in visited:
            return True
        visited.add(pair)

    if kind is Kind.SEQUENCE:
        if isinstance(a, np.ndarray):
            return a.dtype == b.dtype and a.shape == b.shape and bool(np.array_equal(a, b))
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, visited) for x, y in zip(a, b))

    if kind is Kind.MAPPING:
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b:
                return False
            if not _deep_equal(value, b[key], visited):
                return False
        return True

    if kind is Kind.SET:
        return _set_equal(a, b)

    if kind is Kind.STRUCT:
        return _struct_equal(a, b, visited)

    if kind is Kind.REFERENCE:
        return _reference_equal(a, b, visited)

    return _scalar_equal(a, b)


def _struct_equal(a: object, b: object, visited: set) -> bool:
    if dataclasses.is_dataclass(a):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), visited)
            for f in dataclasses.fields(a)
        )
    if has_custom_eq(type(a)):
        return _scalar_equal(a, b)
    fields_a, fields_b = struct_fields(a), struct_fields(b)
    if fields_a.keys() != fields_b.keys():
        return False
    return all(_deep_equal(fields_a[name], fields_b[name], visited) for name in fields_a)


def _set_equal(a: object, b: object) -> bool:
    if len(a) != len(b):
        return False
    try:
        return Counter(map(element_key, a)) == Counter(map(element_key, b))
    except Unhashable:
        return _scalar_equal(a, b)


def _reference_equal(a: object, b: object, visited: set) -> bool:
    alive_a, alive_b = is_alive(a), is_alive(b)
    if not alive_a or not alive_b:
        return alive_a == alive_b
    if type(a) in weakref.ProxyTypes:
        return _scalar_equal(a, b)
    return _deep_equal(a(), b(), visited)


def _scalar_equal(a: object, b: object) -> bool:
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # e.g. objects whose __eq__ returns an array
        return False
