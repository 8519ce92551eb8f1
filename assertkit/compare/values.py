"""Nilness, emptiness and zero values."""

from __future__ import annotations

import dataclasses
import weakref

import numpy as np

from .equality import deep_equal
from .kinds import is_alive, kind_of, length
from .types import NILLABLE_KINDS, SIZED_KINDS, Kind, UnsupportedType, type_name


def is_nil(value: object) -> bool:
    """Whether *value* is ``None`` or a weak reference whose referent is gone.

    A dead reference is not ``None`` itself, so ``value is None`` alone is not
    enough to detect it.
    """
    kind = kind_of(value)
    if kind not in NILLABLE_KINDS:
        return False
    if kind is Kind.NONE:
        return True
    return not is_alive(value)


def zero_value(value: object) -> object:
    """Return the zero value of *value*'s type.

    Raises:
        UnsupportedType: If the type cannot be built without arguments.
    """
    if value is None:
        return None
    try:
        return type(value)()
    except TypeError as exc:
        raise UnsupportedType(f"no zero value for type {type_name(value)}") from exc


def is_empty(value: object) -> bool:
    """Whether *value* is ``None``, has length 0, or equals its zero value.

    Live weak references are followed and the referent is checked instead.
    Dataclass instances are empty when every field is empty.
    """
    kind = kind_of(value)

    if kind is Kind.NONE:
        return True
    if isinstance(value, np.ndarray):
        return value.size == 0
    if kind in SIZED_KINDS:
        return length(value) == 0
    if kind is Kind.REFERENCE:
        if not is_alive(value):
            return True
        if type(value) in weakref.ProxyTypes:
            return _proxy_empty(value)
        return is_empty(value())
    if kind is Kind.STRUCT and dataclasses.is_dataclass(value):
        return all(is_empty(getattr(value, f.name)) for f in dataclasses.fields(value))

    try:
        zero = zero_value(value)
    except UnsupportedType:
        return False
    return deep_equal(value, zero)


def _proxy_empty(proxy: object) -> bool:
    # A proxy cannot hand out its referent; ask it through forwarded operations
    try:
        return len(proxy) == 0
    except TypeError:
        pass
    try:
        return bool(proxy == proxy.__class__())
    except (TypeError, ValueError):
        return False
