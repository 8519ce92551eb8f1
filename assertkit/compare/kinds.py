"""
Runtime kind dispatch

Maps an arbitrary value to a :class:`Kind` through an ordered table of
``(types, kind)`` pairs. Weak references are resolved before the table since
a proxy forwards ``isinstance`` checks to its referent.
"""

from __future__ import annotations

import asyncio
import dataclasses
import functools
import queue
import types
import weakref
from collections import deque
from collections.abc import Hashable, Mapping

import numpy as np

from .types import Kind, Unhashable, UnsupportedType, type_name

_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    functools.partial,
)

# Order matters: bool before int, str before the generic sequence types
_KIND_TABLE = (
    ((bool, np.bool_), Kind.BOOL),
    ((int, np.integer), Kind.INT),
    ((float, np.floating), Kind.FLOAT),
    ((complex, np.complexfloating), Kind.COMPLEX),
    ((str,), Kind.STRING),
    ((bytes, bytearray), Kind.BYTES),
    ((list, tuple, range, deque, np.ndarray), Kind.SEQUENCE),
    ((set, frozenset), Kind.SET),
    ((Mapping,), Kind.MAPPING),
    ((queue.Queue, queue.SimpleQueue, asyncio.Queue), Kind.CHANNEL),
    ((type,), Kind.TYPE),
    (_FUNCTION_TYPES, Kind.FUNCTION),
)


def is_reference(value: object) -> bool:
    """Whether *value* is a weak reference or weak proxy."""
    return type(value) in weakref.ProxyTypes or isinstance(value, weakref.ref)


def kind_of(value: object) -> Kind:
    """Classify *value* into its runtime kind."""
    if value is None:
        return Kind.NONE
    if is_reference(value):
        return Kind.REFERENCE
    for kinds, kind in _KIND_TABLE:
        if isinstance(value, kinds):
            return kind
    if dataclasses.is_dataclass(value) or hasattr(value, "__dict__") or _has_slots(type(value)):
        return Kind.STRUCT
    return Kind.OTHER


def is_alive(ref: object) -> bool:
    """Whether the referent of a weak reference or proxy still exists."""
    if type(ref) in weakref.ProxyTypes:
        try:
            ref.__class__  # noqa: B018
        except ReferenceError:
            return False
        return True
    return ref() is not None


def length(value: object) -> int:
    """Return the length of a sized value (queue size for channels).

    Raises:
        UnsupportedType: If *value* has no length.
    """
    kind = kind_of(value)
    if kind is Kind.CHANNEL:
        return value.qsize()
    if isinstance(value, np.ndarray) and value.ndim == 0:
        raise UnsupportedType(f"unsupported type for length check: 0-d {type_name(value)}")
    if kind in (Kind.STRING, Kind.BYTES, Kind.SEQUENCE, Kind.SET, Kind.MAPPING):
        return len(value)
    raise UnsupportedType(f"unsupported type for length check: {type_name(value)}")


def elements(value: object) -> list:
    """Return the elements of a sequence as a list.

    numpy arrays are unpacked with ``tolist()`` so their elements compare as
    plain Python values.
    """
    if isinstance(value, np.ndarray):
        return value.tolist()
    return list(value)


# ---------------------------------------------------------------------------
# Struct fields
# ---------------------------------------------------------------------------

def _has_slots(tp: type) -> bool:
    return any("__slots__" in vars(cls) for cls in tp.__mro__[:-1])


def _slot_names(tp: type) -> list:
    names = []
    for cls in tp.__mro__:
        slots = vars(cls).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{cls.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def has_custom_eq(tp: type) -> bool:
    """Whether *tp* defines its own ``__eq__``."""
    return tp.__eq__ is not object.__eq__


def struct_fields(value: object) -> dict:
    """Attribute values of a struct-like object.

    Combines the instance ``__dict__`` with every slot that is set, walking
    ``__slots__`` across the MRO.
    """
    fields = dict(getattr(value, "__dict__", {}))
    for name in _slot_names(type(value)):
        try:
            fields[name] = getattr(value, name)
        except AttributeError:
            continue
    return fields


# ---------------------------------------------------------------------------
# Element keys
# ---------------------------------------------------------------------------

def element_key(value: object) -> Hashable:
    """Build a hashable key that distinguishes values the way deep_equal does.

    The runtime type is part of the key, so ``1``, ``1.0`` and ``True``
    count separately. Tuples and frozensets are keyed recursively. Structs
    compared field by field (dataclasses, and classes without their own
    ``__eq__``) are keyed by their field values.

    Raises:
        Unhashable: *value* (or a nested value) cannot serve as a key.
    """
    return _element_key(value, set())


def _element_key(value: object, active: set) -> Hashable:
    kind = kind_of(value)
    if isinstance(value, tuple):
        return (type(value), tuple(_element_key(v, active) for v in value))
    if isinstance(value, frozenset):
        return (type(value), frozenset(_element_key(v, active) for v in value))
    if kind in (Kind.SEQUENCE, Kind.MAPPING, Kind.SET):
        raise Unhashable(f"unsupported element type for comparison: {type_name(value)}")
    if kind is Kind.STRUCT and (dataclasses.is_dataclass(value) or not has_custom_eq(type(value))):
        if id(value) in active:
            raise Unhashable(f"cyclic element for comparison: {type_name(value)}")
        active.add(id(value))
        try:
            return (type(value), _struct_key(value, active))
        finally:
            active.discard(id(value))
    try:
        hash(value)
    except TypeError as exc:
        raise Unhashable(f"unsupported element type for comparison: {type_name(value)}") from exc
    return (type(value), value)


def _struct_key(value: object, active: set) -> tuple:
    if dataclasses.is_dataclass(value):
        return tuple(_element_key(getattr(value, f.name), active) for f in dataclasses.fields(value))
    fields = struct_fields(value)
    return tuple((name, _element_key(fields[name], active)) for name in sorted(fields))
