"""Type identity and capability (interface) checks."""

from __future__ import annotations

import inspect
from typing import FrozenSet

from .types import UnsupportedType, type_name

# Bookkeeping attributes that typing.Protocol and ABCMeta put in a class body
_SPECIAL_MEMBERS = frozenset({
    "__abstractmethods__",
    "__annotate__",
    "__annotate_func__",
    "__annotations__",
    "__annotations_cache__",
    "__class_getitem__",
    "__dict__",
    "__doc__",
    "__firstlineno__",
    "__init__",
    "__init_subclass__",
    "__module__",
    "__new__",
    "__non_callable_proto_members__",
    "__orig_bases__",
    "__parameters__",
    "__protocol_attrs__",
    "__qualname__",
    "__slots__",
    "__static_attributes__",
    "__subclasshook__",
    "__type_params__",
    "__weakref__",
})


def type_equal(a: object, b: object) -> bool:
    """Whether *a* and *b* have the identical runtime type.

    ``1`` and ``numpy.int64(1)`` differ, as do ``1`` and ``True``.
    """
    return type(a) is type(b)


def _is_protocol(cls: type) -> bool:
    return bool(getattr(cls, "_is_protocol", False))


def _protocol_members(proto: type) -> FrozenSet[str]:
    members = set()
    for base in proto.__mro__[:-1]:
        if base.__name__ in ("Protocol", "Generic"):
            continue
        namespace = vars(base)
        for name in (*namespace, *inspect.get_annotations(base)):
            if name in _SPECIAL_MEMBERS or name.startswith(("_abc_", "_is_")):
                continue
            if name.startswith("_"):
                dunder = name.startswith("__") and name.endswith("__")
                if not dunder or not callable(namespace.get(name)):
                    continue
            members.add(name)
    return frozenset(members)


def required_members(capability: object) -> FrozenSet[str]:
    """Return the member names a value must provide to satisfy *capability*.

    Args:
        capability: a ``typing.Protocol`` class, an ABC (its abstract
            methods), a plain class (no structural members), a method name,
            or an iterable of method names.

    Raises:
        UnsupportedType: *capability* is none of the above.
    """
    if isinstance(capability, str):
        return frozenset({capability})
    if isinstance(capability, type):
        if _is_protocol(capability):
            return _protocol_members(capability)
        return frozenset(getattr(capability, "__abstractmethods__", ()))
    try:
        names = frozenset(capability)
    except TypeError as exc:
        raise UnsupportedType(f"unsupported capability type: {type_name(capability)}") from exc
    if not all(isinstance(name, str) for name in names):
        raise UnsupportedType("capability names must be strings")
    return names


def _is_method_member(capability: object, name: str) -> bool:
    # bare member names only require presence
    if isinstance(capability, type):
        return callable(getattr(capability, name, None))
    return False


def implements(capability: object, value: object) -> bool:
    """Whether *value* satisfies every behaviour required by *capability*.

    Instances of the capability class always satisfy it. Otherwise the check
    is structural: each required member must exist on *value*, and members
    that are methods on the capability class must be callable on *value*.
    Member names given as strings are only checked for presence. A plain
    class with no abstract members is only satisfied by its instances.
    """
    if isinstance(capability, type):
        try:
            if isinstance(value, capability):
                return True
        except TypeError:
            # non runtime-checkable protocol
            pass
        if not _is_protocol(capability) and not getattr(capability, "__abstractmethods__", None):
            return False

    for name in required_members(capability):
        if not hasattr(value, name):
            return False
        if _is_method_member(capability, name) and not callable(getattr(value, name)):
            return False
    return True
