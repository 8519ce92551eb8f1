"""Kind taxonomy and exceptions for the compare engine."""

from __future__ import annotations

from enum import Enum


class Kind(str, Enum):
    """Runtime kind of a value, as seen by the compare engine."""

    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"
    CHANNEL = "channel"
    REFERENCE = "reference"
    FUNCTION = "function"
    TYPE = "type"
    STRUCT = "struct"
    OTHER = "other"


NUMERIC_KINDS = frozenset({Kind.INT, Kind.FLOAT})

# Kinds whose length decides emptiness
SIZED_KINDS = frozenset({
    Kind.STRING,
    Kind.BYTES,
    Kind.SEQUENCE,
    Kind.SET,
    Kind.MAPPING,
    Kind.CHANNEL,
})

# Kinds that may hold a null reference
NILLABLE_KINDS = frozenset({Kind.NONE, Kind.REFERENCE})


def type_name(value: object) -> str:
    """Return a readable name for the runtime type of *value*."""
    tp = type(value)
    if tp.__module__ in ("builtins", None):
        return tp.__qualname__
    return f"{tp.__module__}.{tp.__qualname__}"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class CompareError(Exception):
    """Base exception for compare engine operations."""


class UnsupportedType(CompareError, TypeError):
    """Raised when a value's kind cannot take part in the requested operation."""


class TypeMismatch(CompareError, TypeError):
    """Raised when two operands must share a type or kind and do not."""


class Unhashable(CompareError, TypeError):
    """Raised when an element cannot act as a distinguishing key."""
