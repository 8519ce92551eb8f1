"""
Compare engine

Pure comparison primitives over arbitrary values: nilness, emptiness,
numeric coercion and tolerance, containment, subset, multiset equality,
deep structural equality, type identity and capability checks.

Failures are raised as CompareError subclasses:
    UnsupportedType | a value's kind cannot take part in the operation
    TypeMismatch    | two operands must share a type or kind and do not
    Unhashable      | an element cannot act as a distinguishing key

Basic usage:
    from assertkit.compare import compare_numeric, contains, same_elements

    compare_numeric(8, 5)                 # 1
    contains("hello world", "world")      # True
    same_elements([1, 2, 3], [3, 2, 1])   # True
"""

from .types import (
    CompareError,
    Kind,
    TypeMismatch,
    Unhashable,
    UnsupportedType,
    type_name,
)
from .kinds import element_key, kind_of, length
from .equality import deep_equal
from .values import is_empty, is_nil, zero_value
from .numeric import compare_numeric, to_float, within_delta, within_epsilon
from .containers import contains, is_subset, same_elements
from .capability import implements, required_members, type_equal

__all__ = [
    # types
    "Kind",
    "type_name",
    # errors
    "CompareError",
    "UnsupportedType",
    "TypeMismatch",
    "Unhashable",
    # kinds
    "kind_of",
    "length",
    "element_key",
    # equality
    "deep_equal",
    # values
    "is_nil",
    "is_empty",
    "zero_value",
    # numeric
    "to_float",
    "compare_numeric",
    "within_delta",
    "within_epsilon",
    # containers
    "contains",
    "is_subset",
    "same_elements",
    # capability
    "type_equal",
    "implements",
    "required_members",
]
