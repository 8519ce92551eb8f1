"""
Numeric coercion and comparison

Every numeric kind (Python ``int``/``float`` and numpy integer/floating
scalars) is widened to a Python ``float`` before comparison. ``bool`` is not
numeric here.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..constants import NUMERIC_EPSILON
from .kinds import kind_of
from .types import Kind, UnsupportedType, type_name


def to_float(value: object) -> float:
    """
    Convert a numeric value to float

    Args:
        value: int, float or numpy integer/floating scalar

    Returns:
        float

    Raises:
        UnsupportedType: non-numeric value, or an int beyond float range
    """
    kind = kind_of(value)
    if kind is Kind.INT:
        try:
            return float(int(value))
        except OverflowError as exc:
            raise UnsupportedType(
                f"integer out of float range for numeric comparison: {type_name(value)}"
            ) from exc
    if kind is Kind.FLOAT:
        return float(value)
    raise UnsupportedType(f"unsupported type for numeric comparison: {type_name(value)}")


def compare_numeric(a: object, b: object) -> int:
    """
    Three-way numeric comparison

    Differences below NUMERIC_EPSILON count as equal; this absorbs binary
    float representation error and is not a tolerance knob (use
    within_delta / within_epsilon for that).

    Returns:
        -1, 0 or 1

    Raises:
        UnsupportedType: either operand is not numeric (names both types)
    """
    try:
        a_float = to_float(a)
        b_float = to_float(b)
    except UnsupportedType as exc:
        raise UnsupportedType(
            f"unsupported numeric types: {type_name(a)} vs {type_name(b)}"
        ) from exc

    diff = a_float - b_float
    if abs(diff) < NUMERIC_EPSILON:
        return 0
    return 1 if diff > 0 else -1


def _coerce_pair(expected: object, actual: object) -> Tuple[float, float]:
    try:
        a = to_float(expected)
    except UnsupportedType as exc:
        raise UnsupportedType(f"expected value is not numeric: {exc}") from exc
    try:
        b = to_float(actual)
    except UnsupportedType as exc:
        raise UnsupportedType(f"actual value is not numeric: {exc}") from exc
    return a, b


def within_delta(expected: object, actual: object, delta: float) -> Tuple[bool, float]:
    """
    Absolute tolerance check: |expected - actual| <= delta

    Returns:
        (passed, expected - actual)
    """
    a, b = _coerce_pair(expected, actual)
    diff = a - b
    return abs(diff) <= delta, diff


def within_epsilon(expected: object, actual: object, epsilon: float) -> Tuple[bool, float]:
    """
    Relative tolerance check against the mean magnitude

    rel = |a - b| / (|a + b| / 2), passed when rel <= epsilon.
    Exactly equal values pass with rel 0 (also covers a == b == 0).

    Returns:
        (passed, rel)
    """
    a, b = _coerce_pair(expected, actual)
    if a == b:
        return True, 0.0
    mean = abs(a + b) / 2
    rel = abs(a - b) / mean if mean else math.inf
    return rel <= epsilon, rel
