"""
Assertions

Each method checks one condition through the compare engine. On failure it
captures a stack trace, logs it, and hands message + trace to the sink.

Every public method calls ``_fail`` directly: the default skip of two frames
drops ``_fail`` and the assertion method so traces start at the test.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from assertkit import compare
from assertkit.compare import CompareError, type_name
from assertkit.config import AssertConfig, get_config
from assertkit.stacktrace import capture

from .sink import Failure, FailureSink, RaisingSink

logger = logging.getLogger(__name__)


class Asserter:
    """Expressive assertions reporting to a failure sink.

    Methods return ``True`` when the check passes and ``False`` when it
    fails and the sink does not raise.

    Args:
        sink: Failure sink, defaults to :class:`RaisingSink`.
        config: Capture settings, defaults to the process-wide config.
    """

    def __init__(self, sink: Optional[FailureSink] = None, config: Optional[AssertConfig] = None):
        self.sink = sink if sink is not None else RaisingSink()
        self._config = config

    @property
    def config(self) -> AssertConfig:
        return self._config if self._config is not None else get_config()

    def _fail(self, message: str) -> bool:
        cfg = self.config
        trace = capture(cfg.capture).limit(cfg.frame_limit)
        logger.warning("%s\n--- Stack trace ---\n%s\n-------------------", message, trace.render())
        self.sink.fail(Failure(message=message, trace=trace))
        return False

    # -- equality --------------------------------------------------------------

    def equal(self, expected: Any, actual: Any) -> bool:
        if not compare.deep_equal(expected, actual):
            return self._fail(f"values not equal: expected: {expected!r} actual: {actual!r}")
        return True

    def not_equal(self, not_expected: Any, actual: Any) -> bool:
        if compare.deep_equal(not_expected, actual):
            return self._fail(f"values unexpectedly equal: not expected: {not_expected!r} actual: {actual!r}")
        return True

    def same(self, expected: Any, actual: Any) -> bool:
        """Both names refer to the same object."""
        if expected is not actual:
            return self._fail(
                f"expected same object, but got different: {id(expected):#x} vs {id(actual):#x}"
            )
        return True

    def json_eq(self, expected: str, actual: str) -> bool:
        """Equivalent JSON documents, ignoring whitespace and key order.

        Numbers are parsed as floats so ``1`` and ``1.0`` compare equal.
        """
        try:
            expected_json = json.loads(expected, parse_int=float)
        except json.JSONDecodeError as exc:
            return self._fail(f"failed to unmarshal expected JSON: {exc}")
        try:
            actual_json = json.loads(actual, parse_int=float)
        except json.JSONDecodeError as exc:
            return self._fail(f"failed to unmarshal actual JSON: {exc}")
        if not compare.deep_equal(expected_json, actual_json):
            return self._fail(f"JSON not equal: expected: {expected_json!r} actual: {actual_json!r}")
        return True

    # -- nil / empty / zero ----------------------------------------------------

    def nil(self, actual: Any) -> bool:
        if not compare.is_nil(actual):
            return self._fail(f"expected nil, but got: {actual!r}")
        return True

    def not_nil(self, actual: Any) -> bool:
        if compare.is_nil(actual):
            return self._fail("expected non-nil value, but got nil")
        return True

    def empty(self, value: Any) -> bool:
        if not compare.is_empty(value):
            return self._fail(f"expected empty value, but got: {value!r}")
        return True

    def not_empty(self, value: Any) -> bool:
        if compare.is_empty(value):
            return self._fail(f"expected non-empty value, but got empty: {value!r}")
        return True

    def is_zero(self, value: Any) -> bool:
        try:
            zero = compare.zero_value(value)
        except CompareError as exc:
            return self._fail(str(exc))
        if not compare.deep_equal(value, zero):
            return self._fail(f"expected zero value, but got: {value!r}")
        return True

    # -- booleans and errors ---------------------------------------------------

    def true(self, condition: bool) -> bool:
        if not condition:
            return self._fail("expected true, but got false")
        return True

    def false(self, condition: bool) -> bool:
        if condition:
            return self._fail("expected false, but got true")
        return True

    def no_error(self, err: Optional[BaseException]) -> bool:
        if err is not None:
            return self._fail(f"unexpected error: {err!r}")
        return True

    def error(self, err: Optional[BaseException]) -> bool:
        if err is None:
            return self._fail("expected an error, but got nil")
        return True

    def error_contains(self, err: Optional[BaseException], substr: str) -> bool:
        if err is None:
            return self._fail("expected an error, but got nil")
        if substr not in str(err):
            return self._fail(f"expected error message to contain {substr!r}, but got {str(err)!r}")
        return True

    # -- raised exceptions -----------------------------------------------------

    def raises(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Calling *fn* raises an exception."""
        try:
            fn(*args, **kwargs)
        except Exception:  # noqa: BLE001
            return True
        return self._fail("expected exception, but none occurred")

    def not_raises(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        try:
            fn(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001
            return self._fail(f"unexpected exception: {exc!r}")
        return True

    def raises_with_value(self, expected: BaseException, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Calling *fn* raises an exception of *expected*'s type with equal args."""
        try:
            fn(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001
            if type(exc) is not type(expected) or not compare.deep_equal(exc.args, expected.args):
                return self._fail(f"expected exception {expected!r}, but got {exc!r}")
            return True
        return self._fail("expected exception, but none occurred")

    # -- containers ------------------------------------------------------------

    def contains(self, container: Any, item: Any) -> bool:
        try:
            found = compare.contains(container, item)
        except CompareError as exc:
            return self._fail(str(exc))
        if not found:
            return self._fail(f"expected {container!r} to contain {item!r}, but it did not")
        return True

    def not_contains(self, container: Any, item: Any) -> bool:
        try:
            found = compare.contains(container, item)
        except CompareError as exc:
            return self._fail(str(exc))
        if found:
            return self._fail(f"expected {container!r} to not contain {item!r}, but it did")
        return True

    def length(self, obj: Any, expected: int) -> bool:
        try:
            actual = compare.length(obj)
        except CompareError as exc:
            return self._fail(str(exc))
        if actual != expected:
            return self._fail(f"expected length {expected}, but got {actual}")
        return True

    def subset(self, superset: Any, subset: Any) -> bool:
        """Every member of *subset* exists in *superset* (duplicates not counted)."""
        try:
            ok = compare.is_subset(superset, subset)
        except CompareError as exc:
            return self._fail(str(exc))
        if not ok:
            return self._fail(f"expected {subset!r} to be a subset of {superset!r}, but it's not")
        return True

    def same_elements(self, a: Any, b: Any) -> bool:
        """Same elements with the same counts, in any order."""
        try:
            ok = compare.same_elements(a, b)
        except CompareError as exc:
            return self._fail(str(exc))
        if not ok:
            return self._fail(f"expected same elements in both sequences: {a!r} vs {b!r}")
        return True

    def elements_match(self, list_a: Any, list_b: Any) -> bool:
        try:
            ok = compare.same_elements(list_a, list_b)
        except CompareError as exc:
            return self._fail(str(exc))
        if not ok:
            return self._fail(f"element lists are not equal: expected: {list_a!r} actual: {list_b!r}")
        return True

    # -- ordering and tolerance ------------------------------------------------

    def greater(self, a: Any, b: Any) -> bool:
        try:
            cmp = compare.compare_numeric(a, b)
        except CompareError as exc:
            return self._fail(f"failed to compare values: {exc}")
        if cmp <= 0:
            return self._fail(f"expected {a!r} to be greater than {b!r}")
        return True

    def greater_or_equal(self, a: Any, b: Any) -> bool:
        try:
            cmp = compare.compare_numeric(a, b)
        except CompareError as exc:
            return self._fail(f"failed to compare values: {exc}")
        if cmp < 0:
            return self._fail(f"expected {a!r} to be greater than or equal to {b!r}")
        return True

    def less(self, a: Any, b: Any) -> bool:
        try:
            cmp = compare.compare_numeric(a, b)
        except CompareError as exc:
            return self._fail(f"failed to compare values: {exc}")
        if cmp >= 0:
            return self._fail(f"expected {a!r} to be less than {b!r}")
        return True

    def less_or_equal(self, a: Any, b: Any) -> bool:
        try:
            cmp = compare.compare_numeric(a, b)
        except CompareError as exc:
            return self._fail(f"failed to compare values: {exc}")
        if cmp > 0:
            return self._fail(f"expected {a!r} to be less than or equal to {b!r}")
        return True

    def in_delta(self, expected: Any, actual: Any, delta: float) -> bool:
        try:
            ok, diff = compare.within_delta(expected, actual, delta)
        except CompareError as exc:
            return self._fail(str(exc))
        if not ok:
            return self._fail(
                f"expected {actual!r} to be within {delta} of {expected!r}, but difference was {abs(diff)}"
            )
        return True

    def in_epsilon(self, expected: Any, actual: Any, epsilon: float) -> bool:
        try:
            ok, rel = compare.within_epsilon(expected, actual, epsilon)
        except CompareError as exc:
            return self._fail(str(exc))
        if not ok:
            return self._fail(
                f"expected {actual!r} to be within {epsilon * 100}% of {expected!r}, "
                f"but difference was {rel * 100}%"
            )
        return True

    def within_duration(self, expected: datetime, actual: datetime, delta: timedelta) -> bool:
        try:
            diff = expected - actual
        except TypeError as exc:
            return self._fail(f"cannot compare times: {exc}")
        if diff < -delta or diff > delta:
            return self._fail(
                f"expected time {actual} to be within {delta} of {expected}, but difference was {diff}"
            )
        return True

    # -- types -----------------------------------------------------------------

    def is_of_type(self, expected_type: Any, obj: Any) -> bool:
        """*obj* has exactly *expected_type* (a class, or a sample value of it)."""
        tp = expected_type if isinstance(expected_type, type) else type(expected_type)
        if type(obj) is not tp:
            return self._fail(f"expected type {tp.__qualname__}, but got {type_name(obj)}")
        return True

    def implements(self, capability: Any, obj: Any) -> bool:
        try:
            ok = compare.implements(capability, obj)
        except CompareError as exc:
            return self._fail(str(exc))
        if not ok:
            return self._fail(f"expected {type_name(obj)} to implement {capability!r}, but it does not")
        return True

    # -- strings ---------------------------------------------------------------

    def matches_regex(self, s: str, pattern: str) -> bool:
        try:
            matched = re.search(pattern, s)
        except re.error as exc:
            return self._fail(f"invalid regex pattern: {exc}")
        if matched is None:
            return self._fail(f"expected string {s!r} to match regex {pattern!r}, but it did not")
        return True

    def has_prefix(self, s: str, prefix: str) -> bool:
        if not s.startswith(prefix):
            return self._fail(f"expected string {s!r} to have prefix {prefix!r}, but it did not")
        return True

    def has_suffix(self, s: str, suffix: str) -> bool:
        if not s.endswith(suffix):
            return self._fail(f"expected string {s!r} to have suffix {suffix!r}, but it did not")
        return True
