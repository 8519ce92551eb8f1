"""
Assertion layer

Thin wrappers over the compare engine that report failures, with a stack
trace, to a pluggable sink.

Basic usage:
    from assertkit.asserts import Asserter, RecordingSink

    check = Asserter()                  # raises AssertionFailure on failure
    check.contains([1, 2, 3], 2)

    sink = RecordingSink()
    Asserter(sink).equal(1, 2)          # returns False
    print(sink.last_message)
"""

from .sink import AssertionFailure, Failure, FailureSink, RaisingSink, RecordingSink
from .asserter import Asserter

__all__ = [
    "Asserter",
    # sinks
    "Failure",
    "FailureSink",
    "AssertionFailure",
    "RaisingSink",
    "RecordingSink",
]
