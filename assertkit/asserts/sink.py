"""Failure sinks: where assertion failures are reported."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol

from assertkit.stacktrace import StackTrace


@dataclass(frozen=True)
class Failure:
    """One failed assertion: the message and where it happened."""

    message: str
    trace: StackTrace = field(default_factory=StackTrace)

    def report(self) -> str:
        """Message followed by the rendered stack trace block."""
        return (
            f"{self.message}\n"
            f"--- Stack trace ---\n"
            f"{self.trace.render()}\n"
            f"-------------------"
        )


class FailureSink(Protocol):
    """Receives every failure reported by an Asserter."""

    def fail(self, failure: Failure) -> None:
        ...


class AssertionFailure(AssertionError):
    """AssertionError carrying the :class:`Failure` that raised it."""

    def __init__(self, failure: Failure):
        super().__init__(failure.report())
        self.failure = failure


class RaisingSink:
    """Raise :class:`AssertionFailure` on the first failure (default)."""

    def fail(self, failure: Failure) -> None:
        raise AssertionFailure(failure)


class RecordingSink:
    """Keep failures in memory instead of stopping the test.

    Used to test assertions themselves: the failing call returns ``False``
    and the failure can be inspected afterwards.
    """

    def __init__(self) -> None:
        self.failures: List[Failure] = []

    def fail(self, failure: Failure) -> None:
        self.failures.append(failure)

    @property
    def messages(self) -> List[str]:
        return [f.message for f in self.failures]

    @property
    def last_message(self) -> str:
        """Message of the most recent failure, or ``""``."""
        return self.failures[-1].message if self.failures else ""

    def clear(self) -> None:
        self.failures.clear()
