"""Shared fixtures for assertkit tests."""

from __future__ import annotations

import pytest

from assertkit.asserts import Asserter, RecordingSink
from assertkit.config import reset_config


@pytest.fixture(autouse=True)
def _default_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def check(sink) -> Asserter:
    """Asserter recording failures instead of raising."""
    return Asserter(sink)
