"""pytest integration: ``asserts`` fixture reporting through ``pytest.fail``.

Enable with ``pytest_plugins = ["assertkit.pytest_plugin"]`` in the root
conftest, or ``pytest -p assertkit.pytest_plugin``.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from assertkit.asserts import Asserter, Failure
from assertkit.config import AssertConfig, load_config


class PytestSink:
    """Fail the running test with the failure report (no Python traceback)."""

    def fail(self, failure: Failure) -> None:
        pytest.fail(failure.report(), pytrace=False)


def pytest_addoption(parser):
    group = parser.getgroup("assertkit")
    group.addoption(
        "--assert-config",
        default=None,
        help="Path to an assertkit.yaml file (optional)",
    )
    group.addoption(
        "--assert-frames",
        type=int,
        default=None,
        help="Stack frames shown per assertion failure (overrides the config file)",
    )


@pytest.fixture(scope="session")
def assert_config(request) -> AssertConfig:
    path = request.config.getoption("--assert-config")
    cfg = load_config(path) if path else AssertConfig()
    frames = request.config.getoption("--assert-frames")
    if frames is not None:
        cfg = replace(cfg, frame_limit=frames)
        cfg.validate()
    return cfg


@pytest.fixture()
def asserts(assert_config) -> Asserter:
    """An :class:`Asserter` that fails the current test through pytest."""
    return Asserter(sink=PytestSink(), config=assert_config)
