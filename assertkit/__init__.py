"""
assertkit - runtime assertions with call-stack diagnostics

Package layout:
- compare/     pure comparison engine (equality, numeric, containers, capability)
- stacktrace/  call-stack capture, filtering and rendering
- asserts/     Asserter and failure sinks
- config       capture settings and assertkit.yaml loading
- pytest_plugin  ``asserts`` fixture bound to pytest.fail

Example:
    from assertkit import Asserter

    check = Asserter()
    check.in_delta(1.0, 1.05, 0.1)
"""

__version__ = "0.1.0"

from assertkit.compare import CompareError, TypeMismatch, Unhashable, UnsupportedType
from assertkit.stacktrace import CaptureConfig, Frame, StackTrace, capture
from assertkit.config import AssertConfig, ConfigError, get_config, load_config, reset_config, set_config
from assertkit.asserts import Asserter, AssertionFailure, Failure, RaisingSink, RecordingSink

__all__ = [
    "__version__",
    # compare
    "CompareError",
    "UnsupportedType",
    "TypeMismatch",
    "Unhashable",
    # stacktrace
    "CaptureConfig",
    "Frame",
    "StackTrace",
    "capture",
    # config
    "AssertConfig",
    "ConfigError",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # asserts
    "Asserter",
    "AssertionFailure",
    "Failure",
    "RaisingSink",
    "RecordingSink",
]
