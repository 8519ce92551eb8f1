"""
Stack trace capture

Captures the current call stack, filters out frames that do not point into
Python source files, normalizes function names to ``module.Qualname`` and
renders them one per line.

Basic usage:
    from assertkit.stacktrace import CaptureConfig, capture

    trace = capture(CaptureConfig(skip_frames=0))
    print(trace.limit(5).render())
    print(str(trace))  # raw, unfiltered text
"""

from .types import DEFAULT_CAPTURE_CONFIG, CaptureConfig, Frame
from .frames import filter_frames, is_source_frame, normalize_function, render_frames
from .capture import StackTrace, capture

__all__ = [
    # types
    "Frame",
    "CaptureConfig",
    "DEFAULT_CAPTURE_CONFIG",
    "StackTrace",
    # capture
    "capture",
    # frames
    "filter_frames",
    "is_source_frame",
    "normalize_function",
    "render_frames",
]
