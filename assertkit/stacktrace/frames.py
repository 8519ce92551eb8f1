"""
Frame filtering and rendering

Pure post-processing over ``(function, file, line)`` entries, independent of
how the stack was read.
"""

from __future__ import annotations

from typing import Iterable, Tuple, Union

from ..constants import SOURCE_SUFFIX
from .types import Frame

RawFrame = Union[Frame, Tuple[str, str, int]]


def normalize_function(name: str) -> str:
    """Strip any path prefix up to and including the last ``/``.

    ``assertkit/asserts/asserter.Asserter.equal`` becomes
    ``asserter.Asserter.equal``; names without ``/`` are returned unchanged.
    """
    _, sep, tail = name.rpartition("/")
    if sep and tail:
        return tail
    return name


def is_source_frame(frame: Frame) -> bool:
    """Whether *frame* is well formed and points into a source file."""
    if not frame.function or not frame.file:
        return False
    if frame.line is None or frame.line < 1:
        return False
    return frame.file.endswith(SOURCE_SUFFIX)


def filter_frames(frames: Iterable[RawFrame]) -> Tuple[Frame, ...]:
    """Drop non-source and malformed frames and normalize function names.

    Args:
        frames: Frames (or ``(function, file, line)`` tuples), innermost first.

    Returns:
        Retained frames in their original order.
    """
    filtered = []
    for raw in frames:
        frame = raw if isinstance(raw, Frame) else Frame(*raw)
        if not is_source_frame(frame):
            continue
        filtered.append(Frame(
            function=normalize_function(frame.function),
            file=frame.file,
            line=frame.line,
        ))
    return tuple(filtered)


def render_frames(frames: Iterable[Frame]) -> str:
    """One ``file:line function`` line per frame, without trailing newline."""
    return "\n".join(str(frame) for frame in frames)
