"""Call-stack capture into immutable :class:`StackTrace` snapshots."""

from __future__ import annotations

import inspect
import logging
import traceback
from dataclasses import dataclass, replace
from types import FrameType
from typing import List, Optional, Tuple

from .frames import filter_frames, render_frames
from .types import DEFAULT_CAPTURE_CONFIG, CaptureConfig, Frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackTrace:
    """Filtered frames (innermost first) plus the raw text of the same stack.

    ``str(trace)`` returns the raw text; :meth:`render` returns the filtered
    frames, one per line.
    """

    frames: Tuple[Frame, ...] = ()
    raw: str = ""

    def __str__(self) -> str:
        return self.raw

    def render(self) -> str:
        """Render the filtered frames as ``file:line function`` lines."""
        return render_frames(self.frames)

    def limit(self, n: int) -> "StackTrace":
        """Return a snapshot with at most *n* innermost frames.

        The raw text is never truncated. When *n* already covers every frame
        the snapshot itself is returned.

        Raises:
            ValueError: If *n* is negative.
        """
        if n < 0:
            raise ValueError(f"frame limit must be >= 0, got {n}")
        if n >= len(self.frames):
            return self
        return replace(self, frames=self.frames[:n])


def _raw_function_name(frame: FrameType) -> str:
    """``package/module.Qualname`` for a live frame."""
    code = frame.f_code
    qualname = getattr(code, "co_qualname", code.co_name)
    module = frame.f_globals.get("__name__") or ""
    if not module:
        return qualname
    return f"{module.replace('.', '/')}.{qualname}"


def _walk(start: FrameType) -> List[Tuple[FrameType, int]]:
    return [(frame, lineno or 0) for frame, lineno in traceback.walk_stack(start)]


def _render_raw(walked: List[Tuple[FrameType, int]], size: int) -> str:
    lines = []
    used = 0
    for frame, lineno in walked:
        line = f'File "{frame.f_code.co_filename}", line {lineno}, in {_raw_function_name(frame)}'
        lines.append(line)
        used += len(line) + 1
        if used >= size:
            break
    return "\n".join(lines)[:size].strip()


def capture(config: Optional[CaptureConfig] = None) -> StackTrace:
    """
    Capture the current call stack

    Frames start at the caller of ``capture`` after skipping
    ``config.skip_frames`` more frames, and at most ``config.buffer_size``
    frames are read. The raw text covers the whole stack from the caller of
    ``capture``, unfiltered, capped at ``buffer_size`` characters.

    A non-positive buffer size or a skip deeper than the stack yields an
    empty snapshot; capture never raises.

    Args:
        config: capture parameters, defaults to ``CaptureConfig()``

    Returns:
        StackTrace
    """
    if config is None:
        config = DEFAULT_CAPTURE_CONFIG
    if config.buffer_size <= 0:
        return StackTrace()

    current = inspect.currentframe()
    caller = current.f_back if current is not None else None
    start = caller
    try:
        for _ in range(max(config.skip_frames, 0)):
            if start is None:
                break
            start = start.f_back
        if caller is None or start is None:
            logger.debug("stack capture skipped: skip_frames=%d exceeds stack depth", config.skip_frames)
            return StackTrace()

        walked = _walk(start)[: config.buffer_size]
        raw_frames = [
            Frame(function=_raw_function_name(frame), file=frame.f_code.co_filename, line=lineno)
            for frame, lineno in walked
        ]
        raw = _render_raw(_walk(caller), config.buffer_size)
        return StackTrace(frames=filter_frames(raw_frames), raw=raw)
    finally:
        # break reference cycles through frame objects
        del current, caller, start
