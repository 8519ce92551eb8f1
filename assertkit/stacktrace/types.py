"""Value types for the stack trace subsystem."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import DEFAULT_BUFFER_SIZE, DEFAULT_SKIP_FRAMES


@dataclass(frozen=True)
class Frame:
    """One call-stack entry.

    After filtering, ``function`` reads ``module.Qualname`` (the last module
    segment followed by the code object's qualified name).
    """

    function: str
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line} {self.function}"


@dataclass(frozen=True)
class CaptureConfig:
    """How much stack to read and how many innermost frames to drop."""

    buffer_size: int = DEFAULT_BUFFER_SIZE
    skip_frames: int = DEFAULT_SKIP_FRAMES


DEFAULT_CAPTURE_CONFIG = CaptureConfig()
