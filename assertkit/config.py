"""Global configuration and ``assertkit.yaml`` loading."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from assertkit.constants import DEFAULT_FRAME_LIMIT
from assertkit.stacktrace.types import CaptureConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "assertkit.yaml"


class ConfigError(Exception):
    """Raised when a configuration value or file is invalid."""


@dataclass
class AssertConfig:
    """Settings used by :class:`~assertkit.asserts.Asserter` on failure.

    Attributes:
        capture: Stack capture parameters.
        frame_limit: Number of frames shown with each failure.
    """

    capture: CaptureConfig = field(default_factory=CaptureConfig)
    frame_limit: int = DEFAULT_FRAME_LIMIT

    def validate(self) -> None:
        """Reject negative sizes."""
        if self.capture.buffer_size < 0:
            raise ConfigError(f"capture.buffer_size must be >= 0, got {self.capture.buffer_size}")
        if self.capture.skip_frames < 0:
            raise ConfigError(f"capture.skip_frames must be >= 0, got {self.capture.skip_frames}")
        if self.frame_limit < 0:
            raise ConfigError(f"frame_limit must be >= 0, got {self.frame_limit}")

    def to_dict(self) -> dict:
        """Serialise to a plain dict (for writing assertkit.yaml)."""
        return {
            "capture": {
                "buffer_size": self.capture.buffer_size,
                "skip_frames": self.capture.skip_frames,
            },
            "frame_limit": self.frame_limit,
        }


# ---------------------------------------------------------------------------
# Process-wide default (thread safe)
# ---------------------------------------------------------------------------

_config_lock = threading.Lock()
_global_config: AssertConfig | None = None


def get_config() -> AssertConfig:
    """Return the process-wide default configuration."""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        if _global_config is None:
            _global_config = AssertConfig()
        return _global_config


def set_config(
    capture: CaptureConfig | None = None,
    frame_limit: int | None = None,
) -> AssertConfig:
    """Update the process-wide default configuration.

    Only arguments that are not ``None`` are applied. The update is validated
    before it replaces the current configuration.

    Example:
        set_config(capture=CaptureConfig(buffer_size=64, skip_frames=2))
        set_config(frame_limit=3)
    """
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        current = _global_config or AssertConfig()
        updates = {
            "capture": capture,
            "frame_limit": frame_limit,
        }
        candidate = replace(current, **{k: v for k, v in updates.items() if v is not None})
        candidate.validate()
        _global_config = candidate
        return _global_config


def reset_config() -> None:
    """Restore the default configuration."""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        _global_config = AssertConfig()


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------

def _as_int(raw: dict, key: str, default: int, where: str) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where}{key} must be an integer, got {value!r}")
    return value


def _parse_capture(raw: dict | None) -> CaptureConfig:
    if not raw:
        return CaptureConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"capture must be a mapping, got {type(raw).__name__}")
    defaults = CaptureConfig()
    return CaptureConfig(
        buffer_size=_as_int(raw, "buffer_size", defaults.buffer_size, "capture."),
        skip_frames=_as_int(raw, "skip_frames", defaults.skip_frames, "capture."),
    )


def load_config(path: str | Path = DEFAULT_CONFIG_FILE) -> AssertConfig:
    """Load and parse ``assertkit.yaml``.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed and validated :class:`AssertConfig`.

    Raises:
        ConfigError: If the file is missing, malformed, or holds invalid values.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    cfg = AssertConfig(
        capture=_parse_capture(data.get("capture")),
        frame_limit=_as_int(data, "frame_limit", DEFAULT_FRAME_LIMIT, ""),
    )
    cfg.validate()
    logger.debug("loaded %s: %s", p, cfg)
    return cfg


def save_config(cfg: AssertConfig, path: str | Path = DEFAULT_CONFIG_FILE) -> None:
    """Write the config to ``assertkit.yaml``."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as fh:
        yaml.dump(cfg.to_dict(), fh, default_flow_style=False, allow_unicode=True, sort_keys=False)
