"""
Settings - Environment-driven configuration.

Reads wait and browser defaults from PAGEKIT_* environment variables.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_WAIT_TIMEOUT = 20.0
DEFAULT_POLL_FREQUENCY = 0.5
DEFAULT_WINDOW_SIZE = (1920, 1080)


@dataclass
class Settings:
    """Runtime settings for waits and driver creation."""
    wait_timeout: float = DEFAULT_WAIT_TIMEOUT
    poll_frequency: float = DEFAULT_POLL_FREQUENCY
    headless: bool = False
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            wait_timeout=_read_float("PAGEKIT_WAIT_TIMEOUT", DEFAULT_WAIT_TIMEOUT, allow_zero=True),
            poll_frequency=_read_float("PAGEKIT_POLL_FREQUENCY", DEFAULT_POLL_FREQUENCY),
            headless=_read_bool("PAGEKIT_HEADLESS", False),
            window_size=_read_window_size("PAGEKIT_WINDOW_SIZE", DEFAULT_WINDOW_SIZE),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def _read_float(name: str, default: float, allow_zero: bool = False) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
        return default
    if value < 0 or (value == 0 and not allow_zero):
        limit = "non-negative" if allow_zero else "positive"
        logger.warning(f"Ignoring {name}={raw!r}: must be {limit}, using {default}")
        return default
    return value


def _read_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def _read_window_size(name: str, default: Tuple[int, int]) -> Tuple[int, int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        width, height = (int(part) for part in raw.lower().replace("x", ",").split(","))
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: expected WIDTH,HEIGHT, using {default}")
        return default
    return width, height
