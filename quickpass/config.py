# quickpass/config.py
"""
Generator configuration and application settings for QuickPass.

Configuration is the immutable value the core works from (length + class toggles).
Settings are read from JSON in %APPDATA%/QuickPass/config.json (Windows) or
~/.quickpass/config.json (fallback); QUICKPASS_CONFIG overrides the path.
Settings are never written back: generator choices do not persist between sessions.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
MAX_LENGTH = 64
DEFAULT_LENGTH = 12


@dataclass(frozen=True)
class Configuration:
    length: int = DEFAULT_LENGTH
    include_numbers: bool = True
    include_symbols: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an integer, got {self.length!r}")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise ValueError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}")


def clamp_length(value: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(value)))


DEFAULTS: Dict[str, Any] = {
    "default_length": DEFAULT_LENGTH,
    "copied_flash_ms": 1500,
    "clipboard_clear_seconds": 0,  # 0 disables auto-clear
    "log_level": "WARNING",
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "QuickPass")
    return os.path.join(os.path.expanduser("~"), ".quickpass")


def config_path() -> str:
    override = os.getenv("QUICKPASS_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def setting_int(settings: Dict[str, Any], key: str, minimum: int = 0) -> int:
    """Integer setting; anything non-numeric or below ``minimum`` falls back to the default."""
    value = settings.get(key, DEFAULTS[key])
    try:
        if isinstance(value, bool):
            raise TypeError(key)
        n = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r, using %d", key, value, DEFAULTS[key])
        return DEFAULTS[key]
    if n < minimum:
        logger.warning("Invalid %s %r, using %d", key, value, DEFAULTS[key])
        return DEFAULTS[key]
    return n


def log_level(settings: Dict[str, Any]) -> int:
    """Numeric logging level from a level name ("info") or number; unknown values give WARNING."""
    value = settings.get("log_level", DEFAULTS["log_level"])
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    if isinstance(value, str):
        level = logging.getLevelName(value.upper())
        if isinstance(level, int):
            return level
    logger.warning("Unknown log_level %r, using WARNING", value)
    return logging.WARNING


def default_configuration(settings: Optional[Dict[str, Any]] = None) -> Configuration:
    """Starting configuration; an out-of-range default_length is clamped."""
    cfg = settings if settings is not None else DEFAULTS
    try:
        length = clamp_length(cfg.get("default_length", DEFAULT_LENGTH))
    except (TypeError, ValueError):
        logger.warning("Invalid default_length %r, using %d", cfg.get("default_length"), DEFAULT_LENGTH)
        length = DEFAULT_LENGTH
    return Configuration(length=length)
