"""Application settings with JSON persistence.

Settings are stored at:
    ~/.config/CountdownTimer/settings.json

Usage::

    settings = load_settings()
    settings.theme = "light"
    save_settings(settings)

The countdown duration is fixed and deliberately not a setting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path


log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "CountdownTimer"
SETTINGS_PATH = CONFIG_DIR / "settings.json"

THEMES = ("dark", "light")


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── appearance ────────────────────────────────────────────────────
    theme: str = "dark"

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 420
    window_height: int = 640

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "WARNING"


_OPTIONAL_INT_FIELDS = {"window_x", "window_y"}


def _has_valid_type(key: str, value: object) -> bool:
    """True if *value* has the type of the field's default."""
    if key in _OPTIONAL_INT_FIELDS:
        return value is None or (isinstance(value, int) and not isinstance(value, bool))
    default = getattr(Settings(), key)
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        # JSON true/false would otherwise pass as int
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()
    if not isinstance(data, dict):
        log.warning("Ignoring malformed settings file %s", SETTINGS_PATH)
        return Settings()

    # Only use keys that exist in the dataclass, with the right value type
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {}
    for key, value in data.items():
        if key not in valid_keys:
            continue
        if not _has_valid_type(key, value):
            log.warning("Ignoring settings value %s=%r: wrong type", key, value)
            continue
        filtered[key] = value
    settings = Settings(**filtered)
    if settings.theme not in THEMES:
        settings.theme = "dark"
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
    log.debug("Saved settings to %s", SETTINGS_PATH)
