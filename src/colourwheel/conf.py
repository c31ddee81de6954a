"""Default widget options and config persistence for the colour wheel.

Config is stored at ~/.config/colourwheel/config.json (XDG-compliant).
Only widget options are persisted; selections never are.

Usage:
    from colourwheel.conf import settings

    settings.options                    # saved option overrides (dict)
    settings.wheel_config()             # WheelConfig from saved options
    settings.wheel_config(radius=120)   # ... with call-site overrides
    settings.set_option('shade_count', 8)

    # Low-level config access
    from colourwheel.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

from .core.models import WheelConfig

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'colourwheel')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')

# Options that may be persisted, with the type each is coerced to
WHEEL_OPTIONS: Dict[str, type] = {
    'radius': float,
    'line_width': float,
    'padding': float,
    'hue_colours': list,
    'shade_count': int,
    'use_string_format': bool,
    'dynamic_cursor': bool,
}


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(os.path.dirname(CONFIG_PATH), exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# Wheel option persistence
# =========================================================================

def coerce_option(key: str, value: Any) -> Any:
    """Convert a raw value (e.g. a CLI string) to the option's type."""
    if key not in WHEEL_OPTIONS:
        raise KeyError(f"Unknown wheel option {key!r}")
    kind = WHEEL_OPTIONS[key]
    if kind is bool and isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ('1', 'true', 'yes', 'on'):
            return True
        if lowered in ('0', 'false', 'no', 'off'):
            return False
        raise ValueError(f"{key} expects true/false, got {value!r}")
    if kind is list and isinstance(value, str):
        return [part.strip() for part in value.split(',') if part.strip()]
    return kind(value)


def get_wheel_options() -> dict:
    """Saved option overrides; unknown keys and unreadable values are dropped."""
    options = load_config().get('wheel', {})
    if not isinstance(options, dict):
        return {}

    result = {}
    for key, value in options.items():
        if key not in WHEEL_OPTIONS:
            continue
        try:
            result[key] = coerce_option(key, value)
        except (TypeError, ValueError) as e:
            log.warning("Ignoring saved option %s=%r: %s", key, value, e)
    return result


def save_wheel_option(key: str, value: Any):
    """Validate and persist a single wheel option."""
    value = coerce_option(key, value)
    options = get_wheel_options()
    options[key] = value
    # Refuse to persist a combination the wheel cannot render
    WheelConfig.from_options(options)

    config = load_config()
    config['wheel'] = options
    save_config(config)
    return value


def clear_wheel_options():
    """Drop every saved option (back to built-in defaults)."""
    config = load_config()
    config.pop('wheel', None)
    save_config(config)


# =========================================================================
# Settings singleton
# =========================================================================

class Settings:
    """Application-wide settings.

    Hosts read defaults from here instead of touching the JSON file.
    """

    def __init__(self) -> None:
        self.options: Dict[str, Any] = get_wheel_options()

    def reload(self) -> None:
        self.options = get_wheel_options()

    def wheel_config(self, **overrides: Any) -> WheelConfig:
        """WheelConfig from saved options, with call-site overrides on top."""
        merged = dict(self.options)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return WheelConfig.from_options(merged)

    def set_option(self, key: str, value: Any, persist: bool = True) -> None:
        """Change one option and (by default) persist it."""
        if persist:
            value = save_wheel_option(key, value)
        else:
            value = coerce_option(key, value)
        log.info("Settings: %s = %r", key, value)
        self.options[key] = value

    def clear(self) -> None:
        clear_wheel_options()
        self.options = {}


# Module-level singleton, import and use directly
settings = Settings()
