"""
Literal Sanitizer Configuration Module
Centralized configuration for the sanitizer.
"""

import os
from pathlib import Path

import yaml

# Debug Mode Configuration
DEBUG_MODE = os.environ.get('LITERAL_SANITIZER_DEBUG', 'false').lower() == 'true'

APP_NAME = "LiteralSanitizer"

# Sanitizer Defaults
# These mirror the public signature: sanitize(value, "a-z0-9", "-", "left")
DEFAULT_CHARSET = "a-z0-9"
DEFAULT_REPLACEMENT = "-"
DEFAULT_TRIM_MODE = "left"

# Logging Configuration
# LOG_FILE is opt-in; without it nothing is written to disk
_log_file_env = os.environ.get('LITERAL_SANITIZER_LOG_FILE')
LOG_FILE = Path(_log_file_env) if _log_file_env else None
LOG_FORMAT = "[%(levelname)s %(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# --- Preset Configuration System ---
# Bundled with the package (see [tool.setuptools.package-data])
PRESETS_FILE = Path(os.environ.get(
    'LITERAL_SANITIZER_PRESETS',
    Path(__file__).parent / "data" / "presets.yaml",
))
PRESETS = {}
_PRESETS_LOADED = False

_PRESET_KEYS = ("charset", "replacement", "trim_mode")


def load_presets(path: Path | None = None) -> dict:
    """Loads named sanitizer presets from data/presets.yaml."""
    global PRESETS, _PRESETS_LOADED
    presets_file = Path(path) if path is not None else PRESETS_FILE
    _PRESETS_LOADED = True
    try:
        with open(presets_file, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        loaded = data.get('presets', {}) or {}
        PRESETS = {
            name: {key: value for key, value in entry.items() if key in _PRESET_KEYS}
            for name, entry in loaded.items()
        }
        from literal_sanitizer.logging_config import info
        info(f"[CONFIG] Loaded {len(PRESETS)} presets from {presets_file}")
    except FileNotFoundError:
        from literal_sanitizer.logging_config import debug_log
        debug_log(f"[CONFIG] Presets file not found at {presets_file}. No presets available.")
        PRESETS = {}
    except (yaml.YAMLError, AttributeError) as e:
        from literal_sanitizer.logging_config import warning
        warning(f"[CONFIG] Ignoring malformed presets file {presets_file}: {e}")
        PRESETS = {}
    return PRESETS


def get_preset(name: str) -> dict:
    """
    Returns the sanitizer settings for a named preset.

    Args:
        name: Preset name (e.g., 'slug').

    Returns:
        A dictionary with 'charset', 'replacement' and 'trim_mode' keys.
        Keys missing from the preset fall back to the defaults.

    Raises:
        KeyError: If no preset with that name exists.
    """
    if not _PRESETS_LOADED:
        load_presets()

    if name not in PRESETS:
        known = ", ".join(sorted(PRESETS)) or "none"
        raise KeyError(f"Unknown preset '{name}' (known presets: {known})")

    settings = {
        'charset': DEFAULT_CHARSET,
        'replacement': DEFAULT_REPLACEMENT,
        'trim_mode': DEFAULT_TRIM_MODE,
    }
    settings.update(PRESETS[name])
    return settings
# --- End Preset Configuration System ---
