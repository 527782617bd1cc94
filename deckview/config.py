# deckview/config.py
# Description: Configuration management for the deck viewer.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
import toml
from typing import Any, Dict, Optional, Union
#
# Third-Party Imports
from loguru import logger
from pydantic import BaseModel, Field, ValidationError
#
# Local Imports
from .Constants import (
    DEFAULT_ACTIVATION_DELAY,
    DEFAULT_DRAG_MIN_DISTANCE,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_SWIPE_MIN_DISTANCE,
)
from .errors import ConfigError
#
#######################################################################################################################
#
# Functions:

# --- Paths ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "deckview" / "config.toml"
DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "deckview"
CONFIG_PATH_ENV = "DECKVIEW_CONFIG"

# --- Default configuration (used when the TOML file omits a value) ---
DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "navigation": {
        "settle_delay": DEFAULT_SETTLE_DELAY,
        "activation_delay": DEFAULT_ACTIVATION_DELAY,
    },
    "gestures": {
        "min_distance": DEFAULT_SWIPE_MIN_DISTANCE,
        "drag_min_distance": DEFAULT_DRAG_MIN_DISTANCE,
    },
    "display": {
        "show_progress_dots": True,
        "show_counter": True,
        "show_nav_buttons": True,
        "fullscreen_enabled": True,
    },
    "logging": {
        "log_level": "INFO",
        "log_file": str(DEFAULT_DATA_DIR / "deckview.log"),
        "rotation": "10 MB",
        "retention": "7 days",
    },
}

CONFIG_FILE_HEADER = (
    "# deckview configuration\n"
    "# Values left out fall back to the built-in defaults. Delays are in seconds;\n"
    "# gestures.min_distance is in pixels, gestures.drag_min_distance in terminal cells.\n\n"
)

# (section, key, env var, type)
ENV_OVERRIDES = (
    ("logging", "log_level", "DECKVIEW_LOG_LEVEL", str),
    ("navigation", "settle_delay", "DECKVIEW_SETTLE_DELAY", float),
    ("navigation", "activation_delay", "DECKVIEW_ACTIVATION_DELAY", float),
)


class NavigationSettings(BaseModel):
    settle_delay: float = Field(DEFAULT_SETTLE_DELAY, ge=0)
    activation_delay: float = Field(DEFAULT_ACTIVATION_DELAY, ge=0)


class GestureSettings(BaseModel):
    min_distance: float = Field(DEFAULT_SWIPE_MIN_DISTANCE, ge=0)
    drag_min_distance: float = Field(DEFAULT_DRAG_MIN_DISTANCE, ge=0)


class DisplaySettings(BaseModel):
    show_progress_dots: bool = True
    show_counter: bool = True
    show_nav_buttons: bool = True
    fullscreen_enabled: bool = True


class LoggingSettings(BaseModel):
    log_level: str = "INFO"
    log_file: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class DeckSettings(BaseModel):
    """Validated application settings."""
    navigation: NavigationSettings = Field(default_factory=NavigationSettings)
    gestures: GestureSettings = Field(default_factory=GestureSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merge ``update`` into a copy of ``base``."""
    merged = base.copy()
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _get_typed_value(raw: Optional[str], default: Any, target_type: type = str) -> Any:
    """Convert an environment string, falling back to ``default`` on failure."""
    if raw is None:
        return default
    try:
        return target_type(raw)
    except (ValueError, TypeError):
        logger.warning(f"Could not convert value '{raw}' to {target_type.__name__}. Using default: {default}")
        return default


def resolve_config_path(config_path: Optional[Union[str, Path]] = None) -> Path:
    """Explicit path, then $DECKVIEW_CONFIG, then the per-user default."""
    if config_path:
        return Path(config_path).expanduser()
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _read_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.info(f"Config file not found at {path}. Using defaults.")
        return {}
    try:
        with open(path, "rb") as f:  # Use "rb" for tomllib.load
            data = tomllib.load(f)
        logger.info(f"Successfully loaded TOML config from: {path}")
        return data
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding TOML config file {path}: {e}. Proceeding with defaults.")
    except OSError as e:
        logger.error(f"Could not read TOML config file {path}: {e}. Proceeding with defaults.")
    return {}


def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    for section, key, env_var, target_type in ENV_OVERRIDES:
        raw = os.getenv(env_var)
        if raw is None:
            continue
        current = config_data.get(section, {}).get(key)
        config_data.setdefault(section, {})[key] = _get_typed_value(raw, current, target_type)
        logger.debug(f"Config override from {env_var}: [{section}] {key}")
    return config_data


def load_settings(config_path: Optional[Union[str, Path]] = None) -> DeckSettings:
    """
    Load settings: built-in defaults, then the TOML file, then environment.

    Args:
        config_path: Optional explicit config file

    Returns:
        Validated DeckSettings

    Raises:
        ConfigError: A value in the file or environment fails validation
    """
    path = resolve_config_path(config_path)
    config_data = copy.deepcopy(DEFAULT_CONFIG)
    config_data = deep_merge_dicts(config_data, _read_toml(path))
    config_data = _apply_env_overrides(config_data)

    try:
        settings = DeckSettings.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    settings.logging.log_level = settings.logging.log_level.upper()
    return settings


def write_default_config(config_path: Optional[Union[str, Path]] = None, overwrite: bool = False) -> Path:
    """
    Write the default configuration, with a short comment header.

    Returns:
        Path of the config file (left untouched when it exists and
        ``overwrite`` is False)
    """
    path = resolve_config_path(config_path)
    if path.exists() and not overwrite:
        logger.info(f"Config file already exists at {path}; not overwriting.")
        return path
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(CONFIG_FILE_HEADER)
        toml.dump(DEFAULT_CONFIG, f)
    logger.info(f"Wrote default config file to {path}")
    return path

#
# End of config.py
#######################################################################################################################
