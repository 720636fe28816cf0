"""Configuration loading for planview."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PLANVIEW_CONFIG"


@dataclass
class UIConfig:
    theme: str = "dark"  # "dark" or "light"
    show_reference: bool = False  # Prefix list entries with the full reference
    colorize: bool = True  # Color +/-/~ lines in the detail pane
    list_width: int = 40  # Percent of the screen given to the action list


@dataclass
class PlanViewConfig:
    ui: UIConfig = field(default_factory=UIConfig)


def default_config_path() -> Path:
    return Path.home() / ".config" / "planview" / "config.toml"


def load_config(config_path: str | Path | None = None) -> PlanViewConfig:
    """Load configuration from TOML file, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. $PLANVIEW_CONFIG
    3. ~/.config/planview/config.toml
    4. Built-in defaults
    """
    config = PlanViewConfig()

    # Load defaults from bundled config
    default_path = Path(__file__).parent / "config.default.toml"
    if default_path.exists():
        _merge_toml(config, default_path)

    if config_path:
        user_path = Path(config_path).expanduser()
    elif os.environ.get(CONFIG_ENV_VAR):
        user_path = Path(os.environ[CONFIG_ENV_VAR]).expanduser()
    else:
        user_path = default_config_path()

    if user_path.exists():
        try:
            _merge_toml(config, user_path)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring config file %s: %s", user_path, exc)

    _validate_ui(config.ui)
    return config


def _validate_ui(ui: UIConfig) -> None:
    """Reset wrongly typed or out-of-range [ui] values to their defaults."""
    defaults = UIConfig()

    if ui.theme not in ("dark", "light"):
        logger.warning("Unknown theme %r, using dark", ui.theme)
        ui.theme = defaults.theme

    for key in ("show_reference", "colorize"):
        value = getattr(ui, key)
        if not isinstance(value, bool):
            logger.warning("ui.%s must be true or false, got %r", key, value)
            setattr(ui, key, getattr(defaults, key))

    width = ui.list_width
    if isinstance(width, bool) or not isinstance(width, int):
        logger.warning("ui.list_width must be an integer, got %r", width)
        ui.list_width = defaults.list_width
    elif not 10 <= width <= 90:
        logger.warning("ui.list_width %r out of range 10-90, using 40", width)
        ui.list_width = defaults.list_width


def _merge_toml(config: PlanViewConfig, path: Path) -> None:
    """Merge a TOML file into the config, overwriting only specified fields."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    if "ui" in data:
        for key, value in data["ui"].items():
            if hasattr(config.ui, key):
                setattr(config.ui, key, value)
