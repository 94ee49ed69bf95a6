# -*- coding: utf-8 -*-
"""
src/dragstyle/config.py

Settings for DragStyle, read from a per-user config.ini.

Covers the gesture tuning (drag threshold and per-axis pointer sensitivity),
the feedback tones and the document shown at startup. The file is created
with the defaults on first run so users have something to edit.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional

# --- Constants ---
APP_NAME = "DragStyle"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def get_app_dir() -> Path:
    """
    Resolves, and creates if needed, the per-user settings directory.

    - Windows: %APPDATA%/DragStyle
    - macOS: ~/Library/Application Support/DragStyle
    - Linux: ~/.config/DragStyle

    Returns:
        Path: The directory that holds config.ini.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux and other Unix-like
        app_dir = Path.home() / ".config" / APP_NAME

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


class Config:
    """
    Typed access to the DragStyle settings: built-in defaults overlaid
    with whatever the user put in config.ini.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        """
        Initializes the configuration manager.

        Args:
            app_dir (Path, optional): Directory holding config.ini. Defaults
                to the per-user application directory.
        """
        self.parser = configparser.ConfigParser()
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Fills the parser with the built-in settings."""
        self.parser["General"] = {
            "log_level": DEFAULT_LOG_LEVEL
        }
        self.parser["Gesture"] = {
            "drag_threshold": "5",
            "weight_sensitivity": "5",
            "size_sensitivity": "2"
        }
        self.parser["Feedback"] = {
            "tones_enabled": "True",
            "volume": "0.4",
            "tone_duration_ms": "60"
        }
        self.parser["Editor"] = {
            "initial_html": ""
        }

    def _load_from_file(self):
        """
        Overlays the user's config.ini on top of the defaults.
        A missing file is created from the defaults; an unreadable one is ignored.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
            return
        try:
            self.parser.read(self.config_file_path, encoding="utf-8")
        except configparser.Error as e:
            logger.error(f"Could not parse config file at {self.config_file_path}, using defaults: {e}")
            self._load_defaults()

    def _save_defaults(self):
        """Writes the default settings, with a short header, to config.ini."""
        try:
            self.app_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# You can edit these values. Restart the app for changes to take effect.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            # Non-critical: the defaults stay in effect for this run.
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    # --- Typed settings ---

    @property
    def log_level(self) -> str:
        """Name of the root logging level, e.g. 'INFO' or 'DEBUG'."""
        return self.parser.get("General", "log_level", fallback=DEFAULT_LOG_LEVEL).upper()

    @property
    def drag_threshold(self) -> float:
        """Deadband, in scaled pointer units, that separates a tap from a drag."""
        return self.parser.getfloat("Gesture", "drag_threshold", fallback=5.0)

    @property
    def weight_sensitivity(self) -> float:
        """Multiplier applied to the pointer X coordinate on the weight axis."""
        return self.parser.getfloat("Gesture", "weight_sensitivity", fallback=5.0)

    @property
    def size_sensitivity(self) -> float:
        """Multiplier applied to the pointer X coordinate on the size axis."""
        return self.parser.getfloat("Gesture", "size_sensitivity", fallback=2.0)

    @property
    def tones_enabled(self) -> bool:
        """Whether step changes are announced with a feedback tone."""
        return self.parser.getboolean("Feedback", "tones_enabled", fallback=True)

    @property
    def volume(self) -> float:
        """Peak tone amplitude between 0.0 and 1.0."""
        return min(1.0, max(0.0, self.parser.getfloat("Feedback", "volume", fallback=0.4)))

    @property
    def tone_duration_ms(self) -> int:
        """Length of a feedback tone in milliseconds."""
        return self.parser.getint("Feedback", "tone_duration_ms", fallback=60)

    @property
    def initial_html(self) -> str:
        """Document content shown at startup. Empty means the built-in sample text."""
        return self.parser.get("Editor", "initial_html", fallback="")


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Returns the process-wide Config instance, creating it on first use.
    Other modules should call this rather than instantiating Config.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


if __name__ == '__main__':
    # Prints the effective settings; edit config.ini and re-run to check overrides.
    config = get_config()
    print(f"--- {APP_NAME} Configuration ---")
    print(f"Config file path: {config.config_file_path}")

    print("\n--- Loaded Settings ---")
    print(f"Log level: {config.log_level}")
    print(f"Drag threshold: {config.drag_threshold} (type: {type(config.drag_threshold).__name__})")
    print(f"Weight sensitivity: {config.weight_sensitivity}")
    print(f"Size sensitivity: {config.size_sensitivity}")
    print(f"Tones enabled: {config.tones_enabled} (volume {config.volume}, {config.tone_duration_ms} ms)")
    print(f"Initial HTML: {config.initial_html or '(built-in sample)'}")
