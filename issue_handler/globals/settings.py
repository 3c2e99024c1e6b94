"""User settings for rendering issues.

Settings live in a YAML file named ``.issuehandlerrc`` (JSON works too, being
a subset of YAML). The file is looked up in the current working directory and
its parents, then in the user's home directory:

    colorize: false
    colors:
      file: bold.blue
      caret: green
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from rich.console import Console

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".issuehandlerrc"


@dataclass
class Settings:
    """
    Settings loaded from disk.

    Attributes:
        colorize: Forces colored output on or off, or None to detect it
        colors: Partial color map, same shape as ``set_color_map``'s input
        path: File the settings were read from, or None if none was found
    """

    colorize: Optional[bool] = None
    colors: Dict[str, Any] = field(default_factory=dict)
    path: Optional[Path] = None

    def resolve_colorize(
        self, explicit: Optional[bool] = None, console: Optional[Console] = None
    ) -> bool:
        """Decide whether to colorize: explicit flag, then settings, then the terminal."""
        if explicit is not None:
            return explicit
        if self.colorize is not None:
            return self.colorize
        console = console or Console()
        return console.is_terminal and console.color_system is not None


def find_settings_file(
    start: Optional[Path] = None, home: Optional[Path] = None
) -> Optional[Path]:
    """Find the nearest settings file walking up from ``start``, falling back to ``home``."""
    start = (start or Path.cwd()).resolve()
    for directory in [start] + list(start.parents):
        candidate = directory / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate

    try:
        home = home or Path.home()
    except RuntimeError:
        return None
    candidate = home / SETTINGS_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path``, or from the discovered settings file.

    Missing, unreadable or malformed files yield empty settings.
    """
    try:
        path = path or find_settings_file()
    except OSError as e:
        logger.debug(f"Settings lookup failed: {e}")
        return Settings()

    if path is None:
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read settings file {path}: {e}")
        return Settings()
    except yaml.YAMLError as e:
        logger.warning(f"Could not parse settings file {path}: {e}")
        return Settings()

    if data is None:
        return Settings(path=path)
    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {path}: expected a mapping at the top level")
        return Settings()

    colorize = data.get("colorize")
    if not isinstance(colorize, bool):
        if colorize is not None:
            logger.warning(f"Ignoring non-boolean 'colorize' in {path}")
        colorize = None

    colors = data.get("colors") or {}
    if not isinstance(colors, dict):
        logger.warning(f"Ignoring 'colors' in {path}: expected a mapping")
        colors = {}

    return Settings(colorize=colorize, colors=colors, path=path)
