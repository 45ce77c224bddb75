"""Persistent user preferences for the prompt.

Settings are stored as JSON in the OS-appropriate config directory and
survive restarts. A missing or damaged file never stops the editor from
starting; it simply falls back to the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass
class EditorSettings:
    style: str = "classic"
    lazy: bool = True
    tab_width: int = EditorConstants.TAB_WIDTH
    header_message: str = EditorConstants.DEFAULT_HEADER_MESSAGE
    gutter_message: str = ""
    system_clipboard: bool = True


def validate_setting(key: str, value: Any) -> bool:
    """Check one stored value against the type and range it must have."""
    if key == "style":
        return value in EditorConstants.STYLE_NAMES
    if key in ("lazy", "system_clipboard"):
        return isinstance(value, bool)
    if key == "tab_width":
        return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 16
    if key in ("header_message", "gutter_message"):
        return isinstance(value, str)
    # Unknown settings are ignored by the loader (forward compatibility)
    return False


class SettingsStore:
    """Loads and saves EditorSettings in the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir or platformdirs.user_config_dir(EditorConstants.SETTINGS_APP_NAME))
        self._settings_file = self._config_dir / EditorConstants.SETTINGS_FILENAME

    @property
    def path(self) -> Path:
        return self._settings_file

    def _read_raw(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> EditorSettings:
        """Return the saved settings merged over the defaults."""
        data = self._read_raw()
        known = {f.name for f in fields(EditorSettings)}
        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            if not validate_setting(key, value):
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
                continue
            values[key] = value
        return EditorSettings(**values)

    def save(self, settings: EditorSettings) -> bool:
        """Save settings atomically (temp file + rename).

        Returns:
            True if save was successful, False otherwise.
        """
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")
            return False

        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(asdict(settings), f, indent=2)
            temp_file.replace(self._settings_file)
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False
