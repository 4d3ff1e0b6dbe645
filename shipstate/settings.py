"""
settings.py - Persisted window settings.

Three scalars survive between sessions: the window position and whether
the window is shown. They are read once before the plugin starts and
written once after it stops; the caller owns that load/save cycle.

File format is a flat JSON object:
    {"window_x": 240, "window_y": 35, "show": true}
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging
import os

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ErrorCode

logger = logging.getLogger(__name__)


ENV_SETTINGS_PATH = "SHIPSTATE_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path("~/.shipstate/settings.json")

DEFAULT_WINDOW_X = 240
DEFAULT_WINDOW_Y = 35
DEFAULT_SHOW = True


class WindowSettings(BaseModel):
    """
    Window position and visibility.

    A value that fails to parse falls back to that key's default instead
    of rejecting the whole file.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    window_x: int = DEFAULT_WINDOW_X
    window_y: int = DEFAULT_WINDOW_Y
    show: bool = DEFAULT_SHOW

    @field_validator("window_x", "window_y", "show", mode="wrap")
    @classmethod
    def _fallback_to_default(cls, value: Any, handler, info):
        try:
            return handler(value)
        except ValidationError:
            default = cls.model_fields[info.field_name].default
            logger.warning(
                f"[{ErrorCode.MALFORMED_SETTING.name}] {info.field_name}={value!r} "
                f"is invalid, using default {default!r}"
            )
            return default

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class SettingsStore:
    """
    Reads and writes WindowSettings as JSON.

    Usage:
        store = SettingsStore.from_env()
        settings = store.load()
        plugin.start(settings)
        ...
        store.save(plugin.stop())
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SETTINGS_PATH):
        self.path = Path(path).expanduser()

    @classmethod
    def from_env(cls) -> "SettingsStore":
        """Create a store at the path named by SHIPSTATE_SETTINGS_PATH."""
        return cls(os.getenv(ENV_SETTINGS_PATH, str(DEFAULT_SETTINGS_PATH)))

    def load(self) -> WindowSettings:
        """
        Load settings, falling back to defaults.

        A missing file is normal on first run. An unreadable or non-object
        file is logged and replaced by defaults.
        """
        data = self._read()
        if data is None:
            return WindowSettings()

        settings = WindowSettings.model_validate(data)
        logger.debug(f"Loaded settings from {self.path}: {settings.to_dict()}")
        return settings

    def save(self, settings: WindowSettings) -> None:
        """Write settings, creating the parent directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
        logger.debug(f"Saved settings to {self.path}")

    def _read(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}, using defaults")
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(
                f"[{ErrorCode.SETTINGS_UNREADABLE.name}] {self.path}: {e}, using defaults"
            )
            return None

        if not isinstance(data, dict):
            logger.warning(
                f"[{ErrorCode.SETTINGS_UNREADABLE.name}] {self.path} does not hold "
                f"an object, using defaults"
            )
            return None

        return data
