"""Settings persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import Settings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load and save :class:`Settings` to disk."""

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("TURTLEBMP_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.turtlebmp"))
        return base / "settings.json"

    @classmethod
    def ensure_home(cls) -> Path:
        """Ensure the settings directory exists and return it."""
        path = cls.settings_path().parent
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings from *path* or the default file; defaults on error."""
        p = path if path is not None else cls.settings_path()
        if not p.exists():
            return Settings()
        try:
            data = json.loads(p.read_text())
            return Settings.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("ignoring unreadable settings %s: %s", p, e)
            return Settings()

    @classmethod
    def save(cls, settings: Settings, path: Path | None = None) -> Path:
        """Atomically persist *settings* to disk."""
        if path is None:
            cls.ensure_home()
            path = cls.settings_path()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(settings.model_dump_json(indent=2))
        os.replace(tmp, path)
        return path
