import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths

from mindful.core.countdown import DEFAULT_MINUTES, DURATION_CHOICES

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    default_minutes: int = DEFAULT_MINUTES
    sound_enabled: bool = True
    log_level: str = "INFO"


def settings_path() -> Path:
    base = QStandardPaths.writableLocation(QStandardPaths.AppDataLocation)
    return Path(base) / "settings.json"


class SettingsStore:
    """Read-only startup configuration. Timer state is never written back."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or settings_path()

    def load(self) -> AppSettings:
        if not self.path.exists():
            return AppSettings()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings at %s: %r", self.path, e)
            return AppSettings()
        if not isinstance(data, dict):
            return AppSettings()

        s = AppSettings()
        for k, v in data.items():
            if hasattr(s, k):
                setattr(s, k, v)

        if s.default_minutes not in DURATION_CHOICES:
            logger.warning("default_minutes=%r not in %s, using %d",
                           s.default_minutes, DURATION_CHOICES, DEFAULT_MINUTES)
            s.default_minutes = DEFAULT_MINUTES
        s.default_minutes = int(s.default_minutes)
        if not isinstance(s.sound_enabled, bool):
            logger.warning("sound_enabled=%r is not true/false, using %s",
                           s.sound_enabled, AppSettings.sound_enabled)
            s.sound_enabled = AppSettings.sound_enabled
        s.log_level = str(s.log_level)
        return s
