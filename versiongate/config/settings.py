"""Application settings: persistence via JSON."""

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.join(
    os.environ.get('LOCALAPPDATA') or os.path.join(os.path.expanduser('~'), '.local', 'share'),
    'VersionGate',
)


def default_platform() -> str:
    """Platform key used to pick a row from the gate document."""
    if sys.platform.startswith('win'):
        return 'windows'
    if sys.platform == 'darwin':
        return 'macos'
    return 'linux'


@dataclass
class AppSettings:
    """Persistent application settings."""
    # Gate source
    config_url: str = ""
    platform: str = ""
    request_timeout: float = 5.0        # seconds; launch never waits longer

    # Re-check schedule
    check_interval_minutes: int = 60    # 0 = no periodic check
    check_on_resume: bool = True

    # Soft update the user chose "Later" for
    dismissed_version: str = ""

    # Paths
    data_dir: str = ""

    def __post_init__(self):
        if not self.platform:
            self.platform = default_platform()
        if not self.data_dir:
            self.data_dir = DEFAULT_DATA_DIR

    @property
    def cache_path(self) -> str:
        return os.path.join(self.data_dir, 'gate_cache.json')

    @staticmethod
    def load(path: str | None = None) -> 'AppSettings':
        """Load settings from JSON. Returns defaults if file doesn't exist."""
        if path is None:
            path = os.path.join(DEFAULT_DATA_DIR, 'settings.json')

        if not os.path.isfile(path):
            logger.info("No settings file, using defaults")
            return AppSettings()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            settings = AppSettings(**{k: v for k, v in data.items()
                                      if k in AppSettings.__dataclass_fields__})
            logger.info("Loaded settings from %s", path)
            return settings
        except Exception as e:
            logger.warning("Failed to load settings: %s", e)
            return AppSettings()

    def save(self, path: str | None = None):
        """Save settings to JSON."""
        if path is None:
            path = os.path.join(self.data_dir, 'settings.json')

        os.makedirs(os.path.dirname(path), exist_ok=True)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self), f, indent=2)
            logger.info("Saved settings to %s", path)
        except Exception as e:
            logger.warning("Failed to save settings: %s", e)

    def ensure_dirs(self):
        """Create data directories if they don't exist."""
        os.makedirs(self.data_dir, exist_ok=True)
        os.makedirs(os.path.join(self.data_dir, 'logs'), exist_ok=True)
