"""Last known good gate config: JSON file next to the settings."""

import json
import logging
import os
import time

from versiongate.core.models import GateConfig

logger = logging.getLogger(__name__)


class GateCache:
    """Stores the most recent successfully fetched GateConfig."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> GateConfig | None:
        """Return the cached config, or None if missing or unreadable."""
        if not os.path.isfile(self.path):
            return None

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            row = data['config']
            config = GateConfig.from_dict(row, row.get('platform', ''))
            age = time.time() - float(data.get('fetched_at') or 0)
        except Exception as e:
            logger.warning("Ignoring unreadable gate cache %s: %s", self.path, e)
            return None

        logger.info("Loaded cached gate config (%.0f min old)", age / 60)
        return config

    def store(self, config: GateConfig):
        """Write atomically: temp file, then replace. Failures are only logged."""
        tmp_path = self.path + '.tmp'
        payload = {
            'fetched_at': time.time(),
            'config': config.to_dict(),
        }
        try:
            os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("Failed to write gate cache: %s", e)

    def clear(self):
        """Forget the cached config (e.g. after the gate source changed)."""
        try:
            if os.path.exists(self.path):
                os.remove(self.path)
        except OSError as e:
            logger.warning("Failed to clear gate cache: %s", e)
