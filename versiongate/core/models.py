"""Version gate data models."""

from dataclasses import dataclass
from enum import Enum

from versiongate.core.versioning import SemanticVersion
from versiongate.core.errors import VersionCheckUnavailable


class UpdateStatus(Enum):
    UP_TO_DATE = "up_to_date"
    SOFT_UPDATE_AVAILABLE = "soft_update_available"
    FORCE_UPDATE_REQUIRED = "force_update_required"
    MAINTENANCE_MODE = "maintenance_mode"

    @property
    def blocks_user(self) -> bool:
        """Force update and maintenance lock the app; the others don't."""
        return self in (UpdateStatus.FORCE_UPDATE_REQUIRED, UpdateStatus.MAINTENANCE_MODE)


@dataclass(frozen=True)
class VersionGateInput:
    """Parsed inputs for one platform's gate evaluation."""
    current_version: SemanticVersion        # installed app
    minimum_version: SemanticVersion        # soft floor
    force_minimum_version: SemanticVersion  # hard floor
    maintenance_mode: bool = False


@dataclass
class GateConfig:
    """One platform's row of the remote version-gate document.

    Versions stay as raw strings here; they are parsed at resolution time so
    a malformed row can still be cached and reported.
    """
    platform: str
    current_version: str = ""           # latest published version
    minimum_version: str = "0.0.0"
    force_minimum_version: str = "0.0.0"
    store_url: str = ""
    maintenance_mode: bool = False
    maintenance_message: str = ""

    @staticmethod
    def from_dict(row: dict, platform: str) -> 'GateConfig':
        """Build from a remote row. Missing floors default to 0.0.0."""
        if not isinstance(row, dict):
            raise VersionCheckUnavailable(
                f"Config row for {platform!r} is not an object"
            )

        def text(key: str, default: str = "") -> str:
            value = row.get(key)
            if value is None:
                return default
            return str(value)

        return GateConfig(
            platform=text('platform', platform) or platform,
            current_version=text('current_version'),
            minimum_version=text('minimum_version', "0.0.0"),
            force_minimum_version=text('force_minimum_version', "0.0.0"),
            store_url=text('store_url'),
            maintenance_mode=_as_bool(row.get('maintenance_mode', False)),
            maintenance_message=text('maintenance_message'),
        )

    def to_dict(self) -> dict:
        return {
            'platform': self.platform,
            'current_version': self.current_version,
            'minimum_version': self.minimum_version,
            'force_minimum_version': self.force_minimum_version,
            'store_url': self.store_url,
            'maintenance_mode': self.maintenance_mode,
            'maintenance_message': self.maintenance_message,
        }


@dataclass(frozen=True)
class GateDecision:
    """Result of one gate check, ready for the UI."""
    status: UpdateStatus
    installed_version: str
    latest_version: str = ""
    store_url: str = ""
    maintenance_message: str = ""
    from_cache: bool = False
    error: str = ""             # set when the check failed open

    @property
    def blocks_user(self) -> bool:
        return self.status.blocks_user


def _as_bool(value) -> bool:
    # Remote config key/value stores often hand booleans back as strings
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)
