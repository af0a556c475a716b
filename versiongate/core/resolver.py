"""Update-status resolution: pure decision logic, no I/O."""

import logging

from versiongate.core.errors import InvalidVersionFormat, VersionCheckUnavailable
from versiongate.core.models import UpdateStatus, VersionGateInput
from versiongate.core.versioning import meets_minimum, parse_version

logger = logging.getLogger(__name__)


def resolve_update_status(gate_input: VersionGateInput) -> UpdateStatus:
    """Classify one platform's gate inputs. First matching rule wins.

    1. maintenance mode
    2. below the force floor
    3. below the soft floor
    4. up to date

    The force floor is checked on its own, not only after failing the soft
    floor, so a misconfigured force floor above the soft floor still blocks.
    """
    if gate_input.maintenance_mode:
        status = UpdateStatus.MAINTENANCE_MODE
    elif not meets_minimum(gate_input.current_version, gate_input.force_minimum_version):
        status = UpdateStatus.FORCE_UPDATE_REQUIRED
    elif not meets_minimum(gate_input.current_version, gate_input.minimum_version):
        status = UpdateStatus.SOFT_UPDATE_AVAILABLE
    else:
        status = UpdateStatus.UP_TO_DATE

    logger.debug(
        "current=%s minimum=%s force_minimum=%s maintenance=%s -> %s",
        gate_input.current_version, gate_input.minimum_version,
        gate_input.force_minimum_version, gate_input.maintenance_mode,
        status.name,
    )
    return status


def evaluate_gate(current_version: str, minimum_version: str,
                  force_minimum_version: str,
                  maintenance_mode: bool = False) -> UpdateStatus:
    """Parse raw version strings and resolve.

    Raises VersionCheckUnavailable (chained from InvalidVersionFormat) if any
    version can't be parsed; no status is guessed.
    """
    try:
        gate_input = VersionGateInput(
            current_version=parse_version(current_version),
            minimum_version=parse_version(minimum_version),
            force_minimum_version=parse_version(force_minimum_version),
            maintenance_mode=maintenance_mode,
        )
    except InvalidVersionFormat as e:
        raise VersionCheckUnavailable(f"Invalid version in gate input: {e}") from e

    return resolve_update_status(gate_input)
