"""Update-status resolution rules."""

import itertools

import pytest

from versiongate.core.errors import InvalidVersionFormat, VersionCheckUnavailable
from versiongate.core.models import UpdateStatus, VersionGateInput
from versiongate.core.resolver import evaluate_gate, resolve_update_status
from versiongate.core.versioning import parse_version


def gate(current, minimum, force_minimum, maintenance=False):
    return VersionGateInput(
        current_version=parse_version(current),
        minimum_version=parse_version(minimum),
        force_minimum_version=parse_version(force_minimum),
        maintenance_mode=maintenance,
    )


class TestScenarios:

    def test_below_force_floor(self):
        assert evaluate_gate("1.0.0", "1.2.0", "1.1.0") is UpdateStatus.FORCE_UPDATE_REQUIRED

    def test_between_floors(self):
        assert evaluate_gate("1.1.5", "1.2.0", "1.1.0") is UpdateStatus.SOFT_UPDATE_AVAILABLE

    def test_exactly_at_minimum(self):
        assert evaluate_gate("1.2.0", "1.2.0", "1.1.0") is UpdateStatus.UP_TO_DATE

    def test_maintenance_overrides_current_version(self):
        assert evaluate_gate("2.0.0", "1.2.0", "1.1.0", True) is UpdateStatus.MAINTENANCE_MODE

    def test_exactly_at_force_floor_is_soft(self):
        assert evaluate_gate("1.1.0", "1.2.0", "1.1.0") is UpdateStatus.SOFT_UPDATE_AVAILABLE


class TestPriority:

    @pytest.mark.parametrize("current", ["0.0.1", "1.0.0", "1.1.5", "9.9.9"])
    def test_maintenance_always_wins(self, current):
        status = resolve_update_status(gate(current, "1.2.0", "1.1.0", maintenance=True))
        assert status is UpdateStatus.MAINTENANCE_MODE

    def test_force_floor_checked_independently(self):
        # Force floor above the soft floor: current passes "minimum" but not "force"
        status = resolve_update_status(gate("1.0.0", "0.5.0", "1.1.0"))
        assert status is UpdateStatus.FORCE_UPDATE_REQUIRED

    def test_inverted_floors_never_up_to_date_below_force(self):
        versions = ["0.1.0", "0.5.0", "1.0.0", "1.1.0", "1.5.0"]
        for current, minimum, force in itertools.product(versions, repeat=3):
            status = resolve_update_status(gate(current, minimum, force))
            if parse_version(current) < parse_version(force):
                assert status is UpdateStatus.FORCE_UPDATE_REQUIRED
            elif parse_version(current) < parse_version(minimum):
                assert status is UpdateStatus.SOFT_UPDATE_AVAILABLE
            else:
                assert status is UpdateStatus.UP_TO_DATE

    def test_zero_floors_are_up_to_date(self):
        assert resolve_update_status(gate("0.0.0", "0", "0")) is UpdateStatus.UP_TO_DATE


class TestInvalidInput:

    @pytest.mark.parametrize("current,minimum,force", [
        ("", "1.0.0", "1.0.0"),
        ("1.0.0", "a.b.c", "1.0.0"),
        ("1.0.0", "1.0.0", "1.-2.0"),
        ("1.2.3.4", "1.0.0", "1.0.0"),
    ])
    def test_unparseable_version_is_unavailable(self, current, minimum, force):
        with pytest.raises(VersionCheckUnavailable) as exc_info:
            evaluate_gate(current, minimum, force)
        assert isinstance(exc_info.value.__cause__, InvalidVersionFormat)

    def test_unparseable_even_in_maintenance(self):
        with pytest.raises(VersionCheckUnavailable):
            evaluate_gate("1.0.0", "bad", "1.0.0", True)


class TestUpdateStatus:

    def test_blocks_user(self):
        assert UpdateStatus.FORCE_UPDATE_REQUIRED.blocks_user
        assert UpdateStatus.MAINTENANCE_MODE.blocks_user
        assert not UpdateStatus.SOFT_UPDATE_AVAILABLE.blocks_user
        assert not UpdateStatus.UP_TO_DATE.blocks_user
