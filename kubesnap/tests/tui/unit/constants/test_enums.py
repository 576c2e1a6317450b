"""Tests for enum constants."""

import pytest

from kubesnap.constants.enums import FetchSource, RefreshInterval, RefreshStatus
from kubesnap.screens.monitor.config import INTERVAL_OPTIONS


class TestRefreshInterval:
    """Tests for RefreshInterval."""

    def test_allowed_values(self) -> None:
        assert [interval.value for interval in RefreshInterval] == [1000, 3000, 5000]

    @pytest.mark.parametrize("value", [0, 500, 2000, 10000])
    def test_rejects_other_values(self, value: int) -> None:
        with pytest.raises(ValueError):
            RefreshInterval(value)

    def test_seconds_and_label(self) -> None:
        assert RefreshInterval.THREE_SECONDS.seconds == 3.0
        assert RefreshInterval.FIVE_SECONDS.label == "every 5s"

    def test_interval_options(self) -> None:
        assert INTERVAL_OPTIONS == (("every 1s", 1000), ("every 3s", 3000), ("every 5s", 5000))


class TestStatusEnums:
    """Tests for status and source enums."""

    def test_refresh_status_members(self) -> None:
        assert {status.name for status in RefreshStatus} == {"IDLE", "CONNECTING", "SUCCESS", "ERROR"}

    def test_fetch_source_labels(self) -> None:
        assert FetchSource.VIRTUAL_MACHINES.value == "VMs"
        assert FetchSource.VOLUME_SNAPSHOTS.value == "Snapshots"
