"""Observable state of one cluster session."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from kubesnap.constants.defaults import AUTO_REFRESH_DEFAULT, REFRESH_INTERVAL_DEFAULT
from kubesnap.constants.enums import RefreshInterval, RefreshStatus
from kubesnap.models.core.snapshot_views import VirtualMachineView


class RefreshState(BaseModel):
    """Immutable snapshot of a refresh controller, emitted after every transition.

    ``data`` is only populated in the SUCCESS status and ``error_message`` only
    in the ERROR status. ``is_refreshing`` is True only while a silent cycle is
    in flight.
    """

    model_config = ConfigDict(frozen=True)

    status: RefreshStatus = RefreshStatus.IDLE
    data: tuple[VirtualMachineView, ...] = ()
    error_message: str | None = None
    is_refreshing: bool = False
    auto_refresh_enabled: bool = AUTO_REFRESH_DEFAULT
    interval: RefreshInterval = REFRESH_INTERVAL_DEFAULT
    last_updated: datetime | None = None

    @property
    def interval_millis(self) -> int:
        return self.interval.value
