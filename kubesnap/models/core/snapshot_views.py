"""Correlated VM -> DataVolume -> VolumeSnapshot view models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SnapshotView(BaseModel):
    """One VolumeSnapshot as shown to the operator."""

    model_config = ConfigDict(frozen=True)

    name: str
    creation_timestamp: datetime | None = None
    is_ready: bool = False
    status_message: str = ""


class DataVolumeView(BaseModel):
    """A DataVolume referenced by a VM, with its snapshots newest first."""

    model_config = ConfigDict(frozen=True)

    name: str
    snapshots: tuple[SnapshotView, ...] = ()

    @property
    def latest_snapshot(self) -> SnapshotView | None:
        return self.snapshots[0] if self.snapshots else None

    @property
    def ready_count(self) -> int:
        return sum(1 for snapshot in self.snapshots if snapshot.is_ready)


class VirtualMachineView(BaseModel):
    """A VirtualMachine and the DataVolumes backing it."""

    model_config = ConfigDict(frozen=True)

    name: str
    data_volumes: tuple[DataVolumeView, ...] = ()

    @property
    def snapshot_count(self) -> int:
        return sum(len(data_volume.snapshots) for data_volume in self.data_volumes)
