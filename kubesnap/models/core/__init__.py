"""Core models for cluster sessions and correlated snapshot views."""

from kubesnap.models.core.connection import ClusterConnection
from kubesnap.models.core.refresh_state import RefreshState
from kubesnap.models.core.snapshot_views import (
    DataVolumeView,
    SnapshotView,
    VirtualMachineView,
)

__all__ = [
    "ClusterConnection",
    "DataVolumeView",
    "RefreshState",
    "SnapshotView",
    "VirtualMachineView",
]
