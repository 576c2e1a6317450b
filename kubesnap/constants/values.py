"""Scalar string constants shown to the operator or sent to the API."""

from typing import Final

APP_TITLE: Final = "OpenShift VM Snapshot Monitor"
APP_SUBTITLE: Final = "Watch Virtual Machines and their VolumeSnapshots"

# ============================================================================
# Kubernetes API paths
# ============================================================================

VIRTUAL_MACHINES_PATH: Final = "/apis/kubevirt.io/v1/namespaces/{namespace}/virtualmachines"
VOLUME_SNAPSHOTS_PATH: Final = (
    "/apis/snapshot.storage.k8s.io/v1/namespaces/{namespace}/volumesnapshots"
)

# ============================================================================
# Snapshot status messages
# ============================================================================

SNAPSHOT_READY_MESSAGE: Final = "Ready to use"
SNAPSHOT_PENDING_MESSAGE: Final = "Pending creation"

# ============================================================================
# Refresh messages
# ============================================================================

MISSING_CONNECTION_FIELDS_MESSAGE: Final = "API Endpoint and Namespace are required."
INVALID_JSON_DETAIL: Final = "invalid JSON response"

__all__ = [
    "APP_SUBTITLE",
    "APP_TITLE",
    "INVALID_JSON_DETAIL",
    "MISSING_CONNECTION_FIELDS_MESSAGE",
    "SNAPSHOT_PENDING_MESSAGE",
    "SNAPSHOT_READY_MESSAGE",
    "VIRTUAL_MACHINES_PATH",
    "VOLUME_SNAPSHOTS_PATH",
]
