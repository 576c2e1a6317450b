"""Monitor screen configuration constants."""

from typing import Final

from kubesnap.constants.enums import RefreshInterval

BUTTON_WATCH: Final = "Watch Virtual Machines"
BUTTON_DISCOVERING: Final = "Discovering VMs..."

LABEL_API_ENDPOINT: Final = "API Endpoint"
LABEL_AUTH_TOKEN: Final = "Auth Token"
LABEL_NAMESPACE: Final = "Namespace"
LABEL_AUTO_REFRESH: Final = "Auto-refresh"

PLACEHOLDER_API_ENDPOINT: Final = "https://api.my-cluster.com:6443"
PLACEHOLDER_AUTH_TOKEN: Final = "sha256~..."
PLACEHOLDER_NAMESPACE: Final = "e.g., my-virtual-machines"

CONNECTING_MESSAGE: Final = "Connecting and fetching data..."
ERROR_TITLE: Final = "Connection Error"
IDLE_MESSAGE: Final = "Enter connection details and press Watch."
NO_VMS_MESSAGE: Final = "No virtual machines found in namespace '{namespace}'."
NO_DATA_VOLUMES_MESSAGE: Final = "No DataVolumes found for this VM."
NO_SNAPSHOTS_MESSAGE: Final = "No snapshots found for this DataVolume."
REFRESHING_MESSAGE: Final = "refreshing..."
AUTO_REFRESH_OFF_MESSAGE: Final = "auto-refresh off"

READY_MARKER: Final = "✔"
PENDING_MARKER: Final = "⚠"

SNAPSHOT_DATE_FORMAT: Final = "%Y-%m-%d"
UPDATED_TIME_FORMAT: Final = "%H:%M:%S"

INTERVAL_OPTIONS: Final = tuple((interval.label, interval.value) for interval in RefreshInterval)
