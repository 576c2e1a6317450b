"""Constants module for the snapshot monitor.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings and sessions
"""

from kubesnap.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    DEFAULT_CLUSTER_NAMES,
    DESTINATION_CLUSTER_NAME,
    LOG_LEVEL_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SOURCE_CLUSTER_NAME,
)
from kubesnap.constants.enums import FetchSource, RefreshInterval, RefreshStatus
from kubesnap.constants.timeouts import HTTP_REQUEST_TIMEOUT_SECONDS
from kubesnap.constants.values import (
    APP_SUBTITLE,
    APP_TITLE,
    INVALID_JSON_DETAIL,
    MISSING_CONNECTION_FIELDS_MESSAGE,
    SNAPSHOT_PENDING_MESSAGE,
    SNAPSHOT_READY_MESSAGE,
    VIRTUAL_MACHINES_PATH,
    VOLUME_SNAPSHOTS_PATH,
)

__all__ = [
    "APP_SUBTITLE",
    "APP_TITLE",
    "AUTO_REFRESH_DEFAULT",
    "DEFAULT_CLUSTER_NAMES",
    "DESTINATION_CLUSTER_NAME",
    "HTTP_REQUEST_TIMEOUT_SECONDS",
    "INVALID_JSON_DETAIL",
    "LOG_LEVEL_DEFAULT",
    "MISSING_CONNECTION_FIELDS_MESSAGE",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SNAPSHOT_PENDING_MESSAGE",
    "SNAPSHOT_READY_MESSAGE",
    "SOURCE_CLUSTER_NAME",
    "VIRTUAL_MACHINES_PATH",
    "VOLUME_SNAPSHOTS_PATH",
    "FetchSource",
    "RefreshInterval",
    "RefreshStatus",
]
