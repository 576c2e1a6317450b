"""Default values for settings and new cluster sessions."""

from typing import Final

from kubesnap.constants.enums import RefreshInterval

NAMESPACE_DEFAULT: Final = "default"
AUTO_REFRESH_DEFAULT: Final = True
REFRESH_INTERVAL_DEFAULT: Final = RefreshInterval.ONE_SECOND
LOG_LEVEL_DEFAULT: Final = "INFO"

SOURCE_CLUSTER_NAME: Final = "Cluster A (Source)"
DESTINATION_CLUSTER_NAME: Final = "Cluster B (Destination)"
DEFAULT_CLUSTER_NAMES: Final = (SOURCE_CLUSTER_NAME, DESTINATION_CLUSTER_NAME)

__all__ = [
    "AUTO_REFRESH_DEFAULT",
    "DEFAULT_CLUSTER_NAMES",
    "DESTINATION_CLUSTER_NAME",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SOURCE_CLUSTER_NAME",
]
