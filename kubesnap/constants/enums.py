"""All enum definitions for the monitor.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Refresh State Enums
# =============================================================================

class RefreshStatus(Enum):
    """Lifecycle status of one cluster session."""

    IDLE = "idle"
    CONNECTING = "connecting"
    SUCCESS = "success"
    ERROR = "error"


class RefreshInterval(Enum):
    """Allowed auto-refresh periods, in milliseconds."""

    ONE_SECOND = 1000
    THREE_SECONDS = 3000
    FIVE_SECONDS = 5000

    @property
    def seconds(self) -> float:
        return self.value / 1000

    @property
    def label(self) -> str:
        return f"every {self.value // 1000}s"


# =============================================================================
# Fetch Source Enums
# =============================================================================

class FetchSource(Enum):
    """Remote collections read on every refresh cycle."""

    VIRTUAL_MACHINES = "VMs"
    VOLUME_SNAPSHOTS = "Snapshots"
