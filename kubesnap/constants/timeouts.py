"""Timeout constants for the monitor.

All timeout values for API requests and async operations.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (float, in seconds)
# ============================================================================

HTTP_REQUEST_TIMEOUT_SECONDS: Final = 10.0

__all__ = [
    "HTTP_REQUEST_TIMEOUT_SECONDS",
]
