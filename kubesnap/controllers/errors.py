"""Error taxonomy for refresh cycles.

Every error raised while refreshing a cluster derives from KubeSnapError and is
reduced to a single message by the refresh controller.
"""

from __future__ import annotations

from kubesnap.constants.enums import FetchSource


class KubeSnapError(Exception):
    """Base class for refresh cycle failures."""


class ValidationError(KubeSnapError):
    """Raised when required connection fields are missing."""


class FetchError(KubeSnapError):
    """Raised when the API answers one of the list requests with a failure status."""

    def __init__(self, cause: FetchSource, detail: str) -> None:
        self.cause = cause
        self.detail = detail
        super().__init__(f"Failed to fetch {cause.value}: {detail}")


class TransportError(KubeSnapError):
    """Raised when the API cannot be reached (network, DNS, TLS, timeout)."""


__all__ = ["FetchError", "KubeSnapError", "TransportError", "ValidationError"]
