"""Connection parameters for one monitored cluster."""

from __future__ import annotations

from dataclasses import dataclass

from kubesnap.constants.defaults import NAMESPACE_DEFAULT


@dataclass
class ClusterConnection:
    """API endpoint, namespace and bearer token for one cluster.

    Owned and mutated by exactly one refresh controller.
    """

    api_endpoint: str = ""
    namespace: str = NAMESPACE_DEFAULT
    token: str = ""
    verify_tls: bool = True

    @property
    def has_required_fields(self) -> bool:
        """Return True when a manual refresh may contact the API."""
        return bool(self.api_endpoint) and bool(self.namespace)

    @property
    def is_complete(self) -> bool:
        """Return True when every field needed for auto-refresh is set."""
        return self.has_required_fields and bool(self.token)

    def __repr__(self) -> str:
        token_state = "set" if self.token else "unset"
        return (
            f"ClusterConnection(api_endpoint={self.api_endpoint!r}, "
            f"namespace={self.namespace!r}, token=<{token_state}>, "
            f"verify_tls={self.verify_tls!r})"
        )
