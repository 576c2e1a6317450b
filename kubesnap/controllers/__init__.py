"""Controllers module for the snapshot monitor.

This module provides the per-cluster refresh controllers and the pieces they
drive: the resource fetcher and the snapshot correlator.
"""

from __future__ import annotations

# Base classes
from kubesnap.controllers.base import BaseController

# Errors
from kubesnap.controllers.errors import (
    FetchError,
    KubeSnapError,
    TransportError,
    ValidationError,
)

# Snapshot domain
from kubesnap.controllers.snapshots import (
    RefreshController,
    ResourceFetcher,
    SessionRegistry,
    correlate,
)

__all__ = [
    # Base
    "BaseController",
    # Errors
    "FetchError",
    "KubeSnapError",
    # Snapshot domain
    "RefreshController",
    "ResourceFetcher",
    "SessionRegistry",
    "TransportError",
    "ValidationError",
    "correlate",
]
