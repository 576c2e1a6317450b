"""Snapshot monitoring domain: fetch, correlate and refresh per cluster."""

from kubesnap.controllers.snapshots.controller import RefreshController, should_schedule
from kubesnap.controllers.snapshots.fetchers import HttpResponse, ResourceFetcher
from kubesnap.controllers.snapshots.parsers import SnapshotParser, correlate
from kubesnap.controllers.snapshots.registry import SessionRegistry

__all__ = [
    "HttpResponse",
    "RefreshController",
    "ResourceFetcher",
    "SessionRegistry",
    "SnapshotParser",
    "correlate",
    "should_schedule",
]
