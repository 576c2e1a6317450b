"""Parsers for snapshot correlation."""

from kubesnap.controllers.snapshots.parsers.snapshot_parser import SnapshotParser, correlate

__all__ = ["SnapshotParser", "correlate"]
