"""Widgets module for the snapshot monitor."""

from kubesnap.widgets.cluster_panel import ClusterPanel

__all__ = ["ClusterPanel"]
