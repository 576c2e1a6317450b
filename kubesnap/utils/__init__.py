"""Utility modules for the snapshot monitor."""

from kubesnap.utils.logging import configure_logging

__all__ = ["configure_logging"]
