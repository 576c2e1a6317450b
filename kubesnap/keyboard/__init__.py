"""Keyboard bindings for the snapshot monitor."""

from kubesnap.keyboard.app import APP_BINDINGS

__all__ = ["APP_BINDINGS"]
