"""Screens for the snapshot monitor."""
