"""Models module for the snapshot monitor."""
