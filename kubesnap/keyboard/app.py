"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+r", "refresh_all", "Refresh all", priority=True),
    Binding("ctrl+q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
