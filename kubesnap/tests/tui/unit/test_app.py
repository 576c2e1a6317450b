"""Unit tests for SnapshotMonitorApp - class attributes and construction.

Tests avoid running the Textual event loop; see the smoke tests for that.
"""

from __future__ import annotations

from textual.binding import Binding

from kubesnap.app import SnapshotMonitorApp
from kubesnap.constants import APP_TITLE
from kubesnap.controllers.snapshots.registry import SessionRegistry
from kubesnap.keyboard.app import APP_BINDINGS
from kubesnap.models.state.app_settings import AppSettings, ClusterSettings

# =============================================================================
# Class Attributes
# =============================================================================


class TestAppClassAttributes:
    """Test SnapshotMonitorApp class-level attributes."""

    def test_app_title_set(self) -> None:
        """App TITLE class attribute must match APP_TITLE constant."""
        assert SnapshotMonitorApp.TITLE == APP_TITLE

    def test_app_bindings(self) -> None:
        """BINDINGS must be the shared application bindings."""
        assert SnapshotMonitorApp.BINDINGS is APP_BINDINGS
        assert all(isinstance(binding, Binding) for binding in APP_BINDINGS)

    def test_refresh_and_quit_keys(self) -> None:
        """ctrl+r refreshes every session and ctrl+q quits."""
        actions = {binding.key: binding.action for binding in APP_BINDINGS}
        assert actions["ctrl+r"] == "refresh_all"
        assert actions["ctrl+q"] == "app.quit"


# =============================================================================
# Construction
# =============================================================================


class TestAppConstruction:
    """Test SnapshotMonitorApp constructor handling."""

    def test_defaults_create_two_sessions(self) -> None:
        """Without configuration the source and destination sessions exist."""
        app = SnapshotMonitorApp()
        assert app.registry.names() == ["Cluster A (Source)", "Cluster B (Destination)"]

    def test_sessions_from_settings(self) -> None:
        """Configured clusters become sessions in order."""
        settings = AppSettings(clusters=[ClusterSettings(name="one"), ClusterSettings(name="two")])
        app = SnapshotMonitorApp(settings=settings)
        assert app.settings is settings
        assert app.registry.names() == ["one", "two"]

    def test_explicit_registry_wins(self) -> None:
        """An injected registry is used as-is."""
        registry = SessionRegistry()
        app = SnapshotMonitorApp(registry=registry)
        assert app.registry is registry

    def test_saving_is_opt_in(self) -> None:
        """No settings file is written unless a path is given."""
        assert SnapshotMonitorApp().config_path is None
