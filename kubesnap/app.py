"""Main application class for the snapshot monitor TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kubesnap.constants import APP_SUBTITLE, APP_TITLE
from kubesnap.controllers.snapshots.registry import SessionRegistry
from kubesnap.keyboard.app import APP_BINDINGS
from kubesnap.models.state.app_settings import AppSettings, ConfigSaveError
from kubesnap.models.state.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class SnapshotMonitorApp(App[None]):
    """Main TUI application watching VMs and their VolumeSnapshots."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    def __init__(
        self,
        settings: AppSettings | None = None,
        registry: SessionRegistry | None = None,
        *args,
        config_path: Path | None = None,
        **kwargs,
    ) -> None:
        """Initialize the app.

        Args:
            settings: Loaded application settings.
            registry: Pre-built sessions, defaults to one per configured cluster.
            config_path: Settings file to write the edited sessions to on exit.
                Nothing is saved when omitted.
        """
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.registry = registry or SessionRegistry.from_settings(self.settings)
        self.config_path = config_path

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubesnap.screens.monitor.monitor_screen import MonitorScreen

        self.push_screen(MonitorScreen(self.registry))
        self.registry.start_all()
        logger.info("Monitoring %d cluster session(s)", len(self.registry))

    async def on_unmount(self) -> None:
        """Save edited sessions and close them when the app exits."""
        if self.config_path is not None:
            try:
                ConfigManager.save(self.registry.to_settings(self.settings), self.config_path)
            except ConfigSaveError as e:
                logger.warning("Failed to save settings: %s", e)
        await self.registry.close_all()

    def action_refresh_all(self) -> None:
        """Run a manual refresh on every cluster session."""
        self.run_worker(
            self.registry.refresh_all(silent=False),
            name="refresh-all",
            group="refresh",
        )
