"""Monitor screen - side-by-side cluster panels."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header

from kubesnap.controllers.snapshots.registry import SessionRegistry
from kubesnap.widgets import ClusterPanel


class MonitorScreen(Screen[None]):
    """Shows one ClusterPanel per registered cluster session."""

    DEFAULT_CSS = """
    MonitorScreen #cluster-panels {
        height: 1fr;
    }
    """

    def __init__(self, registry: SessionRegistry) -> None:
        super().__init__()
        self.registry = registry

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="cluster-panels"):
            for index, controller in enumerate(self.registry):
                yield ClusterPanel(controller, id=f"cluster-panel-{index}")
        yield Footer()
