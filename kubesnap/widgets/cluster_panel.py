"""Cluster panel - inputs, controls and results for one cluster session."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Checkbox, Input, Label, Select, Static

from kubesnap.controllers.snapshots.controller import RefreshController
from kubesnap.models.core.refresh_state import RefreshState
from kubesnap.screens.monitor.config import (
    BUTTON_WATCH,
    INTERVAL_OPTIONS,
    LABEL_API_ENDPOINT,
    LABEL_AUTH_TOKEN,
    LABEL_AUTO_REFRESH,
    LABEL_NAMESPACE,
    PLACEHOLDER_API_ENDPOINT,
    PLACEHOLDER_AUTH_TOKEN,
    PLACEHOLDER_NAMESPACE,
)
from kubesnap.screens.monitor.presenter import MonitorPresenter

logger = logging.getLogger(__name__)


class ClusterPanel(Vertical):
    """Renders one RefreshController and forwards user commands to it."""

    DEFAULT_CSS = """
    ClusterPanel {
        width: 1fr;
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    ClusterPanel .panel-title {
        text-style: bold;
        margin-bottom: 1;
    }

    ClusterPanel Input {
        margin-bottom: 1;
    }

    ClusterPanel #refresh-controls {
        height: auto;
    }

    ClusterPanel #watch-button {
        width: 1fr;
    }

    ClusterPanel #results {
        height: 1fr;
        overflow-y: auto;
    }
    """

    def __init__(
        self,
        controller: RefreshController,
        *,
        presenter: MonitorPresenter | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.controller = controller
        self._presenter = presenter or MonitorPresenter()
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        connection = self.controller.connection
        state = self.controller.state
        yield Static(self.controller.name, classes="panel-title")
        yield Label(LABEL_API_ENDPOINT)
        yield Input(connection.api_endpoint, placeholder=PLACEHOLDER_API_ENDPOINT, id="api-endpoint")
        yield Label(LABEL_AUTH_TOKEN)
        yield Input(connection.token, placeholder=PLACEHOLDER_AUTH_TOKEN, password=True, id="auth-token")
        yield Label(LABEL_NAMESPACE)
        yield Input(connection.namespace, placeholder=PLACEHOLDER_NAMESPACE, id="namespace")
        yield Button(BUTTON_WATCH, id="watch-button", variant="primary")
        with Horizontal(id="refresh-controls"):
            yield Checkbox(LABEL_AUTO_REFRESH, state.auto_refresh_enabled, id="auto-refresh")
            yield Select(
                INTERVAL_OPTIONS,
                value=state.interval_millis,
                allow_blank=False,
                id="refresh-interval",
            )
        yield Static("", id="status-line")
        yield Static("", id="results")

    def on_mount(self) -> None:
        self._unsubscribe = self.controller.subscribe(self._on_state)
        self._on_state(self.controller.state)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @on(Input.Changed, "#api-endpoint")
    def _endpoint_changed(self, event: Input.Changed) -> None:
        self.controller.set_endpoint(event.value)

    @on(Input.Changed, "#auth-token")
    def _token_changed(self, event: Input.Changed) -> None:
        self.controller.set_token(event.value)

    @on(Input.Changed, "#namespace")
    def _namespace_changed(self, event: Input.Changed) -> None:
        self.controller.set_namespace(event.value)

    @on(Checkbox.Changed, "#auto-refresh")
    def _auto_refresh_changed(self, event: Checkbox.Changed) -> None:
        self.controller.set_auto_refresh(event.value)

    @on(Select.Changed, "#refresh-interval")
    def _interval_changed(self, event: Select.Changed) -> None:
        if isinstance(event.value, int):
            self.controller.set_interval(event.value)

    @on(Button.Pressed, "#watch-button")
    def _watch_pressed(self, _: Button.Pressed) -> None:
        self.run_worker(
            self.controller.refresh(silent=False),
            name=f"refresh-{self.controller.name}",
            group="refresh",
        )

    def _on_state(self, state: RefreshState) -> None:
        if not self.is_mounted:
            return
        button = self.query_one("#watch-button", Button)
        button.label = self._presenter.watch_button_label(state)
        button.disabled = self._presenter.is_watch_disabled(state)

        checkbox = self.query_one("#auto-refresh", Checkbox)
        if checkbox.value != state.auto_refresh_enabled:
            checkbox.value = state.auto_refresh_enabled
        select = self.query_one("#refresh-interval", Select)
        select.disabled = not state.auto_refresh_enabled

        self.query_one("#status-line", Static).update(self._presenter.status_line(state))
        self.query_one("#results", Static).update(
            self._presenter.render_body(state, self.controller.connection.namespace)
        )
