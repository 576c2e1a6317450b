"""Monitor screen presenter - turns RefreshState snapshots into display text."""

from __future__ import annotations

from datetime import timezone

from rich.text import Text

from kubesnap.constants.enums import RefreshStatus
from kubesnap.models.core.refresh_state import RefreshState
from kubesnap.models.core.snapshot_views import (
    DataVolumeView,
    SnapshotView,
    VirtualMachineView,
)
from kubesnap.screens.monitor.config import (
    AUTO_REFRESH_OFF_MESSAGE,
    BUTTON_DISCOVERING,
    BUTTON_WATCH,
    CONNECTING_MESSAGE,
    ERROR_TITLE,
    IDLE_MESSAGE,
    NO_DATA_VOLUMES_MESSAGE,
    NO_SNAPSHOTS_MESSAGE,
    NO_VMS_MESSAGE,
    PENDING_MARKER,
    READY_MARKER,
    REFRESHING_MESSAGE,
    SNAPSHOT_DATE_FORMAT,
    UPDATED_TIME_FORMAT,
)


class MonitorPresenter:
    """Read-only formatting of cluster session state."""

    @staticmethod
    def watch_button_label(state: RefreshState) -> str:
        return BUTTON_DISCOVERING if state.status is RefreshStatus.CONNECTING else BUTTON_WATCH

    @staticmethod
    def is_watch_disabled(state: RefreshState) -> bool:
        return state.status is RefreshStatus.CONNECTING

    @staticmethod
    def summarize(state: RefreshState) -> str:
        """One-line backup health summary for a successful load."""
        snapshot_count = sum(vm.snapshot_count for vm in state.data)
        ready = sum(data_volume.ready_count for vm in state.data for data_volume in vm.data_volumes)
        return f"{len(state.data)} VM(s), {snapshot_count} snapshot(s), {ready} ready"

    def status_line(self, state: RefreshState) -> Text:
        """Freshness line: last update time plus refresh indicators."""
        parts: list[str] = []
        if state.last_updated is not None and state.status is RefreshStatus.SUCCESS:
            updated = state.last_updated.astimezone(timezone.utc)
            parts.append(f"Updated {updated.strftime(UPDATED_TIME_FORMAT)} UTC")
            parts.append(self.summarize(state))
        if state.is_refreshing:
            parts.append(REFRESHING_MESSAGE)
        if not state.auto_refresh_enabled:
            parts.append(AUTO_REFRESH_OFF_MESSAGE)
        return Text(" | ".join(parts), style="dim")

    @staticmethod
    def _format_date(snapshot: SnapshotView) -> str:
        if snapshot.creation_timestamp is None:
            return "-"
        return snapshot.creation_timestamp.strftime(SNAPSHOT_DATE_FORMAT)

    @staticmethod
    def format_snapshot(snapshot: SnapshotView) -> Text:
        marker = Text(READY_MARKER, style="green") if snapshot.is_ready else Text(PENDING_MARKER, style="yellow")
        created = MonitorPresenter._format_date(snapshot)
        line = Text("      ")
        line.append_text(marker)
        line.append(f" {snapshot.name}", style="bold")
        line.append(f"  {created}", style="dim")
        line.append(f"  {snapshot.status_message}")
        return line

    def format_data_volume(self, data_volume: DataVolumeView) -> list[Text]:
        header = Text.assemble("    DataVolume: ", (data_volume.name, "cyan"))
        latest = data_volume.latest_snapshot
        if latest is not None:
            header.append(
                f"  (latest {self._format_date(latest)}, "
                f"{data_volume.ready_count}/{len(data_volume.snapshots)} ready)",
                style="dim",
            )
        lines = [header]
        if not data_volume.snapshots:
            lines.append(Text(f"      {NO_SNAPSHOTS_MESSAGE}", style="dim"))
            return lines
        lines.extend(self.format_snapshot(snapshot) for snapshot in data_volume.snapshots)
        return lines

    def format_virtual_machine(self, vm: VirtualMachineView) -> list[Text]:
        lines = [Text(vm.name, style="bold magenta")]
        if not vm.data_volumes:
            lines.append(Text(f"    {NO_DATA_VOLUMES_MESSAGE}", style="dim"))
            return lines
        for data_volume in vm.data_volumes:
            lines.extend(self.format_data_volume(data_volume))
        return lines

    def render_body(self, state: RefreshState, namespace: str) -> Text:
        """Render the results area for the current state."""
        if state.status is RefreshStatus.CONNECTING:
            return Text(CONNECTING_MESSAGE, style="italic")
        if state.status is RefreshStatus.ERROR:
            return Text.assemble(
                (ERROR_TITLE, "bold red"),
                "\n",
                (state.error_message or "", "red"),
            )
        if state.status is RefreshStatus.SUCCESS:
            if not state.data:
                return Text(NO_VMS_MESSAGE.format(namespace=namespace), style="dim")
            lines: list[Text] = []
            for vm in state.data:
                lines.extend(self.format_virtual_machine(vm))
            return Text("\n").join(lines)
        return Text(IDLE_MESSAGE, style="dim")
