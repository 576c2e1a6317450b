"""Snapshot parser - correlates VirtualMachines with VolumeSnapshots.

VMs reference DataVolumes by name; VolumeSnapshots reference their source by
persistent volume claim name. DataVolumes and their claims share a name, which
is the only link between the two collections.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress
from datetime import datetime, timezone
from typing import Any

from kubesnap.constants.values import SNAPSHOT_PENDING_MESSAGE, SNAPSHOT_READY_MESSAGE
from kubesnap.models.core.snapshot_views import (
    DataVolumeView,
    SnapshotView,
    VirtualMachineView,
)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class SnapshotParser:
    """Parses raw kubevirt and snapshot.storage.k8s.io items into views."""

    @staticmethod
    def _mapping(value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @staticmethod
    def parse_timestamp(timestamp: Any) -> datetime | None:
        """Parse kubernetes timestamp strings into aware datetimes."""
        if isinstance(timestamp, datetime):
            parsed = timestamp
        elif isinstance(timestamp, str) and timestamp:
            parsed = None
            with suppress(ValueError, TypeError):
                parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
            if parsed is None:
                return None
        else:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    def source_claim_name(self, snapshot: dict[str, Any]) -> str:
        """Return the persistent volume claim a snapshot was taken from."""
        spec = self._mapping(snapshot.get("spec"))
        source = self._mapping(spec.get("source"))
        return str(source.get("persistentVolumeClaimName") or "")

    def parse_snapshot(self, snapshot: dict[str, Any]) -> SnapshotView:
        """Parse a single VolumeSnapshot into SnapshotView.

        Args:
            snapshot: Raw VolumeSnapshot dictionary from API

        Returns:
            SnapshotView object.
        """
        metadata = self._mapping(snapshot.get("metadata"))
        status = self._mapping(snapshot.get("status"))

        is_ready = status.get("readyToUse") is True
        if is_ready:
            message = SNAPSHOT_READY_MESSAGE
        else:
            error = self._mapping(status.get("error"))
            message = str(error.get("message") or SNAPSHOT_PENDING_MESSAGE)

        return SnapshotView(
            name=str(metadata.get("name") or ""),
            creation_timestamp=self.parse_timestamp(metadata.get("creationTimestamp")),
            is_ready=is_ready,
            status_message=message,
        )

    def group_by_source(
        self, snapshots: Iterable[dict[str, Any]]
    ) -> dict[str, list[SnapshotView]]:
        """Group snapshots by source claim name, keeping discovery order."""
        groups: dict[str, list[SnapshotView]] = {}
        for snapshot in snapshots:
            if not isinstance(snapshot, dict):
                continue
            groups.setdefault(self.source_claim_name(snapshot), []).append(
                self.parse_snapshot(snapshot)
            )
        return groups

    def data_volume_names(self, vm: dict[str, Any]) -> list[str]:
        """Return DataVolume names referenced by a VM template, in spec order."""
        spec = self._mapping(vm.get("spec"))
        template = self._mapping(spec.get("template"))
        template_spec = self._mapping(template.get("spec"))
        volumes = template_spec.get("volumes")
        if not isinstance(volumes, list):
            return []

        names: list[str] = []
        for volume in volumes:
            if not isinstance(volume, dict):
                continue
            data_volume = volume.get("dataVolume")
            if not isinstance(data_volume, dict):
                continue
            names.append(str(data_volume.get("name") or ""))
        return names

    @staticmethod
    def newest_first(snapshots: Iterable[SnapshotView]) -> tuple[SnapshotView, ...]:
        """Sort snapshots by creation time, newest first.

        The sort is stable, so equal timestamps keep their input order.
        Undated snapshots go last.
        """
        return tuple(
            sorted(
                snapshots,
                key=lambda snapshot: snapshot.creation_timestamp or _OLDEST,
                reverse=True,
            )
        )

    def parse_virtual_machine(
        self,
        vm: dict[str, Any],
        snapshots_by_source: dict[str, list[SnapshotView]],
    ) -> VirtualMachineView:
        """Build the view of one VM from its spec and the grouped snapshots."""
        metadata = self._mapping(vm.get("metadata"))
        data_volumes = tuple(
            DataVolumeView(
                name=name,
                snapshots=self.newest_first(snapshots_by_source.get(name, [])),
            )
            for name in self.data_volume_names(vm)
        )
        return VirtualMachineView(
            name=str(metadata.get("name") or ""),
            data_volumes=data_volumes,
        )


def correlate(
    vms: Iterable[dict[str, Any]],
    snapshots: Iterable[dict[str, Any]],
) -> list[VirtualMachineView]:
    """Correlate raw VMs and VolumeSnapshots into per-VM views.

    Every VM appears once, in input order. Snapshots whose source claim matches
    no referenced DataVolume are dropped.
    """
    parser = SnapshotParser()
    snapshots_by_source = parser.group_by_source(snapshots)
    return [
        parser.parse_virtual_machine(vm if isinstance(vm, dict) else {}, snapshots_by_source)
        for vm in vms
    ]
