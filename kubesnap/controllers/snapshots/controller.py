"""Refresh controller for one monitored cluster.

This module owns the per-cluster refresh state machine. It validates the
connection parameters, drives the resource fetcher, manages the recurring
auto-refresh timer and publishes a RefreshState snapshot after every
transition.

Scheduling follows a single rule: whenever ``auto_refresh_enabled``,
``interval``, ``api_endpoint``, ``token`` or ``namespace`` changes, the running
timer is stopped and, if :func:`should_schedule` allows it, exactly one new
timer is started.

Overlapping cycles are resolved as follows:

- a timer tick that fires while any cycle is in flight is skipped;
- a manual refresh always runs and supersedes whatever is in flight, and only
  the most recently started cycle may apply its result;
- a cycle that finishes after the connection was edited or the controller was
  closed is discarded.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from kubesnap.constants.defaults import AUTO_REFRESH_DEFAULT, REFRESH_INTERVAL_DEFAULT
from kubesnap.constants.enums import RefreshInterval, RefreshStatus
from kubesnap.constants.values import MISSING_CONNECTION_FIELDS_MESSAGE
from kubesnap.controllers.base import BaseController
from kubesnap.controllers.errors import KubeSnapError, ValidationError
from kubesnap.controllers.snapshots.fetchers import ResourceFetcher
from kubesnap.controllers.snapshots.timers import (
    IntervalTimer,
    TimerFactory,
    asyncio_timer_factory,
)
from kubesnap.models.core.connection import ClusterConnection
from kubesnap.models.core.refresh_state import RefreshState
from kubesnap.models.core.snapshot_views import VirtualMachineView

logger = logging.getLogger(__name__)


def should_schedule(auto_refresh_enabled: bool, connection: ClusterConnection) -> bool:
    """Return whether a recurring timer must be running."""
    return auto_refresh_enabled and connection.is_complete


class RefreshController(BaseController[RefreshState]):
    """Per-cluster refresh state machine with auto-refresh scheduling."""

    def __init__(
        self,
        name: str,
        connection: ClusterConnection | None = None,
        *,
        fetcher: ResourceFetcher | None = None,
        timer_factory: TimerFactory | None = None,
        auto_refresh: bool = AUTO_REFRESH_DEFAULT,
        interval: RefreshInterval | int = REFRESH_INTERVAL_DEFAULT,
    ) -> None:
        """Initialize the controller.

        Args:
            name: Display name of the cluster session.
            connection: Initial connection parameters, owned by this controller.
            fetcher: Resource fetcher, defaults to an aiohttp-backed one.
            timer_factory: Callable ``(interval_seconds, callback) -> timer``.
            auto_refresh: Initial auto-refresh flag.
            interval: Initial auto-refresh period in milliseconds.
        """
        super().__init__()
        self.name = name
        self._connection = connection or ClusterConnection()
        self._fetcher = fetcher or ResourceFetcher(verify_tls=self._connection.verify_tls)
        self._timer_factory = timer_factory or asyncio_timer_factory
        self._timer: IntervalTimer | None = None
        self._state = RefreshState(
            auto_refresh_enabled=auto_refresh,
            interval=RefreshInterval(interval),
        )
        self._generation = 0
        self._cycle_seq = 0
        self._in_flight_cycle: int | None = None
        self._started = False
        self._closed = False

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def connection(self) -> ClusterConnection:
        """Return a copy of the current connection parameters."""
        return replace(self._connection)

    @property
    def is_in_flight(self) -> bool:
        return self._in_flight_cycle is not None

    @property
    def timer_active(self) -> bool:
        return self._timer is not None

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin scheduling auto-refresh. Requires a running event loop."""
        if self._closed:
            return
        self._started = True
        self._rearm_timer()

    def set_endpoint(self, api_endpoint: str) -> None:
        self._update_connection(api_endpoint=api_endpoint.strip())

    def set_token(self, token: str) -> None:
        self._update_connection(token=token.strip())

    def set_namespace(self, namespace: str) -> None:
        self._update_connection(namespace=namespace.strip())

    def set_auto_refresh(self, enabled: bool) -> None:
        if enabled == self._state.auto_refresh_enabled:
            return
        logger.debug("%s: auto-refresh %s", self.name, "enabled" if enabled else "disabled")
        self._state = self._state.model_copy(update={"auto_refresh_enabled": enabled})
        self._rearm_timer()
        self._notify(self._state)

    def set_interval(self, interval: RefreshInterval | int) -> None:
        """Change the auto-refresh period.

        Raises:
            ValueError: ``interval`` is not one of the allowed periods.
        """
        value = RefreshInterval(interval)
        if value is self._state.interval:
            return
        logger.debug("%s: refresh interval set to %dms", self.name, value.value)
        self._state = self._state.model_copy(update={"interval": value})
        self._rearm_timer()
        self._notify(self._state)

    async def refresh(self, silent: bool = False) -> None:
        """Run one refresh cycle.

        A manual cycle (``silent=False``) shows CONNECTING and clears previous
        data. A silent cycle keeps the last state visible and only raises
        ``is_refreshing``. Any failure ends in the ERROR state and disables
        auto-refresh. Errors never propagate to the caller.
        """
        if self._closed:
            logger.debug("%s: refresh requested after close, ignoring", self.name)
            return

        connection = replace(self._connection)
        try:
            self._validate(connection)
        except ValidationError as e:
            self._set_state(status=RefreshStatus.ERROR, data=(), error_message=str(e))
            return

        self._cycle_seq += 1
        cycle = self._cycle_seq
        generation = self._generation
        self._in_flight_cycle = cycle

        if silent:
            self._set_state(is_refreshing=True)
        else:
            self._set_state(status=RefreshStatus.CONNECTING, data=(), error_message=None)
        logger.debug("%s: starting %s refresh cycle %d", self.name, "silent" if silent else "manual", cycle)

        try:
            views = await self._fetcher.fetch_cluster_data(
                connection.namespace,
                connection.api_endpoint,
                connection.token,
            )
        except asyncio.CancelledError:
            if self._in_flight_cycle == cycle:
                self._in_flight_cycle = None
                if not self._closed:
                    self._drop_cycle_state()
            raise
        except KubeSnapError as e:
            self._finish_cycle(cycle, generation, error=str(e))
        except Exception as e:
            logger.exception("%s: unexpected failure during refresh", self.name)
            self._finish_cycle(cycle, generation, error=str(e) or e.__class__.__name__)
        else:
            self._finish_cycle(cycle, generation, data=tuple(views))

    async def close(self) -> None:
        """Stop the timer and discard any response still in flight."""
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        self._stop_timer()
        await self._fetcher.close()
        logger.debug("%s: controller closed", self.name)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(connection: ClusterConnection) -> None:
        if not connection.has_required_fields:
            raise ValidationError(MISSING_CONNECTION_FIELDS_MESSAGE)

    def _update_connection(self, **changes: Any) -> None:
        changed = False
        for field, value in changes.items():
            if getattr(self._connection, field) != value:
                setattr(self._connection, field, value)
                changed = True
        if not changed:
            return
        self._generation += 1
        logger.debug("%s: connection updated (%s)", self.name, ", ".join(sorted(changes)))
        self._rearm_timer()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _rearm_timer(self) -> None:
        self._stop_timer()
        if not self._started or self._closed:
            return
        if should_schedule(self._state.auto_refresh_enabled, self._connection):
            self._timer = self._timer_factory(self._state.interval.seconds, self._on_timer_tick)
            logger.debug("%s: auto-refresh every %dms", self.name, self._state.interval.value)

    async def _on_timer_tick(self) -> None:
        if self._in_flight_cycle is not None:
            logger.debug("%s: previous cycle still running, skipping tick", self.name)
            return
        await self.refresh(silent=True)

    def _set_state(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        self._notify(self._state)

    def _drop_cycle_state(self) -> None:
        """Leave the transient state of a cycle whose result will never land."""
        status = self._state.status
        if status is RefreshStatus.CONNECTING:
            status = RefreshStatus.IDLE
        self._set_state(status=status, is_refreshing=False)

    def _finish_cycle(
        self,
        cycle: int,
        generation: int,
        *,
        data: tuple[VirtualMachineView, ...] = (),
        error: str | None = None,
    ) -> None:
        if cycle != self._in_flight_cycle:
            logger.debug("%s: cycle %d superseded, discarding result", self.name, cycle)
            return
        self._in_flight_cycle = None
        if self._closed:
            return

        if generation != self._generation:
            logger.debug("%s: connection changed during cycle %d, discarding result", self.name, cycle)
            self._drop_cycle_state()
            return

        if error is not None:
            logger.warning("%s: refresh failed: %s", self.name, error)
            self._state = self._state.model_copy(
                update={
                    "status": RefreshStatus.ERROR,
                    "data": (),
                    "error_message": error,
                    "is_refreshing": False,
                    "auto_refresh_enabled": False,
                }
            )
            self._rearm_timer()
            self._notify(self._state)
            return

        logger.debug("%s: cycle %d loaded %d VM(s)", self.name, cycle, len(data))
        self._set_state(
            status=RefreshStatus.SUCCESS,
            data=data,
            error_message=None,
            is_refreshing=False,
            last_updated=datetime.now(timezone.utc),
        )
