"""Session registry - one independent refresh controller per monitored cluster."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterator

from kubesnap.constants.defaults import DEFAULT_CLUSTER_NAMES
from kubesnap.constants.enums import RefreshInterval
from kubesnap.controllers.snapshots.controller import RefreshController
from kubesnap.controllers.snapshots.fetchers import ResourceFetcher
from kubesnap.controllers.snapshots.timers import TimerFactory
from kubesnap.models.core.connection import ClusterConnection
from kubesnap.models.state.app_settings import AppSettings, ClusterSettings

logger = logging.getLogger(__name__)

FetcherFactory = Callable[[ClusterSettings], ResourceFetcher]


class SessionRegistry:
    """Ordered collection of cluster sessions.

    Sessions share nothing: each controller owns its connection, timer and
    fetcher.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, RefreshController] = {}

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        fetcher_factory: FetcherFactory | None = None,
        timer_factory: TimerFactory | None = None,
    ) -> SessionRegistry:
        """Build one controller per configured cluster.

        With no clusters configured, the source and destination sessions are
        created with default settings.
        """
        clusters = settings.clusters or [ClusterSettings(name=name) for name in DEFAULT_CLUSTER_NAMES]

        def _default_fetcher(cluster: ClusterSettings) -> ResourceFetcher:
            return ResourceFetcher(
                timeout_seconds=settings.request_timeout_seconds,
                verify_tls=cluster.verify_tls,
            )

        make_fetcher = fetcher_factory or _default_fetcher
        registry = cls()
        for cluster in clusters:
            controller = RefreshController(
                cluster.name,
                ClusterConnection(
                    api_endpoint=cluster.api_endpoint,
                    namespace=cluster.namespace,
                    token=cluster.resolve_token(),
                    verify_tls=cluster.verify_tls,
                ),
                fetcher=make_fetcher(cluster),
                timer_factory=timer_factory,
                auto_refresh=cluster.auto_refresh,
                interval=RefreshInterval(cluster.refresh_interval_ms),
            )
            registry.add(controller)
        return registry

    def to_settings(self, base: AppSettings) -> AppSettings:
        """Return ``base`` with its clusters replaced by the current sessions.

        Connection fields and refresh preferences come from the controllers;
        ``token_env`` is carried over from the matching configured cluster.
        Inline tokens are left out.
        """
        token_envs = {cluster.name: cluster.token_env for cluster in base.clusters}
        clusters = []
        for controller in self:
            connection = controller.connection
            state = controller.state
            clusters.append(
                ClusterSettings(
                    name=controller.name,
                    api_endpoint=connection.api_endpoint,
                    namespace=connection.namespace,
                    token_env=token_envs.get(controller.name, ""),
                    auto_refresh=state.auto_refresh_enabled,
                    refresh_interval_ms=state.interval_millis,
                    verify_tls=connection.verify_tls,
                )
            )
        return base.model_copy(update={"clusters": clusters})

    def add(self, controller: RefreshController) -> None:
        """Register a controller under its name.

        Raises:
            ValueError: A session with the same name already exists.
        """
        if controller.name in self._sessions:
            raise ValueError(f"Duplicate cluster session name: {controller.name!r}")
        self._sessions[controller.name] = controller

    def get(self, name: str) -> RefreshController:
        return self._sessions[name]

    def names(self) -> list[str]:
        return list(self._sessions)

    def __iter__(self) -> Iterator[RefreshController]:
        return iter(list(self._sessions.values()))

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, name: object) -> bool:
        return name in self._sessions

    def start_all(self) -> None:
        for controller in self:
            controller.start()

    async def refresh_all(self, silent: bool = False) -> None:
        """Refresh every session concurrently."""
        await asyncio.gather(*(controller.refresh(silent=silent) for controller in self))

    async def close_all(self) -> None:
        """Tear down every session."""
        logger.debug("Closing %d cluster session(s)", len(self._sessions))
        await asyncio.gather(*(controller.close() for controller in self))
