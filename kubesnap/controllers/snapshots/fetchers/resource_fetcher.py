"""Resource fetcher - reads VirtualMachines and VolumeSnapshots from one cluster."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import aiohttp

from kubesnap.constants.enums import FetchSource
from kubesnap.constants.timeouts import HTTP_REQUEST_TIMEOUT_SECONDS
from kubesnap.constants.values import (
    INVALID_JSON_DETAIL,
    VIRTUAL_MACHINES_PATH,
    VOLUME_SNAPSHOTS_PATH,
)
from kubesnap.controllers.errors import FetchError, TransportError
from kubesnap.controllers.snapshots.parsers import correlate
from kubesnap.models.core.snapshot_views import VirtualMachineView

logger = logging.getLogger(__name__)

_INVALID_JSON = object()


@dataclass(frozen=True)
class HttpResponse:
    """Status line and decoded JSON body of one GET request."""

    status: int
    reason: str = ""
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


HttpGetFunc = Callable[[str, Mapping[str, str]], Awaitable[HttpResponse]]


class AiohttpGetter:
    """Default GET implementation backed by one lazily created aiohttp session."""

    def __init__(
        self,
        *,
        timeout_seconds: float = HTTP_REQUEST_TIMEOUT_SECONDS,
        verify_tls: bool = True,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._verify_tls = verify_tls
        self._session: aiohttp.ClientSession | None = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
            )
        return self._session

    async def __call__(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        session = self._get_session()
        try:
            async with session.get(
                url,
                headers=dict(headers),
                ssl=self._verify_tls,
            ) as response:
                body: Any = None
                if 200 <= response.status < 300:
                    try:
                        body = await response.json(content_type=None)
                    except ValueError:
                        body = _INVALID_JSON
                return HttpResponse(
                    status=response.status,
                    reason=response.reason or "",
                    body=body,
                )
        except TimeoutError as exc:
            raise TransportError(
                f"Request to {url} timed out after {self._timeout_seconds:.0f}s"
            ) from exc
        except aiohttp.InvalidURL as exc:
            raise TransportError(f"Malformed API endpoint URL: {url}") from exc
        except aiohttp.ClientError as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise TransportError(f"Failed to reach {url}: {reason}") from exc

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None


class ResourceFetcher:
    """Fetches VMs and VolumeSnapshots for one namespace and correlates them.

    Holds no state between calls apart from the reusable HTTP getter.
    """

    def __init__(
        self,
        http_get_func: HttpGetFunc | None = None,
        *,
        timeout_seconds: float = HTTP_REQUEST_TIMEOUT_SECONDS,
        verify_tls: bool = True,
    ) -> None:
        """Initialize with an optional GET function.

        Args:
            http_get_func: Async callable ``(url, headers) -> HttpResponse``.
                Defaults to an aiohttp-backed getter.
            timeout_seconds: Per-request timeout for the default getter.
            verify_tls: Whether the default getter verifies server certificates.
        """
        self._owns_getter = http_get_func is None
        self._http_get: HttpGetFunc = http_get_func or AiohttpGetter(
            timeout_seconds=timeout_seconds,
            verify_tls=verify_tls,
        )

    @staticmethod
    def build_urls(api_endpoint: str, namespace: str) -> dict[FetchSource, str]:
        """Build the two namespaced list URLs."""
        base = api_endpoint.strip().rstrip("/")
        return {
            FetchSource.VIRTUAL_MACHINES: base + VIRTUAL_MACHINES_PATH.format(namespace=namespace),
            FetchSource.VOLUME_SNAPSHOTS: base + VOLUME_SNAPSHOTS_PATH.format(namespace=namespace),
        }

    @staticmethod
    def build_headers(token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    @staticmethod
    def _items(source: FetchSource, response: HttpResponse) -> list[dict[str, Any]]:
        """Check the response status and return its ``items`` list."""
        if not response.ok:
            detail = response.reason or str(response.status)
            raise FetchError(source, detail)
        if response.body is _INVALID_JSON:
            raise FetchError(source, INVALID_JSON_DETAIL)
        if not isinstance(response.body, dict):
            return []
        items = response.body.get("items")
        return items if isinstance(items, list) else []

    async def fetch_raw(
        self,
        namespace: str,
        api_endpoint: str,
        token: str,
    ) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
        """Fetch raw VM and VolumeSnapshot items concurrently.

        Raises:
            FetchError: Either request returned a non-success status.
            TransportError: Either request could not be completed.
        """
        urls = self.build_urls(api_endpoint, namespace)
        headers = self.build_headers(token)

        vm_response, snapshot_response = await asyncio.gather(
            self._http_get(urls[FetchSource.VIRTUAL_MACHINES], headers),
            self._http_get(urls[FetchSource.VOLUME_SNAPSHOTS], headers),
            return_exceptions=True,
        )
        # VM outcome takes precedence when both requests fail
        for outcome in (vm_response, snapshot_response):
            if isinstance(outcome, BaseException):
                raise outcome

        vms = self._items(FetchSource.VIRTUAL_MACHINES, vm_response)
        snapshots = self._items(FetchSource.VOLUME_SNAPSHOTS, snapshot_response)
        return vms, snapshots

    async def fetch_cluster_data(
        self,
        namespace: str,
        api_endpoint: str,
        token: str,
    ) -> list[VirtualMachineView]:
        """Fetch both collections and return the correlated per-VM views."""
        logger.debug("Fetching VM and snapshot data from %s (namespace=%s)", api_endpoint, namespace)
        vms, snapshots = await self.fetch_raw(namespace, api_endpoint, token)
        logger.debug("Fetched %d VM(s) and %d snapshot(s)", len(vms), len(snapshots))
        return correlate(vms, snapshots)

    async def close(self) -> None:
        """Release the default getter's HTTP session."""
        if self._owns_getter and isinstance(self._http_get, AiohttpGetter):
            await self._http_get.close()
