"""Tests for resource fetcher."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from kubesnap.constants.enums import FetchSource
from kubesnap.controllers.errors import FetchError, TransportError
from kubesnap.controllers.snapshots.fetchers.resource_fetcher import (
    AiohttpGetter,
    HttpResponse,
    ResourceFetcher,
)

VM_URL = "https://api.example.com:6443/apis/kubevirt.io/v1/namespaces/vms/virtualmachines"
SNAPSHOT_URL = (
    "https://api.example.com:6443/apis/snapshot.storage.k8s.io/v1/namespaces/vms/volumesnapshots"
)

VM_BODY = {
    "items": [
        {
            "metadata": {"name": "vm1"},
            "spec": {"template": {"spec": {"volumes": [{"dataVolume": {"name": "dv1"}}]}}},
        }
    ]
}
SNAPSHOT_BODY = {
    "items": [
        {
            "metadata": {"name": "snap", "creationTimestamp": "2024-01-01T00:00:00Z"},
            "spec": {"source": {"persistentVolumeClaimName": "dv1"}},
            "status": {"readyToUse": True},
        }
    ]
}


def _router(responses: dict[str, HttpResponse | Exception]) -> AsyncMock:
    async def _get(url: str, headers: Any) -> HttpResponse:
        result = responses[url]
        if isinstance(result, Exception):
            raise result
        return result

    return AsyncMock(side_effect=_get)


class TestResourceFetcher:
    """Tests for ResourceFetcher class."""

    def test_build_urls_strips_trailing_slash(self) -> None:
        urls = ResourceFetcher.build_urls("https://api.example.com:6443/", "vms")
        assert urls[FetchSource.VIRTUAL_MACHINES] == VM_URL
        assert urls[FetchSource.VOLUME_SNAPSHOTS] == SNAPSHOT_URL

    def test_build_headers(self) -> None:
        assert ResourceFetcher.build_headers("abc") == {
            "Authorization": "Bearer abc",
            "Accept": "application/json",
        }

    def test_default_getter_is_aiohttp(self) -> None:
        fetcher = ResourceFetcher()
        assert isinstance(fetcher._http_get, AiohttpGetter)

    @pytest.mark.asyncio
    async def test_fetch_cluster_data_correlates(self) -> None:
        """Both lists are requested with the bearer token and correlated."""
        http_get = _router(
            {
                VM_URL: HttpResponse(200, "OK", VM_BODY),
                SNAPSHOT_URL: HttpResponse(200, "OK", SNAPSHOT_BODY),
            }
        )
        fetcher = ResourceFetcher(http_get)

        result = await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "tok")

        assert [vm.name for vm in result] == ["vm1"]
        assert [s.name for s in result[0].data_volumes[0].snapshots] == ["snap"]
        called_urls = sorted(call.args[0] for call in http_get.await_args_list)
        assert called_urls == sorted([VM_URL, SNAPSHOT_URL])
        for call in http_get.await_args_list:
            assert call.args[1]["Authorization"] == "Bearer tok"
            assert call.args[1]["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_missing_items_is_empty(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(200, "OK", {"kind": "VirtualMachineList"}),
                    SNAPSHOT_URL: HttpResponse(200, "OK", {}),
                }
            )
        )
        assert await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t") == []

    @pytest.mark.asyncio
    async def test_null_body_is_empty(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(200, "OK", VM_BODY),
                    SNAPSHOT_URL: HttpResponse(200, "OK", None),
                }
            )
        )
        result = await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")
        assert result[0].data_volumes[0].snapshots == ()

    @pytest.mark.asyncio
    async def test_vm_failure_raises_fetch_error(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(403, "Forbidden"),
                    SNAPSHOT_URL: HttpResponse(200, "OK", SNAPSHOT_BODY),
                }
            )
        )
        with pytest.raises(FetchError) as excinfo:
            await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")
        assert excinfo.value.cause is FetchSource.VIRTUAL_MACHINES
        assert str(excinfo.value) == "Failed to fetch VMs: Forbidden"

    @pytest.mark.asyncio
    async def test_snapshot_failure_raises_fetch_error(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(200, "OK", VM_BODY),
                    SNAPSHOT_URL: HttpResponse(404, "Not Found"),
                }
            )
        )
        with pytest.raises(FetchError, match="Failed to fetch Snapshots: Not Found"):
            await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")

    @pytest.mark.asyncio
    async def test_both_failing_reports_vms(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(500, "Internal Server Error"),
                    SNAPSHOT_URL: HttpResponse(401, "Unauthorized"),
                }
            )
        )
        with pytest.raises(FetchError) as excinfo:
            await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")
        assert excinfo.value.cause is FetchSource.VIRTUAL_MACHINES

    @pytest.mark.asyncio
    async def test_missing_reason_uses_status_code(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(502, ""),
                    SNAPSHOT_URL: HttpResponse(200, "OK", {}),
                }
            )
        )
        with pytest.raises(FetchError, match="Failed to fetch VMs: 502"):
            await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self) -> None:
        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: TransportError("Failed to reach api: connection refused"),
                    SNAPSHOT_URL: HttpResponse(200, "OK", {}),
                }
            )
        )
        with pytest.raises(TransportError, match="connection refused"):
            await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")

    @pytest.mark.asyncio
    async def test_close_with_injected_getter_is_noop(self) -> None:
        http_get = AsyncMock()
        fetcher = ResourceFetcher(http_get)
        await fetcher.close()
        http_get.assert_not_called()


class TestHttpResponse:
    """Tests for HttpResponse."""

    @pytest.mark.parametrize(("status", "ok"), [(200, True), (204, True), (301, False), (500, False)])
    def test_ok(self, status: int, ok: bool) -> None:
        assert HttpResponse(status).ok is ok


class TestInvalidJson:
    """A success status with an undecodable body is a fetch failure."""

    @pytest.mark.asyncio
    async def test_invalid_json_raises_fetch_error(self) -> None:
        from kubesnap.controllers.snapshots.fetchers import resource_fetcher

        fetcher = ResourceFetcher(
            _router(
                {
                    VM_URL: HttpResponse(200, "OK", resource_fetcher._INVALID_JSON),
                    SNAPSHOT_URL: HttpResponse(200, "OK", {}),
                }
            )
        )
        with pytest.raises(FetchError, match="Failed to fetch VMs: invalid JSON response"):
            await fetcher.fetch_cluster_data("vms", "https://api.example.com:6443", "t")


class TestAiohttpGetter:
    """Tests for the aiohttp-backed getter against a local server."""

    @pytest.mark.asyncio
    async def test_get_json_and_headers(self) -> None:
        from aiohttp import web
        from aiohttp.test_utils import TestServer

        seen_headers: dict[str, str] = {}

        async def handler(request: web.Request) -> web.Response:
            seen_headers.update(request.headers)
            return web.json_response({"items": [{"metadata": {"name": "vm1"}}]})

        app = web.Application()
        app.router.add_get("/list", handler)

        getter = AiohttpGetter(timeout_seconds=5)
        async with TestServer(app) as server:
            response = await getter(
                str(server.make_url("/list")),
                ResourceFetcher.build_headers("secret"),
            )
        await getter.close()

        assert response.ok
        assert response.body == {"items": [{"metadata": {"name": "vm1"}}]}
        assert seen_headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_error_status_keeps_reason(self) -> None:
        from aiohttp import web
        from aiohttp.test_utils import TestServer

        async def handler(request: web.Request) -> web.Response:
            return web.Response(status=403, reason="Forbidden")

        app = web.Application()
        app.router.add_get("/list", handler)

        getter = AiohttpGetter(timeout_seconds=5)
        async with TestServer(app) as server:
            response = await getter(str(server.make_url("/list")), {})
        await getter.close()

        assert response.status == 403
        assert response.reason == "Forbidden"
        assert response.body is None

    @pytest.mark.asyncio
    async def test_non_json_body_is_flagged(self) -> None:
        from aiohttp import web
        from aiohttp.test_utils import TestServer

        from kubesnap.controllers.snapshots.fetchers import resource_fetcher

        async def handler(request: web.Request) -> web.Response:
            return web.Response(text="<html>login</html>", content_type="text/html")

        app = web.Application()
        app.router.add_get("/list", handler)

        getter = AiohttpGetter(timeout_seconds=5)
        async with TestServer(app) as server:
            response = await getter(str(server.make_url("/list")), {})
        await getter.close()

        assert response.body is resource_fetcher._INVALID_JSON

    @pytest.mark.asyncio
    async def test_connection_refused_is_transport_error(self) -> None:
        from aiohttp.test_utils import unused_port

        getter = AiohttpGetter(timeout_seconds=5)
        try:
            with pytest.raises(TransportError, match="Failed to reach"):
                await getter(f"http://127.0.0.1:{unused_port()}/list", {})
        finally:
            await getter.close()
