"""Fetchers for cluster resources."""

from kubesnap.controllers.snapshots.fetchers.resource_fetcher import (
    AiohttpGetter,
    HttpResponse,
    ResourceFetcher,
)

__all__ = ["AiohttpGetter", "HttpResponse", "ResourceFetcher"]
