"""FastAPI dependencies and the service composition root."""

import httpx
from fastapi import Request

from raise_datasets.caching import TTLCache
from raise_datasets.config import Settings
from raise_datasets.marketplace_client import MarketplaceClient
from raise_datasets.services import DatasetService


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Shared outbound client; the caller must ``aclose()`` it."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
    )


def build_dataset_service(settings: Settings, http_client: httpx.AsyncClient) -> DatasetService:
    """Wire the marketplace client and cache into a ``DatasetService``."""
    client = MarketplaceClient(
        http_client,
        endpoint=settings.marketplace_endpoint,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout,
    )
    cache = TTLCache(ttl_seconds=settings.cache_ttl_seconds)
    return DatasetService(
        client,
        cache,
        ttl_seconds=settings.cache_ttl_seconds,
        dataset_base_url=settings.dataset_base_url,
    )


def get_dataset_service(request: Request) -> DatasetService:
    """Get the process-wide dataset service via dependency injection."""
    return request.app.state.dataset_service
