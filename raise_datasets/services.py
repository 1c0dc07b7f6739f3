"""Business logic for the dataset listing."""

import logging

from raise_datasets.caching import TTLCache
from raise_datasets.datasets import cache_key, extract_items, extract_total, sanitize_item
from raise_datasets.datasets.sanitize import DATASET_BASE_URL
from raise_datasets.marketplace_client import MarketplaceClient
from raise_datasets.models import DatasetPage, DatasetQuery

logger = logging.getLogger(__name__)


def compute_has_more(page: int, per_page: int, total: int | None, item_count: int) -> bool:
    """Whether another page exists.

    A reported total always wins. Without one, a full page is taken to mean
    more may follow, which is wrong when the last page is exactly full.
    """
    if total is not None:
        return page * per_page < total
    return item_count == per_page


class DatasetService:
    """Serve normalized listing pages, going upstream only on a cache miss.

    Two concurrent misses for the same query may both reach the marketplace;
    the second result simply replaces the first in the cache.
    """

    def __init__(
        self,
        client: MarketplaceClient,
        cache: TTLCache,
        ttl_seconds: int | None = None,
        dataset_base_url: str = DATASET_BASE_URL,
    ):
        self.client = client
        self.cache = cache
        self.ttl_seconds = ttl_seconds
        self.dataset_base_url = dataset_base_url

    async def fetch(self, query: DatasetQuery) -> DatasetPage:
        key = cache_key(query)
        cached = await self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return cached

        logger.debug(f"Cache miss for {key}")
        payload = await self.client.fetch_page(query.skip, query.take, query.search)

        raw_items = extract_items(payload)
        total = extract_total(payload)
        items = [sanitize_item(raw, base_url=self.dataset_base_url) for raw in raw_items]

        result = DatasetPage(
            items=items,
            page=query.page,
            per_page=query.per_page,
            total=total,
            has_more=compute_has_more(query.page, query.per_page, total, len(raw_items)),
        )
        await self.cache.set(key, result, ttl=self.ttl_seconds)
        logger.info(
            f"Fetched {len(items)} datasets for page {query.page} "
            f"(search={query.search!r}, total={total})"
        )
        return result
