"""Shared fixtures: a fake marketplace behind ``httpx.MockTransport``."""

import json

import httpx
import pytest
import pytest_asyncio

from raise_datasets.caching import TTLCache
from raise_datasets.config import Settings
from raise_datasets.marketplace_client import MarketplaceClient
from raise_datasets.services import DatasetService

ENDPOINT = "https://marketplace.test/dataset/marketplace"
BASE_URL = "https://portal.test/dataset-marketplace/"


class FakeClock:
    """Manually advanced replacement for ``time.monotonic``."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeMarketplace:
    """Records upstream requests and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = json.dumps({"items": [], "total": 0}).encode()
        self.error: Exception | None = None

    def respond_json(self, payload, status_code: int = 200) -> None:
        self.body = json.dumps(payload).encode()
        self.status_code = status_code

    def respond_raw(self, body: bytes, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def marketplace():
    return FakeMarketplace()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(
        marketplace_endpoint=ENDPOINT,
        dataset_base_url=BASE_URL,
        log_json=False,
        log_level="WARNING",
        _env_file=None,
    )


@pytest_asyncio.fixture
async def http_client(marketplace):
    async with httpx.AsyncClient(transport=httpx.MockTransport(marketplace.handler)) as client:
        yield client


@pytest.fixture
def marketplace_client(http_client):
    return MarketplaceClient(http_client, endpoint=ENDPOINT, user_agent="Raise-Datasets-Test/1.0")


@pytest.fixture
def dataset_service(marketplace_client, clock):
    cache = TTLCache(ttl_seconds=300, clock=clock)
    return DatasetService(marketplace_client, cache, ttl_seconds=300, dataset_base_url=BASE_URL)
