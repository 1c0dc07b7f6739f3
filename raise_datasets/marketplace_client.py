"""RAISE marketplace API client."""

import asyncio
import logging
from typing import Any

import httpx

from raise_datasets.exceptions import (
    ConfigurationError,
    InvalidUpstreamPayload,
    UpstreamError,
    UpstreamUnreachable,
)

logger = logging.getLogger(__name__)


class MarketplaceClient:
    """Async client for the marketplace listing endpoint.

    The ``httpx.AsyncClient`` is owned by the caller so one connection pool
    can be shared by every request in the process.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        endpoint: str,
        user_agent: str,
        timeout: float = 15.0,
    ):
        if not endpoint:
            raise ConfigurationError("Marketplace endpoint is required")
        self.http_client = http_client
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    @staticmethod
    def build_params(skip: int, take: int, search: str = "") -> dict[str, Any]:
        """Upstream pagination parameters; ``searchQuery`` only when filtering."""
        params: dict[str, Any] = {
            "skip": max(0, skip),
            "take": max(1, take),
        }
        if search:
            params["searchQuery"] = search
        return params

    async def fetch_page(self, skip: int, take: int, search: str = "") -> Any:
        """
        Fetch one page of datasets and return the decoded JSON body.

        Raises:
            UpstreamUnreachable: On transport errors and timeouts
            UpstreamError: When the marketplace answers with a status other than 200
            InvalidUpstreamPayload: When the body is not valid JSON
        """
        params = self.build_params(skip, take, search)
        logger.info(f"Marketplace API request: {self.endpoint} with params: {params}")

        # httpx applies the timeout per phase; wait_for bounds the whole call.
        try:
            response = await asyncio.wait_for(
                self.http_client.get(
                    self.endpoint,
                    params=params,
                    headers=self._headers(),
                    timeout=self.timeout,
                ),
                self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Marketplace API did not answer within {self.timeout}s")
            raise UpstreamUnreachable(
                f"The marketplace API did not answer within {self.timeout} seconds"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Network error connecting to marketplace API: {e!r}")
            raise UpstreamUnreachable(f"Unable to reach the marketplace API: {e}") from e

        logger.debug(f"Marketplace API response: {response.status_code}")

        if response.status_code != 200:
            error_text = response.text[:1000] if response.text else ""
            logger.error(
                f"Marketplace API error {response.status_code}: "
                f"URL={self.endpoint}, Params={params}, Response={error_text}"
            )
            raise UpstreamError(
                status_code=response.status_code,
                message=f"API returned {response.status_code}",
                response_text=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Marketplace API returned a body that is not JSON: {e}")
            raise InvalidUpstreamPayload(
                "The data returned by the marketplace API is not valid JSON"
            ) from e
