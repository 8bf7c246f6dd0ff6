"""HTTP client for the ComEd hourly pricing feeds."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from .errors import ParseError, PricingError, TransportError
from .models import PriceSample

logger = logging.getLogger(__name__)

FIVE_MINUTE_FEED_URL = "https://hourlypricing.comed.com/api?type=5minutefeed&format=json"
HOURLY_FEED_URL = "https://hourlypricing.comed.com/api?type=currenthouraverage&format=json"


def parse_feed(payload: Any) -> list[PriceSample]:
    """Turn a decoded feed response into samples, newest first.

    Raises ParseError unless the payload is a JSON array of objects.
    """
    if not isinstance(payload, list):
        raise ParseError(f"expected a JSON array, got {type(payload).__name__}")

    samples: list[PriceSample] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ParseError(f"feed element {index} is {type(item).__name__}, not an object")
        samples.append(PriceSample.from_dict(item))
    return samples


class ComedFeedClient:
    """Fetches the 5-minute feed and the current hour average.

    Each fetch opens a short-lived httpx.AsyncClient; every request is bounded
    by `timeout` seconds. Pass `transport` to route requests elsewhere
    (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        five_minute_url: str = FIVE_MINUTE_FEED_URL,
        hourly_url: str = HOURLY_FEED_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.five_minute_url = five_minute_url
        self.hourly_url = hourly_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_feeds(self) -> tuple[list[PriceSample], list[PriceSample]]:
        """Fetch both feeds concurrently. Returns (five_minute, hourly).

        Fails as a whole: if either request fails, the first failure is raised
        and the other result is discarded.
        """
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            results = await asyncio.gather(
                self._fetch(client, self.five_minute_url),
                self._fetch(client, self.hourly_url),
                return_exceptions=True,
            )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        five_minute, hourly = results
        logger.debug("Fetched %d five-minute and %d hourly samples", len(five_minute), len(hourly))
        return five_minute, hourly

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> list[PriceSample]:
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise ParseError(f"{url}: invalid JSON") from e

        try:
            return parse_feed(payload)
        except PricingError as e:
            raise ParseError(f"{url}: {e}") from e
