"""Fixtures for pricing tests.

Feed requests never leave the process: ``feed_client`` builds a
ComedFeedClient on top of ``httpx.MockTransport`` serving canned payloads.
"""

import json

import httpx
import pytest

from comed.pricing.feeds import FIVE_MINUTE_FEED_URL, HOURLY_FEED_URL, ComedFeedClient


def make_entries(*prices: str, start_ms: int = 1640995200000) -> list[dict]:
    """Newest-first feed entries, five minutes apart."""
    return [
        {"millisUTC": str(start_ms - i * 300_000), "price": price}
        for i, price in enumerate(prices)
    ]


class FeedServer:
    """Canned (status, body) pairs for the two feed URLs, plus a request log."""

    def __init__(self) -> None:
        self.responses: dict[str, tuple[int, bytes]] = {
            FIVE_MINUTE_FEED_URL: (200, b"[]"),
            HOURLY_FEED_URL: (200, b"[]"),
        }
        self.requests: list[str] = []

    def serve(self, five_minute=None, hourly=None) -> None:
        if five_minute is not None:
            self.responses[FIVE_MINUTE_FEED_URL] = (200, json.dumps(five_minute).encode())
        if hourly is not None:
            self.responses[HOURLY_FEED_URL] = (200, json.dumps(hourly).encode())

    def serve_raw(self, url: str, body: str) -> None:
        self.responses[url] = (200, body.encode())

    def fail(self, url: str, status: int = 503) -> None:
        self.responses[url] = (status, b"unavailable")

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        status, body = self.responses.get(url, (404, b"unknown feed"))
        return httpx.Response(status, content=body, headers={"content-type": "application/json"})


@pytest.fixture
def feed_server() -> FeedServer:
    return FeedServer()


@pytest.fixture
def feed_client(feed_server: FeedServer) -> ComedFeedClient:
    """ComedFeedClient wired to the in-process feed server."""
    return ComedFeedClient(transport=httpx.MockTransport(feed_server.handler))


@pytest.fixture
def entries():
    """The make_entries helper, for building feed payloads."""
    return make_entries
