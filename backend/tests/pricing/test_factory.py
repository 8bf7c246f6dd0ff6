"""Tests for the pricing action factory."""

import os
from unittest.mock import patch

import httpx
import pytest

from comed.pricing.factory import create_pricing_action
from comed.pricing.feeds import FIVE_MINUTE_FEED_URL, HOURLY_FEED_URL
from comed.pricing.poller import PricingAction


class TestFactory:
    """Tests for create_pricing_action."""

    def test_defaults(self):
        """Test defaults when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            action = create_pricing_action()

        assert isinstance(action, PricingAction)
        assert action.interval == 60.0
        assert action._feeds._timeout == 10.0
        assert action._feeds.five_minute_url == FIVE_MINUTE_FEED_URL
        assert action._feeds.hourly_url == HOURLY_FEED_URL
        assert not action.running

    def test_interval_and_timeout_from_env(self):
        env = {"COMED_POLL_INTERVAL_SECONDS": "30", "COMED_REQUEST_TIMEOUT_SECONDS": "2.5"}
        with patch.dict(os.environ, env, clear=True):
            action = create_pricing_action()

        assert action.interval == 30.0
        assert action._feeds._timeout == 2.5

    def test_invalid_values_fall_back(self):
        """Test non-numeric, zero and negative values use the defaults."""
        for bad in ["abc", "0", "-5", "nan", "inf"]:
            env = {"COMED_POLL_INTERVAL_SECONDS": bad, "COMED_REQUEST_TIMEOUT_SECONDS": bad}
            with patch.dict(os.environ, env, clear=True):
                action = create_pricing_action()
            assert action.interval == 60.0
            assert action._feeds._timeout == 10.0

    def test_whitespace_is_unset(self):
        with patch.dict(os.environ, {"COMED_POLL_INTERVAL_SECONDS": "   "}, clear=True):
            action = create_pricing_action()
        assert action.interval == 60.0

    def test_feed_urls_from_env(self):
        env = {"COMED_FIVE_MINUTE_URL": "http://feeds.test/five", "COMED_HOURLY_URL": "http://feeds.test/hour"}
        with patch.dict(os.environ, env, clear=True):
            action = create_pricing_action()

        assert action._feeds.five_minute_url == "http://feeds.test/five"
        assert action._feeds.hourly_url == "http://feeds.test/hour"

    def test_blank_feed_urls_use_defaults(self):
        with patch.dict(os.environ, {"COMED_HOURLY_URL": " "}, clear=True):
            action = create_pricing_action()
        assert action._feeds.hourly_url == HOURLY_FEED_URL


@pytest.mark.asyncio
class TestFactoryRequests:
    """Tests that factory configuration reaches the feed requests."""

    async def test_timeout_from_env_bounds_requests(self):
        timeouts = []

        def handler(request: httpx.Request) -> httpx.Response:
            timeouts.append(request.extensions["timeout"]["read"])
            return httpx.Response(200, json=[{"millisUTC": "1640995200000", "price": "2.0"}])

        with patch.dict(os.environ, {"COMED_REQUEST_TIMEOUT_SECONDS": "3"}, clear=True):
            action = create_pricing_action()
        action._feeds._transport = httpx.MockTransport(handler)

        await action._feeds.fetch_feeds()

        assert timeouts == [3.0, 3.0]
