"""Factory for the pricing key action."""

from __future__ import annotations

import logging
import os

from .feeds import FIVE_MINUTE_FEED_URL, HOURLY_FEED_URL, ComedFeedClient
from .poller import PricingAction

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 60.0
DEFAULT_REQUEST_TIMEOUT = 10.0


def _positive_float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not value > 0 or value == float("inf"):
        logger.warning("Ignoring %s=%r, using %.1f", name, raw, default)
        return default
    return value


def create_pricing_action() -> PricingAction:
    """Create the key action configured from environment variables.

    - COMED_POLL_INTERVAL_SECONDS   refresh period (default 60)
    - COMED_REQUEST_TIMEOUT_SECONDS per-request timeout (default 10)
    - COMED_FIVE_MINUTE_URL / COMED_HOURLY_URL override the feed endpoints

    Returns an idle action. The host drives it via on_will_appear() etc.
    """
    interval = _positive_float_env("COMED_POLL_INTERVAL_SECONDS", DEFAULT_POLL_INTERVAL)
    timeout = _positive_float_env("COMED_REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT)
    five_minute_url = os.environ.get("COMED_FIVE_MINUTE_URL", "").strip() or FIVE_MINUTE_FEED_URL
    hourly_url = os.environ.get("COMED_HOURLY_URL", "").strip() or HOURLY_FEED_URL

    feeds = ComedFeedClient(
        five_minute_url=five_minute_url,
        hourly_url=hourly_url,
        timeout=timeout,
    )
    logger.info("Pricing action: %.1fs interval, %.1fs request timeout", interval, timeout)
    return PricingAction(feeds=feeds, interval=interval)
