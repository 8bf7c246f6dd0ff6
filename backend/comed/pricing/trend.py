"""Trend between consecutive 5-minute prices."""

from __future__ import annotations

from .errors import FormatError
from .formatter import parse_cents
from .models import NOT_AVAILABLE, Trend


def calculate_trend(previous: str | None, current: str) -> Trend:
    """'up', 'down', or 'neutral' for current vs previous.

    Missing, "N/A" or malformed readings on either side give NEUTRAL.
    """
    if not previous or previous == NOT_AVAILABLE or current == NOT_AVAILABLE:
        return Trend.NEUTRAL

    try:
        prev = parse_cents(previous)
        curr = parse_cents(current)
    except FormatError:
        return Trend.NEUTRAL

    if curr > prev:
        return Trend.UP
    elif curr < prev:
        return Trend.DOWN
    return Trend.NEUTRAL
