"""Normal/high classification of the current 5-minute price."""

from __future__ import annotations

from .errors import FormatError
from .formatter import parse_cents
from .models import DisplayState

HIGH_PRICE_THRESHOLD_CENTS = 10.0


def classify_state(literal: str) -> DisplayState:
    """HIGH when the price is strictly above 10 cents, otherwise NORMAL.

    Unparseable prices are NORMAL.
    """
    try:
        cents = parse_cents(literal)
    except FormatError:
        return DisplayState.NORMAL
    return DisplayState.HIGH if cents > HIGH_PRICE_THRESHOLD_CENTS else DisplayState.NORMAL
