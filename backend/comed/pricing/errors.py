"""Exceptions raised by the pricing pipeline."""

from __future__ import annotations


class PricingError(Exception):
    """Base class for pricing failures."""


class TransportError(PricingError):
    """A feed request failed: network error, timeout, or non-2xx status."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(PricingError):
    """A feed response was not a JSON array of price objects."""


class FormatError(PricingError, ValueError):
    """A price literal could not be read as a finite number of cents."""
