"""Data models for ComEd pricing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

NOT_AVAILABLE = "N/A"


class Trend(str, Enum):
    """Direction of the latest 5-minute price against the one before it."""

    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class DisplayState(IntEnum):
    """Key state index. 0 = normal price, 1 = high price."""

    NORMAL = 0
    HIGH = 1


@dataclass(frozen=True, slots=True)
class PriceSample:
    """One element of a ComEd feed. Prices are kept as the raw cents literal."""

    timestamp_millis: int | None
    price_cents: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PriceSample:
        """Build from a feed element like {"millisUTC": "...", "price": "..."}.

        Missing or blank prices become "N/A"; unreadable timestamps become None.
        """
        price = data.get("price")
        price_cents = str(price).strip() if price is not None else ""

        try:
            timestamp = int(data.get("millisUTC"))  # type: ignore[arg-type]
        except (TypeError, ValueError):
            timestamp = None

        return cls(timestamp_millis=timestamp, price_cents=price_cents or NOT_AVAILABLE)


@dataclass(frozen=True, slots=True)
class PricingSnapshot:
    """Everything one tick derived from the two feeds."""

    five_min_price: str
    previous_five_min_price: str | None
    hourly_price: str
    five_min_formatted: str
    hourly_formatted: str
    trend: Trend
    state: DisplayState
    last_update: int  # Unix milliseconds

    def to_settings(self) -> dict[str, Any]:
        """Key/value payload persisted through the display sink."""
        return {
            "fiveMinPrice": self.five_min_price,
            "hourlyPrice": self.hourly_price,
            "fiveMinFormatted": self.five_min_formatted,
            "hourlyFormatted": self.hourly_formatted,
            "trend": self.trend.value,
            "lastUpdate": self.last_update,
        }


@dataclass(frozen=True, slots=True)
class PricingOutcome:
    """Result of a single tick, successful or not."""

    ok: bool
    image: str
    title: str
    snapshot: PricingSnapshot | None = None
    error: str | None = None
