"""Price literal parsing and display formatting."""

from __future__ import annotations

import math

from .errors import FormatError
from .models import NOT_AVAILABLE


def parse_cents(literal: str) -> float:
    """Parse a raw feed price (cents) into a float.

    Raises FormatError for anything that is not a finite number, including
    "N/A", blanks, NaN, infinities and underscore-separated digits.
    """
    try:
        text = literal.strip()
        if "_" in text:
            raise ValueError("digit separators are not allowed")
        cents = float(text)
    except (AttributeError, TypeError, ValueError) as e:
        raise FormatError(f"not a price: {literal!r}") from e
    if not math.isfinite(cents):
        raise FormatError(f"not a finite price: {literal!r}")
    return cents


def format_price(literal: str) -> str:
    """Format a cents literal for the key face.

    Magnitude picks the unit:
      - $1.00 and above  -> "$2.50"
      - 10 to 100 cents  -> "15.7¢"
      - under 10 cents   -> "3.25¢" (a trailing zero is dropped: "8.5¢", "7.0¢")

    Negative prices keep their sign ("-$1.20", "-0.4¢"). Unparseable input
    yields "N/A"; this never raises.
    """
    if literal == NOT_AVAILABLE:
        return NOT_AVAILABLE
    try:
        cents = parse_cents(literal)
    except FormatError:
        return NOT_AVAILABLE

    dollars = cents / 100
    magnitude = abs(dollars)

    if magnitude >= 1:
        sign = "-" if dollars < 0 else ""
        return f"{sign}${magnitude:.2f}"
    if magnitude >= 0.1:
        return f"{cents:.1f}¢"

    text = f"{cents:.2f}"
    if text.endswith("0"):
        text = text[:-1]
    if float(text) == 0:
        text = text.lstrip("-")
    return f"{text}¢"
