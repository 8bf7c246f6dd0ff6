"""SVG key icons for the pricing display."""

from __future__ import annotations

from html import escape
from urllib.parse import quote

from .classifier import classify_state
from .models import DisplayState, Trend

ICON_SIZE = 72
FONT_FAMILY = "Arial, sans-serif"

BACKGROUND_COLOR = "#000000"
NORMAL_COLOR = "#44ff44"
HIGH_COLOR = "#ff4444"
SECONDARY_COLOR = "#cccccc"

# Rising cost is the alarming direction: up is red, down is green.
TREND_GLYPHS: dict[Trend, tuple[str, str]] = {
    Trend.UP: ("▲", HIGH_COLOR),
    Trend.DOWN: ("▼", NORMAL_COLOR),
}


def render_pricing_svg(
    five_min_formatted: str,
    hourly_formatted: str,
    raw_five_min: str,
    trend: Trend,
) -> str:
    """Key face with the 5-minute price, trend glyph and hourly average.

    The main price colour comes from classifying the raw 5-minute price,
    not from the trend.
    """
    state = classify_state(raw_five_min)
    primary_color = HIGH_COLOR if state is DisplayState.HIGH else NORMAL_COLOR

    trend_markup = ""
    if trend in TREND_GLYPHS:
        glyph, color = TREND_GLYPHS[trend]
        trend_markup = (
            f'<text x="60" y="28" text-anchor="middle" fill="{color}" '
            f'font-family="{FONT_FAMILY}" font-size="14">{glyph}</text>'
        )

    return f"""
<svg xmlns="http://www.w3.org/2000/svg" width="{ICON_SIZE}" height="{ICON_SIZE}" viewBox="0 0 {ICON_SIZE} {ICON_SIZE}">
\t<rect width="{ICON_SIZE}" height="{ICON_SIZE}" fill="{BACKGROUND_COLOR}" rx="8"/>
\t<text x="26" y="28" text-anchor="middle" fill="{primary_color}" font-family="{FONT_FAMILY}" font-size="18" font-weight="bold">{escape(five_min_formatted)}</text>
\t{trend_markup}
\t<text x="36" y="54" text-anchor="middle" fill="{SECONDARY_COLOR}" font-family="{FONT_FAMILY}" font-size="14">{escape(hourly_formatted)} avg</text>
</svg>""".strip()


def render_error_svg() -> str:
    """Key face shown when a tick fails."""
    return f"""
<svg xmlns="http://www.w3.org/2000/svg" width="{ICON_SIZE}" height="{ICON_SIZE}" viewBox="0 0 {ICON_SIZE} {ICON_SIZE}">
\t<rect width="{ICON_SIZE}" height="{ICON_SIZE}" fill="{BACKGROUND_COLOR}" rx="8"/>
\t<text x="36" y="40" text-anchor="middle" fill="{HIGH_COLOR}" font-family="{FONT_FAMILY}" font-size="14" font-weight="bold">ERROR</text>
</svg>""".strip()


def svg_data_uri(svg: str) -> str:
    """Encode SVG markup as a data URI, escaping like JavaScript's encodeURIComponent."""
    return "data:image/svg+xml," + quote(svg, safe="!'()*")
