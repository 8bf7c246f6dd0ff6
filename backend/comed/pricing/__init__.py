"""ComEd real-time pricing for a single display key.

Public API:
    format_price        - Cents literal -> "$2.50" / "15.7¢" / "3.25¢" / "N/A"
    calculate_trend     - Previous vs current 5-minute price -> Trend
    classify_state      - 5-minute price -> DisplayState (normal / high)
    render_pricing_svg  - Key face for a successful tick
    render_error_svg    - Key face for a failed tick
    ComedFeedClient     - Fetches the 5-minute and hourly-average feeds
    PricingPoller       - One fetch/render/emit cycle per tick()
    PricingAction       - Appear / key-down / disappear lifecycle
    DisplaySink         - Abstract key the pipeline writes to
    create_pricing_action - Factory configured from environment variables
"""

from .classifier import classify_state
from .factory import create_pricing_action
from .feeds import ComedFeedClient
from .formatter import format_price
from .interface import DisplaySink, Scheduler
from .models import DisplayState, PriceSample, PricingOutcome, PricingSnapshot, Trend
from .poller import PricingAction, PricingPoller
from .renderer import render_error_svg, render_pricing_svg
from .scheduler import AsyncioScheduler
from .sink import RecordingSink
from .trend import calculate_trend

__all__ = [
    "AsyncioScheduler",
    "ComedFeedClient",
    "DisplaySink",
    "DisplayState",
    "PriceSample",
    "PricingAction",
    "PricingOutcome",
    "PricingPoller",
    "PricingSnapshot",
    "RecordingSink",
    "Scheduler",
    "Trend",
    "calculate_trend",
    "classify_state",
    "create_pricing_action",
    "format_price",
    "render_error_svg",
    "render_pricing_svg",
]
