"""Analytics event collection for the host application."""

from loanmatch.analytics.service import AnalyticsService, EventHandler
from loanmatch.schemas.events import AnalyticsEvent, ConversionEvent, EventType

__all__ = [
    "AnalyticsService",
    "EventHandler",
    "AnalyticsEvent",
    "ConversionEvent",
    "EventType",
]
