"""Chat analytics: aggregation, entry points and display formatting."""

from chat_analytics.analytics.aggregator import AnalyticsAccumulator, aggregate
from chat_analytics.analytics.client import analyze, analyze_chat, analyze_sync
from chat_analytics.analytics.formatters import format_duration, format_number
from chat_analytics.analytics.models import EMPTY_ANALYTICS, AnalyticsRecord

__all__ = [
    "analyze",
    "analyze_sync",
    "analyze_chat",
    "aggregate",
    "AnalyticsAccumulator",
    "AnalyticsRecord",
    "EMPTY_ANALYTICS",
    "format_duration",
    "format_number",
]
