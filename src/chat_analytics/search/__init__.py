"""Substring search over raw chat transcripts."""

from chat_analytics.search.models import SearchResult
from chat_analytics.search.scanner import search

__all__ = ["search", "SearchResult"]
