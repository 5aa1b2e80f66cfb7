"""Data models for the search module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """A transcript line matching a search term."""

    line_number: int  # 1-based
    timestamp: str
    sender: str
    message: str
