"""Case-insensitive substring search over a raw transcript."""

from __future__ import annotations

import logging

from chat_analytics.extractors import split_whatsapp_line
from chat_analytics.search.models import SearchResult

logger = logging.getLogger(__name__)


def search(raw_content: str, term: str) -> list[SearchResult]:
    """Find every transcript line containing ``term``, ignoring case.

    The match runs against the whole line. Where the line has the usual
    "[timestamp] sender: message" shape the pieces are split out; otherwise
    the whole line is returned as the message. A blank term returns [].
    """
    if not term or not term.strip():
        return []

    needle = term.lower()
    results: list[SearchResult] = []
    for index, line in enumerate((raw_content or "").split("\n")):
        line = line.rstrip("\r")
        if needle not in line.lower():
            continue
        results.append(_to_result(index + 1, line))

    logger.debug("Search for %r matched %d lines", term, len(results))
    return results


def _to_result(line_number: int, line: str) -> SearchResult:
    parts = split_whatsapp_line(line)
    if parts is None:
        return SearchResult(line_number=line_number, timestamp="", sender="", message=line)
    if parts.sender is None:
        return SearchResult(
            line_number=line_number, timestamp=parts.timestamp, sender="", message=line
        )
    return SearchResult(
        line_number=line_number,
        timestamp=parts.timestamp,
        sender=parts.sender,
        message=parts.body or line,
    )
