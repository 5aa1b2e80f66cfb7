"""Entry points that turn an uploaded chat export into an AnalyticsRecord."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from chat_analytics.analytics.aggregator import AnalyticsAccumulator
from chat_analytics.analytics.models import AnalyticsRecord
from chat_analytics.classify import classifier_for
from chat_analytics.config import AnalysisSettings
from chat_analytics.exceptions import AnalysisError, ChatAnalyticsError, EmptyResultError
from chat_analytics.loader.models import ChatFile, RawChat
from chat_analytics.loader.reader import load_chat, load_chat_sync

logger = logging.getLogger(__name__)

LoggerLike = logging.Logger | logging.LoggerAdapter


async def analyze(
    file: ChatFile | str | Path,
    current_user: str | None = None,
    settings: AnalysisSettings | None = None,
    log: LoggerLike | None = None,
) -> AnalyticsRecord:
    """Async analysis of a WhatsApp (.zip) or Telegram (.html) export.

    Archive decompression and decoding run in a worker thread; the
    classification pass runs on the calling task.

    Args:
        file: The uploaded export, or a path to one on disk.
        current_user: Display name of the exporting user. Guessed from the
            transcript when omitted.
        settings: Thresholds and transcript name; defaults apply when omitted.
        log: Where to send pipeline trace records; defaults to this
            module's logger.

    Returns:
        The fully populated AnalyticsRecord.

    Raises:
        ChatAnalyticsError: Any loading or parsing failure. No partial
            record is ever returned.
    """
    with _analysis_errors():
        raw_chat = await load_chat(file, current_user, settings)
    return analyze_chat(raw_chat, settings=settings, log=log)


def analyze_sync(
    file: ChatFile | str | Path,
    current_user: str | None = None,
    settings: AnalysisSettings | None = None,
    log: LoggerLike | None = None,
) -> AnalyticsRecord:
    """Synchronous analysis of a WhatsApp (.zip) or Telegram (.html) export."""
    with _analysis_errors():
        raw_chat = load_chat_sync(file, current_user, settings)
    return analyze_chat(raw_chat, settings=settings, log=log)


def analyze_chat(
    raw_chat: RawChat,
    settings: AnalysisSettings | None = None,
    log: LoggerLike | None = None,
) -> AnalyticsRecord:
    """Classify and aggregate an already loaded transcript."""
    trace_log = log
    log = log or logger
    log.info(
        "Analyzing %s chat (current user: %s)",
        raw_chat.format.value,
        raw_chat.current_user or "<unknown>",
    )

    with _analysis_errors():
        classifier = classifier_for(raw_chat, logger=trace_log)
        accumulator = AnalyticsAccumulator(settings)
        for unit in classifier.iter_units(raw_chat.content):
            accumulator.add(unit)

        if accumulator.units_seen == 0:
            raise EmptyResultError(
                f"No messages found in the {raw_chat.format.value} export. "
                "Is this the right file?"
            )
        record = accumulator.finish()

    log.info(
        "Analysis finished: %d messages, %d calls",
        record.total_messages,
        record.outgoing_calls + record.incoming_calls,
        extra={"analytics": record.to_dict()},
    )
    return record


@contextmanager
def _analysis_errors() -> Iterator[None]:
    """Re-raise library errors as is; wrap anything else in AnalysisError."""
    try:
        yield
    except ChatAnalyticsError:
        raise
    except Exception as e:
        raise AnalysisError(f"Failed to analyze chat data: {e}") from e
