"""Single-pass accumulation of classified message units into statistics."""

from __future__ import annotations

from typing import Iterable

from chat_analytics.analytics.models import AnalyticsRecord
from chat_analytics.classify.models import CallDirection, Category, MessageUnit
from chat_analytics.config import AnalysisSettings


class AnalyticsAccumulator:
    """Running counters for one analysis; feed units with ``add`` then ``finish``.

    Args:
        settings: Word-count thresholds for short replies and long messages.
    """

    def __init__(self, settings: AnalysisSettings | None = None):
        self.settings = settings or AnalysisSettings()
        self.units_seen = 0

        self.total_messages = 0
        self.messages_sent = 0
        self.messages_received = 0
        self.short_replies = 0
        self.long_messages_sent = 0
        self.long_messages_received = 0
        self.images_sent = 0
        self.images_received = 0
        self.stickers_sent = 0
        self.stickers_received = 0
        self.outgoing_calls = 0
        self.incoming_calls = 0
        self.total_call_duration = 0

        self.total_words = 0
        self.worded_messages = 0
        self.replied_to = 0
        self.first_message_at = ""
        self.last_message_at = ""

        # set after a self-authored text unit until the next unit arrives
        self._awaiting_reply = False

    def add(self, unit: MessageUnit) -> None:
        self.units_seen += 1
        if self._awaiting_reply and not unit.is_self:
            self.replied_to += 1
        self._awaiting_reply = False

        if unit.sent_at:
            if not self.first_message_at:
                self.first_message_at = unit.sent_at
            self.last_message_at = unit.sent_at

        if unit.category is Category.CALL:
            self._add_call(unit)
            return

        self.total_messages += 1
        if unit.is_self:
            self.messages_sent += 1
        else:
            self.messages_received += 1

        if unit.category is Category.IMAGE:
            if unit.is_self:
                self.images_sent += 1
            else:
                self.images_received += 1
            return
        if unit.category is Category.STICKER:
            if unit.is_self:
                self.stickers_sent += 1
            else:
                self.stickers_received += 1
            return

        self._add_text(unit)

    def finish(self) -> AnalyticsRecord:
        calls = self.outgoing_calls + self.incoming_calls
        return AnalyticsRecord(
            total_messages=self.total_messages,
            messages_sent=self.messages_sent,
            messages_received=self.messages_received,
            short_replies=self.short_replies,
            long_messages_sent=self.long_messages_sent,
            long_messages_received=self.long_messages_received,
            images_sent=self.images_sent,
            images_received=self.images_received,
            stickers_sent=self.stickers_sent,
            stickers_received=self.stickers_received,
            outgoing_calls=self.outgoing_calls,
            incoming_calls=self.incoming_calls,
            total_call_duration=self.total_call_duration,
            average_call_duration=_ratio(self.total_call_duration, calls),
            avg_message_length=_ratio(self.total_words, self.worded_messages),
            reply_rate=_ratio(self.replied_to, self.messages_sent),
            first_message_at=self.first_message_at,
            last_message_at=self.last_message_at,
        )

    def _add_call(self, unit: MessageUnit) -> None:
        if unit.call is not None:
            direction = unit.call.direction
            duration = unit.call.duration_seconds
        else:
            direction = CallDirection.OUTGOING if unit.is_self else CallDirection.INCOMING
            duration = 0

        if direction is CallDirection.OUTGOING:
            self.outgoing_calls += 1
        else:
            self.incoming_calls += 1
        self.total_call_duration += duration

    def _add_text(self, unit: MessageUnit) -> None:
        words = unit.word_count
        self.total_words += words
        if words > 0:
            self.worded_messages += 1

        if 1 <= words <= self.settings.short_reply_max_words:
            self.short_replies += 1
        elif words >= self.settings.long_message_min_words:
            if unit.is_self:
                self.long_messages_sent += 1
            else:
                self.long_messages_received += 1

        if unit.is_self:
            self._awaiting_reply = True


def aggregate(
    units: Iterable[MessageUnit], settings: AnalysisSettings | None = None
) -> AnalyticsRecord:
    """Fold message units into an AnalyticsRecord; no units gives EMPTY_ANALYTICS."""
    accumulator = AnalyticsAccumulator(settings)
    for unit in units:
        accumulator.add(unit)
    return accumulator.finish()


def _ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator
