"""Line classifier for WhatsApp "_chat.txt" transcripts."""

from __future__ import annotations

from typing import Iterator

from chat_analytics.classify.base import BaseClassifier
from chat_analytics.classify.models import (
    CallDirection,
    CallEvent,
    Category,
    MessageUnit,
)
from chat_analytics.extractors import (
    WhatsAppLine,
    count_words,
    extract_call_duration,
    has_self_marker,
    is_call_text,
    is_image_text,
    is_sticker_text,
    parse_timestamp,
    split_whatsapp_line,
)


class WhatsAppClassifier(BaseClassifier):
    """Classify each timestamped line of a WhatsApp export.

    Lines without a leading "[date, time]" are wrapped continuations of the
    previous message and are skipped entirely.
    """

    def iter_units(self, content: str) -> Iterator[MessageUnit]:
        for line in content.split("\n"):
            if not line.strip():
                continue
            unit = self.parse_line(line)
            if unit is None:
                continue
            self._trace(unit)
            yield unit

    def parse_line(self, line: str) -> MessageUnit | None:
        """Classify one transcript line; None for continuation lines."""
        parts = split_whatsapp_line(line)
        if parts is None:
            return None

        is_self = self.is_self(parts)
        category = self.classify(parts.body)
        call = None
        word_count = 0
        if category is Category.CALL:
            call = CallEvent(
                direction=_call_direction(parts.body, is_self),
                duration_seconds=extract_call_duration(parts.body),
            )
        elif category is Category.TEXT:
            word_count = count_words(parts.body)

        return MessageUnit(
            category=category,
            is_self=is_self,
            sender=parts.sender,
            timestamp=parts.timestamp,
            sent_at=parse_timestamp(parts.timestamp),
            body=parts.body,
            word_count=word_count,
            call=call,
        )

    def classify(self, raw_unit: str) -> Category:
        if is_call_text(raw_unit):
            return Category.CALL
        if is_image_text(raw_unit):
            return Category.IMAGE
        if is_sticker_text(raw_unit):
            return Category.STICKER
        return Category.TEXT

    def is_self(self, parts: WhatsAppLine) -> bool:
        if self.current_user:
            return parts.sender == self.current_user
        return has_self_marker(parts.remainder)


def _call_direction(body: str, is_self: bool) -> CallDirection:
    if is_self or "outgoing" in body.lower():
        return CallDirection.OUTGOING
    return CallDirection.INCOMING
