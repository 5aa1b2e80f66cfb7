"""Data models for the analytics module."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AnalyticsRecord:
    """Aggregate statistics for one chat export.

    Call units are kept out of ``total_messages`` and the sent/received
    split, so ``messages_sent + messages_received == total_messages``.
    """

    total_messages: int = 0
    messages_sent: int = 0
    messages_received: int = 0
    short_replies: int = 0
    long_messages_sent: int = 0
    long_messages_received: int = 0
    images_sent: int = 0
    images_received: int = 0
    stickers_sent: int = 0
    stickers_received: int = 0
    outgoing_calls: int = 0
    incoming_calls: int = 0
    total_call_duration: int = 0  # seconds
    average_call_duration: float = 0.0  # seconds
    avg_message_length: float = 0.0  # words
    reply_rate: float = 0.0
    first_message_at: str = ""  # ISO 8601
    last_message_at: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


EMPTY_ANALYTICS = AnalyticsRecord()
