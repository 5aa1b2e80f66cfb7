"""Data models for the classify module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    STICKER = "sticker"
    CALL = "call"


class CallDirection(str, Enum):
    OUTGOING = "outgoing"
    INCOMING = "incoming"


@dataclass(frozen=True)
class CallEvent:
    """A voice or video call found in the transcript."""

    direction: CallDirection
    duration_seconds: int = 0  # 0 also when no duration was printed


@dataclass(frozen=True)
class MessageUnit:
    """One classified transcript entry (a WhatsApp line or a Telegram element)."""

    category: Category
    is_self: bool
    sender: str | None = None
    timestamp: str | None = None  # as printed in the export
    sent_at: str = ""  # ISO 8601, "" if the timestamp could not be parsed
    body: str = ""
    word_count: int = 0  # only counted for Category.TEXT
    call: CallEvent | None = None
    is_message_start: bool = True  # continuation lines never become units
