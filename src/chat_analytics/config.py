"""Analysis settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

from chat_analytics.exceptions import ConfigurationError

SHORT_REPLY_MAX_WORDS_ENV = "CHAT_ANALYTICS_SHORT_REPLY_MAX_WORDS"
LONG_MESSAGE_MIN_WORDS_ENV = "CHAT_ANALYTICS_LONG_MESSAGE_MIN_WORDS"
TRANSCRIPT_NAME_ENV = "CHAT_ANALYTICS_TRANSCRIPT_NAME"

DEFAULT_SHORT_REPLY_MAX_WORDS = 5
DEFAULT_LONG_MESSAGE_MIN_WORDS = 50
# WhatsApp names the transcript inside its export archive "_chat.txt"
DEFAULT_TRANSCRIPT_NAME = "_chat.txt"


@dataclass(frozen=True)
class AnalysisSettings:
    """Thresholds and names used while loading and aggregating a chat.

    Args:
        short_reply_max_words: Upper bound (inclusive) for a short reply.
        long_message_min_words: Lower bound (inclusive) for a long message.
        transcript_name: File name of the transcript inside an archive.
    """

    short_reply_max_words: int = DEFAULT_SHORT_REPLY_MAX_WORDS
    long_message_min_words: int = DEFAULT_LONG_MESSAGE_MIN_WORDS
    transcript_name: str = DEFAULT_TRANSCRIPT_NAME

    def __post_init__(self) -> None:
        if self.short_reply_max_words < 1:
            raise ConfigurationError(
                f"short_reply_max_words must be at least 1, got {self.short_reply_max_words}."
            )
        if self.long_message_min_words <= self.short_reply_max_words:
            raise ConfigurationError(
                "long_message_min_words must be greater than short_reply_max_words "
                f"({self.long_message_min_words} <= {self.short_reply_max_words})."
            )
        if not self.transcript_name.strip():
            raise ConfigurationError("transcript_name must not be empty.")

    @classmethod
    def from_env(cls) -> AnalysisSettings:
        """Build settings from CHAT_ANALYTICS_* variables, falling back to defaults."""
        return cls(
            short_reply_max_words=_int_from_env(
                SHORT_REPLY_MAX_WORDS_ENV, DEFAULT_SHORT_REPLY_MAX_WORDS
            ),
            long_message_min_words=_int_from_env(
                LONG_MESSAGE_MIN_WORDS_ENV, DEFAULT_LONG_MESSAGE_MIN_WORDS
            ),
            transcript_name=os.environ.get(TRANSCRIPT_NAME_ENV, DEFAULT_TRANSCRIPT_NAME),
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'.") from e
