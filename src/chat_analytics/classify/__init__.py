"""Per-platform classification of chat transcripts into message units."""

from __future__ import annotations

import logging

from chat_analytics.classify.base import BaseClassifier
from chat_analytics.classify.models import (
    CallDirection,
    CallEvent,
    Category,
    MessageUnit,
)
from chat_analytics.classify.telegram import TelegramClassifier
from chat_analytics.classify.whatsapp import WhatsAppClassifier
from chat_analytics.loader.models import ChatFormat, RawChat

_CLASSIFIERS: dict[ChatFormat, type[BaseClassifier]] = {
    ChatFormat.WHATSAPP: WhatsAppClassifier,
    ChatFormat.TELEGRAM: TelegramClassifier,
}


def classifier_for(
    raw_chat: RawChat,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> BaseClassifier:
    """Classifier matching the chat's export format."""
    return _CLASSIFIERS[raw_chat.format](raw_chat.current_user, logger=logger)


__all__ = [
    "classifier_for",
    "BaseClassifier",
    "WhatsAppClassifier",
    "TelegramClassifier",
    "Category",
    "CallDirection",
    "CallEvent",
    "MessageUnit",
]
