"""Guess which participant exported the chat.

Exports carry no explicit "this is me" flag, so the current user is inferred
from the transcript. Callers that know the name should pass it explicitly;
the guess is only a fallback. When nothing can be inferred every message is
treated as received.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from chat_analytics.extractors import (
    TELEGRAM_OUTGOING_CLASSES,
    TELEGRAM_SENDER_CLASS,
    split_whatsapp_line,
)

logger = logging.getLogger(__name__)

WHATSAPP_SELF_LABEL = "You"

# Senders containing these read like "Alice added Bob" system notices
_SYSTEM_ACTOR_HINTS = ("added", "removed", "left", "group")


def normalize_user(name: str | None) -> str | None:
    """Trim an explicitly supplied user name; blank means "not supplied"."""
    if name is None:
        return None
    return name.strip() or None


def resolve_whatsapp_user(content: str) -> str | None:
    """Current user of a WhatsApp transcript.

    A literal "You:" sender wins outright; otherwise the first sender that
    does not look like a group-management notice is taken.
    """
    lines = [split_whatsapp_line(line) for line in content.split("\n")]
    parsed = [parts for parts in lines if parts is not None]

    if any(parts.remainder.startswith("You:") for parts in parsed):
        logger.debug("Found literal 'You:' sender marker")
        return WHATSAPP_SELF_LABEL

    for parts in parsed:
        if parts.sender and not is_system_actor(parts.sender):
            logger.debug("Guessed WhatsApp current user %r", parts.sender)
            return parts.sender

    logger.info("Could not infer the WhatsApp current user")
    return None


def resolve_telegram_user(content: str) -> str | None:
    """Display name on the first outgoing Telegram message, if any."""
    soup = BeautifulSoup(content, "html.parser")
    for element in soup.find_all(class_=list(TELEGRAM_OUTGOING_CLASSES)):
        name_element = element.find(class_=TELEGRAM_SENDER_CLASS)
        if name_element is None:
            continue
        name = name_element.get_text(strip=True)
        if name:
            logger.debug("Guessed Telegram current user %r", name)
            return name

    logger.info("Could not infer the Telegram current user")
    return None


def is_system_actor(sender: str) -> bool:
    lowered = sender.lower()
    return any(hint in lowered for hint in _SYSTEM_ACTOR_HINTS)
