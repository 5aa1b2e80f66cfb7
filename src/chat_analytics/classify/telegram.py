"""Element classifier for Telegram Desktop HTML exports."""

from __future__ import annotations

import copy
from typing import Iterator

from bs4 import BeautifulSoup, Tag

from chat_analytics.classify.base import BaseClassifier
from chat_analytics.classify.models import (
    CallDirection,
    CallEvent,
    Category,
    MessageUnit,
)
from chat_analytics.extractors import (
    TELEGRAM_DATE_CLASS,
    TELEGRAM_MESSAGE_CLASS,
    TELEGRAM_OUTGOING_CLASSES,
    TELEGRAM_SENDER_CLASS,
    TELEGRAM_SERVICE_CLASS,
    TELEGRAM_TEXT_CLASS,
    count_words,
    extract_call_duration,
    parse_timestamp,
)

# Avatar markup may hold an <img>; it says nothing about the message content
_USERPIC_CLASS = "userpic_wrap"


class TelegramClassifier(BaseClassifier):
    """Classify each ``.message`` element of a Telegram export.

    Service elements (the date separators between days) are skipped.
    Consecutive messages from one sender ("joined" messages) omit the sender
    name, so it is carried over from the previous element.
    """

    def iter_units(self, content: str) -> Iterator[MessageUnit]:
        soup = BeautifulSoup(content, "html.parser")
        previous_sender: str | None = None
        for element in soup.find_all(class_=TELEGRAM_MESSAGE_CLASS):
            if TELEGRAM_SERVICE_CLASS in element.get("class", []):
                continue
            unit = self.parse_element(element, previous_sender)
            previous_sender = unit.sender
            self._trace(unit)
            yield unit

    def parse_element(
        self, element: Tag, previous_sender: str | None = None
    ) -> MessageUnit:
        """Classify one message element."""
        sender_element = element.find(class_=TELEGRAM_SENDER_CLASS)
        if sender_element is not None:
            sender = sender_element.get_text(strip=True) or previous_sender
        else:
            sender = previous_sender
        is_self = self.is_self(element, sender)
        category = self.classify(element)

        timestamp = _timestamp(element)
        body = ""
        word_count = 0
        call = None
        if category is Category.CALL:
            without_dates = _strip_nodes(element, [TELEGRAM_DATE_CLASS])
            call = CallEvent(
                direction=_call_direction(_content_markup(element), is_self),
                duration_seconds=extract_call_duration(
                    without_dates.get_text(" ", strip=True)
                ),
            )
        elif category is Category.TEXT:
            text_element = element.find(class_=TELEGRAM_TEXT_CLASS)
            if text_element is not None:
                body = text_element.get_text(" ", strip=True)
                word_count = count_words(body)

        return MessageUnit(
            category=category,
            is_self=is_self,
            sender=sender,
            timestamp=timestamp,
            sent_at=parse_timestamp(timestamp),
            body=body,
            word_count=word_count,
            call=call,
        )

    def classify(self, raw_unit: Tag) -> Category:
        """Category of a ``.message`` element, judged from its media markup.

        The message text, sender name, date and avatar are left out, so a
        message that merely mentions a call or a photo stays ``TEXT``.
        """
        markup = _content_markup(raw_unit).decode_contents().lower()
        if "call" in markup:
            return Category.CALL
        # sticker markup also embeds a thumbnail <img>, so check it first
        if "sticker" in markup:
            return Category.STICKER
        if "photo" in markup or "<img" in markup:
            return Category.IMAGE
        return Category.TEXT

    def is_self(self, element: Tag, sender: str | None) -> bool:
        classes = element.get("class", [])
        if any(marker in classes for marker in TELEGRAM_OUTGOING_CLASSES):
            return True
        return bool(self.current_user) and sender == self.current_user


def _strip_nodes(element: Tag, class_names: list[str]) -> Tag:
    """Copy of ``element`` without descendants carrying any of the classes."""
    stripped = copy.copy(element)
    for node in stripped.find_all(class_=class_names):
        if node.decomposed:
            continue
        node.decompose()
    return stripped


def _content_markup(element: Tag) -> Tag:
    return _strip_nodes(
        element,
        [TELEGRAM_DATE_CLASS, TELEGRAM_TEXT_CLASS, TELEGRAM_SENDER_CLASS, _USERPIC_CLASS],
    )


def _timestamp(element: Tag) -> str | None:
    date_element = element.find(class_=TELEGRAM_DATE_CLASS)
    if date_element is None:
        return None
    title = date_element.get("title")
    if title:
        return title.strip()
    return date_element.get_text(strip=True) or None


def _call_direction(content: Tag, is_self: bool) -> CallDirection:
    if is_self or "outgoing" in content.decode_contents().lower():
        return CallDirection.OUTGOING
    return CallDirection.INCOMING
