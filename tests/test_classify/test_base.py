"""Tests for classifier base class and selection."""

import pytest

from chat_analytics.classify import (
    BaseClassifier,
    TelegramClassifier,
    WhatsAppClassifier,
    classifier_for,
)
from chat_analytics.loader import ChatFormat, RawChat


def test_base_classifier_is_abstract():
    with pytest.raises(TypeError):
        BaseClassifier()


def test_classifier_for_whatsapp():
    classifier = classifier_for(RawChat(content="", format=ChatFormat.WHATSAPP, current_user="Bob"))
    assert isinstance(classifier, WhatsAppClassifier)
    assert classifier.current_user == "Bob"


def test_classifier_for_telegram():
    classifier = classifier_for(RawChat(content="", format=ChatFormat.TELEGRAM))
    assert isinstance(classifier, TelegramClassifier)
    assert classifier.current_user is None
