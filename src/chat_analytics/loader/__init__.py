"""Chat export detection and decoding (WhatsApp .zip, Telegram .html)."""

from chat_analytics.loader.models import ChatFile, ChatFormat, RawChat
from chat_analytics.loader.reader import load_chat, load_chat_sync

__all__ = [
    "load_chat",
    "load_chat_sync",
    "ChatFile",
    "ChatFormat",
    "RawChat",
]
