"""Pattern-based field extraction shared by the classifiers and search."""

from __future__ import annotations

import re
from dataclasses import dataclass

import dateutil.parser as parser

# "[1/2/23, 10:00:00 AM]", "[01/02/2023, 9:15]", "[1/2/23, 21:04:11]"
WHATSAPP_TIMESTAMP = re.compile(
    r"\[(?P<timestamp>\d{1,2}/\d{1,2}/\d{2,4},\s\d{1,2}:\d{2}(?::\d{2})?\s?(?:[AP]M)?)\]"
)

_SENDER = re.compile(r"(?P<sender>[^:]+):(?P<body>.*)$", re.DOTALL)
_DURATION = re.compile(r"(\d+):(\d+)")
_NON_WORD = re.compile(r"[^\w\s]")
# Telegram titles look like "28.07.2025 01:29:21 UTC+01:00"
_TZ_SUFFIX = re.compile(r"\s*(?:GMT|UTC)\s*[+-]\d{1,2}(?::?\d{2})?\s*$", re.IGNORECASE)

SELF_MARKERS = ("You:", "You ")

# Telegram Desktop HTML export classes
TELEGRAM_MESSAGE_CLASS = "message"
TELEGRAM_SERVICE_CLASS = "service"
TELEGRAM_OUTGOING_CLASSES = ("outgoing", "from_me")
TELEGRAM_SENDER_CLASS = "from_name"
TELEGRAM_TEXT_CLASS = "text"
TELEGRAM_DATE_CLASS = "date"

CALL_MARKERS = (
    "missed voice call",
    "voice call",
    "video call",
    "call ended",
    "call time",
)
IMAGE_MARKERS = (
    "image omitted",
    "<image>",
    "img-",
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    "photo omitted",
    "attachment: photo",
    "attachment: image",
)
STICKER_MARKERS = (
    "sticker omitted",
    "<sticker>",
    "sticker.webp",
    "attachment: sticker",
)


@dataclass(frozen=True)
class WhatsAppLine:
    """The pieces of one timestamped WhatsApp transcript line."""

    timestamp: str
    sender: str | None
    body: str
    remainder: str  # everything after the closing bracket, trimmed


def split_whatsapp_line(line: str) -> WhatsAppLine | None:
    """Split a transcript line into timestamp, sender and body.

    Returns None when the line carries no bracketed timestamp, i.e. it is a
    wrapped continuation of the previous message.
    """
    match = WHATSAPP_TIMESTAMP.search(line)
    if not match:
        return None

    remainder = line[match.end():].strip()
    sender_match = _SENDER.match(remainder)
    if sender_match and sender_match.group("sender").strip():
        sender = sender_match.group("sender").strip()
        body = sender_match.group("body").strip()
    else:
        sender = None
        body = remainder

    return WhatsAppLine(
        timestamp=match.group("timestamp"),
        sender=sender,
        body=body,
        remainder=remainder,
    )


def extract_whatsapp_body(line: str) -> str:
    """Message text after the sender's colon (or the timestamp); "" if no match."""
    parts = split_whatsapp_line(line)
    return parts.body if parts else ""


def has_self_marker(remainder: str) -> bool:
    """True when the line is written by the exporting user ("You: ..." / "You ...")."""
    return remainder.startswith(SELF_MARKERS)


def count_words(text) -> int:
    """Count whitespace-separated tokens once punctuation is stripped."""
    if not isinstance(text, str) or not text:
        return 0
    cleaned = _NON_WORD.sub("", text).strip()
    return len(cleaned.split())


def extract_call_duration(text: str) -> int:
    """Seconds from the first "M:SS" in the text, 0 when there is none."""
    match = _DURATION.search(text or "")
    if not match:
        return 0
    minutes = int(match.group(1))
    seconds = int(match.group(2))
    return minutes * 60 + seconds


def parse_timestamp(text: str | None) -> str:
    """Best-effort ISO 8601 conversion of an export timestamp; "" on failure."""
    if not text:
        return ""
    cleaned = text.replace("\u202f", " ").replace("\u200e", "")
    cleaned = _TZ_SUFFIX.sub("", cleaned).strip()
    if not cleaned:
        return ""
    try:
        return parser.parse(cleaned, dayfirst=True).isoformat()
    except (ValueError, OverflowError):
        return ""


def is_call_text(text: str) -> bool:
    return _contains_any(text, CALL_MARKERS)


def is_image_text(text: str) -> bool:
    return _contains_any(text, IMAGE_MARKERS)


def is_sticker_text(text: str) -> bool:
    return _contains_any(text, STICKER_MARKERS)


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = (text or "").lower()
    return any(marker in lowered for marker in markers)
