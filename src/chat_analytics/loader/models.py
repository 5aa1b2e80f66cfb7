"""Data models for the loader module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ChatFormat(str, Enum):
    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"


@dataclass(frozen=True)
class ChatFile:
    """An uploaded export: the original file name plus its raw bytes."""

    name: str
    content: bytes

    @classmethod
    def from_path(cls, path: str | Path) -> ChatFile:
        path = Path(path)
        return cls(name=path.name, content=path.read_bytes())


@dataclass(frozen=True)
class RawChat:
    """A decoded transcript ready for classification."""

    content: str
    format: ChatFormat
    current_user: str | None = None  # None = every message counts as received
