"""Detect the export format of an uploaded chat and decode its transcript."""

from __future__ import annotations

import asyncio
import io
import logging
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from chat_analytics.config import AnalysisSettings
from chat_analytics.exceptions import (
    ArchiveCorruptError,
    InvalidTelegramExportError,
    LoaderError,
    MissingTranscriptError,
    UnsupportedFormatError,
)
from chat_analytics.identity.resolver import (
    normalize_user,
    resolve_telegram_user,
    resolve_whatsapp_user,
)
from chat_analytics.loader.models import ChatFile, ChatFormat, RawChat

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".zip"
MARKUP_EXTENSION = ".html"

TELEGRAM_MARKER = "Telegram"
_DOCTYPE_MARKER = "<!doctype html"

# macOS Archive Utility adds resource forks under this prefix
_ZIP_METADATA_PREFIX = "__MACOSX/"

_RESOLVERS = {
    ChatFormat.WHATSAPP: resolve_whatsapp_user,
    ChatFormat.TELEGRAM: resolve_telegram_user,
}


def load_chat_sync(
    file: ChatFile | str | Path,
    current_user: str | None = None,
    settings: AnalysisSettings | None = None,
) -> RawChat:
    """Read an export, pick its platform and attach the current user.

    Args:
        file: The uploaded export, or a path to one on disk.
        current_user: Display name of the exporting user. When omitted the
            name is guessed from the transcript.
        settings: Overrides for the archive transcript name.

    Returns:
        The decoded RawChat.
    """
    settings = settings or AnalysisSettings()
    chat_file = _coerce_file(file)
    name = chat_file.name.lower()

    if name.endswith(ARCHIVE_EXTENSION):
        content = _read_archive_transcript(chat_file, settings.transcript_name)
        chat_format = ChatFormat.WHATSAPP
    elif name.endswith(MARKUP_EXTENSION):
        content = _decode(chat_file.content)
        _validate_telegram_export(content, chat_file.name)
        chat_format = ChatFormat.TELEGRAM
    else:
        raise UnsupportedFormatError(
            f"Unsupported file format: '{chat_file.name}'. "
            "Please upload a WhatsApp (.zip) or Telegram (.html) export."
        )

    resolved_user = normalize_user(current_user) or _RESOLVERS[chat_format](content)
    logger.info(
        "Loaded %s transcript from %s (%d chars, current user: %s)",
        chat_format.value,
        chat_file.name,
        len(content),
        resolved_user or "<unknown>",
    )
    return RawChat(content=content, format=chat_format, current_user=resolved_user)


async def load_chat(
    file: ChatFile | str | Path,
    current_user: str | None = None,
    settings: AnalysisSettings | None = None,
) -> RawChat:
    """Async wrapper around load_chat_sync; decompression runs in a worker thread."""
    return await asyncio.to_thread(load_chat_sync, file, current_user, settings)


def _coerce_file(file: ChatFile | str | Path) -> ChatFile:
    if isinstance(file, ChatFile):
        return file
    try:
        return ChatFile.from_path(file)
    except OSError as e:
        raise LoaderError(f"Cannot read chat export at {file}: {e}") from e


def _read_archive_transcript(chat_file: ChatFile, transcript_name: str) -> str:
    try:
        with zipfile.ZipFile(io.BytesIO(chat_file.content)) as archive:
            entry = _find_transcript(archive, transcript_name)
            if entry is None:
                raise MissingTranscriptError(
                    f"Invalid WhatsApp export: no chat file found in '{chat_file.name}'."
                )
            logger.debug("Using archive entry %s as transcript", entry.filename)
            data = archive.read(entry)
    except zipfile.BadZipFile as e:
        raise ArchiveCorruptError(
            f"Cannot open '{chat_file.name}' as a zip archive: {e}"
        ) from e
    except (zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
        # RuntimeError: encrypted entry; NotImplementedError: unknown compression
        raise ArchiveCorruptError(
            f"Failed to decompress '{chat_file.name}': {e}"
        ) from e
    return _decode(data)


def _find_transcript(
    archive: zipfile.ZipFile, transcript_name: str
) -> zipfile.ZipInfo | None:
    """The named transcript if present, else the first .txt entry."""
    entries = []
    for info in archive.infolist():
        if info.is_dir():
            continue
        if info.filename.startswith(_ZIP_METADATA_PREFIX):
            logger.debug("Skipping archive metadata entry %s", info.filename)
            continue
        entries.append(info)

    for info in entries:
        if PurePosixPath(info.filename).name == transcript_name:
            return info
    for info in entries:
        if info.filename.lower().endswith(".txt"):
            return info
    return None


def _validate_telegram_export(content: str, file_name: str) -> None:
    if _DOCTYPE_MARKER not in content.lower() or TELEGRAM_MARKER not in content:
        raise InvalidTelegramExportError(
            f"Invalid Telegram export: '{file_name}' doesn't appear to be "
            "a Telegram chat export."
        )


def _decode(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")
