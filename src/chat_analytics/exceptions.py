"""Unified exception hierarchy for chat-analytics."""


class ChatAnalyticsError(Exception):
    """Base exception for all chat-analytics errors."""


class ConfigurationError(ChatAnalyticsError):
    """Invalid analysis settings or environment overrides."""


# Loader
class LoaderError(ChatAnalyticsError):
    """Base exception for reading an uploaded chat export."""


class UnsupportedFormatError(LoaderError):
    """File extension is not a recognised chat export."""


class MissingTranscriptError(LoaderError):
    """Archive has no usable text transcript."""


class InvalidTelegramExportError(LoaderError):
    """HTML file is missing the Telegram export markers."""


class ArchiveCorruptError(LoaderError):
    """Archive could not be opened or decompressed."""


# Analysis
class AnalysisError(ChatAnalyticsError):
    """Base exception for parsing and aggregation failures."""


class EmptyResultError(AnalysisError):
    """Parsing succeeded but no messages were recognised."""
