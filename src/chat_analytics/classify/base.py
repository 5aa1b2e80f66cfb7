"""Abstract base class for per-platform transcript classifiers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator

from chat_analytics.classify.models import Category, MessageUnit


class BaseClassifier(ABC):
    """Abstract interface turning a transcript into classified message units.

    Args:
        current_user: Resolved name of the exporting user, or None.
        logger: Destination for per-unit trace records; defaults to the
            implementing module's logger.
    """

    def __init__(
        self,
        current_user: str | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self.current_user = current_user
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def iter_units(self, content: str) -> Iterator[MessageUnit]:
        """Yield one MessageUnit per message, in transcript order."""
        ...

    @abstractmethod
    def classify(self, raw_unit: Any) -> Category:
        """Content category of one platform-specific unit."""
        ...

    def _trace(self, unit: MessageUnit) -> None:
        self.logger.debug(
            "Classified %s unit from %s",
            unit.category.value,
            unit.sender or "<unknown>",
            extra={
                "category": unit.category.value,
                "is_self": unit.is_self,
                "word_count": unit.word_count,
            },
        )
