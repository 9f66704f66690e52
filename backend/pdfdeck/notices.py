"""
User-facing notices.

Deciding which notice an outcome deserves is a pure function; showing it is
the notifier's job. The tab keeps the notices it has not yet handed to the
front end in a ``NoticeBoard``.
"""
import logging
from typing import List, Optional, Protocol

from .config import settings
from .types import GenerationOutcome, GenerationSuccess, Notice


logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate presentation"
DOCUMENT_REQUIRED = "Please upload a PDF document first"
GENERATION_BUSY = "A presentation is already being generated"
FALLBACK_SUCCESS = "Presentation created in basic mode (AI quota exceeded)"
NOMINAL_SUCCESS = "Presentation generated successfully!"
MARKDOWN_EXPORTED = "Presentation exported as Markdown!"


class Notifier(Protocol):
    def notify(self, notice: Notice) -> None:
        ...


def notice_for(outcome: GenerationOutcome) -> Notice:
    if isinstance(outcome, GenerationSuccess):
        if outcome.used_fallback:
            return Notice(level="warning", message=FALLBACK_SUCCESS, duration_ms=settings.fallback_notice_duration_ms)
        return Notice(level="success", message=NOMINAL_SUCCESS)
    return Notice(level="error", message=outcome.message or GENERIC_FAILURE)


def document_required() -> Notice:
    return Notice(level="error", message=DOCUMENT_REQUIRED)


def generation_busy() -> Notice:
    return Notice(level="error", message=GENERATION_BUSY)


def markdown_exported() -> Notice:
    return Notice(level="success", message=MARKDOWN_EXPORTED)


_LEVELS = {
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingNotifier:
    """Writes notices to the log and nothing else."""

    def notify(self, notice: Notice) -> None:
        logger.log(_LEVELS.get(notice.level, logging.INFO), "notice: %s", notice.message)


class NoticeBoard(LoggingNotifier):
    """Logs notices and holds them until the front end drains them."""

    def __init__(self, limit: Optional[int] = 20):
        self.limit = limit
        self._pending: List[Notice] = []

    def notify(self, notice: Notice) -> None:
        super().notify(notice)
        self._pending.append(notice)
        if self.limit is not None and len(self._pending) > self.limit:
            del self._pending[: len(self._pending) - self.limit]

    @property
    def pending(self) -> List[Notice]:
        return list(self._pending)

    def drain(self) -> List[Notice]:
        notices, self._pending = self._pending, []
        return notices
