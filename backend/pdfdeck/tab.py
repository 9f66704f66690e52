"""
Presentation tab: one user's generate / browse / export workflow.

The tab wires the session gate, the generation client and the store
together and keeps track of where the workflow stands. All of its methods
run on the event loop; only the HTTP call to the generation service is
pushed onto a worker thread.
"""
import asyncio
import dataclasses
import logging
from enum import Enum
from typing import Any, Dict, Optional

from .config import settings
from .exceptions import GenerationInProgressError, PreconditionError
from .exporter import MarkdownExport, artifact_download, markdown_export
from .generator import GenerationClient
from .notices import NoticeBoard, document_required, generation_busy, markdown_exported, notice_for
from .session import SessionGate
from .store import PresentationStore
from .types import GenerationOutcome, GenerationRequest, GenerationSuccess


logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    DEGRADED = "degraded"
    FAILED = "failed"


def clamp_slide_count(value: int) -> int:
    return min(max(int(value), settings.min_slides), settings.max_slides)


class PresentationTab:
    def __init__(
        self,
        gate: SessionGate,
        client: Optional[GenerationClient] = None,
        store: Optional[PresentationStore] = None,
        notices: Optional[NoticeBoard] = None,
    ):
        self.gate = gate
        self.notices = notices or NoticeBoard()
        self.client = client or GenerationClient(notifier=self.notices)
        self.store = store or PresentationStore()
        self.topic = ""
        self.slide_count = settings.default_slide_count
        self.last_error: Optional[str] = None
        self._generating = False

    @property
    def navigation(self):
        return self.store.navigation

    @property
    def is_generating(self) -> bool:
        return self._generating

    @property
    def phase(self) -> Phase:
        if self._generating:
            return Phase.GENERATING
        if self.store.has_presentation:
            return Phase.DEGRADED if self.store.used_fallback else Phase.READY
        if self.last_error is not None:
            return Phase.FAILED
        return Phase.IDLE

    async def generate(self, topic: Optional[str] = None, max_slides: Optional[int] = None) -> Optional[GenerationOutcome]:
        """
        Request a new deck for the loaded document.

        Returns ``None`` without touching the network when no document is
        loaded. Raises ``GenerationInProgressError`` while an earlier request
        is still outstanding. A failed request leaves any deck already on
        screen in place. A missing topic counts as a blank one; a missing
        slide count keeps the current form value.
        """
        topic = topic or ""
        slide_count = self.slide_count if max_slides is None else clamp_slide_count(max_slides)

        try:
            self.gate.require_ready()
        except PreconditionError as exc:
            logger.info("generation refused: %s", exc)
            self.notices.notify(document_required())
            return None
        if self._generating:
            self.notices.notify(generation_busy())
            raise GenerationInProgressError("generation already in progress", context={"session_id": self.gate.session_id})

        self.topic, self.slide_count = topic, slide_count
        request = GenerationRequest(
            session_id=self.gate.session_id,
            topic=topic,
            max_slides=slide_count,
        )
        self._generating = True
        try:
            outcome = await asyncio.to_thread(self.client.fetch, request)
        finally:
            self._generating = False

        self.notices.notify(notice_for(outcome))
        if isinstance(outcome, GenerationSuccess):
            self.store.replace(outcome.deck, outcome.artifact_url, outcome.used_fallback)
            self.last_error = None
        else:
            self.last_error = outcome.message
        return outcome

    def new_presentation(self):
        self.store.clear()
        self.last_error = None

    def export_markdown(self) -> Optional[MarkdownExport]:
        export = markdown_export(self.store)
        if export is not None:
            logger.info("exporting %s (%d bytes)", export.filename, len(export.encode()))
            self.notices.notify(markdown_exported())
        return export

    def artifact_url(self) -> Optional[str]:
        return artifact_download(self.store)

    def snapshot(self) -> Dict[str, Any]:
        store, nav = self.store, self.navigation
        deck = store.deck
        current = store.current_slide()
        return {
            "phase": self.phase.value,
            "generating": self._generating,
            "ready": self.gate.is_ready(),
            "document": self.gate.describe(),
            "form": {"topic": self.topic, "max_slides": self.slide_count},
            "last_error": self.last_error,
            "presentation": deck.model_dump() if deck is not None else None,
            "artifact_url": store.artifact_url if deck is not None else None,
            "fallback_used": store.used_fallback if deck is not None else False,
            "current_slide": nav.current(),
            "slide": current.model_dump() if current is not None else None,
            "position": nav.position_label(),
            "can_go_previous": nav.can_go_previous,
            "can_go_next": nav.can_go_next,
            "overview": [dataclasses.asdict(t) for t in store.overview()],
            "notices": [n.model_dump() for n in self.notices.drain()],
        }
