from typing import Optional, Protocol

from .config import settings
from .exceptions import PreconditionError
from .types import DocumentInfo


class DocumentSession(Protocol):
    """What the surrounding app knows about the uploaded document."""

    @property
    def active(self) -> bool:
        ...

    @property
    def session_id(self) -> str:
        ...

    @property
    def document(self) -> Optional[DocumentInfo]:
        ...


class InMemoryDocumentSession:
    def __init__(self, session_id: Optional[str] = None):
        self._session_id = session_id or settings.default_session_id
        self._document: Optional[DocumentInfo] = None

    @property
    def active(self) -> bool:
        return self._document is not None

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def document(self) -> Optional[DocumentInfo]:
        return self._document

    def attach(self, document: DocumentInfo, session_id: Optional[str] = None):
        self._document = document
        if session_id:
            self._session_id = session_id

    def detach(self):
        self._document = None


class SessionGate:
    def __init__(self, session: DocumentSession):
        self._session = session

    @property
    def session_id(self) -> str:
        return self._session.session_id

    def is_ready(self) -> bool:
        return bool(self._session.active)

    def require_ready(self):
        if not self.is_ready():
            raise PreconditionError("no document loaded", context={"session_id": self.session_id})

    def describe(self) -> Optional[str]:
        if not self.is_ready():
            return None
        doc = self._session.document
        if doc is None:
            return None
        lines = [f"Using content from: {doc.file_info}"]
        stats = []
        if doc.word_count is not None:
            stats.append(f"{doc.word_count:,} words")
        if doc.page_count is not None:
            stats.append(f"{doc.page_count} pages")
        if stats:
            lines.append(" • ".join(stats))
        return "\n".join(lines)
