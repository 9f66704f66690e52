"""
Deck export.

Two independent ways out: hand over the file the generation service already
built (``artifact_download``), or render the deck as Markdown locally
(``to_markdown`` / ``markdown_export``). Both are stateless.
"""
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .store import PresentationStore
from .types import Deck


_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class MarkdownExport:
    filename: str
    content: str
    media_type: str = "text/markdown"

    def encode(self) -> bytes:
        return self.content.encode("utf-8")

    def write_to(self, directory: Union[str, Path]) -> Path:
        path = Path(directory) / self.filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.encode())
        return path


def to_markdown(deck: Deck) -> str:
    parts = [f"# {deck.title}\n\n"]
    for n, slide in enumerate(deck.slides, start=1):
        bullets = "\n".join(f"• {line}" for line in slide.content)
        parts.append(f"## Slide {n}: {slide.title}\n\n{bullets}\n\n---\n\n")
    return "".join(parts)


def export_filename(title: str) -> str:
    return f"{_WHITESPACE.sub('_', title)}.md"


def markdown_export(store: PresentationStore) -> Optional[MarkdownExport]:
    deck = store.deck
    if deck is None:
        return None
    return MarkdownExport(filename=export_filename(deck.title), content=to_markdown(deck))


def artifact_download(store: PresentationStore) -> Optional[str]:
    # Reachability is the service's problem; the URL is handed over untouched.
    return store.artifact_url
