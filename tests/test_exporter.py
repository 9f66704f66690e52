"""
Tests for pdfdeck.exporter
"""

from __future__ import annotations

from pdfdeck.exporter import MarkdownExport, artifact_download, export_filename, markdown_export, to_markdown
from pdfdeck.store import PresentationStore
from pdfdeck.types import Deck, Slide


DECK = Deck(
    title="Intro to  Hash Tables",
    slides=[
        Slide(title="Overview", content=["Key/value storage", "O(1) average lookup"]),
        Slide(title="Collisions", content=["Chaining"]),
    ],
    slide_count=2,
)


class TestToMarkdown:

    def test_layout(self):
        assert to_markdown(DECK) == (
            "# Intro to  Hash Tables\n\n"
            "## Slide 1: Overview\n\n"
            "• Key/value storage\n"
            "• O(1) average lookup\n\n"
            "---\n\n"
            "## Slide 2: Collisions\n\n"
            "• Chaining\n\n"
            "---\n\n"
        )

    def test_pure(self):
        assert to_markdown(DECK) == to_markdown(DECK)
        assert to_markdown(DECK) == to_markdown(Deck(**DECK.model_dump()))

    def test_empty_deck_is_header_only(self):
        deck = Deck(title="Empty", slides=[], slide_count=0)
        assert to_markdown(deck) == "# Empty\n\n"

    def test_slide_without_content(self):
        deck = Deck(title="T", slides=[Slide(title="Blank", content=[])], slide_count=1)
        assert to_markdown(deck) == "# T\n\n## Slide 1: Blank\n\n\n\n---\n\n"


class TestFilename:

    def test_whitespace_runs_collapse(self):
        assert export_filename("Intro to  Hash\tTables") == "Intro_to_Hash_Tables.md"

    def test_plain_title(self):
        assert export_filename("Roadmap") == "Roadmap.md"


class TestMarkdownExport:

    def test_no_deck_is_noop(self):
        assert markdown_export(PresentationStore()) is None

    def test_export_from_store(self):
        store = PresentationStore()
        store.replace(DECK)
        export = markdown_export(store)
        assert export.filename == "Intro_to_Hash_Tables.md"
        assert export.media_type == "text/markdown"
        assert export.encode() == to_markdown(DECK).encode("utf-8")

    def test_write_to(self, tmp_path):
        export = MarkdownExport(filename="Deck.md", content="# Deck\n\n• ünïcode\n")
        path = export.write_to(tmp_path / "out")
        assert path.name == "Deck.md"
        assert path.read_text(encoding="utf-8") == "# Deck\n\n• ünïcode\n"


class TestArtifactDownload:

    def test_passes_url_through(self):
        store = PresentationStore()
        store.replace(DECK, "https://files.example/deck.pptx")
        assert artifact_download(store) == "https://files.example/deck.pptx"

    def test_no_url(self):
        store = PresentationStore()
        store.replace(DECK)
        assert artifact_download(store) is None

    def test_cleared_store(self):
        store = PresentationStore()
        store.replace(DECK, "https://files.example/deck.pptx")
        store.clear()
        assert artifact_download(store) is None
