"""
Tests for pdfdeck.session and pdfdeck.notices
"""

from __future__ import annotations

import logging

import pytest

from pdfdeck.exceptions import PreconditionError
from pdfdeck.notices import (
    DOCUMENT_REQUIRED,
    FALLBACK_SUCCESS,
    GENERIC_FAILURE,
    NOMINAL_SUCCESS,
    NoticeBoard,
    document_required,
    notice_for,
)
from pdfdeck.session import InMemoryDocumentSession, SessionGate
from pdfdeck.types import Deck, DocumentInfo, GenerationFailure, GenerationSuccess, Notice


class TestSessionGate:

    def test_not_ready_without_document(self):
        gate = SessionGate(InMemoryDocumentSession())
        assert not gate.is_ready()
        assert gate.describe() is None
        with pytest.raises(PreconditionError):
            gate.require_ready()

    def test_ready_after_attach(self):
        session = InMemoryDocumentSession()
        session.attach(DocumentInfo(file_info="report.pdf", word_count=12345, page_count=9))
        gate = SessionGate(session)
        assert gate.is_ready()
        gate.require_ready()
        assert gate.describe() == "Using content from: report.pdf\n12,345 words • 9 pages"

    def test_detach_closes_gate(self):
        session = InMemoryDocumentSession()
        session.attach(DocumentInfo(file_info="a.pdf"))
        session.detach()
        assert not SessionGate(session).is_ready()

    def test_session_id(self):
        session = InMemoryDocumentSession()
        assert SessionGate(session).session_id == "default"
        session.attach(DocumentInfo(file_info="a.pdf"), session_id="s-42")
        assert SessionGate(session).session_id == "s-42"

    def test_describe_without_stats(self):
        session = InMemoryDocumentSession()
        session.attach(DocumentInfo(file_info="notes.pdf"))
        assert SessionGate(session).describe() == "Using content from: notes.pdf"

    def test_any_session_object_works(self):
        class ShellSession:
            active = True
            session_id = "shell"
            document = None

        gate = SessionGate(ShellSession())
        assert gate.is_ready()
        assert gate.session_id == "shell"


class TestNoticeFor:

    def test_nominal(self):
        notice = notice_for(GenerationSuccess(deck=Deck(title="T")))
        assert notice.level == "success"
        assert notice.message == NOMINAL_SUCCESS

    def test_fallback_is_distinct_and_longer(self):
        nominal = notice_for(GenerationSuccess(deck=Deck(title="T")))
        degraded = notice_for(GenerationSuccess(deck=Deck(title="T"), used_fallback=True))
        assert degraded.message == FALLBACK_SUCCESS
        assert degraded.level != "error"
        assert degraded.duration_ms > nominal.duration_ms

    def test_failure(self):
        notice = notice_for(GenerationFailure(message="quota exceeded"))
        assert notice.level == "error"
        assert notice.message == "quota exceeded"

    def test_failure_without_message(self):
        assert notice_for(GenerationFailure(message="")).message == GENERIC_FAILURE

    def test_document_required(self):
        assert document_required().message == DOCUMENT_REQUIRED


class TestNoticeBoard:

    def test_drain(self):
        board = NoticeBoard()
        board.notify(Notice(level="success", message="one"))
        board.notify(Notice(level="error", message="two"))
        assert [n.message for n in board.pending] == ["one", "two"]
        assert [n.message for n in board.drain()] == ["one", "two"]
        assert board.drain() == []

    def test_limit_keeps_latest(self):
        board = NoticeBoard(limit=2)
        for i in range(5):
            board.notify(Notice(level="success", message=str(i)))
        assert [n.message for n in board.pending] == ["3", "4"]

    def test_logs_notice(self, caplog):
        board = NoticeBoard()
        with caplog.at_level(logging.ERROR, logger="pdfdeck.notices"):
            board.notify(Notice(level="error", message="broken"))
        assert "broken" in caplog.text
