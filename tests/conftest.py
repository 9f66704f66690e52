"""
Pytest configuration and fixtures
"""

import sys
from pathlib import Path
from typing import List
from unittest import mock

import pytest
import requests

# Make the package importable without installing it
BACKEND = Path(__file__).parent.parent / "backend"
sys.path.insert(0, str(BACKEND))

from pdfdeck.types import Notice  # noqa: E402


class RecordingNotifier:
    def __init__(self):
        self.notices: List[Notice] = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)


def fake_response(payload=None, status_code=200, json_error=None):
    resp = mock.Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = status_code < 400
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def deck_payload(count=3, **overrides):
    payload = {
        "status": "success",
        "message": "Presentation generated",
        "presentation_url": "/downloads/deck.pptx",
        "slides": [
            {"title": f"Slide {i + 1}", "content": [f"point {i + 1}.a", f"point {i + 1}.b"]}
            for i in range(count)
        ],
        "slide_count": count,
        "api_used": True,
        "fallback_used": False,
        "title": "Quarterly Review",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def http_session():
    return mock.Mock(spec=requests.Session)
