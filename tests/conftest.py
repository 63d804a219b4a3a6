from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest


class FakeResponse:
    def __init__(self, json_data: Any = None, status_code: int = 200, reason: str = "OK", text: Optional[str] = None) -> None:
        self._json = json_data
        self.status_code = status_code
        self.reason = reason
        if text is None:
            text = "" if isinstance(json_data, Exception) else json.dumps(json_data)
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class FakeSession:
    """Stands in for the `requests` module; replays queued responses in order."""

    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def env():
    values = {"GEMINI_API_KEY": "test-gemini-key", "RECAPTCHA_SECRET_KEY": "test-recaptcha-secret"}
    return values.get
