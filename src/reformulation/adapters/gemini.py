"""Gemini REST adapter (generateContent).

The API key travels as the `key` query parameter, so the request URL must
never be logged.
"""
from __future__ import annotations

from http import HTTPStatus
from typing import Any, Optional

import requests

from ..errors import ServiceRequestFailed, UpstreamError, UpstreamShapeInvalid
from ..logging_util import fingerprint, get_logger
from ..types import GenerationRequest, GenerationResult
from .base import BaseGenerator

logger = get_logger(__name__)

def _reason(r: Any) -> str:
    reason = (getattr(r, "reason", None) or "").strip()
    if reason:
        return reason
    try:
        return HTTPStatus(r.status_code).phrase
    except ValueError:
        return f"HTTP {r.status_code}"

def decode_generation_response(data: Any) -> GenerationResult:
    """Extract candidates[0].content.parts[0].text or raise UpstreamShapeInvalid."""
    def invalid(what: str) -> UpstreamShapeInvalid:
        return UpstreamShapeInvalid(f"Invalid API response: {what}", detail=data)

    if not isinstance(data, dict):
        raise invalid("not a JSON object")

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise invalid("no candidates")

    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    if not isinstance(content, dict):
        raise invalid("candidate has no content")

    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        raise invalid("content has no parts")

    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        raise invalid("first part has no text")

    return GenerationResult(text=text, raw=data)

class GeminiGenerator(BaseGenerator):
    def __init__(self, url: str, timeout: Optional[float] = None, session: Any = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests

    def generate(self, request: GenerationRequest, api_key: str) -> GenerationResult:
        logger.info("[GEMINI_KEY] %s", fingerprint(api_key))

        headers = {"Content-Type": "application/json"}
        try:
            r = self.session.post(
                self.url,
                params={"key": api_key},
                headers=headers,
                json=request.to_payload(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # The exception text includes the URL with ?key=...; drop it and its chain.
            raise ServiceRequestFailed("Google AI", self.url, e) from None

        if not r.ok:
            raise UpstreamError(r.status_code, _reason(r), detail=r.text)

        return decode_generation_response(r.json())
