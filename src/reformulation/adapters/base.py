"""Interfaces for the two external services.

Concrete adapters take an HTTP `session` exposing `post(...)` (the `requests`
module by default) so tests can swap in a fake.
"""
from __future__ import annotations

from ..types import GenerationRequest, GenerationResult, VerificationResult

class BaseVerifier:
    def verify(self, secret: str, token: str) -> VerificationResult:
        raise NotImplementedError

class BaseGenerator:
    def generate(self, request: GenerationRequest, api_key: str) -> GenerationResult:
        raise NotImplementedError
