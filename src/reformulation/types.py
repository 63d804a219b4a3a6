"""Transient values passed between pipeline steps.

Nothing here outlives a single invocation.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ReformulationRequest:
    input_text: str
    style: str
    token: str


@dataclass(frozen=True)
class VerificationResult:
    success: bool
    score: float
    # Full verification payload, kept for server-side logging only.
    raw: Dict[str, Any] = field(default_factory=dict)

    def passes(self, min_score: float) -> bool:
        # A score exactly at the threshold passes.
        return self.success and not self.score < min_score


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = 0.8
    top_p: float = 0.9
    top_k: int = 40

    def to_payload(self) -> Dict[str, Any]:
        return {"temperature": self.temperature, "topP": self.top_p, "topK": self.top_k}


@dataclass(frozen=True)
class GenerationRequest:
    input_text: str
    system_prompt: str
    config: GenerationConfig = field(default_factory=GenerationConfig)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": self.input_text}]}],
            "systemInstruction": {"parts": [{"text": self.system_prompt}]},
            "generationConfig": self.config.to_payload(),
        }


@dataclass(frozen=True)
class GenerationResult:
    text: str
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class HandlerResponse:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=lambda: {"Content-Type": "text/plain; charset=utf-8"})

    @classmethod
    def text(cls, status_code: int, message: str) -> "HandlerResponse":
        return cls(status_code=status_code, body=message)

    @classmethod
    def json(cls, status_code: int, data: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> "HandlerResponse":
        return cls(
            status_code=status_code,
            body=json.dumps(data, ensure_ascii=False),
            headers=headers or {"Content-Type": "application/json"},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"statusCode": self.status_code, "headers": dict(self.headers), "body": self.body}
