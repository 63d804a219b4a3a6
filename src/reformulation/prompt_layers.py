"""System prompt assembly.

The template rules are instructions to the model; nothing here checks that
the model follows them.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .types import GenerationConfig, GenerationRequest, ReformulationRequest

STYLE_PLACEHOLDER = "{{style}}"

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "prompts" / "reformulate_system.txt"

def load_template(path: Optional[Path] = None) -> str:
    return Path(path or DEFAULT_TEMPLATE_PATH).read_text(encoding="utf-8").strip()

def render_system_prompt(template: str, style: str) -> str:
    return template.replace(STYLE_PLACEHOLDER, style)

def build_generation_request(
    req: ReformulationRequest,
    template: str,
    config: Optional[GenerationConfig] = None,
) -> GenerationRequest:
    return GenerationRequest(
        input_text=req.input_text,
        system_prompt=render_system_prompt(template, req.style),
        config=config or GenerationConfig(),
    )
