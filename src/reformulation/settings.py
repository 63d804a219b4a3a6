"""Configuration.

Two kinds of values:
- Secrets (API key, verification secret) come from the environment only and
  are re-read on every invocation through an injectable accessor.
- Non-secret settings (endpoints, model, sampling, score threshold) live in
  configs/settings.yaml. A missing or empty file means "use the defaults".
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from .errors import ServerMisconfigured
from .logging_util import get_logger
from .types import GenerationConfig

logger = get_logger(__name__)

EnvAccessor = Callable[[str], Optional[str]]

GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
RECAPTCHA_SECRET_ENV = "RECAPTCHA_SECRET_KEY"
SETTINGS_PATH_ENV = "REFORMULATION_SETTINGS"

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "configs" / "settings.yaml"


@dataclass(frozen=True)
class Settings:
    verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    generation_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.5-flash-preview-09-2025"
    min_score: float = 0.5
    timeout: Optional[float] = None
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    @property
    def generation_url(self) -> str:
        return f"{self.generation_base_url.rstrip('/')}/models/{self.model}:generateContent"


@dataclass(frozen=True)
class Secrets:
    gemini_api_key: str
    recaptcha_secret: str


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file must contain a mapping: {path}")
    return data


def _known(cls, values: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in values.items() if k in names}


def load_settings(path: Optional[Path] = None) -> Settings:
    if path is None:
        override = (os.environ.get(SETTINGS_PATH_ENV) or "").strip()
        path = Path(override) if override else DEFAULT_SETTINGS_PATH

    data = _load_yaml(Path(path))
    gen_in = data.pop("generation", None) or {}
    if not isinstance(gen_in, dict):
        raise ValueError("'generation' must be a mapping")

    settings = Settings(generation=GenerationConfig(**_known(GenerationConfig, gen_in)), **_known(Settings, data))
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def sanitize_secret(raw: Optional[str]) -> str:
    """Strip whitespace and quotes that sneak in when secrets are pasted into a dashboard."""
    k = (raw or "").strip()
    k = k.strip(' "\'`')
    k = k.strip("“”‘’")
    return k


def read_secrets(env: Optional[EnvAccessor] = None) -> Secrets:
    env = env or os.environ.get
    api_key = sanitize_secret(env(GEMINI_API_KEY_ENV))
    recaptcha_secret = sanitize_secret(env(RECAPTCHA_SECRET_ENV))

    missing = [
        name
        for name, value in ((GEMINI_API_KEY_ENV, api_key), (RECAPTCHA_SECRET_ENV, recaptcha_secret))
        if not value
    ]
    if missing:
        raise ServerMisconfigured(f"Missing environment variable(s): {', '.join(missing)}")

    return Secrets(gemini_api_key=api_key, recaptcha_secret=recaptcha_secret)
