"""ReformulationHandler: the verify-then-generate request pipeline.

Steps (each one ends the invocation on failure):
1. method check
2. payload parse
3. secrets check
4. bot verification
5. prompt construction
6. generation call
7. result extraction

Adapters raise typed errors; this is the only place they become responses.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from .adapters.base import BaseGenerator, BaseVerifier
from .adapters.gemini import GeminiGenerator
from .adapters.recaptcha import RecaptchaVerifier
from .errors import (
    MethodNotAllowed,
    ReformulationError,
    ServerMisconfigured,
    UpstreamError,
    UpstreamShapeInvalid,
    VerificationRejected,
)
from .input_spec import parse_request
from .logging_util import get_logger, log_step
from .prompt_layers import build_generation_request, load_template
from .settings import EnvAccessor, Settings, load_settings, read_secrets
from .types import HandlerResponse

logger = get_logger(__name__)

Body = Union[str, bytes, Dict[str, Any], None]

class ReformulationHandler:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        env: Optional[EnvAccessor] = None,
        verifier: Optional[BaseVerifier] = None,
        generator: Optional[BaseGenerator] = None,
        template: Optional[str] = None,
    ):
        self.settings = settings or load_settings()
        # None means os.environ.get, resolved at call time so tests can monkeypatch.
        self.env = env
        self.verifier = verifier or RecaptchaVerifier(url=self.settings.verify_url, timeout=self.settings.timeout)
        self.generator = generator or GeminiGenerator(url=self.settings.generation_url, timeout=self.settings.timeout)
        self.template = template or load_template()

    def handle(self, method: Optional[str], body: Body) -> HandlerResponse:
        try:
            return self._run(method, body)
        except ReformulationError as e:
            self._log_rejection(e)
            return HandlerResponse.text(e.status_code, e.caller_message)
        except Exception as e:
            logger.exception("Serverless function error: %s", e)
            return HandlerResponse.json(500, {"error": str(e)})

    def _run(self, method: Optional[str], body: Body) -> HandlerResponse:
        log_step(logger, "1", "method check")
        if (method or "").upper() != "POST":
            raise MethodNotAllowed(f"method={method!r}")

        log_step(logger, "2", "parse payload")
        req = parse_request(body)

        log_step(logger, "3", "read secrets")
        secrets = read_secrets(self.env)

        log_step(logger, "4", "verify token")
        verification = self.verifier.verify(secrets.recaptcha_secret, req.token)
        if not verification.passes(self.settings.min_score):
            raise VerificationRejected(
                f"success={verification.success} score={verification.score}",
                detail=verification.raw,
            )

        log_step(logger, "5", "build prompt")
        gen_request = build_generation_request(req, self.template, self.settings.generation)

        log_step(logger, "6", "call generation service")
        result = self.generator.generate(gen_request, secrets.gemini_api_key)

        log_step(logger, "7", "respond")
        return HandlerResponse.json(200, {"reformulatedText": result.text})

    @staticmethod
    def _log_rejection(e: ReformulationError) -> None:
        if isinstance(e, VerificationRejected):
            logger.warning("reCAPTCHA verification failed. Likely a bot. %s", e.detail)
        elif isinstance(e, UpstreamError):
            logger.error("Google AI API Error (%s): %s", e.status_code, e.detail)
        elif isinstance(e, UpstreamShapeInvalid):
            logger.error("%s: %s", e, e.detail)
        elif isinstance(e, ServerMisconfigured):
            logger.error("Server configuration error: %s", e)
        else:
            logger.info("Request rejected (%s): %s", e.status_code, e)
