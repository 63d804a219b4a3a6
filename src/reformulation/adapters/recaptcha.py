"""reCAPTCHA siteverify adapter."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from ..errors import ServiceRequestFailed
from ..logging_util import get_logger
from ..types import VerificationResult
from .base import BaseVerifier

logger = get_logger(__name__)

DEFAULT_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

def decode_verification(data: Any) -> VerificationResult:
    """Read `success` and `score`; a missing or non-numeric score counts as 0.0."""
    if not isinstance(data, dict):
        data = {}
    score = data.get("score")
    # Fails closed: score-less replies (reCAPTCHA v2) are rejected, not let through.
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        score = 0.0
    return VerificationResult(success=data.get("success") is True, score=float(score), raw=data)

class RecaptchaVerifier(BaseVerifier):
    def __init__(self, url: str = DEFAULT_VERIFY_URL, timeout: Optional[float] = None, session: Any = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests

    def verify(self, secret: str, token: str) -> VerificationResult:
        form: Dict[str, str] = {"secret": secret, "response": token}
        headers = {"Content-Type": "application/x-www-form-urlencoded"}

        try:
            r = self.session.post(self.url, data=form, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ServiceRequestFailed("reCAPTCHA", self.url, e) from None
        # The verification reply is read as JSON whatever the status; a non-JSON
        # reply raises and ends up in the handler's catch-all.
        result = decode_verification(r.json())
        logger.info("verification success=%s score=%.2f", result.success, result.score)
        return result
