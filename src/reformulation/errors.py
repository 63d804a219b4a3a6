"""Error taxonomy for the reformulation pipeline.

Every error knows the status code it maps to and the message the caller is
allowed to see. `detail` holds server-side context (raw payloads) that is
logged but never returned.
"""
from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlsplit


class ReformulationError(Exception):
    status_code = 500
    public_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, detail: Any = None):
        super().__init__(message or self.public_message)
        self.detail = detail

    @property
    def caller_message(self) -> str:
        return self.public_message


class MethodNotAllowed(ReformulationError):
    status_code = 405
    public_message = "Method Not Allowed"


class MalformedRequest(ReformulationError):
    status_code = 400
    public_message = "Bad Request"

    @property
    def caller_message(self) -> str:
        # The parse message is descriptive and never contains secrets.
        return str(self)


class ServerMisconfigured(ReformulationError):
    status_code = 500
    public_message = "Server configuration error. Please contact the administrator."


class VerificationRejected(ReformulationError):
    status_code = 403
    public_message = "Forbidden. Bot-like activity detected."


class UpstreamError(ReformulationError):
    public_message = "Google AI Error"

    def __init__(self, status_code: int, reason: str, detail: Any = None):
        super().__init__(f"upstream http {status_code}: {reason}", detail=detail)
        self.status_code = status_code
        self.reason = reason

    @property
    def caller_message(self) -> str:
        return f"{self.public_message}: {self.reason}"


class UpstreamShapeInvalid(ReformulationError):
    status_code = 500
    public_message = "Invalid response from Google AI."


class ServiceRequestFailed(Exception):
    """Transport failure talking to an external service.

    Not a ReformulationError: it goes through the handler's catch-all. The
    message names only the exception type and host, since the request URL
    can carry the API key.
    """

    def __init__(self, service: str, url: str, cause: BaseException):
        host = urlsplit(url).hostname or "unknown host"
        super().__init__(f"{service} request failed: {type(cause).__name__} ({host})")
        self.service = service
        self.host = host
