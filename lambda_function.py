"""Serverless entrypoint.

Keep this file small: it only adapts platform events to
ReformulationHandler.handle(method, body).

Accepted event shapes:
1) API Gateway REST / Netlify:
   {"httpMethod": "POST", "body": "{\"inputText\":...}", "isBase64Encoded": false}

2) API Gateway HTTP API / Lambda function URL:
   {"requestContext": {"http": {"method": "POST"}}, "body": "...", "isBase64Encoded": true}

Return: {"statusCode": int, "headers": {...}, "body": str}
"""
import base64
import binascii
from typing import Any, Dict, Optional

from src.reformulation.handler import ReformulationHandler
from src.reformulation.logging_util import get_logger

logger = get_logger(__name__)

_handler = ReformulationHandler()

def _event_method(event: Dict[str, Any]) -> Optional[str]:
    method = event.get("httpMethod")
    if method:
        return method
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method")

def _event_body(event: Dict[str, Any]) -> Any:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body)
        except (binascii.Error, ValueError):
            # Left as-is; the parse step reports it as a bad request.
            logger.warning("body flagged base64 but did not decode")
    return body

def lambda_handler(event: Dict[str, Any], context: Any):
    request_id = getattr(context, "aws_request_id", None)
    logger.info("invocation request_id=%s", request_id)
    response = _handler.handle(_event_method(event or {}), _event_body(event or {}))
    return response.to_dict()

# Netlify-style alias
handler = lambda_handler
