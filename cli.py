"""Local CLI for the reformulation handler.

Usage examples:
- JSON string body:
  python cli.py "{\"inputText\":\"Hello world\",\"style\":\"pirate\",\"token\":\"abc\"}"

- JSON file body (prefix with @):
  python cli.py @request.json --pretty

- Another method (expects 405):
  python cli.py @request.json --method GET

Notes:
- Secrets are read from GEMINI_API_KEY and RECAPTCHA_SECRET_KEY as in production.
- The token must be a real reCAPTCHA token for the call to get past verification.
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from src.reformulation.handler import ReformulationHandler
from src.reformulation.logging_util import get_logger

logger = get_logger(__name__)

def _load_body(spec: str) -> str:
    if spec.startswith("@"):
        return Path(spec[1:]).read_text(encoding="utf-8")
    return spec

def main(argv: Optional[List[str]] = None, handler: Optional[ReformulationHandler] = None) -> int:
    ap = argparse.ArgumentParser(description="Run one reformulation request locally.")
    ap.add_argument("body", help="JSON string or @path/to/json")
    ap.add_argument("--method", default="POST", help="HTTP method to simulate (default: POST)")
    ap.add_argument("--pretty", action="store_true", help="Pretty print the response")
    args = ap.parse_args(argv)

    try:
        body = _load_body(args.body)
    except OSError as e:
        logger.error("Failed to read input: %s", e)
        return 2

    handler = handler or ReformulationHandler()
    out = handler.handle(args.method, body).to_dict()

    if args.pretty:
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(out, ensure_ascii=False))

    return 0 if 200 <= out["statusCode"] < 300 else 1

if __name__ == "__main__":
    sys.exit(main())
