"""Logging utilities.

Each pipeline step logs a `[STEP n]` marker so a failed invocation can be
located quickly in the function logs.

Handlers live on one package-level logger; module loggers propagate to it.
Serverless runtimes usually configure the root logger already, in which case
no handler is added here.
"""
from __future__ import annotations

import hashlib
import logging
import os

PACKAGE_LOGGER = "src.reformulation"

def _level_from_env() -> int:
    name = (os.environ.get("REFORMULATION_LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names.
    return level if isinstance(level, int) else logging.INFO

def _configure_package_logger() -> logging.Logger:
    base = logging.getLogger(PACKAGE_LOGGER)
    base.setLevel(_level_from_env())

    if base.handlers or logging.getLogger().handlers:
        return base

    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s:%(lineno)d - %(message)s"))
    base.addHandler(h)
    return base

def get_logger(name: str) -> logging.Logger:
    _configure_package_logger()
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    # Entry-point modules (lambda_function, cli) log under the package logger.
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")

def log_step(logger: logging.Logger, step: str, msg: str):
    logger.info("[STEP %s] %s", step, msg)

def fingerprint(secret: str) -> str:
    """Loggable stand-in for a secret: its length and a short SHA-256 prefix."""
    sha8 = hashlib.sha256(secret.encode("utf-8")).hexdigest()[:8]
    return f"len={len(secret)} sha8={sha8}"
