"""Logging setup and production-safe structured log lines."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .redaction import redact_context

ROOT_LOGGER = "resume_insight"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """Configure logging format and handlers for the package logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO))
    return logger


def log_secure(
    logger: logging.Logger,
    level: str,
    message: str,
    context: Optional[Dict[str, Any]] = None,
    development: bool = False,
) -> None:
    """Log *message* with *context*.

    Outside development, sensitive keys (email, phone, password, token,
    personal_info) are replaced and string values are scrubbed.
    """
    log_level = _LEVELS.get(level.lower(), logging.INFO)
    if not logger.isEnabledFor(log_level):
        return
    payload = dict(context or {}) if development else redact_context(context or {})
    logger.log(log_level, "%s %s", message, json.dumps(payload, default=str, sort_keys=True))
