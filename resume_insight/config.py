"""Configuration loading and validation for Resume Insight."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .domain.ai_detector import DetectionThresholds
from .domain.validation import MAX_DOCUMENT_CHARS, MAX_DOCUMENT_NAME_CHARS

ENV_PREFIX = "RESUME_INSIGHT_"

_ENV_INT_KEYS = ("max_document_chars", "max_document_name_chars", "max_upload_bytes")
_ENV_STR_KEYS = ("log_level", "environment")
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
# the classifier never reports certainty
MAX_PROBABILITY_CAP = DetectionThresholds.probability_cap


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


@dataclass
class InsightConfig:
    """Runtime settings shared by the service, web and CLI layers."""

    max_document_chars: int = MAX_DOCUMENT_CHARS
    max_document_name_chars: int = MAX_DOCUMENT_NAME_CHARS
    max_upload_bytes: int = 2 * 1024 * 1024
    log_level: str = "INFO"
    environment: str = "production"
    thresholds: DetectionThresholds = field(default_factory=DetectionThresholds)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def load_config(config_path: Optional[str] = None) -> InsightConfig:
    """Load configuration from an optional YAML file plus environment overrides.

    Raises ``FileNotFoundError`` if *config_path* is given but missing and
    ``ValueError`` if the merged configuration has errors.
    """
    raw: Dict[str, Any] = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid configuration: {config_path} must contain a mapping, got {type(raw).__name__}")

    raw = apply_env_overrides(raw)
    issues = validate_config(raw)
    if has_errors(issues):
        details = "; ".join(f"{e.field}: {e.message}" for e in issues if e.severity == Severity.ERROR)
        raise ValueError(f"Invalid configuration: {details}")

    defaults = InsightConfig()
    detection = raw.get("detection") or {}
    return InsightConfig(
        max_document_chars=raw.get("max_document_chars", defaults.max_document_chars),
        max_document_name_chars=raw.get("max_document_name_chars", defaults.max_document_name_chars),
        max_upload_bytes=raw.get("max_upload_bytes", defaults.max_upload_bytes),
        log_level=str(raw.get("log_level", defaults.log_level)).upper(),
        environment=raw.get("environment", defaults.environment),
        thresholds=DetectionThresholds(
            ai_generated=float(detection.get("ai_generated", defaults.thresholds.ai_generated)),
            mixed=float(detection.get("mixed", defaults.thresholds.mixed)),
            probability_cap=float(detection.get("probability_cap", defaults.thresholds.probability_cap)),
        ),
    )


def apply_env_overrides(raw_config: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of *raw_config* with ``RESUME_INSIGHT_*`` env vars applied."""
    merged = dict(raw_config)
    for key in _ENV_INT_KEYS:
        value = os.environ.get(ENV_PREFIX + key.upper())
        if value is None:
            continue
        try:
            merged[key] = int(value)
        except ValueError:
            # left as a string so validate_config reports it
            merged[key] = value
    for key in _ENV_STR_KEYS:
        value = os.environ.get(ENV_PREFIX + key.upper())
        if value is not None:
            merged[key] = value
    return merged


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML (after env overrides)

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Size limits ---
    for key in _ENV_INT_KEYS:
        if key not in raw_config:
            continue
        value = raw_config[key]
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            errors.append(ConfigError(
                field=key,
                message=f"{key} must be a positive integer, got {value!r}",
                severity=Severity.ERROR,
            ))

    max_chars = raw_config.get("max_document_chars")
    if isinstance(max_chars, int) and max_chars > MAX_DOCUMENT_CHARS:
        errors.append(ConfigError(
            field="max_document_chars",
            message=f"max_document_chars above {MAX_DOCUMENT_CHARS} may slow scoring requests",
            severity=Severity.WARNING,
        ))

    # --- Log level ---
    log_level = raw_config.get("log_level", "INFO")
    if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
        errors.append(ConfigError(
            field="log_level",
            message=f"log_level must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}",
            severity=Severity.ERROR,
        ))

    # --- Detection thresholds ---
    detection = raw_config.get("detection") or {}
    if not isinstance(detection, dict):
        errors.append(ConfigError(
            field="detection",
            message="detection must be a mapping",
            severity=Severity.ERROR,
        ))
        return errors

    for key in ("ai_generated", "mixed", "probability_cap"):
        value = detection.get(key)
        if value is None:
            continue
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not 0 <= value <= 1:
            errors.append(ConfigError(
                field=f"detection.{key}",
                message=f"detection.{key} must be a number between 0 and 1, got {value!r}",
                severity=Severity.ERROR,
            ))

    cap = detection.get("probability_cap", MAX_PROBABILITY_CAP)
    cap_in_range = _is_number(cap) and 0 <= cap <= 1
    if cap_in_range and not 0 < cap <= MAX_PROBABILITY_CAP:
        errors.append(ConfigError(
            field="detection.probability_cap",
            message=f"detection.probability_cap must be above 0 and at most {MAX_PROBABILITY_CAP}, got {cap!r}",
            severity=Severity.ERROR,
        ))

    ai_band = detection.get("ai_generated", DetectionThresholds.ai_generated)
    mixed_band = detection.get("mixed", DetectionThresholds.mixed)
    if isinstance(ai_band, (int, float)) and isinstance(mixed_band, (int, float)) and mixed_band >= ai_band:
        errors.append(ConfigError(
            field="detection.mixed",
            message=f"detection.mixed ({mixed_band}) must be below detection.ai_generated ({ai_band})",
            severity=Severity.ERROR,
        ))
    if cap_in_range and _is_number(ai_band) and ai_band >= cap:
        errors.append(ConfigError(
            field="detection.ai_generated",
            message=f"detection.ai_generated ({ai_band}) must be below detection.probability_cap ({cap})",
            severity=Severity.ERROR,
        ))

    return errors


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
