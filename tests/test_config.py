"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest

from resume_insight.config import (
    MAX_PROBABILITY_CAP,
    InsightConfig,
    Severity,
    has_errors,
    load_config,
    validate_config,
)
from resume_insight.domain.ai_detector import classify_document


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestValidateConfig:
    def test_empty_config_is_valid(self):
        assert validate_config({}) == []

    @pytest.mark.parametrize("value", [0, -5, "big", True, 1.5])
    def test_size_limits_must_be_positive_ints(self, value):
        issues = validate_config({"max_upload_bytes": value})
        assert has_errors(issues)
        assert issues[0].field == "max_upload_bytes"

    def test_large_document_limit_is_only_a_warning(self):
        issues = validate_config({"max_document_chars": 2_000_000})
        assert len(issues) == 1
        assert issues[0].severity == Severity.WARNING
        assert not has_errors(issues)

    def test_unknown_log_level(self):
        issues = validate_config({"log_level": "LOUD"})
        assert [i.field for i in issues] == ["log_level"]

    def test_log_level_case_insensitive(self):
        assert validate_config({"log_level": "debug"}) == []

    def test_detection_must_be_mapping(self):
        issues = validate_config({"detection": [0.7, 0.3]})
        assert issues[0].field == "detection"

    def test_threshold_out_of_range(self):
        issues = validate_config({"detection": {"probability_cap": 1.5}})
        assert [i.field for i in issues] == ["detection.probability_cap"]

    def test_mixed_band_must_be_below_ai_band(self):
        issues = validate_config({"detection": {"ai_generated": 0.4, "mixed": 0.5}})
        assert [i.field for i in issues] == ["detection.mixed"]

    def test_default_cap_is_accepted(self):
        assert validate_config({"detection": {"probability_cap": 0.95}}) == []

    def test_cap_above_certainty_bound(self):
        issues = validate_config({"detection": {"probability_cap": 1.0}})
        assert [i.field for i in issues] == ["detection.probability_cap"]

    def test_ai_band_at_cap(self):
        issues = validate_config({"detection": {"ai_generated": 0.9, "probability_cap": 0.9}})
        assert [i.field for i in issues] == ["detection.ai_generated"]


class TestLoadConfig:
    def test_defaults_without_file(self):
        config = load_config()
        assert config == InsightConfig()
        assert config.thresholds.ai_generated == 0.7
        assert not config.is_development

    def test_yaml_values_applied(self, tmp_path):
        path = _write(
            tmp_path,
            "max_document_chars: 1000\n"
            "log_level: debug\n"
            "environment: development\n"
            "detection:\n"
            "  ai_generated: 0.8\n"
            "  mixed: 0.2\n",
        )
        config = load_config(path)
        assert config.max_document_chars == 1000
        assert config.log_level == "DEBUG"
        assert config.is_development
        assert config.thresholds.ai_generated == 0.8
        assert config.thresholds.mixed == 0.2
        assert config.thresholds.probability_cap == 0.95

    def test_empty_file_uses_defaults(self, tmp_path):
        assert load_config(_write(tmp_path, "")) == InsightConfig()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "max_upload_bytes: 1000\n")
        monkeypatch.setenv("RESUME_INSIGHT_MAX_UPLOAD_BYTES", "2048")
        monkeypatch.setenv("RESUME_INSIGHT_ENVIRONMENT", "development")
        config = load_config(path)
        assert config.max_upload_bytes == 2048
        assert config.environment == "development"

    def test_bad_env_value_is_reported(self, monkeypatch):
        monkeypatch.setenv("RESUME_INSIGHT_MAX_DOCUMENT_CHARS", "lots")
        with pytest.raises(ValueError, match="max_document_chars"):
            load_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_thresholds_rejected(self, tmp_path):
        path = _write(tmp_path, "detection:\n  mixed: 0.9\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    @pytest.mark.parametrize("cap", ["1.0", "0.96", "0"])
    def test_probability_cap_must_stay_below_certainty(self, tmp_path, cap):
        path = _write(tmp_path, f"detection:\n  probability_cap: {cap}\n")
        with pytest.raises(ValueError, match="detection.probability_cap"):
            load_config(path)

    def test_ai_band_must_be_reachable_under_cap(self, tmp_path):
        path = _write(tmp_path, "detection:\n  ai_generated: 0.9\n  probability_cap: 0.85\n")
        with pytest.raises(ValueError, match="detection.ai_generated"):
            load_config(path)

    def test_loaded_cap_bounds_classifier(self, tmp_path, furthermore_text):
        path = _write(tmp_path, "detection:\n  probability_cap: 0.95\n")
        result = classify_document(furthermore_text, load_config(path).thresholds)
        assert result.ai_probability <= MAX_PROBABILITY_CAP
        assert result.confidence_score < 1

    @pytest.mark.parametrize("text", ["5\n", "- a\n- b\n", "just text\n"])
    def test_non_mapping_file_rejected(self, tmp_path, text):
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(_write(tmp_path, text))
