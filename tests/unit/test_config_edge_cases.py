"""Edge case tests for Settings configuration."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from meetingnotes.config import Settings


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_default_environment(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.environment == "development"

    def test_default_groq_key_empty(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.groq_api_key == ""

    def test_default_base_url_points_at_groq(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.groq_base_url == "https://api.groq.com/openai/v1"

    def test_default_upload_limit_is_10_mib(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.max_upload_bytes == 10 * 1024 * 1024

    def test_default_low_temperature(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert 0 <= s.summarization_temperature <= 0.5

    def test_only_plain_text_is_extractable_by_default(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.upload_text_types == ["text/plain"]
            assert "application/pdf" in s.upload_accepted_types

    def test_metrics_disabled_by_default(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.metrics_csv_path == ""


class TestSettingsProperties:
    """Tests for computed properties."""

    def test_is_production_true(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is True

    def test_is_production_false_for_development(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "development"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is False

    def test_is_production_false_for_arbitrary(self):
        with patch.dict("os.environ", {"ENVIRONMENT": "staging"}, clear=True):
            s = Settings(_env_file=None)
            assert s.is_production is False


class TestSettingsEnvOverrides:
    """Tests for environment variable overrides."""

    def test_override_api_key(self):
        with patch.dict("os.environ", {"GROQ_API_KEY": "gsk_test"}, clear=True):
            s = Settings(_env_file=None)
            assert s.groq_api_key == "gsk_test"

    def test_override_max_upload_bytes(self):
        with patch.dict("os.environ", {"MAX_UPLOAD_BYTES": "1024"}, clear=True):
            s = Settings(_env_file=None)
            assert s.max_upload_bytes == 1024

    def test_override_text_types_from_json(self):
        env = {"UPLOAD_TEXT_TYPES": '["text/plain", "text/markdown"]'}
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.upload_text_types == ["text/plain", "text/markdown"]

    def test_case_insensitive_env_vars(self):
        """Pydantic Settings with case_sensitive=False accepts any case."""
        with patch.dict("os.environ", {"summarization_model": "llama-3.1-8b-instant"}, clear=True):
            s = Settings(_env_file=None)
            assert s.summarization_model == "llama-3.1-8b-instant"

    def test_override_temperature(self):
        with patch.dict("os.environ", {"SUMMARIZATION_TEMPERATURE": "0.1"}, clear=True):
            s = Settings(_env_file=None)
            assert s.summarization_temperature == 0.1


class TestLogLevel:
    """Tests for LOG_LEVEL validation."""

    def test_default_log_level(self):
        with patch.dict("os.environ", {}, clear=True):
            assert Settings(_env_file=None).log_level == "INFO"

    def test_lowercase_level_normalized(self):
        with patch.dict("os.environ", {"LOG_LEVEL": " debug "}, clear=True):
            assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_level_rejected_at_load(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError, match="log_level"):
                Settings(_env_file=None)


class TestRequestLimit:
    """Tests for the ingress body limit."""

    def test_adds_overhead_to_upload_limit(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.max_request_bytes == 10 * 1024 * 1024 + 64 * 1024

    def test_overhead_configurable(self):
        env = {"MAX_UPLOAD_BYTES": "1000", "UPLOAD_OVERHEAD_BYTES": "24"}
        with patch.dict("os.environ", env, clear=True):
            assert Settings(_env_file=None).max_request_bytes == 1024
