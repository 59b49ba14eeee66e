"""Tests for smartergpt.config.load_settings."""

import dataclasses
from unittest.mock import patch

import pytest

from smartergpt.config import Settings, get_config, load_settings


class TestLoadSettings:
    def test_reads_values_from_config(self, mock_config, monkeypatch):
        monkeypatch.setenv("SMARTERGPT_TEST_KEY", "sk-test")

        settings = load_settings()

        assert settings == Settings(
            api_key="sk-test",
            model="gpt-test",
            temperature=0.2,
            number_of_requests=2,
            rate_limit_backoff_seconds=1,
            rate_limit_max_retries=4,
            request_timeout_seconds=30,
        )

    def test_missing_key_is_none(self, mock_config, monkeypatch):
        monkeypatch.delenv("SMARTERGPT_TEST_KEY", raising=False)
        assert load_settings().api_key is None

    def test_blank_key_is_none(self, mock_config, monkeypatch):
        monkeypatch.setenv("SMARTERGPT_TEST_KEY", "")
        assert load_settings().api_key is None

    def test_defaults_when_keys_missing(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-default")
        with patch("smartergpt.config._config", {}):
            settings = load_settings()

        assert settings.api_key == "sk-default"
        assert settings.model == "gpt-3.5-turbo"
        assert settings.temperature == 0.5
        assert settings.number_of_requests == 3
        assert settings.rate_limit_backoff_seconds == 20.0

    def test_null_retry_cap_means_unbounded(self, monkeypatch):
        with patch("smartergpt.config._config", {"rate_limit_max_retries": None}):
            assert load_settings().rate_limit_max_retries is None


class TestDraftCountValidation:
    @pytest.mark.parametrize("count", [0, -2, "three"])
    def test_load_settings_rejects_bad_count(self, count):
        with patch("smartergpt.config._config", {"number_of_requests": count}):
            with pytest.raises(ValueError):
                load_settings()

    def test_replace_rejects_zero(self, settings):
        with pytest.raises(ValueError):
            dataclasses.replace(settings, number_of_requests=0)

    def test_one_is_accepted(self):
        assert Settings(api_key=None, number_of_requests=1).number_of_requests == 1


class TestShippedConfig:
    def test_config_yaml_defaults(self):
        config = get_config()
        assert config["model"] == "gpt-3.5-turbo"
        assert config["temperature"] == 0.5
        assert config["number_of_requests"] == 3
        assert config["rate_limit_backoff_seconds"] == 20
