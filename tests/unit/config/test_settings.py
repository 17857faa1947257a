"""Unit tests for Settings loading from the environment."""

import pytest
from pydantic import ValidationError

from text_commonizer.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "LOG_LEVEL",
            "TXC_RECURSION_LIMIT",
            "TXC_LOG_TEXT_PREVIEW_CHARS",
            "TXC_PROFILES_CONFIG",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "INFO"
        assert settings.recursion_limit == 10_000
        assert settings.log_text_preview_chars == 80
        assert settings.log_to_file is False
        assert settings.profiles_config is None

    def test_prefixed_environment_variables(self, monkeypatch):
        monkeypatch.setenv("TXC_RECURSION_LIMIT", "25")
        monkeypatch.setenv("TXC_PROFILES_CONFIG", "/tmp/profiles.yml")

        settings = get_settings()

        assert settings.recursion_limit == 25
        assert settings.profiles_config == "/tmp/profiles.yml"

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_recursion_limit_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("TXC_RECURSION_LIMIT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
