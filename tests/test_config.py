"""Unit tests for environment settings."""
import pytest

from licitagov.config import DEFAULT_CHAT_TEMPERATURE, Settings
from licitagov.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "API_KEY",
        "LICITAGOV_CHAT_TEMPERATURE",
        "LICITAGOV_STORE_BACKEND",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.chat_temperature == DEFAULT_CHAT_TEMPERATURE
        assert settings.store_backend == "json"
        assert not settings.has_api_key

    def test_api_key_fallback(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "chave")

        assert Settings.from_env().api_key == "chave"

    def test_undefined_key_is_missing(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "undefined")

        assert not Settings.from_env().has_api_key

    def test_temperature_is_parsed(self, monkeypatch):
        monkeypatch.setenv("LICITAGOV_CHAT_TEMPERATURE", "0.7")

        assert Settings.from_env().chat_temperature == 0.7

    @pytest.mark.parametrize("value", ["quente", "5"])
    def test_invalid_temperature(self, monkeypatch, value):
        monkeypatch.setenv("LICITAGOV_CHAT_TEMPERATURE", value)

        with pytest.raises(ConfigurationError, match="LICITAGOV_CHAT_TEMPERATURE"):
            Settings.from_env()

    def test_invalid_backend(self, monkeypatch):
        monkeypatch.setenv("LICITAGOV_STORE_BACKEND", "redis")

        with pytest.raises(ConfigurationError, match="LICITAGOV_STORE_BACKEND"):
            Settings.from_env()
