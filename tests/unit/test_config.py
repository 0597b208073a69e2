"""
Tests for settings and logging setup
"""

import logging

import pytest
from pydantic import ValidationError

from flockcalc.config import Settings, configure_logging, get_settings
from flockcalc.display.locale import DEFAULT_DISPLAY_LOCALE


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.chdir("/")
        settings = Settings()
        assert settings.CURRENCY_SYMBOL == "C$"
        assert settings.FETCH_MAX_WORKERS == 7
        assert settings.display_locale() == DEFAULT_DISPLAY_LOCALE

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("FLOCKCALC_CURRENCY_SYMBOL", "L")
        monkeypatch.setenv("FLOCKCALC_FETCH_MAX_WORKERS", "3")
        settings = Settings()
        assert settings.CURRENCY_SYMBOL == "L"
        assert settings.FETCH_MAX_WORKERS == 3
        assert settings.display_locale().currency_symbol == "L"

    @pytest.mark.parametrize("workers", ["0", "-2"])
    def test_pool_size_must_be_positive(self, monkeypatch, workers) -> None:
        monkeypatch.setenv("FLOCKCALC_FETCH_MAX_WORKERS", workers)
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_applies_level(self, monkeypatch) -> None:
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(Settings(LOG_LEVEL="debug"))
        assert calls["level"] == logging.DEBUG
        assert "%(name)s" in calls["format"]

    def test_unknown_level_falls_back_to_info(self, monkeypatch) -> None:
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(Settings(LOG_LEVEL="chatty"))
        assert calls["level"] == logging.INFO
