"""Unit tests for translatable.configuration module."""

import pytest
from pydantic import ValidationError

from translatable.configuration import LocaleSettings, Settings


@pytest.fixture(autouse=True)
def clean_locale_env(monkeypatch):
    for name in (
        "TRANSLATABLE_MAIN_LOCALE",
        "TRANSLATABLE_FALLBACK_LOCALE",
        "TRANSLATABLE_FALLBACK_ANY",
        "APP_LOCALE",
        "APP_FALLBACK_LOCALE",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestLocaleSettings:
    def test_defaults(self):
        locales = LocaleSettings()

        assert locales.main_locale == "en"
        assert locales.fallback_locale is None
        assert locales.fallback_any is False
        assert locales.app_locale == "en"
        assert locales.app_fallback_locale is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TRANSLATABLE_MAIN_LOCALE", "fr")
        monkeypatch.setenv("TRANSLATABLE_FALLBACK_LOCALE", "en")
        monkeypatch.setenv("TRANSLATABLE_FALLBACK_ANY", "true")
        monkeypatch.setenv("APP_LOCALE", "de")

        locales = LocaleSettings()

        assert locales.main_locale == "fr"
        assert locales.fallback_locale == "en"
        assert locales.fallback_any is True
        assert locales.app_locale == "de"


@pytest.mark.unit
class TestSettings:
    def test_instantiates_locale_settings(self):
        settings = Settings()

        assert isinstance(settings.locales, LocaleSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_locale_override(self):
        locales = LocaleSettings(TRANSLATABLE_MAIN_LOCALE="nl")
        assert Settings(locales=locales).locales.main_locale == "nl"

    def test_log_format_defaults_to_console(self):
        settings = Settings()

        assert settings.LOG_FORMAT == "console"
        assert settings.log_as_json is False

    def test_log_format_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert Settings().log_as_json is True

    def test_invalid_log_format_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings()
