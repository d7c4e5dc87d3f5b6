"""Tests for translatable.i18n.factory module."""

import pytest

from translatable.configuration import LocaleSettings, Settings
from translatable.i18n import create_policy


@pytest.mark.unit
class TestCreatePolicy:
    def test_policy_from_settings(self):
        settings = Settings(
            locales=LocaleSettings(
                TRANSLATABLE_MAIN_LOCALE="fr",
                TRANSLATABLE_FALLBACK_LOCALE="en",
                TRANSLATABLE_FALLBACK_ANY=True,
                APP_LOCALE="de",
                APP_FALLBACK_LOCALE="nl",
            )
        )

        policy = create_policy(settings)

        assert policy.main_locale == "fr"
        assert policy.fallback_locale == "en"
        assert policy.fallback_any is True
        assert policy.default_locale == "de"
        assert policy.default_fallback_locale == "nl"
        assert policy.missing_key_callback is None

    def test_policy_with_missing_key_callback(self):
        def callback(record, key, locale, value, resolved_locale):
            return None

        settings = Settings(locales=LocaleSettings(TRANSLATABLE_MAIN_LOCALE="en"))
        policy = create_policy(settings, missing_key_callback=callback)

        assert policy.missing_key_callback is callback
