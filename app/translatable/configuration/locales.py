"""Locale settings for translatable records."""

from typing import Optional

from pydantic import Field

from translatable.configuration.base import TranslatableSettingsBase


class LocaleSettings(TranslatableSettingsBase):
    """Locale configuration for translatable fields.

    Environment Variables:
        TRANSLATABLE_MAIN_LOCALE: Locale stored in the plain column (default: en)
        TRANSLATABLE_FALLBACK_LOCALE: Locale used when a translation is missing
        TRANSLATABLE_FALLBACK_ANY: Use any known locale as a last resort
        APP_LOCALE: Default current locale for records (default: en)
        APP_FALLBACK_LOCALE: Application-wide fallback locale

    Example:
        ```python
        from translatable.configuration import settings

        main_locale = settings.locales.main_locale
        ```
    """

    main_locale: str = Field(
        default="en",
        alias="TRANSLATABLE_MAIN_LOCALE",
        description="Locale stored unencoded in the plain column",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="TRANSLATABLE_FALLBACK_LOCALE",
        description="Locale to use when a translation is missing",
    )
    fallback_any: bool = Field(
        default=False,
        alias="TRANSLATABLE_FALLBACK_ANY",
        description="Fall back to any translated locale when the fallback locale is missing",
    )
    app_locale: str = Field(
        default="en",
        alias="APP_LOCALE",
        description="Current locale used when a record has none set",
    )
    app_fallback_locale: Optional[str] = Field(
        default=None,
        alias="APP_FALLBACK_LOCALE",
        description="Application-wide fallback locale",
    )
