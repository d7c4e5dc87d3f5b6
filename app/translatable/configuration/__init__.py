"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocaleSettings: Locale settings class (for testing)

Example:
    ```python
    from translatable.configuration import settings

    main_locale = settings.locales.main_locale
    ```
"""

from translatable.configuration.locales import LocaleSettings
from translatable.configuration.settings import Settings, settings

__all__ = ["Settings", "LocaleSettings", "settings"]
