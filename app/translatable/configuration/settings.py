"""Translatable configuration settings - main aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from translatable.configuration.locales import LocaleSettings


class Settings(BaseSettings):
    """Translatable configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: Log rendering, "console" or "json" (default: console)

    Example:
        ```python
        from translatable.configuration import settings

        if settings.log_as_json:
            # Ship logs to the collector...

        fallback = settings.locales.fallback_locale
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="console",
        pattern="^(console|json)$",
        description="Log rendering: 'console' or 'json'",
    )

    locales: LocaleSettings

    @property
    def log_as_json(self) -> bool:
        """Check whether logs are rendered as JSON lines.

        Returns:
            True if LOG_FORMAT is "json", False otherwise.
        """
        return self.LOG_FORMAT == "json"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "locales" not in kwargs:
            kwargs["locales"] = LocaleSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
