"""Factory functions for creating the resolution policy.

The policy is built once at process start and handed to every record.
"""

from typing import Optional

from translatable.configuration import Settings
from translatable.configuration import settings as default_settings
from translatable.i18n.models import MissingKeyCallback, ResolutionPolicy
from translatable.logging import get_module_logger

logger = get_module_logger()


def create_policy(
    settings: Optional[Settings] = None,
    missing_key_callback: Optional[MissingKeyCallback] = None,
) -> ResolutionPolicy:
    """Create a ResolutionPolicy from settings.

    Args:
        settings: Settings to read locales from (default: module singleton).
        missing_key_callback: Optional hook invoked when a read falls back.

    Returns:
        ResolutionPolicy: Configured policy

    Usage:
        policy = create_policy()

        def report_missing(record, key, locale, value, resolved_locale):
            logger.warning("missing_translation", key=key, locale=locale)

        policy = create_policy(missing_key_callback=report_missing)
    """
    locales = (settings or default_settings).locales

    policy = ResolutionPolicy(
        main_locale=locales.main_locale,
        default_locale=locales.app_locale,
        default_fallback_locale=locales.app_fallback_locale,
    )
    policy.fallback(
        fallback_locale=locales.fallback_locale,
        fallback_any=locales.fallback_any,
        missing_key_callback=missing_key_callback,
    )

    logger.info(
        "created_resolution_policy",
        main_locale=policy.main_locale,
        fallback_locale=policy.fallback_locale,
        fallback_any=policy.fallback_any,
        has_missing_key_callback=missing_key_callback is not None,
    )
    return policy
