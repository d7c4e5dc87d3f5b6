"""Data structures for translatable fields.

Defines the translation mapping type and the resolution policy shared by
all records of a process. TranslationChangeRecord lives with the events it
is carried by and is re-exported here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from translatable.events.models import TranslationChangeRecord  # noqa: F401

TRANSLATIONS_SUFFIX = "Translations"
"""Suffix of the column holding the encoded non-main translations."""

TranslationSet = Dict[str, Optional[str]]
"""Insertion-ordered mapping of locale identifier to text."""

MissingKeyCallback = Callable[[Any, str, str, str, str], Optional[str]]
"""Called as (record, key, requested_locale, value, resolved_locale)."""


def translation_key(key: str) -> str:
    """Return the name of the encoded column for a translatable field.

    Args:
        key: Translatable field name (e.g., "title").

    Returns:
        Encoded column name (e.g., "titleTranslations").
    """
    return f"{key}{TRANSLATIONS_SUFFIX}"


@dataclass
class ResolutionPolicy:
    """Process-wide translation settings.

    Constructed once at process start with the main locale and optionally
    amended once through fallback(). Records read it; nothing mutates it
    while handling requests.

    Attributes:
        main_locale: Locale whose value lives in the plain column.
        fallback_locale: Locale to use when the requested one is missing.
        fallback_any: Use the first translated locale as a last resort.
        missing_key_callback: Hook called when a fallback occurred; a string
            return value replaces the resolved translation.
        default_locale: Current locale of records that have none set.
        default_fallback_locale: Application-wide fallback used when
            fallback_locale is not set.
    """

    main_locale: str
    fallback_locale: Optional[str] = None
    fallback_any: bool = False
    missing_key_callback: Optional[MissingKeyCallback] = None
    default_locale: str = "en"
    default_fallback_locale: Optional[str] = None

    def fallback(
        self,
        fallback_locale: Optional[str] = None,
        fallback_any: bool = False,
        missing_key_callback: Optional[MissingKeyCallback] = None,
    ) -> "ResolutionPolicy":
        """Set the fallback behaviour.

        Args:
            fallback_locale: Locale to use when a translation is missing.
            fallback_any: Fall back to any translated locale as a last resort.
            missing_key_callback: Hook invoked when a fallback happened.

        Returns:
            The policy itself, for chaining.
        """
        self.fallback_locale = fallback_locale
        self.fallback_any = fallback_any
        self.missing_key_callback = missing_key_callback
        return self
