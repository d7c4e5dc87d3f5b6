"""Fallback resolution for translatable fields.

Decides which locale's value a read returns when the requested locale has
no translation.
"""

from typing import Optional, Sequence

from translatable.i18n.models import ResolutionPolicy
from translatable.logging import get_module_logger

logger = get_module_logger()


class FallbackResolver:
    """Resolves the effective locale of a read.

    Resolution order:
    1. Requested locale (if translated)
    2. Requested locale unchanged when fallback is disabled
    3. Fallback locale: record override, then policy, then application default;
       a source is skipped only when it is None
    4. First translated locale when the policy allows falling back to any
    5. Requested locale unchanged
    """

    def __init__(self, policy: ResolutionPolicy):
        self.policy = policy

    def resolve(
        self,
        translated_locales: Sequence[str],
        locale: str,
        use_fallback: bool = True,
        record_fallback_locale: Optional[str] = None,
    ) -> str:
        """Return the locale whose value should be read.

        Args:
            translated_locales: Locales holding a non-empty value, main
                locale first, then encoded order.
            locale: Requested locale.
            use_fallback: Whether substitution is allowed at all.
            record_fallback_locale: Per-record fallback override, if any.

        Returns:
            Effective locale; equals locale when no substitution happened.
        """
        if locale in translated_locales:
            return locale

        if not use_fallback:
            return locale

        fallback_locale = record_fallback_locale
        if fallback_locale is None:
            fallback_locale = self.policy.fallback_locale
        if fallback_locale is None:
            fallback_locale = self.policy.default_fallback_locale

        if fallback_locale is not None and fallback_locale in translated_locales:
            logger.debug(
                "used_fallback_locale",
                requested_locale=locale,
                fallback_locale=fallback_locale,
            )
            return fallback_locale

        if translated_locales and self.policy.fallback_any:
            logger.debug(
                "used_any_locale",
                requested_locale=locale,
                fallback_locale=translated_locales[0],
            )
            return translated_locales[0]

        return locale
