"""Exceptions raised by translatable records."""

from typing import Any, List


class TranslatableError(Exception):
    """Base exception for all translatable-field errors."""

    pass


class NotTranslatable(TranslatableError):
    """Raised when a translation operation targets an undeclared field.

    Example:
        >>> record.set_translation("slug", "en", "x")
        Traceback (most recent call last):
        ...
        NotTranslatable: Cannot translate attribute `slug` as it's not one of the translatable attributes: `title, body`
    """

    def __init__(self, message: str, key: str = "", translatable: List[str] = None):
        super().__init__(message)
        self.key = key
        self.translatable = list(translatable or [])

    @classmethod
    def make(cls, key: str, record: Any) -> "NotTranslatable":
        """Build the exception for a field of a given record.

        Args:
            key: The offending field name.
            record: Record whose declared fields are listed in the message.

        Returns:
            NotTranslatable instance.
        """
        translatable = record.get_translatable_attributes()
        return cls(
            f"Cannot translate attribute `{key}` as it's not one of the "
            f"translatable attributes: `{', '.join(translatable)}`",
            key=key,
            translatable=translatable,
        )
