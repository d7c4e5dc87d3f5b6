"""Translatable record: per-locale values for string fields.

Each translatable field ``F`` occupies two attributes of the underlying
store: ``F`` holds the main-locale text and ``FTranslations`` holds every
other locale, encoded by translatable.i18n.codec. The record decodes the
store on every call and keeps no copy of the translations, so changes made
to the store by someone else are always seen.

Usage:
    class Article(TranslatableRecord):
        translatable = ["title", "body"]

    article = Article(policy, store=DictAttributeStore(row), sink=EventDispatcherSink())
    article.set_translation("title", "fr", "Bonjour")
    article.get_translation("title", "de")  # falls back per policy
"""

from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from sqlalchemy import Table
from sqlalchemy.sql.elements import ColumnElement

from translatable.i18n import query
from translatable.i18n.codec import decode, encode, is_empty
from translatable.i18n.exceptions import NotTranslatable
from translatable.i18n.models import (
    ResolutionPolicy,
    TranslationChangeRecord,
    TranslationSet,
    translation_key,
)
from translatable.i18n.resolvers import FallbackResolver
from translatable.i18n.sinks import ChangeSink
from translatable.i18n.storage import AttributeStore, DictAttributeStore
from translatable.logging import get_module_logger

logger = get_module_logger()


class TranslatableRecord:
    """Wraps one record's attributes with a translation API.

    Subclasses declare their fields and optional behaviour as class
    attributes:

    Attributes:
        translatable: Translatable field names. When None, fields are guessed
            from the store (see get_translatable_attributes).
        use_fallback_locale: Whether get_attribute() falls back.
        get_mutators: Field name -> callable applied to every value read.
        set_mutators: Field name -> callable(value, locale) returning the
            value to store.

    A subclass may also define ``get_fallback_locale()`` returning a locale
    (or None) that takes precedence over the policy's fallback locale.
    """

    translatable: ClassVar[Optional[List[str]]] = None
    use_fallback_locale: ClassVar[bool] = True
    get_mutators: ClassVar[Dict[str, Callable[[Any], Any]]] = {}
    set_mutators: ClassVar[Dict[str, Callable[[Any, str], Any]]] = {}

    def __init__(
        self,
        policy: ResolutionPolicy,
        store: Optional[AttributeStore] = None,
        sink: Optional[ChangeSink] = None,
        locale: Optional[str] = None,
    ):
        """Initialize the record.

        Args:
            policy: Process-wide resolution policy.
            store: Attribute store of the record (default: empty in-memory store).
            sink: Receives a TranslationChangeRecord after every write.
            locale: Current locale of this instance (default: policy default).
        """
        self.policy = policy
        self.store = store if store is not None else DictAttributeStore()
        self.sink = sink
        self.translation_locale = locale
        self._resolver = FallbackResolver(policy)

    @classmethod
    def using_locale(cls, locale: str, policy: ResolutionPolicy, **kwargs: Any):
        """Create a record whose current locale is locale."""
        return cls(policy, **kwargs).set_locale(locale)

    @property
    def main_locale(self) -> str:
        return self.policy.main_locale

    # Locale

    def set_locale(self, locale: str) -> "TranslatableRecord":
        self.translation_locale = locale
        return self

    def get_locale(self) -> str:
        """Return the instance locale, or the policy default when unset."""
        return self.translation_locale or self.policy.default_locale

    # Generic accessors

    def get_attribute(self, key: str) -> Any:
        """Read an attribute; translatable fields resolve in the current locale."""
        if not self.is_translatable_attribute(key):
            return self.store.get(key)

        return self.get_translation(key, self.get_locale(), self.use_fallback_locale)

    def set_attribute(self, key: str, value: Any) -> "TranslatableRecord":
        """Write an attribute.

        A mapping, list or tuple written to a translatable field goes to
        set_translations (empty clears the field); a plain value is stored
        for the current locale.
        Other fields are written to the store as is.
        """
        if not self.is_translatable_attribute(key):
            self.store.set(key, value)
            return self

        if isinstance(value, (Mapping, list, tuple)):
            return self.set_translations(key, value)

        return self.set_translation(key, self.get_locale(), value)

    # Read path

    def translate(self, key: str, locale: str = "", use_fallback: bool = True) -> Any:
        """Alias of get_translation; an empty locale means the current one."""
        return self.get_translation(key, locale or self.get_locale(), use_fallback)

    def get_translation(self, key: str, locale: str, use_fallback: bool = True) -> Any:
        """Return the value of key in locale, applying the fallback policy.

        Args:
            key: Translatable field name.
            locale: Requested locale.
            use_fallback: Whether another locale may be substituted.

        Returns:
            The translation, "" when nothing resolves, passed through the
            field's get mutator when one is registered.

        Raises:
            NotTranslatable: If key is not a translatable field.
        """
        translations = self.get_translations(key)
        normalized_locale = self.normalize_locale(key, locale, use_fallback)

        translation = translations.get(normalized_locale) or ""

        callback = self.policy.missing_key_callback
        if normalized_locale != locale and callback is not None:
            try:
                replacement = callback(self, key, locale, translation, normalized_locale)
                if isinstance(replacement, str):
                    translation = replacement
            except Exception as e:
                logger.warning(
                    "missing_key_callback_failed",
                    key=key,
                    locale=locale,
                    resolved_locale=normalized_locale,
                    error=str(e),
                )

        mutator = self.get_mutators.get(key)
        if mutator is not None:
            return mutator(translation)

        return translation

    def get_translation_with_fallback(self, key: str, locale: str) -> Any:
        return self.get_translation(key, locale, True)

    def get_translation_without_fallback(self, key: str, locale: str) -> Any:
        return self.get_translation(key, locale, False)

    def get_translations(
        self,
        key: Optional[str] = None,
        allowed_locales: Optional[Iterable[str]] = None,
    ) -> Any:
        """Return the non-empty translations of a field.

        Args:
            key: Translatable field name. When None, returns a mapping of
                every translatable field to its translations.
            allowed_locales: Only keep these locales when given.

        Returns:
            TranslationSet for key, or Dict[str, TranslationSet].

        Raises:
            NotTranslatable: If key is not a translatable field.
        """
        if key is None:
            return {
                attribute: self.get_translations(attribute, allowed_locales)
                for attribute in self.get_translatable_attributes()
            }

        self._guard_against_non_translatable_attribute(key)

        allowed = None if allowed_locales is None else set(allowed_locales)
        return {
            locale: value
            for locale, value in self._read_translations(key).items()
            if not is_empty(value) and (allowed is None or locale in allowed)
        }

    @property
    def translations(self) -> Dict[str, TranslationSet]:
        """Translations of every translatable field."""
        return self.get_translations()

    def get_translated_locales(self, key: str) -> List[str]:
        return list(self.get_translations(key).keys())

    def has_translation(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether key has a non-empty value in locale (default: current)."""
        return (locale or self.get_locale()) in self.get_translations(key)

    def locales(self) -> List[str]:
        """Return every locale translated in at least one field, first seen first."""
        seen: Dict[str, None] = {}
        for attribute in self.get_translatable_attributes():
            for locale in self.get_translated_locales(attribute):
                seen.setdefault(locale, None)
        return list(seen)

    def normalize_locale(self, key: str, locale: str, use_fallback: bool = True) -> str:
        """Return the locale a read of key in locale resolves to."""
        record_fallback_locale = None
        get_fallback_locale = getattr(self, "get_fallback_locale", None)
        if callable(get_fallback_locale):
            record_fallback_locale = get_fallback_locale()

        return self._resolver.resolve(
            self.get_translated_locales(key),
            locale,
            use_fallback,
            record_fallback_locale=record_fallback_locale,
        )

    # Write path

    def set_translation(self, key: str, locale: str, value: Any) -> "TranslatableRecord":
        """Store value for key in locale and notify the sink.

        Raises:
            NotTranslatable: If key is not a translatable field.
        """
        self._guard_against_non_translatable_attribute(key)

        translations = self._read_translations(key)
        old_value = translations.get(locale) or ""

        mutator = self.set_mutators.get(key)
        if mutator is not None:
            value = mutator(value, locale)

        translations[locale] = value

        self.store.set(key, translations.get(self.main_locale, ""))
        self.store.set(translation_key(key), encode(translations, self.main_locale))

        logger.debug("translation_set", key=key, locale=locale)

        if self.sink is not None:
            self.sink(TranslationChangeRecord(self, key, locale, old_value, value))

        return self

    def set_translations(
        self,
        key: str,
        translations: Union[Mapping[str, Any], Sequence[Tuple[str, Any]]],
    ) -> "TranslatableRecord":
        """Set several locales of key; an empty value clears the field.

        translations is a mapping or a sequence of (locale, value) pairs.

        Raises:
            NotTranslatable: If key is not a translatable field.
        """
        self._guard_against_non_translatable_attribute(key)

        if not translations:
            self.store.set(key, None)
            self.store.set(translation_key(key), None)
            logger.debug("translations_cleared", key=key)
            return self

        if isinstance(translations, Mapping):
            translations = list(translations.items())

        for locale, translation in translations:
            self.set_translation(key, locale, translation)

        return self

    def forget_translation(self, key: str, locale: str) -> "TranslatableRecord":
        translations: Dict[str, Any] = self.get_translations(key)
        translations[locale] = None

        return self.set_translations(key, translations)

    def forget_translations(self, key: str) -> "TranslatableRecord":
        self._guard_against_non_translatable_attribute(key)

        for locale in self.get_translated_locales(key):
            self.forget_translation(key, locale)

        return self

    def forget_all_translations(self, locale: str) -> "TranslatableRecord":
        for attribute in self.get_translatable_attributes():
            self.forget_translation(attribute, locale)

        return self

    def replace_translations(
        self, key: str, translations: Mapping[str, Any]
    ) -> "TranslatableRecord":
        """Drop every locale of key, then set translations."""
        for locale in self.get_translated_locales(key):
            self.forget_translation(key, locale)

        return self.set_translations(key, translations)

    # Declared fields

    def is_translatable_attribute(self, key: str) -> bool:
        return key in self.get_translatable_attributes()

    def get_translatable_attributes(self) -> List[str]:
        """Return the translatable field names.

        Uses the ``translatable`` declaration when present. Otherwise guesses
        from the store: every key ``k`` for which ``kTranslations`` also
        exists. Guessing is best effort: a field never written has neither
        attribute and goes unnoticed.
        """
        if self.translatable is not None:
            return list(self.translatable)

        keys = self.store.all_keys()
        present = set(keys)
        return [key for key in keys if translation_key(key) in present]

    # Query helpers

    def where_locale(self, table: Table, column: str, locale: str) -> ColumnElement:
        """Predicate matching rows of table translated into locale."""
        return query.where_locale(table, column, locale, self.main_locale)

    def where_locales(
        self, table: Table, column: str, locales: Sequence[str]
    ) -> ColumnElement:
        """Predicate matching rows of table translated into any of locales."""
        return query.where_locales(table, column, locales, self.main_locale)

    def _read_translations(self, key: str) -> TranslationSet:
        # Main column wins over a stray main-locale span in the encoded column
        translations: TranslationSet = {self.main_locale: self.store.get(key) or ""}
        for locale, text in decode(self.store.get(translation_key(key))).items():
            translations.setdefault(locale, text)
        return translations

    def _guard_against_non_translatable_attribute(self, key: str) -> None:
        if not self.is_translatable_attribute(key):
            raise NotTranslatable.make(key, self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(store={self.store!r})"
