"""Translatable fields - per-locale values stored in two columns.

Main components:
- codec: encode/decode of the non-main-locale column
- models: TranslationSet, TranslationChangeRecord, ResolutionPolicy
- resolvers: FallbackResolver picking the locale a read returns
- record: TranslatableRecord with the get/set/forget API
- query: SQLAlchemy predicates filtering rows by locale
- sinks: ChangeSink protocol and EventDispatcherSink
- storage: AttributeStore protocol and DictAttributeStore
"""

from translatable.i18n.codec import decode, encode, locale_pattern
from translatable.i18n.exceptions import NotTranslatable, TranslatableError
from translatable.i18n.factory import create_policy
from translatable.i18n.models import (
    TRANSLATIONS_SUFFIX,
    ResolutionPolicy,
    TranslationChangeRecord,
    TranslationSet,
    translation_key,
)
from translatable.i18n.query import where_locale, where_locales
from translatable.i18n.record import TranslatableRecord
from translatable.i18n.resolvers import FallbackResolver
from translatable.i18n.sinks import (
    TRANSLATION_SET_EVENT,
    ChangeSink,
    EventDispatcherSink,
)
from translatable.i18n.storage import AttributeStore, DictAttributeStore

__all__ = [
    "TRANSLATIONS_SUFFIX",
    "TRANSLATION_SET_EVENT",
    "AttributeStore",
    "ChangeSink",
    "DictAttributeStore",
    "EventDispatcherSink",
    "FallbackResolver",
    "NotTranslatable",
    "ResolutionPolicy",
    "TranslatableError",
    "TranslatableRecord",
    "TranslationChangeRecord",
    "TranslationSet",
    "create_policy",
    "decode",
    "encode",
    "locale_pattern",
    "translation_key",
    "where_locale",
    "where_locales",
]
