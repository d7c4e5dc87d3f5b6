"""Translation change events.

A write to a translatable field produces a TranslationChangeRecord; the
change sink wraps it in a TranslationEvent for the dispatcher.
"""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID, uuid4

TRANSLATION_SET_EVENT = "translation.has_been_set"


@dataclass(frozen=True)
class TranslationChangeRecord:
    """Snapshot of a single translation write.

    Attributes:
        record: The TranslatableRecord that was written to.
        key: Translatable field name.
        locale: Locale that was set.
        old_value: Value before the write ("" when there was none).
        new_value: Value after the write, as stored.
    """

    record: Any
    key: str
    locale: str
    old_value: Any
    new_value: Any


@dataclass
class TranslationEvent:
    """A translation change routed to registered handlers."""

    change: TranslationChangeRecord
    """The write that happened."""

    event_type: str = TRANSLATION_SET_EVENT
    """Handlers are registered per event type."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID tying log lines of one dispatch together."""
