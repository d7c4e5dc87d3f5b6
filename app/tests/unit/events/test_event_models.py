"""Unit tests for translatable.events.models module."""

from dataclasses import FrozenInstanceError
from uuid import UUID

import pytest

from translatable.events import (
    TRANSLATION_SET_EVENT,
    TranslationChangeRecord,
    TranslationEvent,
)


@pytest.mark.unit
class TestTranslationEvent:
    def test_defaults(self, change_factory):
        change = change_factory()

        event = TranslationEvent(change=change)

        assert event.change is change
        assert event.event_type == TRANSLATION_SET_EVENT
        assert isinstance(event.correlation_id, UUID)

    def test_correlation_ids_are_unique(self, event_factory):
        assert event_factory().correlation_id != event_factory().correlation_id


@pytest.mark.unit
class TestTranslationChangeRecord:
    def test_fields(self):
        record = object()

        change = TranslationChangeRecord(record, "title", "fr", "", "Bonjour")

        assert change.record is record
        assert (change.key, change.locale) == ("title", "fr")
        assert (change.old_value, change.new_value) == ("", "Bonjour")

    def test_frozen(self, change_factory):
        change = change_factory()

        with pytest.raises(FrozenInstanceError):
            change.locale = "de"
