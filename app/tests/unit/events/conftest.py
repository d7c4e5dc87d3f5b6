"""Fixtures for event system tests."""

from unittest.mock import MagicMock

import pytest

from translatable.events import (
    TranslationChangeRecord,
    TranslationEvent,
    clear_handlers,
)


@pytest.fixture
def change_factory():
    """Factory for creating change records."""

    def _factory(
        record=None,
        key: str = "title",
        locale: str = "fr",
        old_value: str = "",
        new_value: str = "Bonjour",
    ):
        return TranslationChangeRecord(
            record=record if record is not None else MagicMock(name="record"),
            key=key,
            locale=locale,
            old_value=old_value,
            new_value=new_value,
        )

    return _factory


@pytest.fixture
def event_factory(change_factory):
    """Factory for creating test events."""

    def _factory(event_type: str = "test.event", **change_kwargs):
        return TranslationEvent(
            change=change_factory(**change_kwargs), event_type=event_type
        )

    return _factory


@pytest.fixture
def clear_event_handlers():
    """Clear event handlers before and after test."""
    clear_handlers()
    yield
    clear_handlers()


@pytest.fixture
def mock_event_handler():
    """Mock event handler function."""
    return MagicMock(__name__="mock_event_handler")
