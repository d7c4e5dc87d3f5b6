"""Fixtures for translatable record tests."""

import pytest

from translatable.i18n import (
    DictAttributeStore,
    ResolutionPolicy,
    TranslatableRecord,
)


class Article(TranslatableRecord):
    """Record type with two declared translatable fields."""

    translatable = ["title", "body"]


class RecordingSink:
    """Change sink collecting every change record."""

    def __init__(self):
        self.changes = []

    def __call__(self, change):
        self.changes.append(change)


@pytest.fixture
def policy():
    """Policy with "en" as main locale and no fallback configured."""
    return ResolutionPolicy(main_locale="en", default_locale="en")


@pytest.fixture
def store():
    return DictAttributeStore()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def article(policy, store, sink):
    return Article(policy, store=store, sink=sink)


@pytest.fixture
def article_factory(policy):
    """Factory for Article records over a given row."""

    def _factory(attributes=None, record_policy=None, locale=None, cls=Article):
        return cls(
            record_policy or policy,
            store=DictAttributeStore(attributes),
            locale=locale,
        )

    return _factory
