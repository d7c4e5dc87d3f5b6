"""Fixtures for translatable.logging tests."""

from unittest.mock import Mock

import pytest

from translatable.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.LOG_FORMAT = "console"
    return settings
