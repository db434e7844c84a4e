"""Shared fixtures. A MagicMock stands in for the Playwright page."""

import pytest
from unittest.mock import MagicMock

from pagefactory.config import load_config


@pytest.fixture
def browser():
    mock = MagicMock(name="browser")
    mock.title.return_value = "Example"
    mock.evaluate.return_value = 0
    return mock


@pytest.fixture(autouse=True)
def fresh_config():
    load_config.cache_clear()
    yield
    load_config.cache_clear()
