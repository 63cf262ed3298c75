"""Shared fixtures for the validation tests."""

import sys
from datetime import date, timedelta
from pathlib import Path

import pytest

# Add backend/ to path so tests run without an install
BACKEND_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(BACKEND_ROOT))

from formguard.config import Settings  # noqa: E402
from formguard.validators import FormValidator  # noqa: E402


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def validator(settings):
    return FormValidator(settings=settings)


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


@pytest.fixture
def tomorrow(today):
    return today + timedelta(days=1)
