"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cv_assistant_core.models.profile import Profile
from tests.mocks.mock_factories import make_profile
from tests.mocks.mock_settings import make_settings

FIXTURES_DIR = Path(__file__).resolve().parents[1] / "fixtures"


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_profile() -> Profile:
    """Return a fully populated Profile."""
    return make_profile()


@pytest.fixture
def empty_profile() -> Profile:
    """Return a Profile where nothing was found."""
    return Profile(raw_text="")


@pytest.fixture
def sample_cv_path() -> Path:
    """Path to the plain-text sample résumé."""
    return FIXTURES_DIR / "sample_cv.txt"


@pytest.fixture
def sample_cv_text(sample_cv_path: Path) -> str:
    """Contents of the plain-text sample résumé."""
    return sample_cv_path.read_text(encoding="utf-8")
