"""Shared test fixtures for htmlstyle."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def article_path():
    """Return the path to the sample article markup."""
    return FIXTURES_DIR / "article.html"


@pytest.fixture
def styles_path():
    """Return the path to the sample style file."""
    return FIXTURES_DIR / "styles.json"
