"""Pytest configuration and fixtures for budget splitter tests."""

import json
from pathlib import Path

import pytest

from budget_splitter.assistant import BudgetAssistant
from budget_splitter.core.models import CategorySet
from budget_splitter.storage.category_store import CategoryStore


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    """Path for a not-yet-existing cache file."""
    return tmp_path / "data" / "cache.json"


@pytest.fixture
def store(cache_file: Path) -> CategoryStore:
    """Empty store backed by a temporary cache file."""
    return CategoryStore(cache_file)


@pytest.fixture
def assistant(store: CategoryStore) -> BudgetAssistant:
    """Assistant wired to the temporary store."""
    return BudgetAssistant(store)


@pytest.fixture
def sample_categories() -> CategorySet:
    """The help-text example: Food 50, Rent 30, Other 20."""
    return CategorySet(weights={"Food": 50, "Rent": 30, "Other": 20})


@pytest.fixture
def sample_cache(cache_file: Path) -> Path:
    """Cache file with two users, as written by an earlier run."""
    cache_file.parent.mkdir(parents=True, exist_ok=True)
    cache_file.write_text(
        json.dumps(
            {
                "111": {"Food": 50.0, "Rent": 30.0, "Other": 20.0},
                "222": {"Savings": 1.0, "Fun": 1.0},
            }
        ),
        encoding="utf-8",
    )
    return cache_file
