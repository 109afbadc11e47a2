"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.game.store import GameStore
from src.services.game_service import GameService


@pytest.fixture
def store() -> GameStore:
    """A fresh store for every test (never touch the process-wide one in unit tests)"""
    return GameStore()


@pytest.fixture
def service(store: GameStore) -> GameService:
    """Service wired to the fresh store, so tests can inspect the store directly as well."""
    return GameService(store)
