"""Shared test fixtures."""

import os

# Must be set before config.settings is first imported
os.environ["LNG_BCRYPT_ROUNDS"] = "4"

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402

from src.lng_store.seed import default_seed  # noqa: E402
from src.lng_store.state import AppState, StoreContext  # noqa: E402
from src.lng_store.store import DomainStore  # noqa: E402

FIXED_NOW = datetime(2026, 2, 10, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def ctx() -> StoreContext:
    """Context with a frozen clock and the default sequence start (10)."""
    return StoreContext.create(clock=lambda: FIXED_NOW)


@pytest.fixture
def seed() -> AppState:
    return default_seed()


@pytest.fixture
def store(seed: AppState, ctx: StoreContext) -> DomainStore:
    return DomainStore(seed, ctx)
