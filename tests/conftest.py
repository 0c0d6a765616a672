"""Shared test fixtures for settings, stores and a fixed clock."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from vote_desk.core.config import Settings
from vote_desk.core.state import StoreState
from vote_desk.services.seed_service import seed_demo_data
from vote_desk.store import ElectionStore

FIXED_NOW = datetime(2024, 6, 1, 12, 30, 0, tzinfo=UTC)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Test application settings writing exports under tmp_path."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        export_dir=str(tmp_path / "exports"),
        seed_demo_data=True,
        strict_mode=False,
    )


@pytest.fixture
def store(settings: Settings) -> ElectionStore:
    """Lenient store seeded with the demo data."""
    return ElectionStore(settings=settings, clock=fixed_clock)


@pytest.fixture
def strict_store(settings: Settings) -> ElectionStore:
    """Strict store seeded with the demo data."""
    return ElectionStore(settings=settings, strict=True, clock=fixed_clock)


@pytest.fixture
def empty_store(settings: Settings) -> ElectionStore:
    """Lenient store without seed data."""
    return ElectionStore(settings=settings, seed=False, clock=fixed_clock)


@pytest.fixture
def state() -> StoreState:
    """Seeded lenient state for service-level tests."""
    state = StoreState(clock=fixed_clock)
    seed_demo_data(state)
    return state


@pytest.fixture
def strict_state() -> StoreState:
    """Seeded strict state for service-level tests."""
    state = StoreState(strict=True, clock=fixed_clock)
    seed_demo_data(state)
    return state


@pytest.fixture
def fixed_now() -> datetime:
    """The instant returned by every test store's clock."""
    return FIXED_NOW
