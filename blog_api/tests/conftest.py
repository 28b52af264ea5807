"""Shared fixtures for blog API tests."""

from datetime import datetime, timedelta, timezone

import pytest

from blog_api.services.repository import InMemoryBlogPostRepository

BASE_TIME = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: each call returns one minute later than the last."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.start = start
        self._next = start

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + timedelta(minutes=1)
        return now


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from blog_api.config import get_settings

    get_settings.cache_clear()

    # 2. Repository singleton
    import blog_api.dependencies as deps_mod

    deps_mod._repository = None


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from blog_api.config import Settings, get_settings

    test_settings = Settings(
        environment="test",
        log_level="DEBUG",
        seed_sample_data=False,
    )

    get_settings.cache_clear()
    # Patch importers before blog_api.config so a first import of
    # blog_api.main here binds the real get_settings
    monkeypatch.setattr("blog_api.main.get_settings", lambda: test_settings)
    monkeypatch.setattr("blog_api.dependencies.get_settings", lambda: test_settings)
    monkeypatch.setattr("blog_api.config.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def repository(clock):
    """Empty repository with a deterministic clock."""
    return InMemoryBlogPostRepository(seed=False, clock=clock)


@pytest.fixture
def seeded_repository(clock):
    """Repository holding the four sample posts."""
    return InMemoryBlogPostRepository(seed=True, clock=clock)


@pytest.fixture
def app_repository(mock_settings, repository, monkeypatch):
    """Install *repository* as the app's shared store and return it."""
    monkeypatch.setattr("blog_api.dependencies._repository", repository)
    return repository
