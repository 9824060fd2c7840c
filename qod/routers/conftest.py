"""
Shared pytest fixtures for router tests.

Provides reusable dependency injection fixtures to reduce boilerplate in test files.
Each fixture returns a setup function that creates fresh stub repositories and
dependency overrides with automatic cleanup.
"""

from datetime import datetime, timezone
from typing import Callable, Generator
import pytest

from qod.main import app
from qod.dependencies import (
    get_clock,
    get_quote_of_the_day_cache,
    get_quote_repository,
    get_random_source,
    get_source_repository,
)
from qod.repositories.models import QuoteRead
from qod.selection.daily_pick import DailyPickCache
from qod.test_utils import ScriptedRandom, StubQuoteRepository, StubSourceRepository

# Type aliases for fixtures
QuoteSourceDepsSetup = Callable[..., tuple[StubQuoteRepository, StubSourceRepository]]
QuoteOfTheDayDepsSetup = Callable[
    ..., tuple[StubQuoteRepository, DailyPickCache[QuoteRead], "FakeClock"]
]


class FakeClock:
    """Settable clock for controlling which day a request falls on."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def setup_quote_source_deps() -> Generator[QuoteSourceDepsSetup, None, None]:
    """
    Setup quote and source repository dependencies.

    Usage:
        def test_something(setup_quote_source_deps):
            quote_repo, source_repo = setup_quote_source_deps()
            # or with a scripted random source for /quotes/random:
            quote_repo, source_repo = setup_quote_source_deps(draws=[0])
            # Cleanup is automatic!
    """

    def _setup(
        draws: list[int] | None = None,
    ) -> tuple[StubQuoteRepository, StubSourceRepository]:
        quote_repo = StubQuoteRepository()
        source_repo = StubSourceRepository(quote_repo)

        app.dependency_overrides[get_quote_repository] = lambda: quote_repo
        app.dependency_overrides[get_source_repository] = lambda: source_repo
        if draws is not None:
            app.dependency_overrides[get_random_source] = lambda: ScriptedRandom(
                list(draws)
            )

        return quote_repo, source_repo

    yield _setup
    app.dependency_overrides.clear()


@pytest.fixture
def setup_qod_deps() -> Generator[QuoteOfTheDayDepsSetup, None, None]:
    """
    Setup dependencies for the quote of the day endpoint.

    The cache is built on the stub quote repository and a scripted random
    source, and the clock is a FakeClock that tests can move forward.

    Usage:
        def test_qod(setup_qod_deps):
            quote_repo, cache, clock = setup_qod_deps(draws=[0])
            # Cleanup is automatic!
    """

    def _setup(
        draws: list[int] | None = None,
        now: datetime = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    ) -> tuple[StubQuoteRepository, DailyPickCache[QuoteRead], FakeClock]:
        quote_repo = StubQuoteRepository()
        source_repo = StubSourceRepository(quote_repo)
        cache = DailyPickCache(quote_repo, ScriptedRandom(draws))
        clock = FakeClock(now)

        app.dependency_overrides[get_quote_repository] = lambda: quote_repo
        app.dependency_overrides[get_source_repository] = lambda: source_repo
        app.dependency_overrides[get_quote_of_the_day_cache] = lambda: cache
        app.dependency_overrides[get_clock] = lambda: clock

        return quote_repo, cache, clock

    yield _setup
    app.dependency_overrides.clear()
