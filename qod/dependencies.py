"""
Dependency injection functions for FastAPI endpoints.

This module provides all the dependency functions used across the application,
following the Dependency Injection pattern to supply repositories, the daily
pick cache, the clock and random sources to route handlers.
"""

import random
from datetime import datetime, timezone
from typing import Callable

from fastapi import Depends, Request
from sqlmodel import Session
from qod.database import get_session
from qod.repositories.interfaces import (
    QuoteRepositoryInterface,
    SourceRepositoryInterface,
)
from qod.repositories.models import QuoteRead
from qod.repositories.quote_repository import QuoteRepository
from qod.repositories.source_repository import SourceRepository
from qod.selection.daily_pick import DailyPickCache
from qod.selection.interfaces import RandomSource

Clock = Callable[[], datetime]


def get_quote_repository(
    session: Session = Depends(get_session),
) -> QuoteRepositoryInterface:
    """Get an instance of the quote repository."""
    return QuoteRepository(session)


def get_source_repository(
    session: Session = Depends(get_session),
) -> SourceRepositoryInterface:
    """Get an instance of the source repository."""
    return SourceRepository(session)


def get_quote_of_the_day_cache(request: Request) -> DailyPickCache[QuoteRead]:
    """Get the application's quote of the day cache, created at startup."""
    return request.app.state.quote_of_the_day_cache


def get_clock() -> Clock:
    """Get the clock used to decide which day a request falls on."""
    return lambda: datetime.now(timezone.utc)


def get_random_source() -> RandomSource:
    """Get a fresh random source for a one-shot selection."""
    return random.Random()
