"""
Shared pytest fixtures for repository tests.
"""

import pytest
from sqlmodel import Session
from qod.repositories.quote_repository import QuoteRepository
from qod.repositories.source_repository import SourceRepository


@pytest.fixture(name="quote_repo")
def quote_repo_fixture(session: Session) -> QuoteRepository:
    """Create a QuoteRepository instance with an in-memory database session."""
    return QuoteRepository(session)


@pytest.fixture(name="source_repo")
def source_repo_fixture(session: Session) -> SourceRepository:
    """Create a SourceRepository instance with an in-memory database session."""
    return SourceRepository(session)
