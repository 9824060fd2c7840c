"""
Engine-backed pick source for the quote of the day.

The daily pick cache lives for the whole process, so it cannot hold on to a
request-scoped session. This source opens a short-lived session for each
enumeration and existence check instead.
"""

from typing import Iterator

from sqlalchemy import Engine
from sqlmodel import Session

from qod.repositories.models import QuoteRead
from qod.repositories.quote_repository import QuoteRepository
from qod.selection.interfaces import PickSourceInterface


class EngineQuoteSource(PickSourceInterface[QuoteRead]):
    def __init__(self, engine: Engine):
        self.engine = engine

    def enumerate_all(self) -> Iterator[QuoteRead]:
        with Session(self.engine) as session:
            yield from QuoteRepository(session).enumerate_all()

    def exists(self, candidate: QuoteRead) -> bool:
        with Session(self.engine) as session:
            return QuoteRepository(session).exists(candidate)
