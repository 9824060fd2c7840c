from typing import Iterator
from sqlmodel import Session, select, col
from sqlalchemy import func
from qod.repositories.models import (
    Quote,
    QuoteCreate,
    QuoteRead,
    QuoteSourceLink,
    Source,
)
from qod.repositories.interfaces import QuoteRepositoryInterface


class QuoteRepository(QuoteRepositoryInterface):
    def __init__(self, session: Session):
        self.session = session

    def add(self, quote: QuoteCreate) -> QuoteRead:
        # Quote text is unique regardless of case
        existing_quote = self.find_by_text(quote.text)
        if existing_quote:
            return existing_quote

        db_quote = Quote.model_validate(quote)
        self.session.add(db_quote)
        self.session.commit()
        self.session.refresh(db_quote)
        return QuoteRead.model_validate(db_quote)

    def get(self, quote_id: int) -> QuoteRead | None:
        quote = self.session.get(Quote, quote_id)
        return QuoteRead.model_validate(quote) if quote else None

    def find_by_text(self, text: str) -> QuoteRead | None:
        statement = select(Quote).where(func.lower(Quote.text) == text.lower())
        quote = self.session.exec(statement).first()
        return QuoteRead.model_validate(quote) if quote else None

    def list_quotes(self) -> list[QuoteRead]:
        statement = select(Quote).order_by(func.lower(Quote.text))
        quotes = self.session.exec(statement).all()
        return [QuoteRead.model_validate(quote) for quote in quotes]

    def search(self, fragment: str) -> list[QuoteRead]:
        statement = (
            select(Quote)
            .where(col(Quote.text).icontains(fragment, autoescape=True))
            .order_by(func.lower(Quote.text))
        )
        quotes = self.session.exec(statement).all()
        return [QuoteRead.model_validate(quote) for quote in quotes]

    def update_text(self, quote_id: int, text: str) -> QuoteRead | None:
        quote = self.session.get(Quote, quote_id)
        if not quote:
            return None
        quote.text = text
        self.session.add(quote)
        self.session.commit()
        self.session.refresh(quote)
        return QuoteRead.model_validate(quote)

    def delete(self, quote_id: int) -> None:
        quote = self.session.get(Quote, quote_id)
        if not quote:
            return
        self.session.delete(quote)
        self.session.commit()

    def get_source_ids(self, quote_id: int) -> list[int]:
        statement = select(QuoteSourceLink.source_id).where(
            QuoteSourceLink.quote_id == quote_id
        )
        return [source_id for source_id in self.session.exec(statement) if source_id]

    def get_by_source_id(self, source_id: int) -> list[QuoteRead]:
        statement = (
            select(Quote)
            .join(QuoteSourceLink)
            .where(QuoteSourceLink.source_id == source_id)
            .order_by(func.lower(Quote.text))
        )
        quotes = self.session.exec(statement).all()
        return [QuoteRead.model_validate(quote) for quote in quotes]

    def attach_source(self, quote_id: int, source_id: int) -> None:
        quote = self.session.get(Quote, quote_id)
        source = self.session.get(Source, source_id)
        if not quote or not source or source in quote.sources:
            return
        quote.sources.append(source)
        self.session.add(quote)
        self.session.commit()

    def detach_source(self, quote_id: int, source_id: int) -> None:
        quote = self.session.get(Quote, quote_id)
        source = self.session.get(Source, source_id)
        if not quote or not source or source not in quote.sources:
            return
        quote.sources.remove(source)
        self.session.add(quote)
        self.session.commit()

    def enumerate_all(self) -> Iterator[QuoteRead]:
        """
        Lazily yield every stored quote in insertion (id) order.

        Rows are streamed from the result rather than loaded as a list, so
        memory use does not grow with the size of the collection.
        """
        statement = select(Quote).order_by(col(Quote.id))
        for quote in self.session.exec(statement):
            yield QuoteRead.model_validate(quote)

    def exists(self, candidate: QuoteRead) -> bool:
        return self.session.get(Quote, candidate.id) is not None
