from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime, timezone

metadata = SQLModel.metadata


class QuoteSourceLink(SQLModel, table=True):
    """Association table attributing quotes to sources"""

    quote_id: int | None = Field(default=None, foreign_key="quote.id", primary_key=True)
    source_id: int | None = Field(
        default=None, foreign_key="source.id", primary_key=True
    )


class QuoteBase(SQLModel):
    """Base model with shared fields"""

    text: str = Field(min_length=1, max_length=4096, unique=True)


# Type alias - QuoteCreate is identical to QuoteBase
QuoteCreate = QuoteBase


class Quote(QuoteBase, table=True):
    """Database table model"""

    # SQLite must not hand the id of a deleted row to a new one
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationship
    sources: list["Source"] = Relationship(
        back_populates="quotes", link_model=QuoteSourceLink
    )


class QuoteRead(QuoteBase):
    """Model for repository operations and API responses (id is guaranteed to exist)"""

    id: int
    created_at: datetime


class SourceBase(SQLModel):
    """Base model with shared fields"""

    name: str = Field(min_length=1, max_length=1024, unique=True)


# Type alias - SourceCreate is identical to SourceBase
SourceCreate = SourceBase


class Source(SourceBase, table=True):
    """Database table model"""

    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationship
    quotes: list[Quote] = Relationship(
        back_populates="sources", link_model=QuoteSourceLink
    )


class SourceRead(SourceBase):
    """Model for repository operations and API responses (id is guaranteed to exist)"""

    id: int
    created_at: datetime


class QuoteWithSourcesResponse(QuoteRead):
    sources: list[SourceRead]


class SourceWithQuotesResponse(SourceRead):
    quotes: list[QuoteRead]


class QuoteListResponse(SQLModel):
    quotes: list[QuoteRead]


class SourceListResponse(SQLModel):
    sources: list[SourceRead]
