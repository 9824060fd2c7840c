"""Helper functions for building API response models."""

from qod.repositories.models import (
    QuoteRead,
    QuoteWithSourcesResponse,
    SourceRead,
    SourceWithQuotesResponse,
)


def build_quote_with_sources_response(
    quote: QuoteRead, sources: list[SourceRead]
) -> QuoteWithSourcesResponse:
    """Build a quote response that embeds its attributed sources."""
    return QuoteWithSourcesResponse(
        id=quote.id,
        text=quote.text,
        created_at=quote.created_at,
        sources=sources,
    )


def build_source_with_quotes_response(
    source: SourceRead, quotes: list[QuoteRead]
) -> SourceWithQuotesResponse:
    """Build a source response that embeds the quotes attributed to it."""
    return SourceWithQuotesResponse(
        id=source.id,
        name=source.name,
        created_at=source.created_at,
        quotes=quotes,
    )
