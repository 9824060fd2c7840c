"""
Quote endpoints: quote of the day, random quotes, quote management and attribution.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from qod.dependencies import (
    Clock,
    get_clock,
    get_quote_of_the_day_cache,
    get_quote_repository,
    get_random_source,
    get_source_repository,
)
from qod.repositories.interfaces import (
    QuoteRepositoryInterface,
    SourceRepositoryInterface,
)
from qod.repositories.models import (
    QuoteCreate,
    QuoteListResponse,
    QuoteRead,
    QuoteWithSourcesResponse,
    SourceRead,
)
from qod.routers.response_builders import build_quote_with_sources_response
from qod.selection.daily_pick import DailyPickCache
from qod.selection.interfaces import EmptyCollectionError, RandomSource
from qod.selection.reservoir import select_random
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


def _get_quote_or_404(
    quote_id: int, quote_repository: QuoteRepositoryInterface
) -> QuoteRead:
    quote = quote_repository.get(quote_id)
    if not quote:
        logger.error(f"Error finding a quote with an id of {quote_id}")
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


def _with_sources(
    quote: QuoteRead,
    quote_repository: QuoteRepositoryInterface,
    source_repository: SourceRepositoryInterface,
) -> QuoteWithSourcesResponse:
    sources = source_repository.get_by_ids(quote_repository.get_source_ids(quote.id))
    return build_quote_with_sources_response(quote, sources)


@router.get(
    "",
    summary="List all quotes",
    description="Retrieve every quote, ordered alphabetically by text",
    response_description="List of quotes",
)
async def list_quotes(
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> QuoteListResponse:
    return QuoteListResponse(quotes=quote_repository.list_quotes())


@router.get(
    "/search",
    summary="Search quotes",
    description="Retrieve quotes whose text contains the fragment, ignoring case",
    response_description="Matching quotes ordered alphabetically by text",
)
async def search_quotes(
    q: str = Query(..., min_length=1, description="Text fragment to match"),
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> QuoteListResponse:
    return QuoteListResponse(quotes=quote_repository.search(q))


@router.get(
    "/random",
    summary="Get a random quote",
    description="""
    Select a quote uniformly at random with a single pass over all quotes.

    Unlike `/quotes/qod`, successive requests will usually return different quotes
    unless the collection is small.
    """,
    response_description="A randomly selected quote with its sources",
    responses={404: {"description": "No quotes found in the database"}},
)
async def get_random_quote(
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
    rng: RandomSource = Depends(get_random_source),
) -> QuoteWithSourcesResponse:
    try:
        quote = select_random(quote_repository.enumerate_all(), rng)
    except EmptyCollectionError:
        logger.error("Error finding a random quote")
        raise HTTPException(status_code=404, detail="No quotes found")

    return _with_sources(quote, quote_repository, source_repository)


@router.get(
    "/qod",
    summary="Get the quote of the day",
    description="""
    Retrieve the quote of the day.

    The selection is kept for the rest of the (UTC) day, so requests made on the
    same day return the same quote. A new quote is chosen when the day changes
    or when the current one is deleted.
    """,
    response_description="The quote of the day with its sources",
    responses={404: {"description": "No quotes found in the database"}},
)
async def get_quote_of_the_day(
    cache: DailyPickCache[QuoteRead] = Depends(get_quote_of_the_day_cache),
    clock: Clock = Depends(get_clock),
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> QuoteWithSourcesResponse:
    try:
        quote = cache.get_pick(clock())
    except EmptyCollectionError:
        logger.error("Error finding a quote of the day")
        raise HTTPException(status_code=404, detail="No quotes found")

    # The cached pick may have been edited or deleted since it was selected
    current = quote_repository.get(quote.id)
    if current is None:
        logger.error(f"Quote of the day {quote.id} disappeared while serving it")
        raise HTTPException(status_code=404, detail="No quotes found")

    return _with_sources(current, quote_repository, source_repository)


@router.post(
    "",
    status_code=201,
    summary="Add a quote",
    description="Add a quote. If a quote with the same text (ignoring case) exists, it is returned instead",
    response_description="The stored quote",
)
async def create_quote(
    quote: QuoteCreate,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> QuoteRead:
    return quote_repository.add(quote)


@router.get(
    "/{quote_id}",
    summary="Get a quote",
    description="Retrieve a quote by ID along with its sources",
    responses={404: {"description": "Quote not found"}},
)
async def get_quote(
    quote_id: int,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> QuoteWithSourcesResponse:
    quote = _get_quote_or_404(quote_id, quote_repository)
    return _with_sources(quote, quote_repository, source_repository)


@router.put(
    "/{quote_id}",
    summary="Update a quote",
    description="Replace the text of an existing quote",
    responses={
        404: {"description": "Quote not found"},
        400: {"description": "Another quote already has this text"},
    },
)
async def update_quote(
    quote_id: int,
    update: QuoteCreate,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> QuoteRead:
    _get_quote_or_404(quote_id, quote_repository)

    duplicate = quote_repository.find_by_text(update.text)
    if duplicate and duplicate.id != quote_id:
        logger.error(f"Quote {duplicate.id} already has the text of quote {quote_id}")
        raise HTTPException(status_code=400, detail="Invalid quote")

    updated = quote_repository.update_text(quote_id, update.text)
    if not updated:
        raise HTTPException(status_code=404, detail="Quote not found")
    return updated


@router.delete(
    "/{quote_id}",
    status_code=204,
    summary="Delete a quote",
    description="Delete a quote and its source attributions",
    responses={404: {"description": "Quote not found"}},
)
async def delete_quote(
    quote_id: int,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> None:
    _get_quote_or_404(quote_id, quote_repository)
    quote_repository.delete(quote_id)


@router.put(
    "/{quote_id}/sources/{source_id}",
    summary="Attribute a quote to a source",
    responses={404: {"description": "Quote or source not found"}},
)
async def attach_source(
    quote_id: int,
    source_id: int,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> SourceRead:
    _get_quote_or_404(quote_id, quote_repository)
    source = source_repository.get(source_id)
    if not source:
        logger.error(f"Error finding a source with an id of {source_id}")
        raise HTTPException(status_code=404, detail="Source not found")

    quote_repository.attach_source(quote_id, source_id)
    return source


@router.get(
    "/{quote_id}/sources/{source_id}",
    summary="Get an attributed source",
    description="Retrieve a source only if it is attributed to the quote",
    responses={404: {"description": "Quote or source not found, or not attributed"}},
)
async def get_quote_source(
    quote_id: int,
    source_id: int,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> SourceRead:
    _get_quote_or_404(quote_id, quote_repository)
    source = source_repository.get(source_id)
    if not source or source_id not in quote_repository.get_source_ids(quote_id):
        logger.error(f"Source {source_id} is not attributed to quote {quote_id}")
        raise HTTPException(status_code=404, detail="Source not found")
    return source


@router.delete(
    "/{quote_id}/sources/{source_id}",
    status_code=204,
    summary="Remove an attribution",
    responses={404: {"description": "Quote or source not found, or not attributed"}},
)
async def detach_source(
    quote_id: int,
    source_id: int,
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> None:
    _get_quote_or_404(quote_id, quote_repository)
    if source_id not in quote_repository.get_source_ids(quote_id):
        logger.error(f"Source {source_id} is not attributed to quote {quote_id}")
        raise HTTPException(status_code=404, detail="Source not found")

    quote_repository.detach_source(quote_id, source_id)
