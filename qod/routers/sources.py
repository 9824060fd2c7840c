"""
Source endpoints for browsing and managing the people and works quotes come from.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from qod.dependencies import get_quote_repository, get_source_repository
from qod.repositories.interfaces import (
    QuoteRepositoryInterface,
    SourceRepositoryInterface,
)
from qod.repositories.models import (
    QuoteListResponse,
    SourceCreate,
    SourceListResponse,
    SourceRead,
    SourceWithQuotesResponse,
)
from qod.routers.response_builders import build_source_with_quotes_response
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sources", tags=["sources"])


def _get_source_or_404(
    source_id: int, source_repository: SourceRepositoryInterface
) -> SourceRead:
    source = source_repository.get(source_id)
    if not source:
        logger.error(f"Error finding a source with an id of {source_id}")
        raise HTTPException(status_code=404, detail="Source not found")
    return source


@router.get(
    "",
    summary="List all sources",
    description="Retrieve every source, ordered alphabetically by name",
)
async def list_sources(
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> SourceListResponse:
    return SourceListResponse(sources=source_repository.list_sources())


@router.get(
    "/search",
    summary="Search sources",
    description="Retrieve sources whose name contains the fragment, ignoring case",
)
async def search_sources(
    q: str = Query(..., min_length=1, description="Name fragment to match"),
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> SourceListResponse:
    return SourceListResponse(sources=source_repository.search(q))


@router.post(
    "",
    status_code=201,
    summary="Add a source",
    description="Add a source. If a source with the same name (ignoring case) exists, it is returned instead",
)
async def create_source(
    source: SourceCreate,
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> SourceRead:
    return source_repository.add(source)


@router.get(
    "/{source_id}",
    summary="Get a source",
    description="Retrieve a source by ID along with the quotes attributed to it",
    responses={404: {"description": "Source not found"}},
)
async def get_source(
    source_id: int,
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> SourceWithQuotesResponse:
    source = _get_source_or_404(source_id, source_repository)
    quotes = quote_repository.get_by_source_id(source_id)
    return build_source_with_quotes_response(source, quotes)


@router.put(
    "/{source_id}",
    summary="Rename a source",
    responses={
        404: {"description": "Source not found"},
        400: {"description": "Another source already has this name"},
    },
)
async def rename_source(
    source_id: int,
    update: SourceCreate,
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> SourceRead:
    _get_source_or_404(source_id, source_repository)

    duplicate = source_repository.find_by_name(update.name)
    if duplicate and duplicate.id != source_id:
        logger.error(f"Source {duplicate.id} already has the name of source {source_id}")
        raise HTTPException(status_code=400, detail="Invalid source")

    renamed = source_repository.rename(source_id, update.name)
    if not renamed:
        raise HTTPException(status_code=404, detail="Source not found")
    return renamed


@router.delete(
    "/{source_id}",
    status_code=204,
    summary="Delete a source",
    description="Delete a source; its quotes are kept but lose this attribution",
    responses={404: {"description": "Source not found"}},
)
async def delete_source(
    source_id: int,
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
) -> None:
    _get_source_or_404(source_id, source_repository)
    source_repository.delete(source_id)


@router.get(
    "/{source_id}/quotes",
    summary="List quotes for a source",
    description="Retrieve the quotes attributed to a source, ordered by text",
    responses={404: {"description": "Source not found"}},
)
async def list_source_quotes(
    source_id: int,
    source_repository: SourceRepositoryInterface = Depends(get_source_repository),
    quote_repository: QuoteRepositoryInterface = Depends(get_quote_repository),
) -> QuoteListResponse:
    _get_source_or_404(source_id, source_repository)
    return QuoteListResponse(quotes=quote_repository.get_by_source_id(source_id))
