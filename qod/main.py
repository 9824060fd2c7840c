from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging
import random

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from qod.routers import general, quotes, sources
from qod.config import settings
from qod.cors_config import get_cors_config
from qod.database import create_db_and_tables, engine
from qod.repositories.models import QuoteRead
from qod.repositories.quote_source import EngineQuoteSource
from qod.selection.daily_pick import DailyPickCache

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    create_db_and_tables()
    logger.info("Database tables are ready")
    yield


app = FastAPI(
    title="Quote of the Day",
    description="""
    A small FastAPI service for collecting quotes and serving a quote of the day.

    ## Features

    * **Quote of the Day**: One uniformly chosen quote per day, reselected when it is deleted
    * **Random Quotes**: A fresh uniformly chosen quote on every request
    * **Quotes and Sources**: Create, search, update and delete quotes and their sources
    * **Attribution**: Attach any number of sources to a quote

    ## Getting Started

    1. Add quotes via `POST /quotes` and sources via `POST /sources`
    2. Attribute a quote with `PUT /quotes/{quote_id}/sources/{source_id}`
    3. Read today's quote via `/quotes/qod`
    """,
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "general",
            "description": "General endpoints for health checks and basic info",
        },
        {
            "name": "quotes",
            "description": "Quote of the day, random quotes and quote management",
        },
        {
            "name": "sources",
            "description": "Browse and manage the people and works quotes come from",
        },
    ],
)

# One quote of the day slot for the whole process
app.state.quote_of_the_day_cache = DailyPickCache[QuoteRead](
    EngineQuoteSource(engine), random.Random(settings.qod_seed)
)

# Configure CORS
cors_config = get_cors_config(allowed_origins=settings.cors_allow_origin)
app.add_middleware(CORSMiddleware, **cors_config)

# Include routers
app.include_router(general.router)
app.include_router(quotes.router)
app.include_router(sources.router)
