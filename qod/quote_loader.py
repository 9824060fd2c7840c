"""
Bulk loading of quotes and their sources from JSON.

The expected document is a list of objects such as:

    [
        {"text": "I'm your huckleberry.", "sources": ["Doc Holliday"]},
        {"text": "We begin where we are."}
    ]
"""

import json
import logging
from dataclasses import dataclass, asdict
from typing import Annotated

from pydantic import BaseModel, Field, ValidationError

from qod.repositories.interfaces import (
    QuoteRepositoryInterface,
    SourceRepositoryInterface,
)
from qod.repositories.models import QuoteCreate, SourceCreate

logger = logging.getLogger(__name__)


class QuoteFileError(Exception):
    """Raised when a quote document cannot be parsed."""


class QuoteEntry(BaseModel):
    text: str = Field(min_length=1, max_length=4096)
    sources: list[Annotated[str, Field(min_length=1, max_length=1024)]] = []


@dataclass
class LoadSummary:
    quotes: int = 0
    sources: int = 0
    attributions: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def parse_quote_document(content: str) -> list[QuoteEntry]:
    """
    Parse a JSON quote document.

    Raises:
        QuoteFileError: If the content is not valid JSON or an entry is malformed
    """
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise QuoteFileError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise QuoteFileError("Expected a JSON list of quote objects")

    entries: list[QuoteEntry] = []
    for index, item in enumerate(raw):
        try:
            entries.append(QuoteEntry.model_validate(item))
        except ValidationError as e:
            raise QuoteFileError(f"Invalid quote at position {index}: {e}") from e
    return entries


def load_quotes(
    entries: list[QuoteEntry],
    quote_repository: QuoteRepositoryInterface,
    source_repository: SourceRepositoryInterface,
) -> LoadSummary:
    """
    Store parsed entries, reusing quotes and sources that already exist.

    Returns:
        Counts of newly stored quotes and sources, and of attributions made
    """
    summary = LoadSummary()
    for entry in entries:
        is_new_quote = quote_repository.find_by_text(entry.text) is None
        quote = quote_repository.add(QuoteCreate(text=entry.text))
        summary.quotes += int(is_new_quote)

        attached = set(quote_repository.get_source_ids(quote.id))
        for name in entry.sources:
            is_new_source = source_repository.find_by_name(name) is None
            source = source_repository.add(SourceCreate(name=name))
            summary.sources += int(is_new_source)
            if source.id not in attached:
                quote_repository.attach_source(quote.id, source.id)
                attached.add(source.id)
                summary.attributions += 1

    logger.info(
        f"Loaded {summary.quotes} new quotes, {summary.sources} new sources "
        f"and {summary.attributions} attributions"
    )
    return summary
