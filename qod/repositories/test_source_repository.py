"""
Tests for SourceRepository methods using in-memory database.
"""

import pytest
from qod.repositories.quote_repository import QuoteRepository
from qod.repositories.source_repository import SourceRepository
from qod.repositories.models import QuoteCreate, SourceCreate, SourceRead


@pytest.fixture(name="sample_sources")
def sample_sources_fixture(source_repo: SourceRepository) -> list[SourceRead]:
    names = ["Wyatt Earp", "doc Holliday", "Pema Chödrön"]
    return [source_repo.add(SourceCreate(name=name)) for name in names]


def test_add_new_source(source_repo: SourceRepository):
    result = source_repo.add(SourceCreate(name="Marcus Aurelius"))

    assert result.id is not None
    assert result.name == "Marcus Aurelius"


def test_add_duplicate_source_ignoring_case(source_repo: SourceRepository):
    first = source_repo.add(SourceCreate(name="Seneca"))
    second = source_repo.add(SourceCreate(name="seneca"))

    assert second.id == first.id
    assert len(source_repo.list_sources()) == 1


def test_get_nonexistent_source(source_repo: SourceRepository):
    assert source_repo.get(999) is None


def test_find_by_name(source_repo: SourceRepository, sample_sources: list[SourceRead]):
    result = source_repo.find_by_name("WYATT EARP")

    assert result is not None
    assert result.id == sample_sources[0].id
    assert source_repo.find_by_name("Nobody") is None


def test_list_sources_ordered_by_name_ignoring_case(
    source_repo: SourceRepository, sample_sources: list[SourceRead]
):
    result = source_repo.list_sources()

    assert [s.name for s in result] == ["doc Holliday", "Pema Chödrön", "Wyatt Earp"]


def test_search(source_repo: SourceRepository, sample_sources: list[SourceRead]):
    result = source_repo.search("EARP")

    assert [s.name for s in result] == ["Wyatt Earp"]


def test_get_by_ids_some_exist(
    source_repo: SourceRepository, sample_sources: list[SourceRead]
):
    result = source_repo.get_by_ids([sample_sources[0].id, 999])

    assert [s.id for s in result] == [sample_sources[0].id]


def test_get_by_ids_empty_list(source_repo: SourceRepository):
    assert source_repo.get_by_ids([]) == []


def test_rename(source_repo: SourceRepository, sample_sources: list[SourceRead]):
    result = source_repo.rename(sample_sources[1].id, "Doc Holliday")

    assert result is not None
    assert result.name == "Doc Holliday"


def test_rename_nonexistent(source_repo: SourceRepository):
    assert source_repo.rename(999, "Nobody") is None


def test_delete_source_keeps_quotes(
    source_repo: SourceRepository,
    quote_repo: QuoteRepository,
    sample_sources: list[SourceRead],
):
    quote = quote_repo.add(QuoteCreate(text="I'm your huckleberry."))
    quote_repo.attach_source(quote.id, sample_sources[1].id)

    source_repo.delete(sample_sources[1].id)

    assert source_repo.get(sample_sources[1].id) is None
    assert quote_repo.get(quote.id) is not None
    assert quote_repo.get_source_ids(quote.id) == []


def test_delete_nonexistent_source(
    source_repo: SourceRepository, sample_sources: list[SourceRead]
):
    source_repo.delete(999)

    assert len(source_repo.list_sources()) == 3


def test_deleted_source_id_is_not_reused(source_repo: SourceRepository):
    first = source_repo.add(SourceCreate(name="Wyatt Earp"))
    second = source_repo.add(SourceCreate(name="Doc Holliday"))
    source_repo.delete(second.id)

    added = source_repo.add(SourceCreate(name="Tombstone"))

    assert added.id > second.id > first.id
