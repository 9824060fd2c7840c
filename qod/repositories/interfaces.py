"""
Repository interfaces.

Routers depend on these abstractions so that tests can swap in the in-memory
stubs from qod.test_utils.
"""

from abc import ABC, abstractmethod

from qod.repositories.models import QuoteCreate, QuoteRead, SourceCreate, SourceRead
from qod.selection.interfaces import PickSourceInterface


class QuoteRepositoryInterface(PickSourceInterface[QuoteRead]):
    @abstractmethod
    def add(self, quote: QuoteCreate) -> QuoteRead:
        """Add a quote, or return the existing one with the same text ignoring case."""
        pass

    @abstractmethod
    def get(self, quote_id: int) -> QuoteRead | None:
        pass

    @abstractmethod
    def find_by_text(self, text: str) -> QuoteRead | None:
        pass

    @abstractmethod
    def list_quotes(self) -> list[QuoteRead]:
        pass

    @abstractmethod
    def search(self, fragment: str) -> list[QuoteRead]:
        pass

    @abstractmethod
    def update_text(self, quote_id: int, text: str) -> QuoteRead | None:
        pass

    @abstractmethod
    def delete(self, quote_id: int) -> None:
        pass

    @abstractmethod
    def get_source_ids(self, quote_id: int) -> list[int]:
        pass

    @abstractmethod
    def get_by_source_id(self, source_id: int) -> list[QuoteRead]:
        pass

    @abstractmethod
    def attach_source(self, quote_id: int, source_id: int) -> None:
        pass

    @abstractmethod
    def detach_source(self, quote_id: int, source_id: int) -> None:
        pass


class SourceRepositoryInterface(ABC):
    @abstractmethod
    def add(self, source: SourceCreate) -> SourceRead:
        """Add a source, or return the existing one with the same name ignoring case."""
        pass

    @abstractmethod
    def get(self, source_id: int) -> SourceRead | None:
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> SourceRead | None:
        pass

    @abstractmethod
    def list_sources(self) -> list[SourceRead]:
        pass

    @abstractmethod
    def search(self, fragment: str) -> list[SourceRead]:
        pass

    @abstractmethod
    def get_by_ids(self, source_ids: list[int]) -> list[SourceRead]:
        pass

    @abstractmethod
    def rename(self, source_id: int, name: str) -> SourceRead | None:
        pass

    @abstractmethod
    def delete(self, source_id: int) -> None:
        pass
