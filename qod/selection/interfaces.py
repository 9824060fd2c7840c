from abc import ABC, abstractmethod
from typing import Generic, Iterable, Protocol, TypeVar

T = TypeVar("T")


class EmptyCollectionError(Exception):
    """Raised when there are no candidates to select from."""


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from [0, stop), e.g. random.Random."""

    def randrange(self, stop: int) -> int: ...


class PickSourceInterface(ABC, Generic[T]):
    """Backing collection that a daily pick is drawn from."""

    @abstractmethod
    def enumerate_all(self) -> Iterable[T]:
        """Yield every candidate currently stored, in natural order."""
        pass

    @abstractmethod
    def exists(self, candidate: T) -> bool:
        """Report whether a previously returned candidate is still stored."""
        pass
