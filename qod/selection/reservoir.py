"""
Single-pass uniform selection over a sequence of unknown length.

Implements reservoir sampling (Algorithm R) with a reservoir of one: the n-th
offered candidate replaces the current pick with probability 1/n, which leaves
every offered candidate as the final pick with probability exactly 1/n.
"""

import random
from typing import Generic, Iterable, TypeVar, cast

from qod.selection.interfaces import EmptyCollectionError, RandomSource

T = TypeVar("T")


class ReservoirSelector(Generic[T]):
    """Running uniform pick over the candidates offered so far."""

    def __init__(self, rng: RandomSource | None = None):
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._count = 0
        self._current: T | None = None

    @property
    def count(self) -> int:
        return self._count

    def offer(self, candidate: T) -> T:
        """
        Offer the next candidate from the sequence.

        Args:
            candidate: The next item of the sequence (must not be None)

        Returns:
            The current pick after this offer, which may be unchanged
        """
        self._count += 1
        if self._rng.randrange(self._count) == 0:
            self._current = candidate
        # The first offer always wins, so current is set from here on
        return cast(T, self._current)

    def peek(self) -> T | None:
        return self._current

    def reset(self) -> None:
        self._count = 0
        self._current = None


def select_random(candidates: Iterable[T], rng: RandomSource | None = None) -> T:
    """
    Pick one item uniformly at random from an iterable in a single pass.

    Args:
        candidates: Any iterable, consumed exactly once
        rng: Optional random source; a fresh generator is used when omitted

    Returns:
        The selected item

    Raises:
        EmptyCollectionError: If the iterable yields nothing
    """
    selector: ReservoirSelector[T] = ReservoirSelector(rng)
    for candidate in candidates:
        selector.offer(candidate)

    pick = selector.peek()
    if pick is None:
        raise EmptyCollectionError("No candidates to select from")
    return pick
