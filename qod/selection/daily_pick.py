"""
Daily pick cache.

Holds one uniformly chosen candidate per day key and re-runs a full reservoir
pass when the day rolls over or the cached candidate has been deleted.
"""

import logging
import random
import threading
from datetime import datetime, timezone
from typing import Generic, TypeVar

from qod.selection.interfaces import (
    EmptyCollectionError,
    PickSourceInterface,
    RandomSource,
)
from qod.selection.reservoir import ReservoirSelector

logger = logging.getLogger(__name__)

T = TypeVar("T")

SECONDS_PER_DAY = 24 * 60 * 60


def day_key(now: datetime) -> int:
    """
    Number of whole UTC days between the Unix epoch and `now`.

    Naive datetimes are interpreted as UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(now.timestamp() // SECONDS_PER_DAY)


class DailyPickCache(Generic[T]):
    """
    One cached pick slot backed by a pick source.

    The freshness check and the refresh both run under the same lock, so
    concurrent callers that find the slot stale trigger a single enumeration
    and all read back the value it produced. The random source is only drawn
    from while that lock is held.
    """

    def __init__(self, source: PickSourceInterface[T], rng: RandomSource | None = None):
        self.source = source
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._lock = threading.Lock()
        self._cached_item: T | None = None
        self._cached_day_key: int | None = None

    def get_pick(self, now: datetime) -> T:
        """
        Return the pick for the day containing `now`.

        Args:
            now: The instant the pick is requested for

        Returns:
            The cached pick, or a freshly selected one if the cache was stale

        Raises:
            EmptyCollectionError: If the source has no candidates
        """
        key = day_key(now)
        with self._lock:
            item = self._cached_item
            if (
                item is not None
                and self._cached_day_key == key
                and self.source.exists(item)
            ):
                logger.debug(f"Daily pick cache hit for day {key}")
                return item
            return self._refresh(key)

    def invalidate(self) -> None:
        """Force the next get_pick call to select a new candidate."""
        with self._lock:
            self._cached_item = None
            self._cached_day_key = None

    def _refresh(self, key: int) -> T:
        selector: ReservoirSelector[T] = ReservoirSelector(self._rng)
        for candidate in self.source.enumerate_all():
            selector.offer(candidate)

        pick = selector.peek()
        if pick is None:
            self._cached_item = None
            self._cached_day_key = None
            raise EmptyCollectionError("No candidates available for the daily pick")

        self._cached_item = pick
        self._cached_day_key = key
        logger.info(f"Selected daily pick for day {key} from {selector.count} candidates")
        return pick
