"""Shared ranking types and the selector contracts every metric implements.

A metric answers two questions against its own store client:

* ``RankSelector`` returns one window of the metric's leaderboard for a filter
  value (for the language metric, one language).
* ``UserRankSelector`` returns a user's count and rank for every sub-label the
  metric tracks.

Selectors are stateless. The store handle is passed into every call so the
same selector instance can serve concurrent requests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)

StoreT = TypeVar("StoreT", contravariant=True)
RequestT = TypeVar("RequestT", contravariant=True)


@dataclass(frozen=True, slots=True)
class RangeQuery:
    """Half-open window ``[start, stop)`` over a sorted leaderboard."""

    start: int
    stop: int

    @property
    def is_empty(self) -> bool:
        return self.start < 0 or self.stop < 0 or self.start >= self.stop

    def __len__(self) -> int:
        if self.is_empty:
            return 0
        return self.stop - self.start


@dataclass(slots=True)
class LeaderboardEntry:
    user_id: str
    count: int


@dataclass(slots=True)
class UserBreakdownEntry:
    sub_label: str
    count: int
    rank: int


class StoreFailure(Exception):
    """Raised when the backing store could not complete a read."""

    def __init__(self, operation: str, message: str | None = None):
        self.operation = operation
        super().__init__(message or f"store read failed: {operation}")


class RankSelector(Protocol[StoreT, RequestT]):
    async def fetch_leaderboard(
        self, store: StoreT, request: RequestT
    ) -> list[LeaderboardEntry]: ...


class UserRankSelector(Protocol[StoreT]):
    async def fetch_user_breakdown(
        self, store: StoreT, user_id: str
    ) -> list[UserBreakdownEntry]: ...


def join_breakdown(
    counts: Iterable[tuple[str, int]],
    ranks: Iterable[tuple[str, int]],
) -> list[UserBreakdownEntry]:
    """Pair per-sub-label counts with ranks by sub-label, keeping count order.

    The two reads are independent, so a concurrent write can leave a sub-label
    in one of them only. Such sub-labels are dropped rather than paired with a
    neighbour's value.
    """
    rank_by_label = dict(ranks)
    entries: list[UserBreakdownEntry] = []
    seen: set[str] = set()
    for sub_label, count in counts:
        seen.add(sub_label)
        rank = rank_by_label.get(sub_label)
        if rank is None:
            logger.warning("No rank for sub-label %r; omitting it", sub_label)
            continue
        entries.append(UserBreakdownEntry(sub_label=sub_label, count=count, rank=rank))

    unmatched = rank_by_label.keys() - seen
    if unmatched:
        logger.warning("No count for sub-labels %s; omitting them", sorted(unmatched))
    return entries
