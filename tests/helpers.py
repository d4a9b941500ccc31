from __future__ import annotations

from ranking_api.services.ranking import RangeQuery, StoreFailure
from ranking_api.storage.language_count import (
    LANGUAGES_KEY,
    language_count_key,
    user_language_count_key,
)


def seed_language_counts(redis, language: str, counts: dict[str, int]) -> None:
    redis.sadd(LANGUAGES_KEY, language)
    redis.zadd(language_count_key(language), {user_id: -count for user_id, count in counts.items()})
    for user_id, count in counts.items():
        redis.hset(user_language_count_key(user_id), language, count)


class MemoryLanguageCountClient:
    """In-process language count store ordered the same way as the Redis one."""

    def __init__(
        self,
        counts: dict[str, dict[str, int]] | None = None,
        ranks: dict[str, dict[str, int]] | None = None,
        failing: set[str] | None = None,
    ):
        # language -> user_id -> count
        self.counts = counts or {}
        # user_id -> language -> rank; derived from counts when not given
        self.ranks = ranks
        self.failing = failing or set()
        self.calls: list[str] = []

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise StoreFailure(operation)

    async def load_language_count_in_range(
        self, language: str, range_query: RangeQuery
    ) -> list[tuple[str, int]]:
        self._record("load_language_count_in_range")
        board = sorted(self.counts.get(language, {}).items(), key=lambda row: (-row[1], row[0]))
        return board[range_query.start : range_query.stop]

    async def load_users_language_count(self, user_id: str) -> list[tuple[str, int]]:
        self._record("load_users_language_count")
        return sorted(
            (language, users[user_id])
            for language, users in self.counts.items()
            if user_id in users
        )

    async def load_users_language_count_rank(self, user_id: str) -> list[tuple[str, int]]:
        self._record("load_users_language_count_rank")
        if self.ranks is not None:
            return sorted(self.ranks.get(user_id, {}).items())
        rows = []
        for language, users in sorted(self.counts.items()):
            if user_id not in users:
                continue
            higher = sum(1 for count in users.values() if count > users[user_id])
            rows.append((language, higher + 1))
        return rows
