"""Per-language accepted count metric."""

from __future__ import annotations

from dataclasses import dataclass

from ranking_api.services.ranking import (
    LeaderboardEntry,
    RangeQuery,
    RankSelector,
    UserBreakdownEntry,
    UserRankSelector,
    join_breakdown,
)
from ranking_api.storage.language_count import LanguageCountClient


@dataclass(frozen=True, slots=True)
class LanguageRankingRequest:
    range: RangeQuery
    language: str


class LanguageRanking:
    async def fetch_leaderboard(
        self, store: LanguageCountClient, request: LanguageRankingRequest
    ) -> list[LeaderboardEntry]:
        if request.range.is_empty:
            return []
        rows = await store.load_language_count_in_range(request.language, request.range)
        return [
            LeaderboardEntry(user_id=user_id, count=count)
            for user_id, count in rows[: len(request.range)]
        ]

    async def fetch_user_breakdown(
        self, store: LanguageCountClient, user_id: str
    ) -> list[UserBreakdownEntry]:
        counts = await store.load_users_language_count(user_id)
        ranks = await store.load_users_language_count_rank(user_id)
        # Zero counts are dropped after the join; the rank read still reports them.
        return [entry for entry in join_breakdown(counts, ranks) if entry.count > 0]


_language_ranking = LanguageRanking()
language_leaderboard: RankSelector[LanguageCountClient, LanguageRankingRequest] = _language_ranking
language_user_rank: UserRankSelector[LanguageCountClient] = _language_ranking
