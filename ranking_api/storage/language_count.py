"""Language count reads backed by Redis sorted sets.

Layout, populated by the ingestion side:

* ``lang:count:{language}``: sorted set of user ids scored with the negated
  accepted count, so an ascending ``ZRANGE`` walks the leaderboard from the
  highest count down with ties in ascending user id order.
* ``lang:user:{user_id}``: hash of language to accepted count.
* ``lang:languages``: set of every language that has a leaderboard.
"""

from __future__ import annotations

from typing import Protocol

from redis.asyncio import Redis
from redis.exceptions import RedisError

from ranking_api.services.ranking import RangeQuery, StoreFailure

LANGUAGES_KEY = "lang:languages"


def language_count_key(language: str) -> str:
    return f"lang:count:{language}"


def user_language_count_key(user_id: str) -> str:
    return f"lang:user:{user_id}"


class LanguageCountClient(Protocol):
    async def load_language_count_in_range(
        self, language: str, range_query: RangeQuery
    ) -> list[tuple[str, int]]: ...

    async def load_users_language_count(self, user_id: str) -> list[tuple[str, int]]: ...

    async def load_users_language_count_rank(self, user_id: str) -> list[tuple[str, int]]: ...


class RedisLanguageCountClient:
    def __init__(self, redis_client: Redis):
        self.redis = redis_client

    async def load_language_count_in_range(
        self, language: str, range_query: RangeQuery
    ) -> list[tuple[str, int]]:
        if range_query.is_empty:
            return []
        try:
            rows = await self.redis.zrange(
                language_count_key(language),
                range_query.start,
                range_query.stop - 1,
                withscores=True,
            )
        except RedisError as exc:
            raise StoreFailure("load_language_count_in_range") from exc
        return [(user_id, int(-score)) for user_id, score in rows]

    async def load_users_language_count(self, user_id: str) -> list[tuple[str, int]]:
        try:
            counts = await self.redis.hgetall(user_language_count_key(user_id))
        except RedisError as exc:
            raise StoreFailure("load_users_language_count") from exc
        return sorted((language, int(count)) for language, count in counts.items())

    async def load_users_language_count_rank(self, user_id: str) -> list[tuple[str, int]]:
        try:
            languages = sorted(await self.redis.smembers(LANGUAGES_KEY))
            if not languages:
                return []

            async with self.redis.pipeline(transaction=False) as pipe:
                for language in languages:
                    pipe.zscore(language_count_key(language), user_id)
                scores = await pipe.execute()

            scored = [
                (language, score)
                for language, score in zip(languages, scores)
                if score is not None
            ]
            if not scored:
                return []

            # Rank is one plus the number of users with a strictly higher count.
            async with self.redis.pipeline(transaction=False) as pipe:
                for language, score in scored:
                    pipe.zcount(language_count_key(language), "-inf", f"({score}")
                higher = await pipe.execute()
        except RedisError as exc:
            raise StoreFailure("load_users_language_count_rank") from exc

        return [
            (language, int(above) + 1)
            for (language, _), above in zip(scored, higher)
        ]
