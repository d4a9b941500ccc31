"""Redis client creation helpers used by application startup."""

from __future__ import annotations

from redis.asyncio import Redis

from ranking_api.settings import get_redis_socket_timeout, get_redis_url


def create_redis_client(redis_url: str | None = None) -> Redis:
    return Redis.from_url(
        redis_url or get_redis_url(),
        decode_responses=True,
        socket_timeout=get_redis_socket_timeout(),
    )
