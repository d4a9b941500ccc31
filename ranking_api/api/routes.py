"""HTTP route handlers for ranking queries and service health checks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from redis.asyncio import Redis

from ranking_api.api.errors import APIError, range_too_long
from ranking_api.models.schemas import (
    HealthResponse,
    LanguageUserRankRow,
    RankingRow,
    ReadyResponse,
)
from ranking_api.services.language import (
    LanguageRankingRequest,
    language_leaderboard,
    language_user_rank,
)
from ranking_api.services.ranking import RangeQuery
from ranking_api.storage.language_count import LanguageCountClient

router = APIRouter(prefix="/v3")


def get_redis(request: Request) -> Redis:
    return request.app.state.redis


def get_language_count_client(request: Request) -> LanguageCountClient:
    return request.app.state.language_count_client


def get_max_range_length(request: Request) -> int:
    return request.app.state.max_range_length


@router.get("/language_ranking", response_model=list[RankingRow])
async def get_language_ranking(
    from_: int = Query(alias="from", ge=0),
    to: int = Query(ge=0),
    language: str = Query(min_length=1),
    store: LanguageCountClient = Depends(get_language_count_client),
    max_length: int = Depends(get_max_range_length),
) -> list[RankingRow]:
    if to - from_ > max_length:
        raise range_too_long(max_length)

    query = LanguageRankingRequest(range=RangeQuery(start=from_, stop=to), language=language)
    rows = await language_leaderboard.fetch_leaderboard(store, query)
    return [RankingRow(user_id=r.user_id, count=r.count) for r in rows]


@router.get("/user/language_rank", response_model=list[LanguageUserRankRow])
async def get_user_language_rank(
    user: str = Query(min_length=1),
    store: LanguageCountClient = Depends(get_language_count_client),
) -> list[LanguageUserRankRow]:
    rows = await language_user_rank.fetch_user_breakdown(store, user)
    return [LanguageUserRankRow(language=r.sub_label, count=r.count, rank=r.rank) for r in rows]


# These probes are intended for infrastructure and do not need to appear in API docs.
@router.get("/healthz", response_model=HealthResponse, include_in_schema=False)
async def healthz() -> HealthResponse:
    return HealthResponse(status="ok")


@router.get("/readyz", response_model=ReadyResponse, include_in_schema=False)
async def readyz(redis: Redis = Depends(get_redis)) -> ReadyResponse:
    try:
        # Readiness verifies backing Redis connectivity, not just process liveness.
        is_ready = await redis.ping()
    except Exception as exc:
        raise APIError(
            code="REDIS_UNAVAILABLE",
            message="Redis readiness check failed",
            status_code=503,
        ) from exc

    if not is_ready:
        raise APIError(
            code="REDIS_UNAVAILABLE",
            message="Redis readiness check failed",
            status_code=503,
        )
    return ReadyResponse(status="ok")
