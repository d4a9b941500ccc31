"""FastAPI application wiring for routes, error handlers, and lifespan."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from redis.asyncio import Redis

from ranking_api.api.errors import APIError
from ranking_api.api.routes import router
from ranking_api.models.schemas import ErrorBody, ErrorResponse
from ranking_api.services.ranking import StoreFailure
from ranking_api.settings import get_log_level, get_max_range_length
from ranking_api.storage.language_count import RedisLanguageCountClient
from ranking_api.storage.redis import create_redis_client

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(redis_factory: Callable[[], Redis] | None = None) -> FastAPI:
    max_range_length = get_max_range_length()

    @asynccontextmanager
    async def app_lifespan(app: FastAPI):
        configure_logging()
        redis_client = (redis_factory or create_redis_client)()
        app.state.redis = redis_client
        app.state.language_count_client = RedisLanguageCountClient(redis_client)
        try:
            yield
        finally:
            await redis_client.aclose()

    app = FastAPI(title="Ranking API", version="1.0.0", lifespan=app_lifespan)
    app.state.max_range_length = max_range_length

    @app.exception_handler(APIError)
    async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
        payload = ErrorResponse(
            error=ErrorBody(code=exc.code, message=exc.message, details=exc.details),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=payload.model_dump(exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        payload = ErrorResponse(
            error=ErrorBody(
                code="VALIDATION_ERROR",
                message="Request validation failed",
                details={"errors": exc.errors()},
            ),
        )
        return JSONResponse(status_code=400, content=payload.model_dump(exclude_none=True))

    @app.exception_handler(StoreFailure)
    async def store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
        logger.error(
            "Store read %s failed for %s %s",
            exc.operation,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        payload = ErrorResponse(
            error=ErrorBody(code="INTERNAL_ERROR", message="Internal server error"),
        )
        return JSONResponse(status_code=500, content=payload.model_dump(exclude_none=True))

    app.include_router(router)
    return app


app = create_app()
