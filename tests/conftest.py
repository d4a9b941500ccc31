from __future__ import annotations

import pytest
from fakeredis import FakeRedis, FakeServer
from fakeredis.aioredis import FakeRedis as FakeAsyncRedis
from fastapi.testclient import TestClient

from ranking_api.main import create_app


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture()
def sync_redis(server: FakeServer) -> FakeRedis:
    return FakeRedis(server=server, decode_responses=True)


@pytest.fixture()
def client(server: FakeServer, sync_redis: FakeRedis):
    app = create_app(lambda: FakeAsyncRedis(server=server, decode_responses=True))

    with TestClient(app) as test_client:
        yield test_client, sync_redis
