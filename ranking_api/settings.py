"""Environment-driven settings used by application startup and routes."""

from __future__ import annotations

import os

DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_MAX_RANGE_LENGTH = 1000
DEFAULT_LOG_LEVEL = "INFO"


def get_redis_url() -> str:
    return os.getenv("REDIS_URL", DEFAULT_REDIS_URL)


def get_redis_socket_timeout() -> float | None:
    raw = os.getenv("REDIS_SOCKET_TIMEOUT")
    if not raw:
        return None
    return float(raw)


def get_max_range_length() -> int:
    raw = os.getenv("RANKING_MAX_RANGE_LENGTH")
    if not raw:
        return DEFAULT_MAX_RANGE_LENGTH
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"RANKING_MAX_RANGE_LENGTH must be an integer, got {raw!r}") from exc


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
