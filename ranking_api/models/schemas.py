"""Pydantic response schemas for the public ranking API.

These models define the response contracts used by routes and exception
handlers.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


class RankingRow(BaseModel):
    user_id: str
    count: int = Field(ge=0)


class LanguageUserRankRow(BaseModel):
    language: str
    count: int = Field(ge=0)
    rank: int = Field(ge=1)


class HealthResponse(BaseModel):
    status: Literal["ok"]


class ReadyResponse(BaseModel):
    status: Literal["ok"]
