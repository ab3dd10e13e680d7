"""Pydantic models for the web API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from rectorrules import __version__
from rectorrules.search import MatchMode


class FilterRequest(BaseModel):
    """Request body for filtering rules by rule set."""

    rule_set: str = Field(
        ..., min_length=1, description="Rule set name, e.g. php80, codequality, Type Declaration"
    )


class SearchRequest(BaseModel):
    """Request body for a keyword search."""

    query: str = Field(..., min_length=1, description="Keywords to search for")
    rule_set: str | None = Field(
        default=None, description="Restrict the search to one rule set"
    )
    mode: MatchMode = Field(
        default=MatchMode.ALL_TOKENS,
        description="all_tokens: every word must match; substring: whole query must match",
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "ok"
    version: str = __version__


class CacheErrorInfo(BaseModel):
    message: str
    timestamp: datetime
    had_fallback: bool


class CacheInfoResponse(BaseModel):
    """Response for the cache status endpoint."""

    status: Literal["empty", "loading", "loaded", "error"]
    cache_status: Literal["fresh", "stale", "error"]
    loaded: bool
    rule_count: int = 0
    fetched_at: datetime | None = None
    load_timings: dict[str, float] = Field(default_factory=dict)
    last_error: CacheErrorInfo | None = None
