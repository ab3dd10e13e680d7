"""Web API for the Rector rules catalog."""

from rectorrules.web.app import app, get_cache
from rectorrules.web.models import (
    CacheInfoResponse,
    FilterRequest,
    HealthResponse,
    SearchRequest,
)

__all__ = [
    "app",
    "get_cache",
    "CacheInfoResponse",
    "FilterRequest",
    "HealthResponse",
    "SearchRequest",
]
