"""FastAPI application for the Rector rules catalog API."""

import asyncio
import functools
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from rectorrules import __version__
from rectorrules.cache import CatalogCache
from rectorrules.config import configure_logging, load_config
from rectorrules.core import EmptyQueryError, FetchError
from rectorrules.source import make_fetcher
from rectorrules.tools import (
    FilterRulesResponse,
    ListRulesResponse,
    SearchRulesResponse,
    cache_status_label,
    filter_rules,
    list_rules,
    search_rules,
)
from rectorrules.web.models import (
    CacheErrorInfo,
    CacheInfoResponse,
    FilterRequest,
    HealthResponse,
    SearchRequest,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    config = load_config()
    configure_logging(config.log_level)
    # Cache is created empty; the first request triggers the fetch
    app.state.cache = CatalogCache(make_fetcher(config))
    yield
    app.state.cache.clear()
    app.state.cache = None


app = FastAPI(
    title="Rector Rules Catalog API",
    description="Query Rector refactoring rules by rule set or keyword",
    version=__version__,
    lifespan=lifespan,
)


def get_cache(request: Request) -> CatalogCache:
    """Dependency providing the application's catalog cache."""
    return request.app.state.cache


async def run_blocking(func, *args, **kwargs):
    """Run a cache call in the default executor so loads don't block the loop."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"detail": f"Error loading Rector rules: {exc}"},
    )


@app.exception_handler(EmptyQueryError)
async def empty_query_handler(request: Request, exc: EmptyQueryError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@app.get("/api/rules", response_model=ListRulesResponse)
async def list_all_rules(cache: CatalogCache = Depends(get_cache)) -> ListRulesResponse:
    """List all rules with their rule sets."""
    return await run_blocking(list_rules, cache)


@app.post("/api/rules/filter", response_model=FilterRulesResponse)
async def filter_by_rule_set(
    request: FilterRequest,
    cache: CatalogCache = Depends(get_cache),
) -> FilterRulesResponse:
    """Filter rules by rule set (e.g. php80, codequality, typedeclaration)."""
    return await run_blocking(filter_rules, cache, request.rule_set)


@app.post("/api/rules/search", response_model=SearchRulesResponse)
async def search(
    request: SearchRequest,
    cache: CatalogCache = Depends(get_cache),
) -> SearchRulesResponse:
    """Search rules by keyword; name matches rank above description and tag matches."""
    return await run_blocking(
        search_rules, cache, request.query, rule_set=request.rule_set, mode=request.mode
    )


def _cache_info(cache: CatalogCache) -> CacheInfoResponse:
    status = cache.get_status()
    error = cache.get_last_error()
    snapshot = cache.peek_snapshot()

    return CacheInfoResponse(
        status=status.value,
        cache_status=cache_status_label(status),
        loaded=snapshot is not None,
        rule_count=len(snapshot.rules) if snapshot else 0,
        fetched_at=snapshot.fetched_at if snapshot else None,
        load_timings=snapshot.load_timings if snapshot else {},
        last_error=CacheErrorInfo(
            message=error.message,
            timestamp=error.timestamp,
            had_fallback=error.had_fallback,
        ) if error else None,
    )


@app.get("/api/cache", response_model=CacheInfoResponse)
async def cache_info(cache: CatalogCache = Depends(get_cache)) -> CacheInfoResponse:
    """Report cache status without loading anything."""
    return _cache_info(cache)


@app.post("/api/cache/refresh", response_model=CacheInfoResponse)
async def refresh_cache(cache: CatalogCache = Depends(get_cache)) -> CacheInfoResponse:
    """Reload the rules document, keeping stale data if the reload fails."""
    await run_blocking(cache.refresh)
    return _cache_info(cache)


@app.delete("/api/cache", response_model=CacheInfoResponse)
async def clear_cache(cache: CatalogCache = Depends(get_cache)) -> CacheInfoResponse:
    """Drop cached rules; the next query fetches again."""
    cache.clear()
    return _cache_info(cache)
