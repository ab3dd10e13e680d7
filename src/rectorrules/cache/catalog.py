"""In-memory cache of the parsed rules catalog.

The cache loads lazily on first access and keeps the result for the life of
the process. Concurrent callers share one in-flight load, and a failed
reload keeps serving the previous snapshot when there is one.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from rectorrules.config import load_config
from rectorrules.core import Rule, RuleSet, TimingContext
from rectorrules.extraction import derive_rule_sets, parse_rules_markdown
from rectorrules.source import make_fetcher

logger = logging.getLogger(__name__)


class CacheStatus(str, Enum):
    """Current state of the rule cache."""
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Rules and rule sets from one successful load."""
    rules: tuple[Rule, ...]
    rule_sets: tuple[RuleSet, ...]
    fetched_at: datetime
    load_timings: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class CacheError:
    """Details of the most recent failed load."""
    message: str
    timestamp: datetime
    had_fallback: bool


class _PendingLoad:
    """Handle shared by every caller waiting on the same load."""

    def __init__(self) -> None:
        self._done = threading.Event()
        self._snapshot: CatalogSnapshot | None = None
        self._error: BaseException | None = None

    def resolve(self, snapshot: CatalogSnapshot) -> None:
        self._snapshot = snapshot
        self._done.set()

    def reject(self, error: BaseException) -> None:
        self._error = error
        self._done.set()

    def wait(self) -> CatalogSnapshot:
        self._done.wait()
        if self._error is not None:
            raise self._error
        return self._snapshot


class CatalogCache:
    """Lazily loaded, single-flight cache of Rector rules."""

    def __init__(self, fetch_document: Callable[[], str] | None = None):
        """Initialize the cache.

        Args:
            fetch_document: Zero-argument callable returning the rules
                markdown and raising FetchError on failure. Defaults to
                fetching the configured URL over HTTP.
        """
        self._fetch_document = fetch_document or make_fetcher(load_config())
        self._lock = threading.Lock()
        self._snapshot: CatalogSnapshot | None = None
        self._pending: _PendingLoad | None = None
        self._status = CacheStatus.EMPTY
        self._last_error: CacheError | None = None
        # Bumped by clear() so loads started earlier cannot install results
        self._generation = 0

    def get_rules(self) -> tuple[Rule, ...]:
        """Get all cached rules, loading them if necessary."""
        return self.get_snapshot().rules

    def get_rule_sets(self) -> tuple[RuleSet, ...]:
        """Get all cached rule sets, loading them if necessary."""
        return self.get_snapshot().rule_sets

    def get_snapshot(self) -> CatalogSnapshot:
        """Get the current snapshot, loading it if necessary."""
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        return self._ensure_loaded(force=False)

    def refresh(self) -> CatalogSnapshot:
        """Reload from the source, keeping the current snapshot on failure.

        Joins an in-flight load instead of starting a second one.

        Raises:
            Exception: The load error, only when there is no snapshot to
                fall back to
        """
        return self._ensure_loaded(force=True)

    def get_status(self) -> CacheStatus:
        return self._status

    def get_last_error(self) -> CacheError | None:
        return self._last_error

    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def peek_snapshot(self) -> CatalogSnapshot | None:
        """Return the current snapshot without ever triggering a load."""
        return self._snapshot

    def clear(self) -> None:
        """Drop all cached data so the next access fetches again."""
        with self._lock:
            self._generation += 1
            self._snapshot = None
            self._pending = None
            self._status = CacheStatus.EMPTY
            self._last_error = None

    def _ensure_loaded(self, force: bool) -> CatalogSnapshot:
        """Return loaded data, joining an in-flight load if there is one."""
        with self._lock:
            if not force and self._snapshot is not None:
                return self._snapshot

            pending = self._pending
            if pending is not None:
                owner = False
            else:
                owner = True
                pending = self._pending = _PendingLoad()
                generation = self._generation
                fallback = self._snapshot
                self._status = CacheStatus.LOADING

        if not owner:
            return pending.wait()

        try:
            snapshot = self._load(generation, fallback)
        except BaseException as e:
            # Waiters must be woken even on KeyboardInterrupt/SystemExit
            pending.reject(e)
            with self._lock:
                if self._status == CacheStatus.LOADING:
                    self._status = CacheStatus.LOADED if self._snapshot is not None else CacheStatus.EMPTY
            raise
        else:
            pending.resolve(snapshot)
            return snapshot
        finally:
            with self._lock:
                if self._pending is pending:
                    self._pending = None

    def _load(self, generation: int, fallback: CatalogSnapshot | None) -> CatalogSnapshot:
        """Fetch, parse and derive rules, then install the new snapshot.

        Falls back to the previous snapshot on error if it has rules.
        """
        timing = TimingContext()
        try:
            with timing.measure("fetch"):
                markdown = self._fetch_document()
            with timing.measure("parse"):
                rules = tuple(parse_rules_markdown(markdown))
            with timing.measure("derive"):
                rule_sets = tuple(derive_rule_sets(rules))
        except Exception as e:
            return self._handle_failure(e, generation, fallback)

        snapshot = CatalogSnapshot(
            rules=rules,
            rule_sets=rule_sets,
            fetched_at=datetime.now(timezone.utc),
            load_timings=timing.as_dict(),
        )
        logger.info("Loaded %d rules in %.0fms (%s)", len(rules), timing.total_ms, timing.summary())

        with self._lock:
            if generation == self._generation:
                self._snapshot = snapshot
                self._status = CacheStatus.LOADED
                self._last_error = None
            else:
                logger.debug("Cache cleared during load; discarding result")
        return snapshot

    def _handle_failure(
        self,
        error: Exception,
        generation: int,
        fallback: CatalogSnapshot | None,
    ) -> CatalogSnapshot:
        had_fallback = fallback is not None and len(fallback.rules) > 0
        message = str(error) or type(error).__name__

        with self._lock:
            if generation == self._generation:
                self._last_error = CacheError(
                    message=message,
                    timestamp=datetime.now(timezone.utc),
                    had_fallback=had_fallback,
                )
                self._status = CacheStatus.ERROR

        if not had_fallback:
            logger.error("Cache load failed with no fallback: %s", message)
            raise error

        logger.warning("Cache load failed, using stale data: %s", message)
        return fallback
