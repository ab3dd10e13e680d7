"""List, filter and search operations over the cached catalog.

These are the entry points used by the web API and the CLI. They read from
a CatalogCache passed in by the caller and return typed responses. Load
failures without a fallback propagate as the underlying exception.
"""

from rectorrules.cache import CacheStatus, CatalogCache
from rectorrules.core import EmptyQueryError
from rectorrules.search import (
    MatchMode,
    filter_rules_by_rule_set,
    search_rules as run_search,
    summarize_rule_set,
)
from .models import (
    CacheStatusLabel,
    FilterRulesResponse,
    ListRulesResponse,
    RuleModel,
    RuleSetModel,
    RuleWithRelevanceModel,
    SearchRulesResponse,
)


def cache_status_label(status: CacheStatus) -> CacheStatusLabel:
    """Collapse the internal cache status into what callers see."""
    if status == CacheStatus.LOADED:
        return "fresh"
    if status == CacheStatus.ERROR:
        return "error"
    return "stale"


def list_rules(cache: CatalogCache) -> ListRulesResponse:
    """Return every rule along with the derived rule sets."""
    snapshot = cache.get_snapshot()

    return ListRulesResponse(
        rules=[RuleModel.from_rule(rule) for rule in snapshot.rules],
        total_count=len(snapshot.rules),
        rule_sets=[RuleSetModel.from_rule_set(rs) for rs in snapshot.rule_sets],
        cache_status=cache_status_label(cache.get_status()),
        last_updated=snapshot.fetched_at.isoformat(),
    )


def filter_rules(cache: CatalogCache, rule_set: str) -> FilterRulesResponse:
    """Return the rules of one rule set.

    Args:
        cache: Catalog cache to read from
        rule_set: Rule set name; case and separators are ignored
    """
    filtered = filter_rules_by_rule_set(cache.get_rules(), rule_set)
    summary = summarize_rule_set(filtered, rule_set)

    return FilterRulesResponse(
        rules=[RuleModel.from_rule(rule) for rule in filtered],
        matched_count=len(filtered),
        rule_set=RuleSetModel.from_rule_set(summary) if summary else None,
        cache_status=cache_status_label(cache.get_status()),
    )


def search_rules(
    cache: CatalogCache,
    query: str,
    rule_set: str | None = None,
    mode: MatchMode = MatchMode.ALL_TOKENS,
) -> SearchRulesResponse:
    """Search rules by keyword, most relevant first.

    Args:
        cache: Catalog cache to read from
        query: Search text
        rule_set: Optional rule set to restrict the search to
        mode: How the query is matched against rule text

    Raises:
        EmptyQueryError: If the query is blank (checked before any load)
    """
    if not query.strip():
        raise EmptyQueryError("Query string cannot be empty")

    results = run_search(cache.get_rules(), query, rule_set_filter=rule_set, mode=mode)

    return SearchRulesResponse(
        rules=[RuleWithRelevanceModel.from_result(result) for result in results],
        matched_count=len(results),
        query=query,
        filtered_rule_set=rule_set or None,
        cache_status=cache_status_label(cache.get_status()),
    )
