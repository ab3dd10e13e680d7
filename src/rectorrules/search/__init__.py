"""Filtering and keyword search over the rules catalog."""

from .query import (
    MatchMode,
    Relevance,
    RuleWithRelevance,
    filter_rules_by_rule_set,
    normalize_rule_set_name,
    search_rules,
    summarize_rule_set,
    tokenize_query,
)

__all__ = [
    "MatchMode",
    "Relevance",
    "RuleWithRelevance",
    "filter_rules_by_rule_set",
    "normalize_rule_set_name",
    "search_rules",
    "summarize_rule_set",
    "tokenize_query",
]
