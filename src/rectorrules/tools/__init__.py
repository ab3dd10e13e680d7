"""Catalog operations: list, filter and search."""

from .formatting import (
    Colors,
    format_filter_response,
    format_list_response,
    format_search_response,
)
from .handlers import cache_status_label, filter_rules, list_rules, search_rules
from .models import (
    FilterRulesResponse,
    ListRulesResponse,
    RuleModel,
    RuleSetModel,
    RuleWithRelevanceModel,
    SearchRulesResponse,
)

__all__ = [
    # Operations
    "cache_status_label",
    "filter_rules",
    "list_rules",
    "search_rules",
    # Response models
    "FilterRulesResponse",
    "ListRulesResponse",
    "RuleModel",
    "RuleSetModel",
    "RuleWithRelevanceModel",
    "SearchRulesResponse",
    # Formatting
    "Colors",
    "format_filter_response",
    "format_list_response",
    "format_search_response",
]
