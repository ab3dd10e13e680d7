"""Core domain models for the rules catalog."""

from .errors import CatalogError, EmptyQueryError, FetchError
from .rule import Rule, RuleSet, RuleStatus, derive_tags, make_id, validate_rule
from .timing import TimingContext

__all__ = [
    "CatalogError",
    "EmptyQueryError",
    "FetchError",
    "Rule",
    "RuleSet",
    "RuleStatus",
    "derive_tags",
    "make_id",
    "validate_rule",
    "TimingContext",
]
