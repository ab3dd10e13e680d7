"""Category filtering and keyword search over parsed rules.

All functions here are pure: they never mutate the rules they are given,
so they can run against a shared cache snapshot from any thread.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from rectorrules.core import Rule, RuleSet

# Query tokens shorter than this are ignored
MIN_TOKEN_LENGTH = 2


class Relevance(str, Enum):
    """Which rule field a search matched, in ranking order."""
    NAME = "name"
    DESCRIPTION = "description"
    TAG = "tag"

    @property
    def rank(self) -> int:
        return _RELEVANCE_ORDER[self]


_RELEVANCE_ORDER = {Relevance.NAME: 0, Relevance.DESCRIPTION: 1, Relevance.TAG: 2}


class MatchMode(str, Enum):
    """How a query is compared against rule text.

    ALL_TOKENS: every query token (>= 2 chars) must appear in the field.
    SUBSTRING: the whole query must appear in the field as-is.
    """
    ALL_TOKENS = "all_tokens"
    SUBSTRING = "substring"


@dataclass(frozen=True)
class RuleWithRelevance:
    """A search hit: the matched rule and the field it matched on."""
    rule: Rule
    relevance: Relevance

    def to_dict(self) -> dict:
        return {**self.rule.to_dict(), "relevance": self.relevance.value}


def normalize_rule_set_name(name: str) -> str:
    """Normalize a rule set name for comparison.

    Lowercases and collapses runs of whitespace, underscores, hyphens and
    dots into a single hyphen: "PHP 8.0" -> "php-8-0",
    "Code Quality" and "code_quality" -> "code-quality", "CodeQuality" -> "codequality".
    """
    return re.sub(r'[\s_.\-]+', '-', name.lower()).strip('-')


def filter_rules_by_rule_set(rules: Iterable[Rule], rule_set_query: str) -> list[Rule]:
    """Return rules whose normalized rule set equals the normalized query.

    Args:
        rules: Rules to filter
        rule_set_query: Rule set name in any casing/separator style

    Returns:
        Matching rules in input order
    """
    normalized_query = normalize_rule_set_name(rule_set_query)
    return [rule for rule in rules if normalize_rule_set_name(rule.rule_set) == normalized_query]


def summarize_rule_set(rules: Sequence[Rule], rule_set_query: str) -> RuleSet | None:
    """Build rule set metadata for an already-filtered list of rules.

    The count reflects the rules passed in, not the full category size.
    Returns None for an empty list.
    """
    if not rules:
        return None

    rule_set = rules[0].rule_set
    return RuleSet(
        name=normalize_rule_set_name(rule_set),
        display_name=rule_set,
        description=f"Rules for {rule_set}",
        rule_count=len(rules),
    )


def tokenize_query(query: str) -> list[str]:
    """Split a query into lowercase alphanumeric tokens of 2+ characters."""
    cleaned = re.sub(r'[^a-z0-9]', ' ', query.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def _contains_all(text: str, tokens: list[str]) -> bool:
    text = text.lower()
    return all(token in text for token in tokens)


def _match_tokens(rule: Rule, tokens: list[str]) -> Relevance | None:
    if _contains_all(rule.name, tokens):
        return Relevance.NAME
    if _contains_all(rule.description, tokens):
        return Relevance.DESCRIPTION
    if rule.tags and _contains_all(" ".join(rule.tags), tokens):
        return Relevance.TAG
    return None


def _match_substring(rule: Rule, needle: str) -> Relevance | None:
    if needle in rule.name.lower():
        return Relevance.NAME
    if needle in rule.description.lower():
        return Relevance.DESCRIPTION
    if any(needle in tag.lower() for tag in rule.tags):
        return Relevance.TAG
    return None


def search_rules(
    rules: Iterable[Rule],
    query: str,
    rule_set_filter: str | None = None,
    mode: MatchMode = MatchMode.ALL_TOKENS,
) -> list[RuleWithRelevance]:
    """Search rules by keyword with optional rule set filter.

    Each rule is checked against its name, then description, then tags;
    the first field that matches decides its relevance. Results are ordered
    name matches first, then description, then tag matches, keeping input
    order within each level.

    Args:
        rules: Rules to search
        query: Search text
        rule_set_filter: Optional rule set to restrict the search to
        mode: Token matching (default) or whole-query substring matching

    Returns:
        Matching rules with relevance, sorted by relevance
    """
    if rule_set_filter:
        rules = filter_rules_by_rule_set(rules, rule_set_filter)

    if mode == MatchMode.SUBSTRING:
        needle = query.strip().lower()
        if not needle:
            return []

        def match(rule: Rule) -> Relevance | None:
            return _match_substring(rule, needle)
    else:
        tokens = tokenize_query(query)
        if not tokens:
            return []

        def match(rule: Rule) -> Relevance | None:
            return _match_tokens(rule, tokens)

    results = []
    for rule in rules:
        relevance = match(rule)
        if relevance is not None:
            results.append(RuleWithRelevance(rule=rule, relevance=relevance))

    # sorted() is stable, so input order is kept within a level
    return sorted(results, key=lambda result: result.relevance.rank)
