"""Derive rule set summaries from parsed rules."""

import re
from collections.abc import Iterable

from rectorrules.core import Rule, RuleSet

_PHP_VERSION = re.compile(r'^Php(\d+)$')


def format_display_name(name: str) -> str:
    """Format a rule set name for display.

    "Php80" -> "PHP 8.0", "Php7" -> "PHP 7.0", "CodeQuality" -> "Code Quality".
    Names that already contain spaces pass through unchanged.
    """
    match = _PHP_VERSION.match(name)
    if match:
        version = match.group(1)
        major = version[0]
        minor = version[1] if len(version) > 1 else "0"
        return f"PHP {major}.{minor}"

    return re.sub(r'([a-z])([A-Z])', r'\1 \2', name).strip()


def display_sort_key(rule_set: RuleSet) -> tuple[str, str]:
    """Collation key: case-insensitive first, raw text as a tiebreak."""
    return rule_set.display_name.casefold(), rule_set.display_name


def derive_rule_sets(rules: Iterable[Rule]) -> list[RuleSet]:
    """Group rules by rule set and count them.

    Args:
        rules: Validated rules in any order

    Returns:
        One RuleSet per distinct rule_set value, sorted by display name
    """
    counts: dict[str, int] = {}
    for rule in rules:
        counts[rule.rule_set] = counts.get(rule.rule_set, 0) + 1

    rule_sets = [
        RuleSet(name=name, display_name=format_display_name(name), rule_count=count)
        for name, count in counts.items()
    ]
    return sorted(rule_sets, key=display_sort_key)
