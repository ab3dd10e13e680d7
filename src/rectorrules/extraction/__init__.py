"""Rule extraction from the Rector overview markdown."""

from .parser import (
    parse_rule_chunk,
    parse_rules_markdown,
    split_sections,
)
from .rulesets import derive_rule_sets, format_display_name

__all__ = [
    "parse_rule_chunk",
    "parse_rules_markdown",
    "split_sections",
    "derive_rule_sets",
    "format_display_name",
]
