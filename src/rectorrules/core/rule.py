"""Rule and RuleSet dataclasses for the Rector rules catalog."""

import re
from dataclasses import asdict, dataclass, field
from enum import Enum

# Common words excluded from description-derived search tags
COMMON_WORDS = frozenset({
    "this", "that", "with", "from", "have", "will",
    "been", "were", "rector", "rule", "your", "code",
})

# Maximum number of description words contributing to tags
MAX_DESCRIPTION_TAGS = 10

_CASE_BOUNDARY = re.compile(r'([a-z])([A-Z])')


class RuleStatus(str, Enum):
    """Lifecycle status of a rule."""
    STABLE = "stable"
    DEPRECATED = "deprecated"
    EXPERIMENTAL = "experimental"


@dataclass(frozen=True)
class Rule:
    """A single Rector refactoring rule parsed from the overview document."""
    id: str
    name: str
    description: str
    rule_set: str
    class_path: str | None = None
    status: RuleStatus = RuleStatus.STABLE
    configurable: bool = False
    tags: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Return the rule as a plain dict for JSON serialization."""
        data = asdict(self)
        data["status"] = self.status.value
        data["tags"] = list(self.tags)
        return data

    def __repr__(self) -> str:
        return f"Rule(id={self.id!r}, rule_set={self.rule_set!r})"


@dataclass(frozen=True)
class RuleSet:
    """A category of rules, always derived from the rules it groups."""
    name: str
    display_name: str
    rule_count: int
    description: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def make_id(name: str) -> str:
    """Convert a PascalCase rule name into a kebab-case identifier.

    Args:
        name: Rule name, e.g. "UnionTypesRector"

    Returns:
        Identifier, e.g. "union-types-rector"
    """
    return _CASE_BOUNDARY.sub(r'\1-\2', name).lower()


def derive_tags(name: str, description: str) -> tuple[str, ...]:
    """Extract lowercase search keywords from a rule name and description.

    Name words come from splitting on case boundaries and keep anything
    longer than two characters. Description words must be longer than three
    characters, must not be common words, and only the first ten count.

    Args:
        name: The rule name (PascalCase)
        description: The rule description

    Returns:
        Deduplicated keywords in first-seen order
    """
    name_words = [
        word for word in _CASE_BOUNDARY.sub(r'\1 \2', name).lower().split()
        if len(word) > 2
    ]

    desc_words = [
        word for word in re.sub(r'[^a-z0-9\s]', ' ', description.lower()).split()
        if len(word) > 3 and word not in COMMON_WORDS
    ][:MAX_DESCRIPTION_TAGS]

    return tuple(dict.fromkeys(name_words + desc_words))


def validate_rule(
    name: str | None,
    description: str | None,
    category: str | None,
    class_path: str | None = None,
    configurable: bool = False,
) -> Rule | None:
    """Validate raw parsed fields and build a Rule.

    Returns:
        A Rule, or None when name, description or category is blank
    """
    name = (name or "").strip()
    description = (description or "").strip()
    category = (category or "").strip()
    if not name or not description or not category:
        return None

    return Rule(
        id=make_id(name),
        name=name,
        description=description,
        rule_set=category,
        class_path=(class_path.strip() or None) if class_path else None,
        status=RuleStatus.STABLE,
        configurable=bool(configurable),
        tags=derive_tags(name, description),
    )
