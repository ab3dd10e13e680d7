"""Parse the Rector rules overview markdown into validated rules."""

import logging
import re

from rectorrules.core import Rule, validate_rule

logger = logging.getLogger(__name__)

# Index section at the top of the overview, not a rule category
CATEGORIES_SECTION = "Categories"

# Marker emoji used by the overview for rules that take configuration
CONFIGURABLE_MARKER = ":wrench:"

CLASS_LINE_PREFIX = "- class:"
CODE_FENCE = "```"

# Matches [`Rector\Php80\Rector\Class_\SomeRector`] inside the class line
_CLASS_LINK = re.compile(r'\[`([^`]+)`\]')


def split_sections(markdown: str, level: int) -> list[str]:
    """Split markdown on headings of exactly the given level.

    The chunk before the first heading is discarded. Each returned chunk
    starts with the heading text (without the # symbols).

    Args:
        markdown: Markdown content
        level: Heading level to split on (2 for "## ", 3 for "### ")

    Returns:
        List of section chunks in document order
    """
    marker = "\n" + "#" * level + " "
    return markdown.split(marker)[1:]


def is_description_line(line: str) -> bool:
    """Check whether a stripped line can serve as a rule description."""
    return bool(line) and not line.startswith((":", "-", CODE_FENCE))


def extract_class_path(line: str) -> str | None:
    """Extract the class reference from a '- class:' line, if present."""
    match = _CLASS_LINK.search(line)
    if match:
        return match.group(1)
    return None


def parse_rule_chunk(chunk: str, category: str) -> Rule | None:
    """Parse a single '### RuleName' chunk into a Rule.

    Only the first qualifying line becomes the description. Scanning stops
    at the first code fence or heading.

    Args:
        chunk: Rule text starting with the rule name line
        category: The enclosing '## ' heading text

    Returns:
        A validated Rule, or None if a required field is missing
    """
    lines = chunk.split("\n")
    name = lines[0].strip()

    description = ""
    class_path = None
    configurable = False

    for raw_line in lines[1:]:
        line = raw_line.strip()

        if not description and is_description_line(line):
            description = line

        if CONFIGURABLE_MARKER in line:
            configurable = True

        if line.startswith(CLASS_LINE_PREFIX):
            found = extract_class_path(line)
            if found:
                class_path = found

        if line.startswith(CODE_FENCE) or line.startswith("##"):
            break

    return validate_rule(
        name=name,
        description=description,
        category=category,
        class_path=class_path,
        configurable=configurable,
    )


def parse_rules_markdown(markdown: str) -> list[Rule]:
    """Parse the Rector rules overview into a list of validated rules.

    Malformed or incomplete entries are dropped rather than raising.

    Args:
        markdown: The raw markdown document

    Returns:
        Rules in document order (category order, then rule order)
    """
    rules: list[Rule] = []
    skipped = 0

    for section in split_sections(markdown, 2):
        category = section.split("\n", 1)[0].strip()
        if category == CATEGORIES_SECTION:
            continue

        for chunk in split_sections(section, 3):
            rule = parse_rule_chunk(chunk, category)
            if rule is None:
                skipped += 1
                logger.debug("Skipping incomplete rule in %r: %r", category, chunk.split("\n", 1)[0])
                continue
            rules.append(rule)

    if skipped:
        logger.debug("Parsed %d rules, skipped %d incomplete entries", len(rules), skipped)
    return rules
