"""Terminal formatting for catalog responses."""

from .models import (
    FilterRulesResponse,
    ListRulesResponse,
    RuleModel,
    SearchRulesResponse,
)


# ANSI color codes for output
class Colors:
    CYAN = "\033[36m"      # Headers, queries
    YELLOW = "\033[33m"    # Rule names
    DIM = "\033[2m"        # Class paths, counts
    RED = "\033[31m"       # Errors, error cache status
    GREEN = "\033[32m"     # Fresh cache status
    RESET = "\033[0m"      # Reset to default


_STATUS_COLORS = {"fresh": Colors.GREEN, "stale": Colors.YELLOW, "error": Colors.RED}


def format_cache_status(cache_status: str) -> str:
    color = _STATUS_COLORS.get(cache_status, Colors.DIM)
    return f"{color}[{cache_status}]{Colors.RESET}"


def format_rule(rule: RuleModel, verbose: bool = False, relevance: str | None = None) -> list[str]:
    """Format one rule as indented lines ready to print.

    Args:
        rule: The rule to format
        verbose: Include class path and tags
        relevance: Matched field for search hits
    """
    marker = f" {Colors.CYAN}:wrench:{Colors.RESET}" if rule.configurable else ""
    match = f" {Colors.DIM}(matched {relevance}){Colors.RESET}" if relevance else ""
    lines = [
        f"  {Colors.YELLOW}- {rule.name}{Colors.RESET} {Colors.DIM}[{rule.rule_set}]{Colors.RESET}{marker}{match}",
        f"      {rule.description}",
    ]
    if verbose:
        if rule.class_path:
            lines.append(f"      {Colors.DIM}class: {rule.class_path}{Colors.RESET}")
        if rule.tags:
            lines.append(f"      {Colors.DIM}tags: {', '.join(rule.tags)}{Colors.RESET}")
    return lines


def format_list_response(response: ListRulesResponse, verbose: bool = False) -> str:
    """Format a list response: rule set table, then rules if verbose."""
    lines = [
        f"{Colors.CYAN}{response.total_count} rules in {len(response.rule_sets)} rule sets{Colors.RESET} "
        f"{format_cache_status(response.cache_status)} {Colors.DIM}updated {response.last_updated}{Colors.RESET}",
    ]
    for rule_set in response.rule_sets:
        lines.append(f"  {rule_set.display_name:<40} {Colors.DIM}{rule_set.rule_count:>5}{Colors.RESET}")
    if verbose:
        lines.append("")
        for rule in response.rules:
            lines.extend(format_rule(rule))
    return "\n".join(lines)


def format_filter_response(response: FilterRulesResponse, query: str, verbose: bool = False) -> str:
    if response.rule_set is None:
        return f"{Colors.RED}No rules found for rule set \"{query}\"{Colors.RESET}"

    lines = [
        f"{Colors.CYAN}{response.rule_set.display_name}: {response.matched_count} rules{Colors.RESET} "
        f"{format_cache_status(response.cache_status)}",
    ]
    for rule in response.rules:
        lines.extend(format_rule(rule, verbose=verbose))
    return "\n".join(lines)


def format_search_response(response: SearchRulesResponse, verbose: bool = False) -> str:
    scope = f" in {response.filtered_rule_set}" if response.filtered_rule_set else ""
    lines = [
        f"{Colors.CYAN}[Search]{Colors.RESET} \"{response.query}\"{scope}: "
        f"{response.matched_count} matches {format_cache_status(response.cache_status)}",
    ]
    for rule in response.rules:
        lines.extend(format_rule(rule, verbose=verbose, relevance=rule.relevance))
    return "\n".join(lines)
