"""Retrieval of the upstream rules document."""

from .fetcher import fetch_rules_markdown, make_fetcher

__all__ = ["fetch_rules_markdown", "make_fetcher"]
