"""Pydantic response models for the catalog operations."""

from typing import Literal

from pydantic import BaseModel, Field

from rectorrules.core import Rule, RuleSet
from rectorrules.search import RuleWithRelevance

CacheStatusLabel = Literal["fresh", "stale", "error"]


class RuleModel(BaseModel):
    """A single rule as returned to callers."""

    id: str
    name: str
    description: str
    rule_set: str
    class_path: str | None = None
    status: Literal["stable", "deprecated", "experimental"] = "stable"
    configurable: bool = False
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_rule(cls, rule: Rule) -> "RuleModel":
        return cls(**rule.to_dict())


class RuleWithRelevanceModel(RuleModel):
    """A search hit with the field it matched on."""

    relevance: Literal["name", "description", "tag"]

    @classmethod
    def from_result(cls, result: RuleWithRelevance) -> "RuleWithRelevanceModel":
        return cls(**result.to_dict())


class RuleSetModel(BaseModel):
    """Summary of a rule set."""

    name: str
    display_name: str
    description: str | None = None
    rule_count: int = Field(..., ge=1)

    @classmethod
    def from_rule_set(cls, rule_set: RuleSet) -> "RuleSetModel":
        return cls(**rule_set.to_dict())


class ListRulesResponse(BaseModel):
    """All rules with derived rule sets."""

    rules: list[RuleModel]
    total_count: int
    rule_sets: list[RuleSetModel]
    cache_status: CacheStatusLabel
    last_updated: str = Field(..., description="ISO-8601 time of the load that produced the rules")


class FilterRulesResponse(BaseModel):
    """Rules belonging to one rule set."""

    rules: list[RuleModel]
    matched_count: int
    rule_set: RuleSetModel | None = None
    cache_status: CacheStatusLabel


class SearchRulesResponse(BaseModel):
    """Keyword search results, most relevant first."""

    rules: list[RuleWithRelevanceModel]
    matched_count: int
    query: str
    filtered_rule_set: str | None = None
    cache_status: CacheStatusLabel
