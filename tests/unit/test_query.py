"""Unit tests for rule filtering and keyword search."""

import pytest

from rectorrules.core import Rule
from rectorrules.search import (
    MatchMode,
    Relevance,
    filter_rules_by_rule_set,
    normalize_rule_set_name,
    search_rules,
    summarize_rule_set,
    tokenize_query,
)


@pytest.fixture
def rules(make_rule):
    """A mixed set of rules across rule sets."""
    return [
        make_rule("UnionTypesRector", "Change docs types to union types, where possible", "PHP 8.0"),
        make_rule("CombineIfRector", "Merges nested if statements", "Code Quality"),
        make_rule("SimplifyIfReturnBoolRector", "Shortens if return false/true to direct return", "Code Quality"),
        make_rule("RemoveUnusedVariableRector", "Remove unused assigned variables", "Dead Code"),
        make_rule("AddVoidReturnTypeRector", "Add return type void to function like without any return", "Type Declaration"),
    ]


class TestNormalizeRuleSetName:
    """Tests for normalize_rule_set_name()."""

    @pytest.mark.parametrize("name", ["Code Quality", "code_quality", "code-quality", "CODE  QUALITY"])
    def test_separator_and_case_insensitive(self, name):
        """Case and separator style don't matter."""
        assert normalize_rule_set_name(name) == "code-quality"

    def test_camel_case_is_only_lowercased(self):
        """Document headings like "CodeQuality" are not split into words."""
        assert normalize_rule_set_name("CodeQuality") == "codequality"
        assert normalize_rule_set_name("DeadCode") == "deadcode"

    def test_php_version(self):
        """Dotted versions normalize like the hyphenated form."""
        assert normalize_rule_set_name("PHP 8.0") == "php-8-0"
        assert normalize_rule_set_name("php-8-0") == "php-8-0"


class TestFilterRulesByRuleSet:
    """Tests for filter_rules_by_rule_set()."""

    def test_exact_normalized_match(self, rules):
        """Rules of the requested set are returned in input order."""
        filtered = filter_rules_by_rule_set(rules, "code_quality")
        assert [r.name for r in filtered] == ["CombineIfRector", "SimplifyIfReturnBoolRector"]

    def test_php_version_query(self, rules):
        """'php-8-0' finds the 'PHP 8.0' rule set."""
        filtered = filter_rules_by_rule_set(rules, "php-8-0")
        assert [r.name for r in filtered] == ["UnionTypesRector"]

    def test_camel_case_heading(self, make_rule):
        """A lowercase query finds rules under a CamelCase heading."""
        rules = [
            make_rule("CombineIfRector", rule_set="CodeQuality"),
            make_rule("RemoveUnusedVariableRector", rule_set="DeadCode"),
        ]

        filtered = filter_rules_by_rule_set(rules, "codequality")
        assert [r.name for r in filtered] == ["CombineIfRector"]
        assert summarize_rule_set(filtered, "codequality").name == "codequality"
        assert [r.name for r in filter_rules_by_rule_set(rules, "deadcode")] == ["RemoveUnusedVariableRector"]

    def test_no_partial_match(self, rules):
        """A prefix of a rule set name is not a match."""
        assert filter_rules_by_rule_set(rules, "code") == []

    def test_does_not_mutate_input(self, rules):
        """The input list is left untouched."""
        before = list(rules)
        filter_rules_by_rule_set(rules, "Dead Code")
        assert rules == before


class TestSummarizeRuleSet:
    """Tests for summarize_rule_set()."""

    def test_empty_returns_none(self):
        """No rules, no summary."""
        assert summarize_rule_set([], "anything") is None

    def test_summary_from_first_rule(self, rules):
        """Summary uses the first rule's set and the filtered count."""
        filtered = filter_rules_by_rule_set(rules, "code-quality")
        summary = summarize_rule_set(filtered, "code-quality")

        assert summary.name == "code-quality"
        assert summary.display_name == "Code Quality"
        assert summary.description == "Rules for Code Quality"
        assert summary.rule_count == 2

    def test_count_reflects_caller_list(self, rules):
        """The count is the size of the list passed in."""
        filtered = filter_rules_by_rule_set(rules, "code-quality")[:1]
        assert summarize_rule_set(filtered, "code-quality").rule_count == 1


class TestTokenizeQuery:
    """Tests for tokenize_query()."""

    def test_lowercase_and_split(self):
        """Punctuation separates tokens."""
        assert tokenize_query("Union-Types, PHP8!") == ["union", "types", "php8"]

    def test_short_tokens_dropped(self):
        """Single-character tokens are ignored."""
        assert tokenize_query("a if b") == ["if"]

    def test_blank(self):
        """Blank queries produce no tokens."""
        assert tokenize_query("") == []
        assert tokenize_query("  ! ") == []


class TestSearchRules:
    """Tests for search_rules() in the default token mode."""

    def test_name_match(self, rules):
        """A token inside the rule name matches at name level."""
        results = search_rules(rules, "type")
        union = next(r for r in results if r.rule.name == "UnionTypesRector")
        assert union.relevance == Relevance.NAME

    def test_all_tokens_required(self, rules):
        """Every token must appear in the same field."""
        results = search_rules(rules, "combine if")
        assert [r.rule.name for r in results] == ["CombineIfRector"]

        assert search_rules(rules, "combine zebra") == []

    def test_description_match(self, rules):
        """Tokens found only in the description match at description level."""
        results = search_rules(rules, "nested statements")
        assert len(results) == 1
        assert results[0].rule.name == "CombineIfRector"
        assert results[0].relevance == Relevance.DESCRIPTION

    def test_tag_match(self, make_rule):
        """Tokens spread over name and description only match via tags."""
        rule = make_rule("CombineIfRector", "Merges nested statements")
        results = search_rules([rule], "combine merges")
        assert len(results) == 1
        assert results[0].relevance == Relevance.TAG

    def test_relevance_ordering(self, rules):
        """Name matches come first, then description matches, input order kept."""
        results = search_rules(rules, "return")
        assert [(r.rule.name, r.relevance) for r in results] == [
            ("SimplifyIfReturnBoolRector", Relevance.NAME),
            ("AddVoidReturnTypeRector", Relevance.NAME),
        ]

        results = search_rules(rules, "if")
        relevances = [r.relevance.rank for r in results]
        assert relevances == sorted(relevances)
        assert results[0].rule.name == "CombineIfRector"
        assert results[1].rule.name == "SimplifyIfReturnBoolRector"

    def test_stable_within_level(self, make_rule):
        """Rules at the same level keep their input order."""
        rules = [
            make_rule("ZetaRector", "handles arrays"),
            make_rule("ArraySortRector", "sorts things"),
            make_rule("AlphaRector", "handles arrays too"),
        ]
        results = search_rules(rules, "array")
        assert [r.rule.name for r in results] == ["ArraySortRector", "ZetaRector", "AlphaRector"]
        assert [r.relevance for r in results] == [Relevance.NAME, Relevance.DESCRIPTION, Relevance.DESCRIPTION]

    def test_empty_query(self, rules):
        """A query without usable tokens returns nothing."""
        assert search_rules(rules, "") == []
        assert search_rules(rules, "a") == []

    def test_no_match(self, rules):
        """Unknown keywords yield an empty list, not an error."""
        assert search_rules(rules, "nonexistentkeyword") == []

    def test_rule_set_filter(self, rules):
        """The category filter restricts the search."""
        results = search_rules(rules, "return", rule_set_filter="type-declaration")
        assert [r.rule.name for r in results] == ["AddVoidReturnTypeRector"]

    def test_to_dict_includes_relevance(self, rules):
        """Serialized results carry the rule fields plus relevance."""
        data = search_rules(rules, "union")[0].to_dict()
        assert data["name"] == "UnionTypesRector"
        assert data["relevance"] == "name"


class TestSearchRulesSubstringMode:
    """Tests for search_rules() with MatchMode.SUBSTRING."""

    def test_whole_query_must_match(self, rules):
        """Multi-word queries are matched as one string."""
        results = search_rules(rules, "nested statements", mode=MatchMode.SUBSTRING)
        assert results == []

        results = search_rules(rules, "nested if statements", mode=MatchMode.SUBSTRING)
        assert [r.rule.name for r in results] == ["CombineIfRector"]

    def test_single_character_query(self, rules):
        """Short queries are not tokenized away."""
        results = search_rules(rules, "V", mode=MatchMode.SUBSTRING)
        assert results

    def test_tag_match(self):
        """Any tag containing the query matches at tag level."""
        rule = Rule(
            id="xy-rector",
            name="XyRector",
            description="Handles docblocks",
            rule_set="CodeQuality",
            tags=("legacy", "docblocks"),
        )
        results = search_rules([rule], "leg", mode=MatchMode.SUBSTRING)
        assert results[0].relevance == Relevance.TAG

        results = search_rules([rule], "docblock", mode=MatchMode.SUBSTRING)
        assert results[0].relevance == Relevance.DESCRIPTION

    def test_blank_query(self, rules):
        """Whitespace-only queries return nothing."""
        assert search_rules(rules, "   ", mode=MatchMode.SUBSTRING) == []
