"""Shared fixtures for the rules catalog tests."""

import pytest

from rectorrules.core import validate_rule

SAMPLE_MARKDOWN = r"""# 4 Rules Overview

<br>

## Categories

- [CodeQuality](#codequality) (2)

- [Php80](#php80) (1)

- [TypeDeclaration](#typedeclaration) (1)

<br>

## CodeQuality

### CombineIfRector

Merges nested if statements

- class: [`Rector\CodeQuality\Rector\If_\CombineIfRector`](../rules/CodeQuality/Rector/If_/CombineIfRector.php)

```diff
 class SomeClass
 {
     public function run()
     {
-        if ($cond1) {
-            if ($cond2) {
+        if ($cond1 && $cond2) {
```

<br>

### RenameFunctionRector

:wrench: **configure it!**

Turns defined function call new one.

- class: [`Rector\Renaming\Rector\FuncCall\RenameFunctionRector`](../rules/Renaming/Rector/FuncCall/RenameFunctionRector.php)

```php
use Rector\Config\RectorConfig;
```

<br>

## Php80

### UnionTypesRector

Change docs types to union types, where possible (properties are covered by TypedPropertiesRector)

- class: [`Rector\Php80\Rector\FunctionLike\UnionTypesRector`](../rules/Php80/Rector/FunctionLike/UnionTypesRector.php)

<br>

## TypeDeclaration

### AddVoidReturnTypeWhereNoReturnRector

Add return type void to function like without any return

- class: [`Rector\TypeDeclaration\Rector\ClassMethod\AddVoidReturnTypeWhereNoReturnRector`](../rules/TypeDeclaration/Rector/ClassMethod/AddVoidReturnTypeWhereNoReturnRector.php)
"""


@pytest.fixture
def sample_markdown() -> str:
    """A small excerpt in the layout of rector_rules_overview.md."""
    return SAMPLE_MARKDOWN


@pytest.fixture
def make_rule():
    """Factory for validated rules with sensible defaults."""
    def _make_rule(
        name: str,
        description: str = "Some description text",
        rule_set: str = "CodeQuality",
        class_path: str | None = None,
        configurable: bool = False,
    ):
        rule = validate_rule(name, description, rule_set, class_path, configurable)
        assert rule is not None
        return rule
    return _make_rule
