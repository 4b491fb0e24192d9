"""Testing utilities for boomer_buddy rulesets.

Shared contract tests that every ruleset implementation should pass,
whether built in or published by another package through the
``boomer_buddy.rulesets`` entry point group.
"""

import pytest

from boomer_buddy.rulesets.base import AbstractRuleset
from boomer_buddy.rulesets.loader import RulesetLoader
from boomer_buddy.rulesets.registry import RulesetRegistry
from boomer_buddy.rulesets.types import Rule


class RulesetContractTests[RuleType: Rule]:
    """Contract tests that all AbstractRuleset implementations must pass.

    Required Fixtures:
        ruleset_class: The AbstractRuleset subclass (not instance) to test
        rule_class: The Rule subclass that the ruleset uses
        expected_name: The expected canonical name of the ruleset

    An ``isolated_registry`` fixture must also be available (typically from a
    conftest.py), returning a RulesetRegistry whose state is restored after
    each test.

    Usage Pattern:
        class TestMyRulesetContract(RulesetContractTests[MyRule]):
            @pytest.fixture
            def ruleset_class(self) -> type[AbstractRuleset[MyRule]]:
                return MyRuleset

            @pytest.fixture
            def rule_class(self) -> type[MyRule]:
                return MyRule

            @pytest.fixture
            def expected_name(self) -> str:
                return "my_ruleset"

    The required fixtures raise NotImplementedError rather than skipping, so
    a subclass that forgets one fails loudly.

    """

    @pytest.fixture
    def ruleset_class(self) -> type[AbstractRuleset[RuleType]]:
        """Provide AbstractRuleset subclass to test."""
        raise NotImplementedError(
            "Subclass must provide 'ruleset_class' fixture with an AbstractRuleset "
            "subclass"
        )

    @pytest.fixture
    def rule_class(self) -> type[RuleType]:
        """Provide Rule subclass that the ruleset uses."""
        raise NotImplementedError(
            "Subclass must provide 'rule_class' fixture with Rule subclass"
        )

    @pytest.fixture
    def expected_name(self) -> str:
        """Provide the expected canonical name of the ruleset."""
        raise NotImplementedError(
            "Subclass must provide 'expected_name' fixture with string"
        )

    @pytest.fixture
    def ruleset_instance(
        self, ruleset_class: type[AbstractRuleset[RuleType]]
    ) -> AbstractRuleset[RuleType]:
        """Create a ruleset instance for testing."""
        return ruleset_class()

    # =========================================================================
    # CONTRACT TEST: Identity
    # =========================================================================

    def test_name_property_returns_canonical_name(
        self,
        ruleset_instance: AbstractRuleset[RuleType],
        expected_name: str,
    ) -> None:
        """Verify ruleset.name returns the expected canonical name."""
        assert ruleset_instance.name == expected_name

    def test_version_property_returns_valid_semantic_version(
        self, ruleset_instance: AbstractRuleset[RuleType]
    ) -> None:
        """Verify ruleset.version is a semantic version (x.y.z)."""
        parts = ruleset_instance.version.split(".")

        assert len(parts) == 3, f"version must have 3 parts, got: {parts}"
        assert all(part.isdigit() for part in parts)

    def test_uri_uses_local_provider(
        self, ruleset_instance: AbstractRuleset[RuleType]
    ) -> None:
        """Verify ruleset.uri is local/<name>/<version>."""
        assert ruleset_instance.uri == (
            f"local/{ruleset_instance.name}/{ruleset_instance.version}"
        )

    # =========================================================================
    # CONTRACT TEST: Rules
    # =========================================================================

    def test_get_rules_returns_tuple_with_at_least_one_rule(
        self,
        ruleset_instance: AbstractRuleset[RuleType],
        rule_class: type[RuleType],
    ) -> None:
        """Verify get_rules() returns a non-empty tuple of the right rule type."""
        rules = ruleset_instance.get_rules()

        assert isinstance(rules, tuple), "get_rules() must return tuple, not list"
        assert len(rules) > 0
        assert all(isinstance(rule, rule_class) for rule in rules)

    def test_get_rules_returns_same_tuple_each_time(
        self, ruleset_instance: AbstractRuleset[RuleType]
    ) -> None:
        """Verify get_rules() caches and returns the same tuple instance."""
        assert ruleset_instance.get_rules() is ruleset_instance.get_rules()

    def test_rules_are_immutable(
        self, ruleset_instance: AbstractRuleset[RuleType]
    ) -> None:
        """Verify neither the tuple nor the rule objects can be modified."""
        rules = ruleset_instance.get_rules()

        with pytest.raises(TypeError):
            rules[0] = None  # type: ignore[index]

        with pytest.raises(ValueError):
            rules[0].name = "changed"  # type: ignore[misc]

    def test_rule_names_are_unique(
        self, ruleset_instance: AbstractRuleset[RuleType]
    ) -> None:
        """Verify all rule names in the ruleset are unique."""
        names = [rule.name for rule in ruleset_instance.get_rules()]

        assert len(names) == len(set(names))

    # =========================================================================
    # INTEGRATION TEST: Registry and loader
    # =========================================================================

    def test_ruleset_can_be_used_with_registry(
        self,
        ruleset_class: type[AbstractRuleset[RuleType]],
        rule_class: type[RuleType],
        expected_name: str,
        isolated_registry: RulesetRegistry,
    ) -> None:
        """Verify ruleset is registerable and retrievable via RulesetRegistry."""
        isolated_registry.register(ruleset_class, rule_class)

        retrieved_class = isolated_registry.get_ruleset_class(
            expected_name, ruleset_class.ruleset_version, rule_class
        )

        assert retrieved_class is ruleset_class
        assert retrieved_class().name == expected_name

    def test_ruleset_loader_integration(
        self,
        ruleset_class: type[AbstractRuleset[RuleType]],
        rule_class: type[RuleType],
        expected_name: str,
        isolated_registry: RulesetRegistry,
    ) -> None:
        """Verify ruleset is loadable via RulesetLoader using its URI."""
        isolated_registry.register(ruleset_class, rule_class)

        rules = RulesetLoader.load_ruleset(
            f"local/{expected_name}/{ruleset_class.ruleset_version}", rule_class
        )

        assert rules == ruleset_class().get_rules()


__all__ = ["RulesetContractTests"]
