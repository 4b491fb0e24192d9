"""Pydantic-based types for structured rulesets.

This module defines the rule type hierarchy:

- Rule: Base class with common properties (name, description)
- DetectionRule: Pattern-based rules for detecting content in free text
- RulesetData: Top-level YAML document holding a versioned list of rules
"""

import re

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class Rule(BaseModel):
    """Base class for all rules.

    Attributes:
        name: Unique identifier for this rule
        description: Human-readable description of what this rule does

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Unique name for this rule")
    description: str = Field(
        min_length=1,
        description="Human-readable description of what this rule does",
    )


class DetectionRule(Rule):
    """Pattern-based rule for detecting content in text.

    Attributes:
        patterns: Literal phrases matched where they start a word
            (case-insensitive), so inflected forms match too
        whole_words: Phrases from patterns that must also end a word
        value_patterns: Regex patterns matched anywhere (case-insensitive)

    """

    patterns: tuple[str, ...] = Field(
        default=(), description="Word-start phrases (case-insensitive matching)"
    )
    whole_words: tuple[str, ...] = Field(
        default=(), description="Phrases that must not run into a longer word"
    )
    value_patterns: tuple[str, ...] = Field(
        default=(), description="Regex patterns for value-based detection"
    )

    @field_validator("patterns", "value_patterns")
    @classmethod
    def validate_patterns_not_empty_strings(
        cls, patterns: tuple[str, ...]
    ) -> tuple[str, ...]:
        """Validate that pattern tuples contain no empty strings."""
        if any(not pattern.strip() for pattern in patterns):
            raise ValueError("All patterns must be non-empty strings")
        return patterns

    @field_validator("value_patterns")
    @classmethod
    def validate_value_patterns_compile(
        cls, value_patterns: tuple[str, ...]
    ) -> tuple[str, ...]:
        """Validate that every regex pattern compiles."""
        for pattern in value_patterns:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid regex pattern '{pattern}': {e}") from e
        return value_patterns

    @model_validator(mode="after")
    def validate_whole_words_are_patterns(self) -> "DetectionRule":
        """Whole-word markers must name phrases of this rule."""
        unknown = sorted(set(self.whole_words) - set(self.patterns))
        if unknown:
            raise ValueError(f"whole_words entries are not patterns: {unknown}")
        return self

    @model_validator(mode="after")
    def validate_has_patterns(self) -> "DetectionRule":
        """Ensure at least one pattern type is specified."""
        if not self.patterns and not self.value_patterns:
            raise ValueError("Rule must have at least one pattern or value_pattern")
        return self

    def is_whole_word(self, phrase: str) -> bool:
        """Return True if phrase must be matched as a complete word."""
        return phrase in self.whole_words


class RulesetData[RuleType: Rule](BaseModel):
    """Base ruleset data class for YAML parsing.

    Generic over RuleType which can be Rule, DetectionRule, or any subclass.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Canonical name of the ruleset")
    version: str = Field(
        pattern=r"^\d+\.\d+\.\d+$", description='Semantic version (e.g., "1.0.0")'
    )
    description: str = Field(
        min_length=1, description="Description of what this ruleset does"
    )
    rules: tuple[RuleType, ...] = Field(
        min_length=1, description="Rules in this ruleset, in catalogue order"
    )

    @field_validator("rules")
    @classmethod
    def validate_unique_rule_names(
        cls, rules: tuple[RuleType, ...]
    ) -> tuple[RuleType, ...]:
        """Validate that rule names are unique within the ruleset."""
        names = [rule.name for rule in rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate rule names found: {duplicates}")
        return rules
