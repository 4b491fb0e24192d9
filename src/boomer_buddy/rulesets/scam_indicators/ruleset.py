"""Scam indicator ruleset.

This module defines the Pattern Category table used by the risk scorer:
named groups of phrases and regexes that share one static severity, the
auxiliary link-shortener and caller-prefix indicators, the quick-check
pattern subset, and the scoring policy. All of it lives in one versioned
YAML file so every runtime reads the same catalogue.
"""

import re
from typing import ClassVar, Self, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from boomer_buddy.rulesets.base import YAMLRuleset
from boomer_buddy.rulesets.types import DetectionRule, RulesetData
from boomer_buddy.severity import Severity


class ScamIndicatorRule(DetectionRule):
    """A Pattern Category: patterns sharing one severity and one set of guidance."""

    severity: Severity = Field(description="Static severity of this category")
    recommendations: tuple[str, ...] = Field(
        default=(),
        description="Guidance emitted when this category matches",
    )


class AuxiliaryIndicator(BaseModel):
    """Indicator computed outside the category table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    severity: Severity
    recommendations: tuple[str, ...] = ()


class LinkShortenerIndicator(AuxiliaryIndicator):
    """Fires when a known link-shortener domain appears as a host."""

    domains: tuple[str, ...] = Field(min_length=1)

    @field_validator("domains")
    @classmethod
    def normalise_domains(cls, domains: tuple[str, ...]) -> tuple[str, ...]:
        """Lower-case domains and reject blanks or embedded whitespace."""
        normalised = tuple(domain.strip().lower() for domain in domains)
        if any(not domain or " " in domain for domain in normalised):
            raise ValueError("Domains must be non-empty and contain no spaces")
        return normalised


class SuspiciousCallerIndicator(AuxiliaryIndicator):
    """Fires on a caller's ten-digit national number.

    Attributes:
        prefixes: Area codes commonly spoofed by scammers
        known_numbers: Exact numbers reported as scam callers
        repeated_digit_run: Shortest run of one repeated digit treated as a
            robocall range; None turns the check off

    """

    prefixes: tuple[str, ...] = Field(min_length=1)
    known_numbers: tuple[str, ...] = ()
    repeated_digit_run: int | None = Field(default=4, ge=2, le=10)

    @field_validator("prefixes")
    @classmethod
    def validate_prefixes_are_digits(cls, prefixes: tuple[str, ...]) -> tuple[str, ...]:
        """Prefixes are compared against digits only."""
        if not all(prefix.isdigit() for prefix in prefixes):
            raise ValueError("Caller prefixes must contain digits only")
        return prefixes

    @field_validator("known_numbers")
    @classmethod
    def validate_known_numbers(cls, numbers: tuple[str, ...]) -> tuple[str, ...]:
        """Known numbers are stored as ten-digit national numbers."""
        for number in numbers:
            if len(number) != 10 or not number.isdigit():
                raise ValueError(
                    f"Known caller number '{number}' must be exactly ten digits"
                )
        return numbers

    def repeated_digit_pattern(self) -> str | None:
        """Regex for a run of one digit, or None when the check is off."""
        if self.repeated_digit_run is None:
            return None
        return rf"(\d)\1{{{self.repeated_digit_run - 1},}}"


class QuickCheckPattern(BaseModel):
    """Reference to one pattern of a category, reused by the quick check."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(min_length=1)
    phrase: str | None = None
    regex: str | None = None

    @model_validator(mode="after")
    def validate_exactly_one_pattern(self) -> Self:
        """Each entry names either a phrase or a regex, not both."""
        if (self.phrase is None) == (self.regex is None):
            raise ValueError(
                f"Quick-check entry for '{self.category}' must set exactly one "
                "of 'phrase' or 'regex'"
            )
        return self


class QuickCheckPolicy(BaseModel):
    """Reduced pattern subset and thresholds for the three-bucket pre-filter."""

    model_config = ConfigDict(frozen=True)

    patterns: tuple[QuickCheckPattern, ...] = Field(min_length=1)
    suspicious_at: int = Field(default=1, ge=1)
    dangerous_at: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def validate_threshold_order(self) -> Self:
        """The dangerous threshold must be above the suspicious one."""
        if self.dangerous_at <= self.suspicious_at:
            raise ValueError("dangerous_at must be greater than suspicious_at")
        return self


class ScoringPolicy(BaseModel):
    """Linear confidence model and immediate-action threshold.

    confidence = min(confidence_cap, matched_count * confidence_step + confidence_base)
    """

    model_config = ConfigDict(frozen=True)

    confidence_base: int = Field(default=30, ge=0, le=100)
    confidence_step: int = Field(default=20, ge=0, le=100)
    confidence_cap: int = Field(default=95, ge=0, le=100)
    immediate_action_min_matches: int = Field(default=3, ge=1)

    @model_validator(mode="after")
    def validate_cap_above_base(self) -> Self:
        """The cap can never sit below the floor."""
        if self.confidence_cap < self.confidence_base:
            raise ValueError("confidence_cap must be >= confidence_base")
        return self

    def confidence_for(self, matched_count: int) -> int:
        """Return the confidence for a number of matched indicators."""
        return min(
            self.confidence_cap,
            matched_count * self.confidence_step + self.confidence_base,
        )


class ScamIndicatorRulesetData(RulesetData[ScamIndicatorRule]):
    """Scam indicator ruleset data structure."""

    link_shortener: LinkShortenerIndicator
    suspicious_caller: SuspiciousCallerIndicator
    phone_number_pattern: str = Field(min_length=1)
    url_pattern: str = Field(min_length=1)
    quick_check: QuickCheckPolicy
    scoring: ScoringPolicy = Field(default_factory=ScoringPolicy)
    escalation_recommendations: tuple[str, ...] = ()
    closing_recommendations: tuple[str, ...] = Field(min_length=1)

    @field_validator("phone_number_pattern", "url_pattern")
    @classmethod
    def validate_fact_patterns_compile(cls, pattern: str) -> str:
        """Fact patterns must be valid regexes."""
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern '{pattern}': {e}") from e
        return pattern

    @model_validator(mode="after")
    def validate_auxiliary_names(self) -> Self:
        """Auxiliary indicator names must not shadow category names."""
        rule_names = {rule.name for rule in self.rules}
        for aux in (self.link_shortener, self.suspicious_caller):
            if aux.name in rule_names:
                raise ValueError(
                    f"Auxiliary indicator '{aux.name}' clashes with a category name"
                )
        return self

    @model_validator(mode="after")
    def validate_quick_check_references(self) -> Self:
        """Every quick-check pattern must come from a high or critical category.

        A quick-check hit then always implies a matched high/critical category
        in the full assessment.
        """
        rules = {rule.name: rule for rule in self.rules}
        for entry in self.quick_check.patterns:
            rule = rules.get(entry.category)
            if rule is None:
                raise ValueError(
                    "Quick-check pattern references unknown category "
                    f"'{entry.category}'"
                )
            if not rule.severity.at_least(Severity.HIGH):
                raise ValueError(
                    f"Quick-check category '{entry.category}' has severity "
                    f"'{rule.severity.value}'; only high or critical categories "
                    "are allowed"
                )
            if entry.phrase is not None and entry.phrase not in rule.patterns:
                raise ValueError(
                    f"Quick-check phrase '{entry.phrase}' is not a pattern of "
                    f"category '{entry.category}'"
                )
            if entry.regex is not None and entry.regex not in rule.value_patterns:
                raise ValueError(
                    f"Quick-check regex '{entry.regex}' is not a value pattern of "
                    f"category '{entry.category}'"
                )
        return self


class ScamIndicatorRuleset(YAMLRuleset[ScamIndicatorRule]):
    """Versioned catalogue of scam indicator categories."""

    ruleset_name: ClassVar[str] = "scam_indicators"
    ruleset_version: ClassVar[str] = "1.0.0"
    _data_class: ClassVar[type[ScamIndicatorRulesetData]] = ScamIndicatorRulesetData

    def get_data(self) -> ScamIndicatorRulesetData:
        """Get the full ruleset data (rules plus scoring and quick-check policy)."""
        return cast(ScamIndicatorRulesetData, self._load_data())
