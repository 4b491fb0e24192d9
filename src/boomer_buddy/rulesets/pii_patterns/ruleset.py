"""PII pattern ruleset.

Value patterns for personal data that must never leave the device. Rules
flagged ``hard_block`` (SSNs, card numbers) replace the whole text; the rest
are redacted in place with a typed placeholder.
"""

from typing import ClassVar, Self, cast

from pydantic import Field, model_validator

from boomer_buddy.rulesets.base import YAMLRuleset
from boomer_buddy.rulesets.types import DetectionRule, RulesetData


class PiiPatternRule(DetectionRule):
    """Regex-based PII detection rule."""

    label: str = Field(
        pattern=r"^[A-Z][A-Z_]*$",
        description="Upper-case type label used in placeholders (e.g., 'EMAIL')",
    )
    hard_block: bool = Field(
        default=False,
        description="Whether a match blocks the whole text instead of redacting it",
    )

    @property
    def placeholder(self) -> str:
        """Replacement text for redacted matches."""
        return f"[REDACTED_{self.label}]"


class PiiPatternRulesetData(RulesetData[PiiPatternRule]):
    """PII pattern ruleset data structure."""

    blocked_placeholder: str = Field(
        default="[BLOCKED_SENSITIVE_DATA]",
        description="Replacement for the entire text when a hard-block rule matches",
    )
    hard_block_label: str = Field(
        default="SSN_OR_CREDIT_CARD",
        description="Blocked type reported when a hard-block rule matches",
    )

    @model_validator(mode="after")
    def validate_value_patterns_only(self) -> Self:
        """PII is detected by value, never by keyword."""
        for rule in self.rules:
            if rule.patterns or not rule.value_patterns:
                raise ValueError(
                    f"Rule '{rule.name}' must define value_patterns and no patterns"
                )
        return self


class PiiPatternRuleset(YAMLRuleset[PiiPatternRule]):
    """Ruleset of PII value patterns used by the scrubber."""

    ruleset_name: ClassVar[str] = "pii_patterns"
    ruleset_version: ClassVar[str] = "1.0.0"
    _data_class: ClassVar[type[PiiPatternRulesetData]] = PiiPatternRulesetData

    def get_data(self) -> PiiPatternRulesetData:
        """Get the full ruleset data including placeholders."""
        return cast(PiiPatternRulesetData, self._load_data())
