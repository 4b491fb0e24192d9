"""PII pattern ruleset."""

from boomer_buddy.rulesets.pii_patterns.ruleset import (
    PiiPatternRule,
    PiiPatternRuleset,
    PiiPatternRulesetData,
)

__all__ = [
    "PiiPatternRule",
    "PiiPatternRuleset",
    "PiiPatternRulesetData",
]
