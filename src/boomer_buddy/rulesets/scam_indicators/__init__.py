"""Scam indicator ruleset."""

from boomer_buddy.rulesets.scam_indicators.ruleset import (
    AuxiliaryIndicator,
    LinkShortenerIndicator,
    QuickCheckPattern,
    QuickCheckPolicy,
    ScamIndicatorRule,
    ScamIndicatorRuleset,
    ScamIndicatorRulesetData,
    ScoringPolicy,
    SuspiciousCallerIndicator,
)

__all__ = [
    "AuxiliaryIndicator",
    "LinkShortenerIndicator",
    "QuickCheckPattern",
    "QuickCheckPolicy",
    "ScamIndicatorRule",
    "ScamIndicatorRuleset",
    "ScamIndicatorRulesetData",
    "ScoringPolicy",
    "SuspiciousCallerIndicator",
]
