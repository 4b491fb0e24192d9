"""Versioned rule catalogues and the registry that serves them."""

from boomer_buddy.errors import (
    RulesetError,
    RulesetNotFoundError,
    RulesetURIParseError,
    UnsupportedProviderError,
)
from boomer_buddy.rulesets.base import AbstractRuleset, YAMLRuleset
from boomer_buddy.rulesets.brand_impersonation import (
    BrandImpersonationRule,
    BrandImpersonationRuleset,
)
from boomer_buddy.rulesets.loader import RulesetLoader, RulesetURI
from boomer_buddy.rulesets.pii_patterns import PiiPatternRule, PiiPatternRuleset
from boomer_buddy.rulesets.registry import RulesetRegistry
from boomer_buddy.rulesets.scam_indicators import (
    ScamIndicatorRule,
    ScamIndicatorRuleset,
)
from boomer_buddy.rulesets.types import DetectionRule, Rule, RulesetData

# Built-in rulesets with their corresponding rule types
_BUILTIN_RULESETS = [
    (ScamIndicatorRuleset, ScamIndicatorRule),
    (PiiPatternRuleset, PiiPatternRule),
    (BrandImpersonationRuleset, BrandImpersonationRule),
]

# Register all built-in rulesets automatically on import with type information
_registry = RulesetRegistry()
for _ruleset_class, _rule_type in _BUILTIN_RULESETS:
    _registry.register(_ruleset_class, _rule_type)

__all__ = [
    # Errors
    "RulesetError",
    "RulesetNotFoundError",
    "RulesetURIParseError",
    "UnsupportedProviderError",
    # Base classes and types
    "AbstractRuleset",
    "DetectionRule",
    "Rule",
    "RulesetData",
    "YAMLRuleset",
    # URI, loader and registry
    "RulesetLoader",
    "RulesetRegistry",
    "RulesetURI",
    # Rulesets
    "BrandImpersonationRuleset",
    "PiiPatternRuleset",
    "ScamIndicatorRuleset",
    # Rule types
    "BrandImpersonationRule",
    "PiiPatternRule",
    "ScamIndicatorRule",
]
