"""Brand impersonation ruleset."""

from boomer_buddy.rulesets.brand_impersonation.ruleset import (
    BrandImpersonationRule,
    BrandImpersonationRuleset,
    BrandImpersonationRulesetData,
)

__all__ = [
    "BrandImpersonationRule",
    "BrandImpersonationRuleset",
    "BrandImpersonationRulesetData",
]
