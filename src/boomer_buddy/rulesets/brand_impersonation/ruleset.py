"""Brand impersonation ruleset.

Names of organisations scammers most often pretend to be. Matches feed the
``brand_suspects`` field of privacy-safe feature vectors.
"""

from typing import ClassVar

from pydantic import Field

from boomer_buddy.rulesets.base import YAMLRuleset
from boomer_buddy.rulesets.types import DetectionRule, RulesetData


class BrandImpersonationRule(DetectionRule):
    """Phrases that indicate a message claims to come from one brand."""

    display_name: str = Field(min_length=1, description="Human-readable brand name")


class BrandImpersonationRulesetData(RulesetData[BrandImpersonationRule]):
    """Brand impersonation ruleset data structure."""


class BrandImpersonationRuleset(YAMLRuleset[BrandImpersonationRule]):
    """Ruleset of commonly impersonated brands."""

    ruleset_name: ClassVar[str] = "brand_impersonation"
    ruleset_version: ClassVar[str] = "1.0.0"
    _data_class: ClassVar[type[BrandImpersonationRulesetData]] = (
        BrandImpersonationRulesetData
    )
