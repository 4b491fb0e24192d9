"""Result types produced by the risk scorer."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from boomer_buddy.severity import Severity


class QuickCheckVerdict(str, Enum):
    """Three-bucket outcome of the quick check."""

    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"


class _CamelModel(BaseModel):
    """Frozen model that serialises with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase JSON shape shared with web and mobile clients."""
        return self.model_dump(mode="json", by_alias=True)


class Indicator(_CamelModel):
    """Outcome of testing one pattern category or auxiliary indicator."""

    category: str = Field(description="Category or auxiliary indicator name")
    severity: Severity
    description: str
    matched: bool
    matched_patterns: tuple[str, ...] = Field(
        default=(), description="Patterns that fired; empty when unmatched"
    )


class RiskAssessment(_CamelModel):
    """Complete scam-risk assessment of one message."""

    overall_risk: Severity
    confidence: int = Field(ge=0, le=100)
    indicators: tuple[Indicator, ...]
    recommendations: tuple[str, ...]
    immediate_action_required: bool
    contains_phone_number: bool = False
    contains_url: bool = False
    ruleset: str = Field(description="URI of the ruleset that produced this result")

    @property
    def matched_indicators(self) -> tuple[Indicator, ...]:
        """Indicators that fired, in assessment order."""
        return tuple(indicator for indicator in self.indicators if indicator.matched)

    @property
    def matched_categories(self) -> tuple[str, ...]:
        """Names of the indicators that fired."""
        return tuple(indicator.category for indicator in self.matched_indicators)
