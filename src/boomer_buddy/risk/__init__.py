"""Scam-risk scoring: assessment, quick check and recommendations."""

from boomer_buddy.risk.config import (
    DEFAULT_MAX_INPUT_CHARS,
    DEFAULT_RULESET_URI,
    RiskScorerConfig,
)
from boomer_buddy.risk.recommendations import RecommendationBuilder
from boomer_buddy.risk.scorer import RiskScorer, assess, get_default_scorer, quick_check
from boomer_buddy.risk.types import Indicator, QuickCheckVerdict, RiskAssessment

__all__ = [
    "DEFAULT_MAX_INPUT_CHARS",
    "DEFAULT_RULESET_URI",
    "Indicator",
    "QuickCheckVerdict",
    "RecommendationBuilder",
    "RiskAssessment",
    "RiskScorer",
    "RiskScorerConfig",
    "assess",
    "get_default_scorer",
    "quick_check",
]
