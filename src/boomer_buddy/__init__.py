"""Boomer Buddy: heuristic scam-risk scoring for suspicious messages.

Typical use:
    from boomer_buddy import assess

    result = assess("Your account is suspended. Verify your account now.")
    result.overall_risk      # Severity.HIGH
    result.recommendations   # ordered advice
"""

from boomer_buddy.errors import (
    BoomerBuddyError,
    InputTooLargeError,
    InvalidInputError,
    RulesetError,
    SensitiveDataBlockedError,
)
from boomer_buddy.privacy import (
    Channel,
    FeatureVector,
    PiiScrubber,
    ScrubResult,
    create_feature_vector,
)
from boomer_buddy.risk import (
    Indicator,
    QuickCheckVerdict,
    RiskAssessment,
    RiskScorer,
    RiskScorerConfig,
    assess,
    quick_check,
)
from boomer_buddy.severity import Severity

__all__ = [
    # Errors
    "BoomerBuddyError",
    "InputTooLargeError",
    "InvalidInputError",
    "RulesetError",
    "SensitiveDataBlockedError",
    # Risk scoring
    "Indicator",
    "QuickCheckVerdict",
    "RiskAssessment",
    "RiskScorer",
    "RiskScorerConfig",
    "Severity",
    "assess",
    "quick_check",
    # Privacy
    "Channel",
    "FeatureVector",
    "PiiScrubber",
    "ScrubResult",
    "create_feature_vector",
]
