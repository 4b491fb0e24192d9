"""Recommendation generator."""

from collections.abc import Sequence

from boomer_buddy.risk.types import Indicator
from boomer_buddy.rulesets.scam_indicators import ScamIndicatorRulesetData
from boomer_buddy.severity import Severity


class RecommendationBuilder:
    """Builds the ordered, de-duplicated advice list for an assessment.

    Order:
        1. Escalation advice, when the overall risk is high or critical
        2. Guidance for each matched indicator, highest severity first and
           catalogue order within a severity
        3. Closing advice, always last

    A recommendation repeated by several indicators keeps its first position.
    """

    def __init__(self, data: ScamIndicatorRulesetData) -> None:
        """Index guidance and catalogue position for every indicator name."""
        self._escalation = data.escalation_recommendations
        self._closing = data.closing_recommendations
        self._guidance: dict[str, tuple[str, ...]] = {
            rule.name: rule.recommendations for rule in data.rules
        }
        self._guidance[data.link_shortener.name] = data.link_shortener.recommendations
        self._guidance[data.suspicious_caller.name] = (
            data.suspicious_caller.recommendations
        )
        self._catalogue_order = {name: i for i, name in enumerate(self._guidance)}

    def build(
        self, matched: Sequence[Indicator], overall_risk: Severity
    ) -> tuple[str, ...]:
        """Return recommendations for the matched indicators."""
        recommendations: list[str] = []

        if overall_risk.at_least(Severity.HIGH):
            recommendations.extend(self._escalation)

        unknown_position = len(self._catalogue_order)
        prioritised = sorted(
            matched,
            key=lambda indicator: (
                -indicator.severity.rank,
                self._catalogue_order.get(indicator.category, unknown_position),
            ),
        )
        for indicator in prioritised:
            recommendations.extend(self._guidance.get(indicator.category, ()))

        recommendations.extend(self._closing)

        return tuple(dict.fromkeys(recommendations))
