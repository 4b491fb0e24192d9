"""Tests for RecommendationBuilder."""

import pytest

from boomer_buddy.risk import Indicator, RecommendationBuilder, RiskScorer
from boomer_buddy.rulesets.scam_indicators import ScamIndicatorRulesetData
from boomer_buddy.severity import Severity


def _indicator(data: ScamIndicatorRulesetData, category: str) -> Indicator:
    rule = next(rule for rule in data.rules if rule.name == category)
    return Indicator(
        category=rule.name,
        severity=rule.severity,
        description=rule.description,
        matched=True,
        matched_patterns=(rule.patterns[0],),
    )


@pytest.fixture
def builder(scam_data: ScamIndicatorRulesetData) -> RecommendationBuilder:
    """Recommendation builder over the bundled catalogue."""
    return RecommendationBuilder(scam_data)


class TestRecommendationBuilder:
    """Test recommendation ordering and de-duplication."""

    def test_low_risk_gets_closing_advice_only(
        self, builder: RecommendationBuilder, scam_data: ScamIndicatorRulesetData
    ) -> None:
        """With nothing matched only the closing advice is given."""
        recommendations = builder.build([], Severity.LOW)

        assert recommendations == scam_data.closing_recommendations

    def test_high_risk_starts_with_escalation(
        self, builder: RecommendationBuilder, scam_data: ScamIndicatorRulesetData
    ) -> None:
        """High or critical risk opens with the escalation advice."""
        recommendations = builder.build(
            [_indicator(scam_data, "authority")], Severity.HIGH
        )

        escalation = scam_data.escalation_recommendations
        assert recommendations[: len(escalation)] == escalation
        assert recommendations[-len(scam_data.closing_recommendations) :] == (
            scam_data.closing_recommendations
        )

    def test_medium_risk_has_no_escalation(
        self, builder: RecommendationBuilder, scam_data: ScamIndicatorRulesetData
    ) -> None:
        """Medium risk does not get the escalation advice."""
        recommendations = builder.build(
            [_indicator(scam_data, "prize")], Severity.MEDIUM
        )

        assert not set(scam_data.escalation_recommendations) & set(recommendations)

    def test_guidance_is_ordered_by_severity_then_catalogue(
        self, builder: RecommendationBuilder, scam_data: ScamIndicatorRulesetData
    ) -> None:
        """Critical guidance precedes medium guidance regardless of input order."""
        urgency = _indicator(scam_data, "urgency")
        sensitive = _indicator(scam_data, "sensitiveInfo")
        rules = {rule.name: rule for rule in scam_data.rules}

        recommendations = builder.build([urgency, sensitive], Severity.CRITICAL)

        first_sensitive = recommendations.index(
            rules["sensitiveInfo"].recommendations[0]
        )
        first_urgency = recommendations.index(rules["urgency"].recommendations[0])
        assert first_sensitive < first_urgency

    def test_repeated_advice_is_kept_once(
        self, builder: RecommendationBuilder, scam_data: ScamIndicatorRulesetData
    ) -> None:
        """Advice shared by several indicators appears once."""
        authority = _indicator(scam_data, "authority")

        recommendations = builder.build([authority, authority], Severity.HIGH)

        assert len(recommendations) == len(set(recommendations))

    def test_auxiliary_indicator_guidance_is_included(
        self, builder: RecommendationBuilder, scam_data: ScamIndicatorRulesetData
    ) -> None:
        """Auxiliary indicators contribute their own guidance."""
        aux = scam_data.link_shortener
        indicator = Indicator(
            category=aux.name,
            severity=aux.severity,
            description=aux.description,
            matched=True,
            matched_patterns=("bit.ly",),
        )

        recommendations = builder.build([indicator], Severity.HIGH)

        assert aux.recommendations[0] in recommendations

    def test_assessment_recommendations_have_no_duplicates(
        self, scorer: RiskScorer
    ) -> None:
        """A message firing every category still yields unique advice."""
        assessment = scorer.assess(
            "URGENT IRS notice: account suspended, send your SSN and gift cards. "
            "Your computer is infected. I love you. You won the lottery. "
            "Guaranteed returns. https://bit.ly/x"
        )

        assert len(assessment.recommendations) == len(set(assessment.recommendations))
