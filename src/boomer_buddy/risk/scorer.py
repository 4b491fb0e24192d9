"""Scam-risk scorer.

Runs every pattern category of the scam indicator ruleset against a message
and reduces the matches to an overall severity, a heuristic confidence and
ordered advice. Scoring is pure: a scorer holds only immutable ruleset data
after construction and may be shared between threads.
"""

import logging
import threading

from boomer_buddy.errors import RulesetError
from boomer_buddy.matching import HostMatcher, RegexMatcher, RulePatternDispatcher
from boomer_buddy.risk.config import RiskScorerConfig
from boomer_buddy.risk.input_validation import (
    national_number,
    validate_caller_number,
    validate_text,
)
from boomer_buddy.risk.recommendations import RecommendationBuilder
from boomer_buddy.risk.types import Indicator, QuickCheckVerdict, RiskAssessment
from boomer_buddy.rulesets.loader import RulesetLoader
from boomer_buddy.rulesets.scam_indicators import (
    AuxiliaryIndicator,
    QuickCheckPattern,
    ScamIndicatorRule,
    ScamIndicatorRuleset,
)
from boomer_buddy.severity import Severity, max_severity

logger = logging.getLogger(__name__)


class RiskScorer:
    """Scores messages against an injected scam indicator ruleset."""

    def __init__(
        self,
        config: RiskScorerConfig | None = None,
        ruleset: ScamIndicatorRuleset | None = None,
    ) -> None:
        """Initialise the scorer.

        Args:
            config: Scorer configuration; defaults to RiskScorerConfig()
            ruleset: Ruleset instance to use; loaded from config.ruleset
                when omitted

        Raises:
            RulesetError: If the configured ruleset cannot be loaded or does
                not carry scam indicator data

        """
        self._config = config or RiskScorerConfig()
        if ruleset is None:
            ruleset = self._load_ruleset(self._config.ruleset)

        self._data = ruleset.get_data()
        self._rules_by_name = {rule.name: rule for rule in self._data.rules}
        self._ruleset_uri = ruleset.uri
        self._dispatcher = RulePatternDispatcher()
        self._regex = RegexMatcher()
        self._hosts = HostMatcher()
        self._recommendations = RecommendationBuilder(self._data)

        logger.debug("RiskScorer ready with ruleset %s", self._ruleset_uri)

    @staticmethod
    def _load_ruleset(uri: str) -> ScamIndicatorRuleset:
        try:
            instance = RulesetLoader.load_ruleset_instance(uri, ScamIndicatorRule)
        except TypeError as e:
            raise RulesetError(
                f"Ruleset '{uri}' is not a scam indicator ruleset"
            ) from e
        if not isinstance(instance, ScamIndicatorRuleset):
            raise RulesetError(
                f"Ruleset '{uri}' is not a scam indicator ruleset "
                f"(got {type(instance).__name__})"
            )
        return instance

    @property
    def config(self) -> RiskScorerConfig:
        """Configuration this scorer was built with."""
        return self._config

    @property
    def ruleset_uri(self) -> str:
        """URI of the ruleset this scorer scores against."""
        return self._ruleset_uri

    def assess(
        self, text: str | bytes, caller_number: str | None = None
    ) -> RiskAssessment:
        """Assess a message for scam risk.

        Args:
            text: Message text, or UTF-8 bytes
            caller_number: Optional number the message or call came from

        Returns:
            RiskAssessment with every category indicator, in catalogue order,
            followed by any auxiliary indicators that fired.

        Raises:
            InvalidInputError: If text or caller_number is not valid input
            InputTooLargeError: If text exceeds the configured cap

        """
        content = validate_text(text, self._config.max_input_chars)
        caller = validate_caller_number(caller_number)

        indicators = [
            self._category_indicator(content, rule) for rule in self._data.rules
        ]

        link_shortener = self._data.link_shortener
        shortener_hosts = self._hosts.find_domains(content, link_shortener.domains)
        if shortener_hosts:
            indicators.append(
                self._auxiliary_indicator(link_shortener, shortener_hosts)
            )

        if caller is not None:
            evidence = self._caller_evidence(caller)
            if evidence:
                indicators.append(
                    self._auxiliary_indicator(self._data.suspicious_caller, evidence)
                )

        matched = [indicator for indicator in indicators if indicator.matched]
        overall_risk = max_severity(indicator.severity for indicator in matched)
        scoring = self._data.scoring

        assessment = RiskAssessment(
            overall_risk=overall_risk,
            confidence=scoring.confidence_for(len(matched)),
            indicators=tuple(indicators),
            recommendations=self._recommendations.build(matched, overall_risk),
            immediate_action_required=(
                overall_risk is Severity.CRITICAL
                or len(matched) >= scoring.immediate_action_min_matches
            ),
            contains_phone_number=self._regex.contains(
                content, self._data.phone_number_pattern
            ),
            contains_url=self._regex.contains(content, self._data.url_pattern),
            ruleset=self._ruleset_uri,
        )

        logger.debug(
            "Assessed %d characters: risk=%s confidence=%d matched=%d",
            len(content),
            assessment.overall_risk.value,
            assessment.confidence,
            len(matched),
        )
        return assessment

    def quick_check(self, text: str | bytes) -> QuickCheckVerdict:
        """Classify a message with the reduced quick-check pattern set.

        Every quick-check pattern belongs to a high or critical category, so
        any non-safe verdict implies assess() reports at least high.

        Raises:
            InvalidInputError: If text is not valid input
            InputTooLargeError: If text exceeds the configured cap

        """
        content = validate_text(text, self._config.max_input_chars)
        policy = self._data.quick_check

        hits = sum(
            1 for entry in policy.patterns if self._quick_check_hit(content, entry)
        )

        if hits >= policy.dangerous_at:
            verdict = QuickCheckVerdict.DANGEROUS
        elif hits >= policy.suspicious_at:
            verdict = QuickCheckVerdict.SUSPICIOUS
        else:
            verdict = QuickCheckVerdict.SAFE

        logger.debug("Quick check: %d hits -> %s", hits, verdict.value)
        return verdict

    def _category_indicator(self, content: str, rule: ScamIndicatorRule) -> Indicator:
        matched_patterns = self._dispatcher.matched_patterns(content, rule)
        return Indicator(
            category=rule.name,
            severity=rule.severity,
            description=rule.description,
            matched=bool(matched_patterns),
            matched_patterns=matched_patterns,
        )

    @staticmethod
    def _auxiliary_indicator(
        aux: AuxiliaryIndicator, matched_patterns: tuple[str, ...]
    ) -> Indicator:
        return Indicator(
            category=aux.name,
            severity=aux.severity,
            description=aux.description,
            matched=True,
            matched_patterns=matched_patterns,
        )

    def _caller_evidence(self, caller: str) -> tuple[str, ...]:
        """Return the parts of a caller's number that look like a scam source."""
        number = national_number(caller)
        if len(number) != 10:
            return ()

        policy = self._data.suspicious_caller
        evidence: list[str] = []
        prefix = next((p for p in policy.prefixes if number.startswith(p)), None)
        if prefix is not None:
            evidence.append(prefix)
        if number in policy.known_numbers:
            evidence.append(number)

        run_pattern = policy.repeated_digit_pattern()
        if run_pattern is not None:
            run = self._regex.find_match(number, run_pattern).first_match
            if run is not None:
                evidence.append(number[run.start : run.end])

        return tuple(evidence)

    def _quick_check_hit(self, content: str, entry: QuickCheckPattern) -> bool:
        if entry.phrase is not None:
            rule = self._rules_by_name[entry.category]
            return self._dispatcher.matches_phrase(
                content, entry.phrase, whole_word=rule.is_whole_word(entry.phrase)
            )
        if entry.regex is not None:
            return self._dispatcher.matches_regex(content, entry.regex)
        return False


_default_scorer: RiskScorer | None = None
_default_scorer_lock = threading.Lock()


def get_default_scorer() -> RiskScorer:
    """Return the process-wide scorer, creating it on first use.

    The default scorer reads its configuration from the environment
    (see RiskScorerConfig.from_properties).
    """
    global _default_scorer
    if _default_scorer is None:
        with _default_scorer_lock:
            if _default_scorer is None:
                _default_scorer = RiskScorer(RiskScorerConfig.from_properties({}))
    return _default_scorer


def assess(text: str | bytes, caller_number: str | None = None) -> RiskAssessment:
    """Assess a message with the default scorer."""
    return get_default_scorer().assess(text, caller_number)


def quick_check(text: str | bytes) -> QuickCheckVerdict:
    """Quick-check a message with the default scorer."""
    return get_default_scorer().quick_check(text)
