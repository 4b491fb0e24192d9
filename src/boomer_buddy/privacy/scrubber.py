"""Client-side PII scrubber."""

import logging

from boomer_buddy.errors import RulesetError
from boomer_buddy.matching import RegexMatcher
from boomer_buddy.privacy.types import ScrubResult
from boomer_buddy.risk.config import DEFAULT_MAX_INPUT_CHARS
from boomer_buddy.risk.input_validation import validate_text
from boomer_buddy.rulesets.loader import RulesetLoader
from boomer_buddy.rulesets.pii_patterns import (
    PiiPatternRule,
    PiiPatternRuleset,
    PiiPatternRulesetData,
)

logger = logging.getLogger(__name__)

DEFAULT_PII_RULESET_URI = "local/pii_patterns/1.0.0"


class PiiScrubber:
    """Removes personal data from text before it leaves the device.

    Hard-block types (SSNs, card numbers) withhold the entire text. Every
    other type is replaced in place with ``[REDACTED_<TYPE>]``, applying the
    rules in ruleset order to the progressively scrubbed text.
    """

    def __init__(
        self,
        ruleset: PiiPatternRuleset | None = None,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
    ) -> None:
        """Initialise the scrubber.

        Args:
            ruleset: PII ruleset to use; the bundled one when omitted
            max_input_chars: Longest input accepted

        """
        if ruleset is None:
            instance = RulesetLoader.load_ruleset_instance(
                DEFAULT_PII_RULESET_URI, PiiPatternRule
            )
            if not isinstance(instance, PiiPatternRuleset):
                raise RulesetError(
                    f"Ruleset '{DEFAULT_PII_RULESET_URI}' is not a PII pattern ruleset"
                )
            ruleset = instance

        self._data: PiiPatternRulesetData = ruleset.get_data()
        self._max_input_chars = max_input_chars
        self._regex = RegexMatcher()

    def scrub_text(self, text: str | bytes) -> ScrubResult:
        """Scrub PII from text.

        Raises:
            InvalidInputError: If text is not valid input
            InputTooLargeError: If text exceeds the size cap

        """
        content = validate_text(text, self._max_input_chars)

        if self.contains_hard_block(content):
            logger.debug("Hard-block PII found; withholding text")
            return ScrubResult(
                scrubbed_text=self._data.blocked_placeholder,
                has_pii=True,
                blocked_types=(self._data.hard_block_label,),
                hard_blocked=True,
            )

        scrubbed = content
        found: list[str] = []
        for rule in self._data.rules:
            if rule.hard_block:
                continue
            for pattern in rule.value_patterns:
                scrubbed, count = self._regex.replace_all(
                    scrubbed, pattern, rule.placeholder
                )
                if count and rule.label not in found:
                    found.append(rule.label)

        logger.debug("Scrubbed %d PII types", len(found))
        return ScrubResult(
            scrubbed_text=scrubbed,
            has_pii=bool(found),
            blocked_types=tuple(found),
        )

    def contains_hard_block(self, text: str) -> bool:
        """Return True if text holds PII that must never be transmitted."""
        return any(
            self._regex.contains(text, pattern)
            for rule in self._data.rules
            if rule.hard_block
            for pattern in rule.value_patterns
        )

    @property
    def hard_block_label(self) -> str:
        """Blocked type reported for hard-blocked text."""
        return self._data.hard_block_label
