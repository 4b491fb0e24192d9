"""Rule pattern dispatcher."""

from boomer_buddy.matching.regex import RegexMatcher
from boomer_buddy.matching.types import PatternMatchResult
from boomer_buddy.matching.word_boundary import WordBoundaryMatcher
from boomer_buddy.rulesets.types import DetectionRule


class RulePatternDispatcher:
    """Routes DetectionRule patterns to appropriate matchers.

    - rule.patterns → WordBoundaryMatcher, whole words where the rule says so
    - rule.value_patterns → RegexMatcher
    """

    def __init__(self) -> None:
        """Initialise dispatcher with word boundary and regex matchers."""
        self._word_boundary = WordBoundaryMatcher()
        self._regex = RegexMatcher()

    def find_matches(
        self, content: str, rule: DetectionRule
    ) -> list[PatternMatchResult]:
        """Find all pattern matches for a rule.

        Args:
            content: Text to search
            rule: Detection rule with patterns and/or value_patterns

        Returns:
            List of match results, one per pattern that matched, phrases
            first then regexes, each in rule order.

        """
        if not content.strip():
            return []

        results: list[PatternMatchResult] = []

        for pattern in rule.patterns:
            result = self._word_boundary.find_match(
                content, pattern, whole_word=rule.is_whole_word(pattern)
            )
            if result.matched:
                results.append(result)

        for pattern in rule.value_patterns:
            result = self._regex.find_match(content, pattern)
            if result.matched:
                results.append(result)

        return results

    def matched_patterns(self, content: str, rule: DetectionRule) -> tuple[str, ...]:
        """Return the patterns of a rule that match content."""
        return tuple(result.pattern for result in self.find_matches(content, rule))

    def matches_phrase(
        self, content: str, phrase: str, whole_word: bool = False
    ) -> bool:
        """Return True if a single phrase starts a word in content."""
        return self._word_boundary.find_match(content, phrase, whole_word).matched

    def matches_regex(self, content: str, pattern: str) -> bool:
        """Return True if a single regex matches anywhere."""
        return self._regex.contains(content, pattern)
