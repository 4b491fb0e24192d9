"""Regex pattern matcher."""

import re
from functools import cache

from boomer_buddy.matching.types import PatternMatch, PatternMatchResult, PatternType


@cache
def _compile_regex_pattern(pattern: str) -> re.Pattern[str]:
    """Compile regex pattern with case-insensitive matching."""
    return re.compile(pattern, re.IGNORECASE)


class RegexMatcher:
    """Matches using regex patterns directly.

    Used for value shapes (phone numbers, "within 24 hours", card numbers)
    that a literal phrase cannot express.
    """

    def find_match(self, content: str, pattern: str) -> PatternMatchResult:
        """Find a regex pattern in content.

        Args:
            content: Text to search in
            pattern: Regex pattern to find

        Returns:
            PatternMatchResult with the first match position.

        """
        if not content or not pattern:
            return PatternMatchResult.no_match(pattern)

        match = _compile_regex_pattern(pattern).search(content)
        if match is None:
            return PatternMatchResult.no_match(pattern)

        return PatternMatchResult(
            pattern=pattern,
            first_match=PatternMatch(
                pattern_type=PatternType.REGEX,
                start=match.start(),
                end=match.end(),
            ),
        )

    def contains(self, content: str, pattern: str) -> bool:
        """Return True if the pattern matches anywhere in content."""
        if not content or not pattern:
            return False
        return _compile_regex_pattern(pattern).search(content) is not None

    def replace_all(
        self, content: str, pattern: str, replacement: str
    ) -> tuple[str, int]:
        """Replace every match of a pattern.

        Returns:
            Tuple of (new content, number of replacements made).

        """
        if not content or not pattern:
            return content, 0
        return _compile_regex_pattern(pattern).subn(replacement, content)
