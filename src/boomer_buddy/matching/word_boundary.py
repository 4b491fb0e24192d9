"""Word boundary pattern matcher."""

import re
from functools import cache

from boomer_buddy.matching.types import PatternMatch, PatternMatchResult, PatternType


@cache
def _compile_word_boundary_pattern(pattern: str, whole_word: bool) -> re.Pattern[str]:
    """Compile a literal phrase that must start a word.

    Only alphanumerics count as word characters, so punctuation, hyphens and
    underscores all act as boundaries. Inflections ("arrested", "passwords")
    match unless whole_word also requires a boundary after the phrase.
    """
    escaped = re.escape(pattern)
    suffix = r"(?![a-zA-Z0-9])" if whole_word else ""
    return re.compile(rf"(?<![a-zA-Z0-9]){escaped}{suffix}", re.IGNORECASE)


class WordBoundaryMatcher:
    """Matches literal phrases at the start of words.

    The leading boundary keeps "irs" out of "first"; short tokens that
    prefix ordinary words ("won", "mac") are matched as whole words.
    """

    def find_match(
        self, content: str, pattern: str, whole_word: bool = False
    ) -> PatternMatchResult:
        """Find the first occurrence of a phrase in content.

        Args:
            content: Text to search in
            pattern: Literal phrase to find
            whole_word: Also require a boundary after the phrase

        Returns:
            PatternMatchResult with the first match position.

        """
        if not content or not pattern:
            return PatternMatchResult.no_match(pattern)

        match = _compile_word_boundary_pattern(pattern, whole_word).search(content)
        if match is None:
            return PatternMatchResult.no_match(pattern)

        return PatternMatchResult(
            pattern=pattern,
            first_match=PatternMatch(
                pattern_type=PatternType.WORD_BOUNDARY,
                start=match.start(),
                end=match.end(),
            ),
        )
