"""Value types returned by the pattern matchers."""

from dataclasses import dataclass
from enum import Enum


class PatternType(Enum):
    """Type of pattern matching strategy.

    WORD_BOUNDARY: Literal phrase matched where it starts a word, so
        "arrest" fires on "arrested". Phrases marked as whole words must
        also end one ("won" does not fire on "wonderful").

    REGEX: Full regex matching for variable shapes such as "within 24 hours".

    HOST: Domain name matched only where it is a whole host, so "t.co" does
        not fire on "microsoft.com".
    """

    WORD_BOUNDARY = "word_boundary"
    REGEX = "regex"
    HOST = "host"


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """A single pattern match with position information.

    Attributes:
        pattern_type: Which matching strategy produced this match
        start: Start position (inclusive) in the content
        end: End position (exclusive) in the content

    """

    pattern_type: PatternType
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class PatternMatchResult:
    """Result of searching for one pattern in content.

    Matchers stop at the first occurrence; scoring only needs to know that a
    pattern fired.

    Attributes:
        pattern: The pattern that was searched for
        first_match: The first match found, or None if no matches

    """

    pattern: str
    first_match: PatternMatch | None

    @property
    def matched(self) -> bool:
        """Whether the pattern matched at least once."""
        return self.first_match is not None

    @classmethod
    def no_match(cls, pattern: str) -> "PatternMatchResult":
        """Build an empty result for a pattern."""
        return cls(pattern=pattern, first_match=None)
