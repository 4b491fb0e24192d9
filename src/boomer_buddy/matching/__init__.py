"""Pattern matching components.

This package provides composable pattern matchers:
- WordBoundaryMatcher: Matches literal phrases at alphanumeric word boundaries
- RegexMatcher: Matches using regex patterns directly
- HostMatcher: Matches domain names only where they stand as a whole host
- RulePatternDispatcher: Routes DetectionRule patterns to the appropriate matcher
"""

from boomer_buddy.matching.host import HostMatcher
from boomer_buddy.matching.regex import RegexMatcher
from boomer_buddy.matching.rule_pattern_dispatcher import RulePatternDispatcher
from boomer_buddy.matching.types import PatternMatch, PatternMatchResult, PatternType
from boomer_buddy.matching.word_boundary import WordBoundaryMatcher

__all__ = [
    "HostMatcher",
    "PatternMatch",
    "PatternMatchResult",
    "PatternType",
    "RegexMatcher",
    "RulePatternDispatcher",
    "WordBoundaryMatcher",
]
