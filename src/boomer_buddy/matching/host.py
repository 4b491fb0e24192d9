"""Host name matcher for link domains."""

import re
from functools import cache

from boomer_buddy.matching.types import PatternMatch, PatternMatchResult, PatternType


@cache
def _compile_host_pattern(domain: str) -> re.Pattern[str]:
    """Compile a domain so it only matches as a complete host label sequence.

    A letter, digit or hyphen on either side means the domain is part of a
    longer host ("microsoft.com" contains "t.co" but is not "t.co").
    """
    escaped = re.escape(domain)
    return re.compile(rf"(?<![a-zA-Z0-9-]){escaped}(?![a-zA-Z0-9-])", re.IGNORECASE)


class HostMatcher:
    """Matches domain names where they appear as a host."""

    def find_match(self, content: str, domain: str) -> PatternMatchResult:
        """Find a domain in content.

        Args:
            content: Text to search in
            domain: Domain name such as "bit.ly"

        Returns:
            PatternMatchResult with the first match position.

        """
        if not content or not domain:
            return PatternMatchResult.no_match(domain)

        match = _compile_host_pattern(domain).search(content)
        if match is None:
            return PatternMatchResult.no_match(domain)

        return PatternMatchResult(
            pattern=domain,
            first_match=PatternMatch(
                pattern_type=PatternType.HOST, start=match.start(), end=match.end()
            ),
        )

    def find_domains(self, content: str, domains: tuple[str, ...]) -> tuple[str, ...]:
        """Return the domains that appear as hosts, in the order given."""
        return tuple(
            domain for domain in domains if self.find_match(content, domain).matched
        )
