"""Ordinal severity scale shared by rules, indicators and assessments."""

from collections.abc import Iterable
from enum import Enum


class Severity(str, Enum):
    """Severity of a scam indicator, ordered low < medium < high < critical."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Numeric rank used for ordering (1 = low, 4 = critical)."""
        match self:
            case Severity.LOW:
                return 1
            case Severity.MEDIUM:
                return 2
            case Severity.HIGH:
                return 3
            case Severity.CRITICAL:
                return 4

    def at_least(self, other: "Severity") -> bool:
        """Return True if this severity ranks at or above ``other``."""
        return self.rank >= other.rank


def max_severity(severities: Iterable[Severity]) -> Severity:
    """Return the highest severity, or LOW when there are none."""
    return max(severities, key=lambda s: s.rank, default=Severity.LOW)
