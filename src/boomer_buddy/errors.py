"""Error classes for Boomer Buddy.

This module provides:
- BoomerBuddyError: Base exception class for all package errors
- InvalidInputError, InputTooLargeError: Input rejected before pattern matching
- SensitiveDataBlockedError: Hard-block PII prevented feature extraction
- RulesetError and its subclasses: Ruleset lookup and URI problems
"""


class BoomerBuddyError(Exception):
    """Base exception for all Boomer Buddy errors."""

    pass


class InvalidInputError(BoomerBuddyError):
    """Raised when input is not text (None, non-UTF-8 bytes, binary content)."""

    pass


class InputTooLargeError(BoomerBuddyError):
    """Raised when input exceeds the configured size cap."""

    def __init__(self, length: int, limit: int) -> None:
        """Initialise with the offending length and the cap.

        Args:
            length: Number of characters in the rejected input
            limit: Maximum number of characters accepted

        """
        super().__init__(
            f"Input of {length} characters exceeds the limit of {limit} characters"
        )
        self.length = length
        self.limit = limit


class SensitiveDataBlockedError(BoomerBuddyError):
    """Raised when text contains hard-block PII (SSN, credit card numbers)."""

    pass


class RulesetError(BoomerBuddyError):
    """Base exception for ruleset-related errors."""

    pass


class RulesetURIParseError(RulesetError):
    """Raised when a ruleset URI cannot be parsed."""

    pass


class UnsupportedProviderError(RulesetError):
    """Raised when a ruleset provider is not supported."""

    pass


class RulesetNotFoundError(RulesetError):
    """Raised when a requested ruleset cannot be found."""

    pass
