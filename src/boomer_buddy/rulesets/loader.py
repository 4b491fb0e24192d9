"""Ruleset URIs and the loader that resolves them."""

import logging
import re
from dataclasses import dataclass
from typing import override

from boomer_buddy.errors import RulesetURIParseError, UnsupportedProviderError
from boomer_buddy.rulesets.base import AbstractRuleset
from boomer_buddy.rulesets.registry import RulesetRegistry
from boomer_buddy.rulesets.types import Rule

logger = logging.getLogger(__name__)

_SEMVER = re.compile(r"^\d+\.\d+\.\d+$")


@dataclass(frozen=True)
class RulesetURI:
    """Ruleset address in the form ``{provider}/{name}/{version}``.

    Examples:
        - local/scam_indicators/1.0.0
        - local/pii_patterns/1.0.0

    """

    provider: str
    name: str
    version: str

    @classmethod
    def parse(cls, uri: str) -> "RulesetURI":
        """Parse a ruleset URI string into components.

        Raises:
            RulesetURIParseError: If the URI does not have three non-empty
                parts or the version is not semantic (x.y.z)

        """
        parts = uri.strip().split("/")
        if len(parts) != 3 or not all(parts):
            raise RulesetURIParseError(
                f"Invalid ruleset URI format: '{uri}'. "
                "Expected provider/name/version (e.g., 'local/scam_indicators/1.0.0')"
            )

        provider, name, version = parts
        if not _SEMVER.match(version):
            raise RulesetURIParseError(
                f"Invalid ruleset version '{version}' in URI '{uri}'. "
                "Expected semantic version x.y.z"
            )
        return cls(provider=provider, name=name, version=version)

    @override
    def __str__(self) -> str:
        return f"{self.provider}/{self.name}/{self.version}"


class RulesetLoader:
    """Loads rulesets by URI.

    Currently supported providers:
        - local: Rulesets bundled with this package and registered in
          RulesetRegistry

    """

    _SUPPORTED_PROVIDERS = frozenset({"local"})

    @classmethod
    def load_ruleset[T: Rule](
        cls, ruleset_uri: str, rule_type: type[T]
    ) -> tuple[T, ...]:
        """Load the rules of a ruleset.

        Args:
            ruleset_uri: URI in format provider/name/version
            rule_type: The expected rule type for validation and typing

        Returns:
            Immutable tuple of rules

        Raises:
            RulesetURIParseError: If URI format is invalid
            UnsupportedProviderError: If provider is not supported
            RulesetNotFoundError: If ruleset is not registered

        """
        return cls.load_ruleset_instance(ruleset_uri, rule_type).get_rules()

    @classmethod
    def load_ruleset_instance[T: Rule](
        cls, ruleset_uri: str, rule_type: type[T]
    ) -> AbstractRuleset[T]:
        """Load a ruleset instance, giving access to its full data.

        Unlike load_ruleset(), this returns the ruleset object so callers can
        reach ruleset-specific data (e.g., scoring policy, quick-check
        patterns) as well as the rules.

        Raises:
            RulesetURIParseError: If URI format is invalid
            UnsupportedProviderError: If provider is not supported
            RulesetNotFoundError: If ruleset is not registered
            TypeError: If the registered rule type differs from rule_type

        """
        uri = RulesetURI.parse(ruleset_uri)

        if uri.provider not in cls._SUPPORTED_PROVIDERS:
            raise UnsupportedProviderError(
                f"Unsupported ruleset provider: '{uri.provider}'. "
                f"Supported providers: {', '.join(sorted(cls._SUPPORTED_PROVIDERS))}"
            )

        logger.debug("Loading ruleset: %s (type: %s)", uri, rule_type.__name__)
        ruleset_class = RulesetRegistry().get_ruleset_class(
            uri.name, uri.version, rule_type
        )
        return ruleset_class()
