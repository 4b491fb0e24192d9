"""Abstract base classes for rulesets."""

import abc
import logging
import sys
from pathlib import Path
from typing import Any, ClassVar

import yaml

from boomer_buddy.rulesets.types import Rule, RulesetData

logger = logging.getLogger(__name__)


class AbstractRuleset[RuleType: Rule](abc.ABC):
    """Ruleset with strongly typed, immutable rules.

    Each ruleset must define:
    - ruleset_name: ClassVar[str] - canonical name for registry
    - ruleset_version: ClassVar[str] - semantic version string
    - name property - returns ruleset_name (for instance access)
    - version property - returns ruleset_version (for instance access)
    """

    ruleset_name: ClassVar[str]
    ruleset_version: ClassVar[str]

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Get the canonical name of this ruleset."""

    @property
    @abc.abstractmethod
    def version(self) -> str:
        """Get the version of this ruleset in semantic versioning format."""

    @abc.abstractmethod
    def get_rules(self) -> tuple[RuleType, ...]:
        """Get the rules defined by this ruleset.

        Returns:
            Immutable tuple of RuleType objects

        """

    @property
    def uri(self) -> str:
        """Get the local URI of this ruleset (e.g., 'local/scam_indicators/1.0.0')."""
        return f"local/{self.name}/{self.version}"


class YAMLRuleset[RuleType: Rule](AbstractRuleset[RuleType]):
    """Base class for YAML-backed rulesets.

    Subclasses need only define ClassVars:
        ruleset_name: Canonical name for the ruleset
        ruleset_version: Semantic version string
        _data_class: The RulesetData subclass for parsing YAML

    The YAML file is expected at:
        {subclass_module_dir}/data/{version}/{name}.yaml

    For rulesets that carry data beyond rules (e.g., scoring policy),
    use _load_data() to access the full RulesetData object.
    """

    _data_class: ClassVar[type[RulesetData[Any]]]

    def __init__(self) -> None:
        """Initialise the YAML-backed ruleset."""
        self._rules_cache: tuple[RuleType, ...] | None = None
        self._data_cache: RulesetData[RuleType] | None = None
        logger.debug(
            "Initialised %s ruleset v%s", self.ruleset_name, self.ruleset_version
        )

    @property
    def name(self) -> str:
        """Get the canonical name of this ruleset."""
        return self.ruleset_name

    @property
    def version(self) -> str:
        """Get the version of this ruleset."""
        return self.ruleset_version

    def _get_data_file_path(self) -> Path:
        """Get the path to the YAML data file.

        Uses the concrete subclass's module location so each ruleset package
        ships its own data/ directory.
        """
        module = sys.modules[self.__class__.__module__]
        module_file = module.__file__
        if module_file is None:
            msg = f"Cannot determine file path for module {self.__class__.__module__}"
            raise RuntimeError(msg)
        return (
            Path(module_file).parent
            / "data"
            / self.ruleset_version
            / f"{self.ruleset_name}.yaml"
        )

    def _load_data(self) -> RulesetData[RuleType]:
        """Load and cache the ruleset data from YAML.

        Returns:
            The parsed and validated RulesetData object.

        """
        if self._data_cache is None:
            yaml_file = self._get_data_file_path()
            with yaml_file.open("r", encoding="utf-8") as f:
                raw_data = yaml.safe_load(f)
            self._data_cache = self._data_class.model_validate(raw_data)
            logger.debug(
                "Loaded %d rules from %s", len(self._data_cache.rules), self.name
            )
        return self._data_cache

    def get_rules(self) -> tuple[RuleType, ...]:
        """Get the rules loaded from the YAML file."""
        if self._rules_cache is None:
            self._rules_cache = tuple(self._load_data().rules)
        return self._rules_cache
