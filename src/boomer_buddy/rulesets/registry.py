"""Registry of ruleset classes keyed by name and version."""

import logging
import threading
from importlib.metadata import entry_points
from typing import Any, ClassVar, TypedDict, get_args

from boomer_buddy.errors import RulesetNotFoundError
from boomer_buddy.rulesets.base import AbstractRuleset
from boomer_buddy.rulesets.types import Rule

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "boomer_buddy.rulesets"


def extract_rule_type(ruleset_class: type[AbstractRuleset[Any]]) -> type[Rule]:
    """Extract the Rule type from a ruleset class's generic parameter.

    Walks the class hierarchy's ``__orig_bases__`` looking for a parameter
    such as ``YAMLRuleset[ScamIndicatorRule]``.

    Raises:
        ValueError: If the rule type cannot be extracted from the class

    """
    for klass in ruleset_class.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            args = get_args(base)
            if args and isinstance(args[0], type) and issubclass(args[0], Rule):
                return args[0]

    raise ValueError(
        f"Cannot extract rule type from {ruleset_class.__name__}. "
        "Class must inherit from AbstractRuleset[T] where T is a Rule subclass."
    )


class RulesetRegistryState(TypedDict):
    """Snapshot of RulesetRegistry contents, used for test isolation."""

    registry: dict[tuple[str, str], type[AbstractRuleset[Any]]]
    type_mapping: dict[tuple[str, str], type[Rule]]


class RulesetRegistry:
    """Type-aware singleton registry for ruleset classes."""

    _lock: ClassVar[threading.Lock] = threading.Lock()
    _instance: "RulesetRegistry | None" = None
    _registry: dict[tuple[str, str], type[AbstractRuleset[Any]]]
    _type_mapping: dict[tuple[str, str], type[Rule]]

    def __new__(cls) -> "RulesetRegistry":
        """Create or return the singleton instance.

        Uses double-checked locking so concurrent first use creates exactly
        one instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._registry = {}
                    instance._type_mapping = {}
                    cls._instance = instance
        return cls._instance

    def register[T: Rule](
        self, ruleset_class: type[AbstractRuleset[T]], rule_type: type[T]
    ) -> None:
        """Register a ruleset class under its ``ruleset_name``/``ruleset_version``.

        Registration is idempotent; re-registering the same key is ignored.

        Raises:
            ValueError: If ruleset_class is missing required ClassVars

        """
        name = getattr(ruleset_class, "ruleset_name", None)
        version = getattr(ruleset_class, "ruleset_version", None)

        if name is None:
            raise ValueError(
                f"Ruleset class {ruleset_class.__name__} must define "
                "'ruleset_name' ClassVar"
            )
        if version is None:
            raise ValueError(
                f"Ruleset class {ruleset_class.__name__} must define "
                "'ruleset_version' ClassVar"
            )

        key = (name, version)
        with self._lock:
            if key in self._registry:
                return
            self._registry[key] = ruleset_class
            self._type_mapping[key] = rule_type
        logger.debug("Registered ruleset %s/%s", name, version)

    def get_ruleset_class[T: Rule](
        self, name: str, version: str, expected_rule_type: type[T]
    ) -> type[AbstractRuleset[T]]:
        """Get a registered ruleset class with type validation.

        Raises:
            RulesetNotFoundError: If the ruleset name+version is not registered
            TypeError: If the expected type doesn't match the registered type

        """
        key = (name, version)
        if key not in self._registry:
            available = self.get_available_versions(name)
            if available:
                raise RulesetNotFoundError(
                    f"Ruleset '{name}' version '{version}' not registered. "
                    f"Available versions: {', '.join(available)}"
                )
            raise RulesetNotFoundError(
                f"Ruleset '{name}' not registered (no versions available)"
            )

        actual_rule_type = self._type_mapping[key]
        if actual_rule_type is not expected_rule_type:
            raise TypeError(
                f"Ruleset '{name}' returns {actual_rule_type.__name__}, "
                f"but {expected_rule_type.__name__} was expected"
            )

        return self._registry[key]

    def clear(self) -> None:
        """Remove every registered ruleset."""
        with self._lock:
            self._registry.clear()
            self._type_mapping.clear()

    def is_empty(self) -> bool:
        """Check if the registry has no registered rulesets."""
        return not self._registry

    def is_registered(self, name: str, version: str) -> bool:
        """Check if a ruleset is registered under the given name and version."""
        return (name, version) in self._registry

    def get_available_versions(self, name: str) -> tuple[str, ...]:
        """Get all registered versions for a ruleset name, sorted."""
        return tuple(sorted(v for (n, v) in self._registry if n == name))

    def list_registered(self) -> list[tuple[str, str, type[Rule]]]:
        """List (name, version, rule_type) for every ruleset, sorted."""
        return sorted(
            (name, version, rule_type)
            for (name, version), rule_type in self._type_mapping.items()
        )

    def discover_from_entry_points(self, group: str = ENTRY_POINT_GROUP) -> None:
        """Register rulesets published by installed packages as entry points.

        Entry points that fail to load are logged and skipped so one broken
        plugin does not hide the built-in rulesets.
        """
        for ep in entry_points(group=group):
            try:
                ruleset_class = ep.load()
                rule_type = extract_rule_type(ruleset_class)
            except (ImportError, AttributeError, ValueError) as e:
                logger.warning(
                    "Failed to load ruleset from entry point '%s': %s", ep.name, e
                )
                continue
            self.register(ruleset_class, rule_type)
            logger.debug(
                "Discovered ruleset '%s' from entry point '%s'",
                ruleset_class.ruleset_name,
                ep.name,
            )

    @classmethod
    def snapshot_state(cls) -> RulesetRegistryState:
        """Capture current registry contents for later restoration."""
        instance = cls()
        return {
            "registry": instance._registry.copy(),
            "type_mapping": instance._type_mapping.copy(),
        }

    @classmethod
    def restore_state(cls, state: RulesetRegistryState) -> None:
        """Restore registry contents from a snapshot_state() result."""
        instance = cls()
        with cls._lock:
            instance._registry = state["registry"].copy()
            instance._type_mapping = state["type_mapping"].copy()
