"""Project-level pytest configuration and fixtures."""

import pytest

from boomer_buddy.rulesets import RulesetRegistry


@pytest.fixture(autouse=True, scope="function")
def isolate_ruleset_registry():
    """Automatically preserve and restore RulesetRegistry state for each test.

    RulesetRegistry is a singleton with mutable global state; tests that
    clear or extend it would otherwise leak into later tests.
    """
    saved_state = RulesetRegistry.snapshot_state()

    yield

    RulesetRegistry.restore_state(saved_state)
