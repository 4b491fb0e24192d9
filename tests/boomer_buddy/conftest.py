"""Shared fixtures for boomer_buddy tests."""

import logging
from collections.abc import Generator

import pytest

from boomer_buddy.risk import RiskScorer
from boomer_buddy.rulesets import RulesetRegistry
from boomer_buddy.rulesets.scam_indicators import (
    ScamIndicatorRuleset,
    ScamIndicatorRulesetData,
)


@pytest.fixture(autouse=True)
def restore_logging_state() -> Generator[None]:
    """Undo logging configuration applied by CLI commands and setup_logging."""
    root = logging.getLogger()
    package_logger = logging.getLogger("boomer_buddy")
    root_handlers = root.handlers[:]
    root_level = root.level
    package_level = package_logger.level
    package_propagate = package_logger.propagate

    yield

    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    package_logger.setLevel(package_level)
    package_logger.propagate = package_propagate


@pytest.fixture
def isolated_registry() -> RulesetRegistry:
    """Provide the RulesetRegistry instance.

    The project-level autouse fixture restores registry state after each
    test, so tests may register or clear freely.
    """
    return RulesetRegistry()


@pytest.fixture(scope="session")
def scam_ruleset() -> ScamIndicatorRuleset:
    """Bundled scam indicator ruleset, loaded once per session."""
    return ScamIndicatorRuleset()


@pytest.fixture(scope="session")
def scam_data(scam_ruleset: ScamIndicatorRuleset) -> ScamIndicatorRulesetData:
    """Full data of the bundled scam indicator ruleset."""
    return scam_ruleset.get_data()


@pytest.fixture(scope="session")
def scorer(scam_ruleset: ScamIndicatorRuleset) -> RiskScorer:
    """Scorer over the bundled ruleset with default configuration."""
    return RiskScorer(ruleset=scam_ruleset)
