"""Tests for RiskScorerConfig."""

import pytest
from pydantic import ValidationError

from boomer_buddy.risk import (
    DEFAULT_MAX_INPUT_CHARS,
    DEFAULT_RULESET_URI,
    RiskScorerConfig,
)


class TestRiskScorerConfig:
    """Test direct construction."""

    def test_defaults(self) -> None:
        """Defaults point at the bundled ruleset and the standard cap."""
        config = RiskScorerConfig()

        assert config.ruleset == DEFAULT_RULESET_URI
        assert config.max_input_chars == DEFAULT_MAX_INPUT_CHARS == 20_000

    def test_rejects_unknown_fields(self) -> None:
        """Unknown fields are a configuration error."""
        with pytest.raises(ValidationError):
            RiskScorerConfig(max_chars=100)  # type: ignore[call-arg]

    @pytest.mark.parametrize("value", [0, -1, 1_000_001])
    def test_rejects_out_of_range_cap(self, value: int) -> None:
        """The input cap must be between 1 and 1,000,000."""
        with pytest.raises(ValidationError):
            RiskScorerConfig(max_input_chars=value)

    def test_is_immutable(self) -> None:
        """Configuration is frozen."""
        config = RiskScorerConfig()

        with pytest.raises(ValidationError):
            config.max_input_chars = 5  # type: ignore[misc]


class TestRiskScorerConfigFromProperties:
    """Test environment fallback."""

    def test_uses_environment_when_properties_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """BOOMER_BUDDY_* variables fill in missing properties."""
        monkeypatch.setenv("BOOMER_BUDDY_RULESET", "local/custom/2.0.0")
        monkeypatch.setenv("BOOMER_BUDDY_MAX_INPUT_CHARS", "500")

        config = RiskScorerConfig.from_properties({})

        assert config.ruleset == "local/custom/2.0.0"
        assert config.max_input_chars == 500

    def test_properties_override_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Explicit properties win over the environment."""
        monkeypatch.setenv("BOOMER_BUDDY_MAX_INPUT_CHARS", "500")

        config = RiskScorerConfig.from_properties({"max_input_chars": 42})

        assert config.max_input_chars == 42

    def test_defaults_without_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """With nothing set, defaults apply."""
        monkeypatch.delenv("BOOMER_BUDDY_RULESET", raising=False)
        monkeypatch.delenv("BOOMER_BUDDY_MAX_INPUT_CHARS", raising=False)

        assert RiskScorerConfig.from_properties({}) == RiskScorerConfig()

    def test_invalid_environment_value_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A non-numeric cap in the environment is rejected."""
        monkeypatch.setenv("BOOMER_BUDDY_MAX_INPUT_CHARS", "lots")

        with pytest.raises(ValidationError):
            RiskScorerConfig.from_properties({})

    def test_does_not_mutate_properties(self) -> None:
        """The caller's dict is left untouched."""
        properties = {"ruleset": "local/scam_indicators/1.0.0"}

        RiskScorerConfig.from_properties(properties)

        assert properties == {"ruleset": "local/scam_indicators/1.0.0"}
