"""Configuration for the risk scorer."""

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RULESET_URI = "local/scam_indicators/1.0.0"
DEFAULT_MAX_INPUT_CHARS = 20_000


class RiskScorerConfig(BaseModel):
    """Configuration for RiskScorer with environment fallback.

    Attributes:
        ruleset: URI of the scam indicator ruleset to score against
        max_input_chars: Longest input accepted, bounding regex cost

    Example:
        ```python
        config = RiskScorerConfig(max_input_chars=5000)

        # Explicit properties override BOOMER_BUDDY_* environment variables
        config = RiskScorerConfig.from_properties({})
        ```

    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)

    ruleset: str = Field(
        default=DEFAULT_RULESET_URI,
        min_length=1,
        description="Scam indicator ruleset URI (provider/name/version)",
    )
    max_input_chars: int = Field(
        default=DEFAULT_MAX_INPUT_CHARS,
        ge=1,
        le=1_000_000,
        description="Maximum number of characters accepted per assessment",
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Environment variables used:
        - BOOMER_BUDDY_RULESET: Ruleset URI
        - BOOMER_BUDDY_MAX_INPUT_CHARS: Input size cap

        Raises:
            ValidationError: If configuration is invalid

        """
        config_data = properties.copy()

        if "ruleset" not in config_data:
            ruleset = os.getenv("BOOMER_BUDDY_RULESET")
            if ruleset:
                config_data["ruleset"] = ruleset

        if "max_input_chars" not in config_data:
            max_input_chars = os.getenv("BOOMER_BUDDY_MAX_INPUT_CHARS")
            if max_input_chars:
                config_data["max_input_chars"] = max_input_chars

        return cls.model_validate(config_data)
