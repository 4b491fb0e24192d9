"""Result types for PII scrubbing and feature extraction."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Channel(str, Enum):
    """Channel a suspicious message arrived through."""

    SMS = "sms"
    CALL = "call"
    VOICEMAIL = "voicemail"
    EMAIL = "email"
    WEB = "web"
    LETTER = "letter"


class TimeOfDayBucket(str, Enum):
    """Coarse time of day, so feature vectors never carry a timestamp."""

    NIGHT = "night"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class ScrubResult(BaseModel):
    """Outcome of removing PII from a text.

    Attributes:
        scrubbed_text: Text with PII replaced, or the blocked placeholder
        has_pii: Whether any PII was found
        blocked_types: Labels of the PII types found (e.g., "EMAIL")
        hard_blocked: Whether the whole text was withheld

    """

    model_config = ConfigDict(frozen=True)

    scrubbed_text: str
    has_pii: bool
    blocked_types: tuple[str, ...] = ()
    hard_blocked: bool = False


class FeatureVector(BaseModel):
    """Privacy-safe summary of a message, suitable for transmission."""

    model_config = ConfigDict(frozen=True)

    v: int = Field(default=1, description="Feature vector format version")
    channel: Channel
    language: str = "en"
    length_chars: int = Field(ge=0)
    has_links: bool
    link_domains: tuple[str, ...] = ()
    signals: tuple[str, ...] = ()
    brand_suspects: tuple[str, ...] = ()
    time_of_day_bucket: TimeOfDayBucket
    state: str | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """Serialise to the snake_case JSON shape sent to the backend."""
        return self.model_dump(mode="json")
