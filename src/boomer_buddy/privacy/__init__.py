"""Client-side privacy helpers: PII scrubbing and feature vectors."""

from boomer_buddy.privacy.features import (
    create_feature_vector,
    detect_brand_suspects,
    extract_link_domains,
    time_of_day_bucket,
)
from boomer_buddy.privacy.scrubber import PiiScrubber
from boomer_buddy.privacy.types import (
    Channel,
    FeatureVector,
    ScrubResult,
    TimeOfDayBucket,
)

__all__ = [
    "Channel",
    "FeatureVector",
    "PiiScrubber",
    "ScrubResult",
    "TimeOfDayBucket",
    "create_feature_vector",
    "detect_brand_suspects",
    "extract_link_domains",
    "time_of_day_bucket",
]
