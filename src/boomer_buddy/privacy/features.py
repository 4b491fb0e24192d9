"""Privacy-safe feature vectors.

A feature vector summarises a message (signals, link hosts, impersonated
brands, coarse timing) without carrying any of its text, so it can be sent
to a backend for aggregate analysis.
"""

import logging
import re
from datetime import datetime

from boomer_buddy.errors import InvalidInputError, SensitiveDataBlockedError
from boomer_buddy.matching import RulePatternDispatcher
from boomer_buddy.privacy.scrubber import PiiScrubber
from boomer_buddy.privacy.types import Channel, FeatureVector, TimeOfDayBucket
from boomer_buddy.risk.scorer import RiskScorer, get_default_scorer
from boomer_buddy.rulesets.brand_impersonation import BrandImpersonationRule
from boomer_buddy.rulesets.loader import RulesetLoader

logger = logging.getLogger(__name__)

BRAND_RULESET_URI = "local/brand_impersonation/1.0.0"

_LINK_HOST = re.compile(
    r"https?://(?:www\.)?([a-z0-9-]+(?:\.[a-z0-9-]+){0,8}\.[a-z]{2,})", re.IGNORECASE
)


def time_of_day_bucket(moment: datetime) -> TimeOfDayBucket:
    """Bucket a local time into night (22-6), morning, afternoon or evening (18-22)."""
    hour = moment.hour
    if hour >= 22 or hour < 6:
        return TimeOfDayBucket.NIGHT
    if hour < 12:
        return TimeOfDayBucket.MORNING
    if hour < 18:
        return TimeOfDayBucket.AFTERNOON
    return TimeOfDayBucket.EVENING


def extract_link_domains(text: str) -> tuple[str, ...]:
    """Return the distinct lower-cased hosts of http(s) links, in order."""
    hosts = (match.group(1).lower() for match in _LINK_HOST.finditer(text))
    return tuple(dict.fromkeys(hosts))


def detect_brand_suspects(
    text: str, rules: tuple[BrandImpersonationRule, ...] | None = None
) -> tuple[str, ...]:
    """Return the names of brands the text mentions, in ruleset order."""
    if rules is None:
        rules = RulesetLoader.load_ruleset(BRAND_RULESET_URI, BrandImpersonationRule)
    dispatcher = RulePatternDispatcher()
    return tuple(rule.name for rule in rules if dispatcher.find_matches(text, rule))


def create_feature_vector(
    text: str | bytes,
    channel: Channel | str,
    state: str | None = None,
    now: datetime | None = None,
    *,
    scrubber: PiiScrubber | None = None,
    scorer: RiskScorer | None = None,
) -> FeatureVector:
    """Build a feature vector from a message.

    The text is scrubbed first and every feature is computed from the
    scrubbed text.

    Args:
        text: Message text
        channel: Channel the message arrived through
        state: Optional two-letter US state of the recipient
        now: Time of receipt; the current local time when omitted
        scrubber: Scrubber to use; a default PiiScrubber when omitted
        scorer: Scorer whose matched categories become the signals

    Raises:
        SensitiveDataBlockedError: If the text holds hard-block PII
        InvalidInputError: If text or channel is invalid
        InputTooLargeError: If text exceeds the size cap

    """
    try:
        channel = Channel(channel)
    except ValueError as e:
        allowed = ", ".join(c.value for c in Channel)
        raise InvalidInputError(
            f"Unknown channel '{channel}'. Expected one of: {allowed}"
        ) from e

    scrubbed = (scrubber or PiiScrubber()).scrub_text(text)
    if scrubbed.hard_blocked:
        raise SensitiveDataBlockedError(
            "Text contains sensitive personal information (SSN or card number) "
            "and cannot be analysed"
        )

    clean_text = scrubbed.scrubbed_text
    assessment = (scorer or get_default_scorer()).assess(clean_text)
    link_domains = extract_link_domains(clean_text)

    vector = FeatureVector(
        channel=channel,
        length_chars=len(clean_text),
        has_links=bool(link_domains),
        link_domains=link_domains,
        signals=assessment.matched_categories,
        brand_suspects=detect_brand_suspects(clean_text),
        time_of_day_bucket=time_of_day_bucket(now or datetime.now()),
        state=state,
    )
    logger.debug(
        "Built feature vector: channel=%s signals=%d",
        channel.value,
        len(vector.signals),
    )
    return vector
