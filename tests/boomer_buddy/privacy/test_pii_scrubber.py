"""Tests for PiiScrubber."""

import pytest

from boomer_buddy.errors import InputTooLargeError, InvalidInputError
from boomer_buddy.privacy import PiiScrubber


@pytest.fixture(scope="module")
def scrubber() -> PiiScrubber:
    """Scrubber over the bundled PII ruleset."""
    return PiiScrubber()


class TestPiiScrubberRedaction:
    """Soft PII types are replaced in place."""

    def test_redacts_email(self, scrubber: PiiScrubber) -> None:
        """Email addresses become [REDACTED_EMAIL]."""
        result = scrubber.scrub_text("Write to grandma.jones@example.com today")

        assert result.scrubbed_text == "Write to [REDACTED_EMAIL] today"
        assert result.has_pii is True
        assert result.blocked_types == ("EMAIL",)
        assert result.hard_blocked is False

    @pytest.mark.parametrize(
        "phone", ["(555) 123-4567", "555-123-4567", "+1 555 123 4567", "5551234567"]
    )
    def test_redacts_phone_numbers(self, scrubber: PiiScrubber, phone: str) -> None:
        """North American phone formats are redacted."""
        result = scrubber.scrub_text(f"Call me at {phone} please")

        assert "[REDACTED_PHONE]" in result.scrubbed_text
        assert "4567" not in result.scrubbed_text
        assert result.blocked_types == ("PHONE",)

    def test_redacts_routing_number(self, scrubber: PiiScrubber) -> None:
        """A bare nine-digit number is redacted, not blocked."""
        result = scrubber.scrub_text("Routing 021000021 for the transfer")

        assert result.scrubbed_text == (
            "Routing [REDACTED_ROUTING_NUMBER] for the transfer"
        )
        assert result.hard_blocked is False

    def test_redacts_street_address(self, scrubber: PiiScrubber) -> None:
        """Street addresses are redacted."""
        result = scrubber.scrub_text("I live at 42 Maple Grove Avenue now")

        assert result.scrubbed_text == "I live at [REDACTED_ADDRESS] now"

    def test_redacts_crypto_wallet(self, scrubber: PiiScrubber) -> None:
        """Ethereum wallet addresses are redacted."""
        wallet = "0x" + "ab12" * 10

        result = scrubber.scrub_text(f"Send ETH to {wallet}")

        assert result.scrubbed_text == "Send ETH to [REDACTED_CRYPTO]"

    def test_reports_each_type_once_in_rule_order(self, scrubber: PiiScrubber) -> None:
        """Several matches of one type are reported once."""
        result = scrubber.scrub_text(
            "a@example.com, 555-123-4567 and b@example.org"
        )

        assert result.blocked_types == ("EMAIL", "PHONE")
        assert result.scrubbed_text.count("[REDACTED_EMAIL]") == 2

    def test_clean_text_is_unchanged(self, scrubber: PiiScrubber) -> None:
        """Text without PII passes through."""
        result = scrubber.scrub_text("Your package is on its way")

        assert result.scrubbed_text == "Your package is on its way"
        assert result.has_pii is False
        assert result.blocked_types == ()


class TestPiiScrubberHardBlock:
    """SSNs and card numbers withhold the entire text."""

    @pytest.mark.parametrize(
        "text",
        [
            "My SSN is 123-45-6789",
            "ssn 123 45 6789 thanks",
            "Card 4111 1111 1111 1111 exp 09/27",
            "Card 4111-1111-1111-1111",
            "Card 4111111111111111",
        ],
    )
    def test_blocks_entire_text(self, scrubber: PiiScrubber, text: str) -> None:
        """The whole text is replaced with the blocked placeholder."""
        result = scrubber.scrub_text(text)

        assert result.scrubbed_text == "[BLOCKED_SENSITIVE_DATA]"
        assert result.hard_blocked is True
        assert result.has_pii is True
        assert result.blocked_types == ("SSN_OR_CREDIT_CARD",)
        assert scrubber.hard_block_label == "SSN_OR_CREDIT_CARD"

    def test_hard_block_wins_over_soft_types(self, scrubber: PiiScrubber) -> None:
        """Soft PII alongside an SSN still blocks the whole text."""
        result = scrubber.scrub_text("bob@example.com 123-45-6789")

        assert result.hard_blocked is True
        assert "bob" not in result.scrubbed_text

    def test_contains_hard_block(self, scrubber: PiiScrubber) -> None:
        """contains_hard_block only flags SSNs and card numbers."""
        assert scrubber.contains_hard_block("123-45-6789")
        assert not scrubber.contains_hard_block("555-123-4567")


class TestPiiScrubberInputValidation:
    """Invalid input raises before scrubbing."""

    def test_rejects_none(self, scrubber: PiiScrubber) -> None:
        """None is not valid text."""
        with pytest.raises(InvalidInputError):
            scrubber.scrub_text(None)  # type: ignore[arg-type]

    def test_rejects_oversized_input(self) -> None:
        """Input above the cap raises InputTooLargeError."""
        with pytest.raises(InputTooLargeError):
            PiiScrubber(max_input_chars=5).scrub_text("abcdef")
