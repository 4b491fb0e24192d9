"""Tests for WordBoundaryMatcher."""

import pytest

from boomer_buddy.matching import PatternType, WordBoundaryMatcher


class TestWordBoundaryMatcherBoundaryDetection:
    """Test word boundary detection behaviour."""

    def test_matches_phrase_surrounded_by_spaces(self) -> None:
        """Phrase matches when surrounded by spaces."""
        matcher = WordBoundaryMatcher()

        result = matcher.find_match("you have won a prize", "won")

        assert result.matched
        assert result.pattern == "won"
        assert result.first_match is not None
        assert result.first_match.pattern_type == PatternType.WORD_BOUNDARY

    def test_no_match_when_phrase_starts_inside_a_word(self) -> None:
        """Phrase does NOT match when preceded by a letter or digit."""
        matcher = WordBoundaryMatcher()

        assert not matcher.find_match("first of the month", "irs").matched
        assert not matcher.find_match("pineapple juice", "apple").matched
        assert not matcher.find_match("unblocked", "blocked").matched
        assert not matcher.find_match("2fraud", "fraud").matched

    @pytest.mark.parametrize(
        ("content", "phrase"),
        [
            ("You will be arrested today", "arrest"),
            ("Two warrants were filed", "warrant"),
            ("Send us your passwords", "password"),
            ("Lawsuits are pending against you", "lawsuit"),
        ],
    )
    def test_matches_inflected_forms(self, content: str, phrase: str) -> None:
        """A phrase that starts a longer word still matches."""
        assert WordBoundaryMatcher().find_match(content, phrase).matched

    def test_whole_word_rejects_longer_words(self) -> None:
        """With whole_word set, the phrase must also end a word."""
        matcher = WordBoundaryMatcher()

        assert not matcher.find_match("what a wonderful day", "won", True).matched
        assert not matcher.find_match("my new machine", "mac", True).matched
        assert matcher.find_match("You won!", "won", True).matched
        assert matcher.find_match("my old mac", "mac", True).matched

    def test_matches_with_punctuation_boundaries(self) -> None:
        """Punctuation, hyphens and underscores all act as boundaries."""
        matcher = WordBoundaryMatcher()

        assert matcher.find_match("URGENT: call now", "urgent").matched
        assert matcher.find_match("account-suspended", "suspended").matched
        assert matcher.find_match("irs_notice", "irs", True).matched
        assert matcher.find_match("(fraud)", "fraud").matched

    def test_records_first_match_position(self) -> None:
        """The position of the first occurrence is reported."""
        matcher = WordBoundaryMatcher()

        result = matcher.find_match("urgent, very urgent", "urgent")

        assert result.first_match is not None
        assert result.first_match.start == 0
        assert result.first_match.end == 6

    def test_multi_word_phrase(self) -> None:
        """Multi-word phrases match as a unit."""
        matcher = WordBoundaryMatcher()

        assert matcher.find_match("Please buy a gift card today", "gift card").matched
        assert not matcher.find_match("a gift of cards", "gift card").matched
        assert not matcher.find_match(
            "gift cardboard box", "gift card", whole_word=True
        ).matched


class TestWordBoundaryMatcherCaseSensitivity:
    """Test case-insensitive matching."""

    def test_matches_regardless_of_case(self) -> None:
        """Upper, lower and mixed case all match."""
        matcher = WordBoundaryMatcher()

        assert matcher.find_match("IRS NOTICE", "irs").matched
        assert matcher.find_match("Social Security", "social security").matched


class TestWordBoundaryMatcherEdgeCases:
    """Test empty input handling."""

    def test_empty_content_returns_no_match(self) -> None:
        """Empty content never matches."""
        result = WordBoundaryMatcher().find_match("", "won")

        assert not result.matched
        assert result.first_match is None

    def test_empty_pattern_returns_no_match(self) -> None:
        """Empty pattern never matches."""
        assert not WordBoundaryMatcher().find_match("anything", "").matched

    def test_regex_metacharacters_are_literal(self) -> None:
        """Phrases are escaped before compilation."""
        matcher = WordBoundaryMatcher()

        assert not matcher.find_match("abc", "a.c").matched
        assert matcher.find_match("price is a.c today", "a.c").matched
