"""Tests for the pattern-based intent classifier."""

from __future__ import annotations

import re

import pytest

from loanmatch.conversation.intents import (
    INTENT_PATTERNS,
    calculate_confidence,
    classify,
    classify_with_confidence,
    count_matches,
    validate_patterns,
)
from loanmatch.models.enums import Intent


class TestClassify:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hvor mye kan jeg låne?", Intent.LOAN_INQUIRY),
            ("Jeg søker et forbrukslån", Intent.LOAN_INQUIRY),
            ("Hva er renten?", Intent.LOAN_INQUIRY),
            ("Hvilken bank er billigst?", Intent.LOAN_COMPARISON),
            ("Sammenlign de beste bankene", Intent.LOAN_COMPARISON),
            ("Kan du beregne månedlig avdrag?", Intent.CALCULATION),
            ("Hvilke dokumenter trenger jeg?", Intent.APPLICATION_HELP),
            ("I want to apply", Intent.APPLICATION_HELP),
            ("Jeg vil spare penger", Intent.GENERAL_ADVICE),
            ("Hei der", Intent.GENERAL),
        ],
    )
    def test_examples(self, text, expected):
        assert classify(text) == expected

    def test_earlier_intent_wins_on_overlap(self):
        """The word "tips" appears under both comparison and advice; comparison is first."""
        assert classify("Har du noen tips?") == Intent.LOAN_COMPARISON

    def test_case_insensitive(self):
        assert classify("HVOR MYE KAN JEG LÅNE") == Intent.LOAN_INQUIRY

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "🙂🙂", "?!.,", "x" * 5000, "ÆØÅ æøå"])
    def test_total_over_odd_input(self, text):
        match = classify_with_confidence(text)
        assert isinstance(match.intent, Intent)
        assert match.intent is not Intent.ERROR
        assert 0.3 <= match.confidence <= 0.9


class TestConfidence:
    def test_single_match(self):
        match = classify_with_confidence("Hvor mye kan jeg låne?")
        assert match.intent == Intent.LOAN_INQUIRY
        assert match.match_count == 1
        assert match.confidence == 0.5

    def test_two_matches(self):
        assert calculate_confidence("Kan du beregne månedlig avdrag?", Intent.CALCULATION) == 0.7

    def test_capped_at_point_nine(self):
        text = "Jeg trenger et lån, hvor mye kan jeg låne og hva er renten?"
        assert count_matches(text, Intent.LOAN_INQUIRY) == 3
        assert classify_with_confidence(text).confidence == 0.9

    def test_general_has_base_confidence(self):
        match = classify_with_confidence("Hei der")
        assert match.intent == Intent.GENERAL
        assert match.match_count == 0
        assert match.confidence == 0.3

    def test_confidence_for_other_intent(self):
        """Informational only: scoring a non-winning intent is allowed."""
        assert calculate_confidence("Hvor mye kan jeg låne?", Intent.GENERAL_ADVICE) == 0.3


class TestValidatePatterns:
    def test_shipped_table_is_valid(self):
        validate_patterns(INTENT_PATTERNS)

    def test_empty_table(self):
        with pytest.raises(ValueError, match="empty"):
            validate_patterns(())

    def test_intent_without_patterns(self):
        with pytest.raises(ValueError, match="no patterns"):
            validate_patterns(((Intent.CALCULATION, ()),))

    def test_duplicate_intent(self):
        pattern = (re.compile("x"),)
        with pytest.raises(ValueError, match="Duplicate"):
            validate_patterns(((Intent.CALCULATION, pattern), (Intent.CALCULATION, pattern)))

    @pytest.mark.parametrize("intent", [Intent.GENERAL, Intent.ERROR])
    def test_fallback_intents_rejected(self, intent):
        with pytest.raises(ValueError, match="fallback"):
            validate_patterns(((intent, (re.compile("x"),)),))
