"""Pattern-based intent classifier.

The table is evaluated in declaration order: the first intent with any
matching pattern wins, so earlier intents take precedence on overlap
(e.g. "tips" hits loan_comparison before general_advice). Messages that
match nothing are classified as general.
"""

from __future__ import annotations

import logging
import re

from loanmatch.models.enums import Intent
from loanmatch.schemas.chat import IntentMatch

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE

INTENT_PATTERNS: tuple[tuple[Intent, tuple[re.Pattern[str], ...]], ...] = (
    (Intent.LOAN_INQUIRY, (
        re.compile(r"(?:trenger|vil ha|søker|leter etter).*(lån|kredit)", _FLAGS),
        re.compile(r"(?:hvor mye|kan jeg|låne)", _FLAGS),
        re.compile(r"(?:rente|rentesats|prosent)", _FLAGS),
    )),
    (Intent.LOAN_COMPARISON, (
        re.compile(r"(?:sammenlign|beste|billigste).*(lån|bank)", _FLAGS),
        re.compile(r"(?:hvilken bank|hvor skal jeg)", _FLAGS),
        re.compile(r"(?:anbefal|foreslå|tips)", _FLAGS),
    )),
    (Intent.CALCULATION, (
        re.compile(r"(?:beregn|kalkuler|regn ut)", _FLAGS),
        re.compile(r"(?:månedlig|avdrag|totalkostnad)", _FLAGS),
        re.compile(r"(?:kalkulator|utregning)", _FLAGS),
    )),
    (Intent.APPLICATION_HELP, (
        re.compile(r"(?:søke|søknad|apply)", _FLAGS),
        re.compile(r"(?:dokumenter|papirer|krav)", _FLAGS),
        re.compile(r"(?:hvordan|prosess|steg)", _FLAGS),
    )),
    (Intent.GENERAL_ADVICE, (
        re.compile(r"(?:råd|tips|hjelp|veiledning)", _FLAGS),
        re.compile(r"(?:økonomi|finans|penger)", _FLAGS),
        re.compile(r"(?:spare|investere|budsjett)", _FLAGS),
    )),
)

_PATTERNS_BY_INTENT: dict[Intent, tuple[re.Pattern[str], ...]] = dict(INTENT_PATTERNS)

BASE_CONFIDENCE = 0.3
CONFIDENCE_STEP = 0.2
MAX_CONFIDENCE = 0.9


def validate_patterns(table: tuple[tuple[Intent, tuple[re.Pattern[str], ...]], ...]) -> None:
    """Reject malformed tables at import time.

    Raises:
        ValueError: On an empty table, an intent without patterns, a duplicate
            intent, or a rule for the general fallback.
    """
    if not table:
        raise ValueError("Intent pattern table is empty")
    seen: set[Intent] = set()
    for intent, patterns in table:
        if intent in (Intent.GENERAL, Intent.ERROR):
            msg = f"{intent.value} is a fallback intent and cannot have patterns"
            raise ValueError(msg)
        if intent in seen:
            msg = f"Duplicate intent in pattern table: {intent.value}"
            raise ValueError(msg)
        if not patterns:
            msg = f"Intent {intent.value} has no patterns"
            raise ValueError(msg)
        seen.add(intent)


validate_patterns(INTENT_PATTERNS)


def classify(text: str) -> Intent:
    """Return the first intent whose patterns match, else general."""
    normalized = text.lower()
    for intent, patterns in INTENT_PATTERNS:
        for pattern in patterns:
            if pattern.search(normalized):
                return intent
    return Intent.GENERAL


def count_matches(text: str, intent: Intent) -> int:
    """Number of the intent's patterns that match (not just the first)."""
    normalized = text.lower()
    patterns = _PATTERNS_BY_INTENT.get(intent, ())
    return sum(1 for p in patterns if p.search(normalized))


def _confidence(matches: int) -> float:
    return round(min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_STEP * matches), 2)


def calculate_confidence(text: str, intent: Intent) -> float:
    """min(0.9, 0.3 + 0.2 × matches). Informational only."""
    return _confidence(count_matches(text, intent))


def classify_with_confidence(text: str) -> IntentMatch:
    """Classify and score a message in one call."""
    intent = classify(text)
    matches = count_matches(text, intent)
    confidence = _confidence(matches)
    logger.debug("Classified message as %s (matches=%d, confidence=%.2f)", intent.value, matches, confidence)
    return IntentMatch(intent=intent, confidence=confidence, match_count=matches)
