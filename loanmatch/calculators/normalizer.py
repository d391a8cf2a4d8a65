"""Questionnaire label normalizer.

Turns bucketed quiz answers into representative numbers. Pure and total:
every rule table is evaluated top to bottom by substring containment, the
first match wins, and anything unmatched falls back to a fixed default.

Defaults:
  amount → 200 000 kr
  income → 400 000 kr
  debt   → 0 kr
"""

from __future__ import annotations

import re
from decimal import Decimal

from loanmatch.schemas.recommendation import NormalizedProfile, ProfileAnswers

DEFAULT_AMOUNT = Decimal("200000")
DEFAULT_INCOME = Decimal("400000")
DEFAULT_DEBT = Decimal("0")

# Amount labels are "<thousands>.000 kr"; only the leading group is read.
_LEADING_NUMBER = re.compile(r"\d+")

INCOME_RULES: tuple[tuple[str, Decimal], ...] = (
    ("Under 300.000", Decimal("250000")),
    ("300.000 - 500.000", Decimal("400000")),
    ("500.000 - 700.000", Decimal("600000")),
    ("700.000 - 1.000.000", Decimal("850000")),
    ("Over 1.000.000", Decimal("1200000")),
)

DEBT_RULES: tuple[tuple[str, Decimal], ...] = (
    ("Ingen gjeld", Decimal("0")),
    ("Under 100.000", Decimal("50000")),
    ("100.000 - 300.000", Decimal("200000")),
    ("300.000 - 500.000", Decimal("400000")),
    ("Over 500.000", Decimal("600000")),
)


def _first_match(label: str, rules: tuple[tuple[str, Decimal], ...], default: Decimal) -> Decimal:
    for needle, value in rules:
        if needle in label:
            return value
    return default


def parse_amount(label: str | None) -> Decimal:
    """Requested amount in kroner: leading number (thousands) × 1000."""
    match = _LEADING_NUMBER.search(label or "")
    if match is None:
        return DEFAULT_AMOUNT
    return Decimal(match.group()) * 1000


def parse_income(label: str | None) -> Decimal:
    """Representative annual income for an income bracket label."""
    return _first_match(label or "", INCOME_RULES, DEFAULT_INCOME)


def parse_debt(label: str | None) -> Decimal:
    """Representative existing debt for a debt bracket label."""
    return _first_match(label or "", DEBT_RULES, DEFAULT_DEBT)


def normalize_profile(answers: ProfileAnswers) -> NormalizedProfile:
    """Derive the numeric profile used for scoring."""
    return NormalizedProfile(
        loan_amount=parse_amount(answers.loan_amount),
        income=parse_income(answers.income),
        debt=parse_debt(answers.existing_debt),
    )
