"""Per-dimension match scoring and rate estimation.

Each rule takes a product plus the profile and returns its capped point
contribution. Pure Python, deterministic, Decimal arithmetic.

Point budget:
  amount fit      0–30  (−1 per 10 000 kr below min, 0 above max)
  income fit      0–25  (−1 per 10 000 kr of shortfall)
  debt ratio fit  0–20  (−100 per unit of ratio excess)
  employment      0/15
  credit          0/10
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from loanmatch.calculators.normalizer import normalize_profile
from loanmatch.models.enums import CreditTier
from loanmatch.schemas.recommendation import (
    LoanProduct,
    NormalizedProfile,
    ProfileAnswers,
    ScoreBreakdown,
)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")
_DECAY_STEP = Decimal("10000")

AMOUNT_POINTS = Decimal("30")
INCOME_POINTS = Decimal("25")
DEBT_RATIO_POINTS = Decimal("20")
EMPLOYMENT_POINTS = Decimal("15")
CREDIT_POINTS = Decimal("10")

# Rate points added after interpolation; unknown labels get no adjustment.
CREDIT_RATE_ADJUSTMENTS: dict[str, Decimal] = {
    CreditTier.EXCELLENT.value: Decimal("-0.5"),
    CreditTier.GOOD.value: Decimal("0"),
    CreditTier.FAIR.value: Decimal("1.0"),
    CreditTier.POOR.value: Decimal("2.5"),
    CreditTier.DELINQUENT.value: Decimal("4.0"),
}

ScoreRule = Callable[[LoanProduct, ProfileAnswers, NormalizedProfile], Decimal]


def debt_ratio(profile: NormalizedProfile) -> Decimal | None:
    """Debt / income, or None when income is zero and there is debt."""
    if profile.income <= 0:
        return _ZERO if profile.debt <= 0 else None
    return profile.debt / profile.income


def score_amount(product: LoanProduct, _answers: ProfileAnswers, profile: NormalizedProfile) -> Decimal:
    amount = profile.loan_amount
    if product.min_amount <= amount <= product.max_amount:
        return AMOUNT_POINTS
    if amount < product.min_amount:
        shortfall = product.min_amount - amount
        return max(_ZERO, AMOUNT_POINTS - shortfall / _DECAY_STEP)
    return _ZERO


def score_income(product: LoanProduct, _answers: ProfileAnswers, profile: NormalizedProfile) -> Decimal:
    required = product.requirements.min_income
    if profile.income >= required:
        return INCOME_POINTS
    shortfall = required - profile.income
    return max(_ZERO, INCOME_POINTS - shortfall / _DECAY_STEP)


def score_debt_ratio(product: LoanProduct, _answers: ProfileAnswers, profile: NormalizedProfile) -> Decimal:
    ratio = debt_ratio(profile)
    if ratio is None:
        return _ZERO
    limit = product.requirements.max_debt_ratio
    if ratio <= limit:
        return DEBT_RATIO_POINTS
    return max(_ZERO, DEBT_RATIO_POINTS - (ratio - limit) * 100)


def score_employment(product: LoanProduct, answers: ProfileAnswers, _profile: NormalizedProfile) -> Decimal:
    if answers.employment_status in product.requirements.employment_types:
        return EMPLOYMENT_POINTS
    return _ZERO


def score_credit(product: LoanProduct, answers: ProfileAnswers, _profile: NormalizedProfile) -> Decimal:
    if answers.credit_history in product.requirements.credit_tiers:
        return CREDIT_POINTS
    return _ZERO


# Field name on ScoreBreakdown → rule. Order matches the point budget above.
SCORE_RULES: dict[str, ScoreRule] = {
    "amount": score_amount,
    "income": score_income,
    "debt_ratio": score_debt_ratio,
    "employment": score_employment,
    "credit": score_credit,
}


def calculate_match_score(
    product: LoanProduct,
    answers: ProfileAnswers,
    profile: NormalizedProfile | None = None,
) -> ScoreBreakdown:
    """Score a product against a profile.

    Args:
        product: Catalog entry to evaluate.
        answers: Raw quiz answers (employment and credit labels are read here).
        profile: Pre-normalized numbers; derived from answers when omitted.

    Returns:
        ScoreBreakdown whose total is clamped to [0, 100].
    """
    if profile is None:
        profile = normalize_profile(answers)
    return ScoreBreakdown(**{name: rule(product, answers, profile) for name, rule in SCORE_RULES.items()})


def estimate_interest_rate(product: LoanProduct, credit_history: str, match_score: Decimal) -> Decimal:
    """Estimate the offered nominal rate.

    Linear between min_rate (score 100) and max_rate (score 0), shifted by
    the credit tier adjustment, then clamped back into the product's range.
    """
    spread = product.max_rate - product.min_rate
    fraction = (_HUNDRED - match_score) / _HUNDRED
    rate = product.min_rate + spread * fraction
    rate += CREDIT_RATE_ADJUSTMENTS.get(credit_history, _ZERO)
    return min(product.max_rate, max(product.min_rate, rate))
