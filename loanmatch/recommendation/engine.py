"""Recommendation engine: scores the catalog against a profile and ranks offers.

Pure Python orchestrator. No I/O, no hidden state: identical answers always
yield identical output. The host tracks analytics and renders the list.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from loanmatch.calculators.normalizer import normalize_profile
from loanmatch.calculators.payment import calculate_monthly_payment, to_kroner
from loanmatch.catalog.products import PRODUCTS
from loanmatch.config import RecommendationSettings, settings
from loanmatch.recommendation.scoring import calculate_match_score, estimate_interest_rate
from loanmatch.schemas.recommendation import (
    LoanProduct,
    NormalizedProfile,
    ProfileAnswers,
    Recommendation,
)

logger = logging.getLogger(__name__)


def _evaluate(
    product: LoanProduct,
    answers: ProfileAnswers,
    profile: NormalizedProfile,
    term_months: int,
) -> Recommendation:
    """Score, price and cost a single product."""
    breakdown = calculate_match_score(product, answers, profile)
    score = breakdown.total
    rate = estimate_interest_rate(product, answers.credit_history, score)
    monthly = calculate_monthly_payment(profile.loan_amount, rate, term_months)
    total_cost = monthly * term_months + product.establishment_fee

    return Recommendation(
        product=product,
        estimated_rate=rate,
        monthly_payment=to_kroner(monthly),
        total_cost=to_kroner(total_cost),
        match_score=score,
        score_breakdown=breakdown,
    )


def generate_recommendations(
    answers: ProfileAnswers,
    products: Sequence[LoanProduct] = PRODUCTS,
    config: RecommendationSettings | None = None,
) -> list[Recommendation]:
    """Rank viable offers for a completed questionnaire.

    Steps:
    1. Score, price and cost every product over the fixed term
    2. Drop offers with match_score <= min_match_score
    3. Sort ascending by total_cost - match_score * match_score_weight
    4. Flag the first offer as recommended, keep the top max_results

    Returns:
        Ordered offers, possibly empty. Never raises for any answers.
    """
    config = config or settings.recommendation
    profile = normalize_profile(answers)
    threshold = Decimal(config.min_match_score)
    weight = Decimal(config.match_score_weight)

    evaluated = [_evaluate(p, answers, profile, config.term_months) for p in products]
    viable = [r for r in evaluated if r.match_score > threshold]
    viable.sort(key=lambda r: r.total_cost - r.match_score * weight)

    ranked = viable[: config.max_results]
    if ranked:
        ranked[0].recommended = True

    logger.debug(
        "Ranked %d/%d products (amount=%s income=%s debt=%s) top=%s",
        len(ranked),
        len(evaluated),
        profile.loan_amount,
        profile.income,
        profile.debt,
        ranked[0].product.id if ranked else None,
    )
    return ranked
