"""Tests for match scoring, rate estimation and offer ranking.

Tests cover:
- Each scoring dimension, including decay and the zero-income edge
- Score and rate bounds across extreme profiles
- Ranking by fit-adjusted cost, the viability threshold and result cap
- The reference profile landing on Bank Norwegian
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from loanmatch.calculators.payment import calculate_monthly_payment, to_kroner
from loanmatch.catalog.products import PRODUCTS, get_product
from loanmatch.config import RecommendationSettings
from loanmatch.models.enums import CreditTier, EmploymentStatus
from loanmatch.recommendation.engine import generate_recommendations
from loanmatch.recommendation.scoring import (
    calculate_match_score,
    debt_ratio,
    estimate_interest_rate,
    score_amount,
    score_debt_ratio,
    score_income,
)
from loanmatch.schemas.recommendation import (
    EligibilityRequirements,
    LoanProduct,
    NormalizedProfile,
    ProfileAnswers,
)

BANK_NORWEGIAN = get_product("bank-norwegian-forbruk")
KOMPLETT = get_product("komplett-forbruk")


def _profile(amount: int = 200000, income: int = 400000, debt: int = 0) -> NormalizedProfile:
    return NormalizedProfile(loan_amount=Decimal(amount), income=Decimal(income), debt=Decimal(debt))


def _product(
    product_id: str,
    rate: str,
    employment: set[str],
    min_income: str = "0",
    max_debt_ratio: str = "1",
    credit_tiers: tuple[str, ...] = (CreditTier.GOOD.value,),
) -> LoanProduct:
    """Flat-rate product with wide amount limits."""
    return LoanProduct(
        id=product_id,
        lender_name=f"{product_id} bank",
        product_name="Forbrukslån",
        min_amount=Decimal("10000"),
        max_amount=Decimal("1000000"),
        min_rate=Decimal(rate),
        max_rate=Decimal(rate),
        establishment_fee=Decimal("0"),
        requirements=EligibilityRequirements(
            min_income=Decimal(min_income),
            max_debt_ratio=Decimal(max_debt_ratio),
            employment_types=frozenset(employment),
            credit_tiers=credit_tiers,
        ),
        referral_url=f"https://{product_id}.test",
        commission=Decimal("0"),
    )


@pytest.fixture
def reference_answers() -> ProfileAnswers:
    """Permanent employee, 400k income, no debt, excellent credit, 200k loan."""
    return ProfileAnswers(
        loan_amount="200.000 kr",
        loan_purpose="Refinansiering",
        income="300.000 - 500.000 kr",
        existing_debt="Ingen gjeld",
        employment_status="Fast ansatt",
        housing_status="Leier bolig",
        credit_history="Meget god",
    )


@pytest.fixture
def hopeless_answers() -> ProfileAnswers:
    """Amount above every product, low income, heavy debt, no matching labels."""
    return ProfileAnswers(
        loan_amount="900.000 kr",
        income="Under 300.000 kr",
        existing_debt="Over 500.000 kr",
        employment_status=EmploymentStatus.STUDENT.value,
        credit_history=CreditTier.DELINQUENT.value,
    )


# ---------------------------------------------------------------------------
# Scoring rules
# ---------------------------------------------------------------------------


class TestAmountScore:
    def test_inside_range(self):
        assert score_amount(BANK_NORWEGIAN, ProfileAnswers(), _profile(amount=50000)) == 30
        assert score_amount(BANK_NORWEGIAN, ProfileAnswers(), _profile(amount=500000)) == 30

    def test_below_min_decays_per_10k(self):
        """20 000 requested vs 50 000 min → 30 − 3."""
        assert score_amount(BANK_NORWEGIAN, ProfileAnswers(), _profile(amount=20000)) == 27

    def test_below_min_floored_at_zero(self):
        product = _product("big", "5", {"Fast ansatt"}).model_copy(update={"min_amount": Decimal("900000")})
        assert score_amount(product, ProfileAnswers(), _profile(amount=0)) == 0

    def test_above_max_scores_zero(self):
        assert score_amount(BANK_NORWEGIAN, ProfileAnswers(), _profile(amount=500001)) == 0


class TestIncomeScore:
    def test_meets_minimum(self):
        assert score_income(KOMPLETT, ProfileAnswers(), _profile(income=300000)) == 25

    def test_shortfall_decays(self):
        """250 000 vs 300 000 min → 25 − 5."""
        assert score_income(KOMPLETT, ProfileAnswers(), _profile(income=250000)) == 20

    def test_zero_income_floored(self):
        assert score_income(KOMPLETT, ProfileAnswers(), _profile(income=0)) == 0


class TestDebtRatioScore:
    def test_within_limit(self):
        assert score_debt_ratio(BANK_NORWEGIAN, ProfileAnswers(), _profile(debt=160000)) == 20

    def test_excess_penalised(self):
        """0.5 ratio vs 0.4 limit → 20 − 10."""
        assert score_debt_ratio(BANK_NORWEGIAN, ProfileAnswers(), _profile(debt=200000)) == 10

    def test_heavy_debt_floored(self):
        assert score_debt_ratio(BANK_NORWEGIAN, ProfileAnswers(), _profile(debt=10**7)) == 0

    def test_zero_income_without_debt(self):
        assert debt_ratio(_profile(income=0, debt=0)) == 0
        assert score_debt_ratio(BANK_NORWEGIAN, ProfileAnswers(), _profile(income=0, debt=0)) == 20

    def test_zero_income_with_debt(self):
        """No division by zero: the ratio is undefined and earns nothing."""
        assert debt_ratio(_profile(income=0, debt=50000)) is None
        assert score_debt_ratio(BANK_NORWEGIAN, ProfileAnswers(), _profile(income=0, debt=50000)) == 0


class TestMatchScore:
    def test_reference_profile_full_marks(self, reference_answers):
        breakdown = calculate_match_score(BANK_NORWEGIAN, reference_answers)
        assert breakdown.amount == 30
        assert breakdown.income == 25
        assert breakdown.debt_ratio == 20
        assert breakdown.employment == 15
        assert breakdown.credit == 10
        assert breakdown.total == 100

    def test_unknown_labels_earn_nothing(self):
        answers = ProfileAnswers(employment_status="Astronaut", credit_history="Ukjent")
        breakdown = calculate_match_score(BANK_NORWEGIAN, answers)
        assert breakdown.employment == 0
        assert breakdown.credit == 0
        # default amount, income and debt still fit
        assert breakdown.total == 75

    @pytest.mark.parametrize("product", PRODUCTS, ids=[p.id for p in PRODUCTS])
    @pytest.mark.parametrize(
        "profile",
        [
            _profile(amount=0, income=0, debt=0),
            _profile(amount=0, income=0, debt=10**9),
            _profile(amount=10**9, income=10**9, debt=0),
            _profile(amount=1, income=1, debt=10**9),
            _profile(amount=250000, income=400000, debt=400000),
        ],
    )
    def test_total_bounded(self, product, profile):
        answers = ProfileAnswers(employment_status="Fast ansatt", credit_history="God")
        total = calculate_match_score(product, answers, profile).total
        assert 0 <= total <= 100


# ---------------------------------------------------------------------------
# Rate estimation
# ---------------------------------------------------------------------------


class TestEstimateInterestRate:
    def test_perfect_score_excellent_credit_clamps_to_min(self):
        assert estimate_interest_rate(BANK_NORWEGIAN, "Meget god", Decimal("100")) == Decimal("5.9")

    def test_linear_interpolation(self):
        """Score 50 sits halfway between 5.9 and 19.9."""
        assert estimate_interest_rate(BANK_NORWEGIAN, "God", Decimal("50")) == Decimal("12.9")

    def test_credit_adjustment_added(self):
        assert estimate_interest_rate(BANK_NORWEGIAN, "Middels", Decimal("50")) == Decimal("13.9")

    def test_zero_score_delinquent_clamps_to_max(self):
        rate = estimate_interest_rate(BANK_NORWEGIAN, "Har betalingsanmerkninger", Decimal("0"))
        assert rate == BANK_NORWEGIAN.max_rate

    @pytest.mark.parametrize("product", PRODUCTS, ids=[p.id for p in PRODUCTS])
    @pytest.mark.parametrize("credit", [*(t.value for t in CreditTier), "", "ukjent"])
    @pytest.mark.parametrize("score", ["0", "30", "55.5", "100"])
    def test_rate_within_product_range(self, product, credit, score):
        rate = estimate_interest_rate(product, credit, Decimal(score))
        assert product.min_rate <= rate <= product.max_rate


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


class TestGenerateRecommendations:
    def test_reference_profile_recommends_bank_norwegian(self, reference_answers):
        results = generate_recommendations(reference_answers)
        top = results[0]
        assert top.product.lender_name == "Bank Norwegian"
        assert top.match_score == 100
        assert top.recommended is True
        assert top.estimated_rate == Decimal("5.9")

    def test_costs_are_whole_kroner(self, reference_answers):
        top = generate_recommendations(reference_answers)[0]
        expected = calculate_monthly_payment(Decimal("200000"), Decimal("5.9"), 60)
        assert top.monthly_payment == to_kroner(expected)
        assert top.total_cost == to_kroner(expected * 60 + top.product.establishment_fee)
        assert Decimal("3850") < top.monthly_payment < Decimal("3865")

    def test_exactly_one_recommended_and_first(self, reference_answers):
        results = generate_recommendations(reference_answers)
        assert 0 < len(results) <= 5
        flagged = [r for r in results if r.recommended]
        assert flagged == [results[0]]

    def test_sorted_by_fit_adjusted_cost(self, reference_answers):
        results = generate_recommendations(reference_answers)
        keys = [r.total_cost - r.match_score * 1000 for r in results]
        assert keys == sorted(keys)

    def test_all_above_threshold(self):
        results = generate_recommendations(ProfileAnswers(credit_history="Dårlig"))
        assert results
        assert all(r.match_score > 30 for r in results)

    def test_hopeless_profile_returns_empty(self, hopeless_answers):
        assert generate_recommendations(hopeless_answers) == []

    def test_blank_answers_still_rank(self):
        """Defaults give 75 points everywhere; nothing raises."""
        results = generate_recommendations(ProfileAnswers())
        assert len(results) == 5
        assert all(r.match_score == 75 for r in results)

    def test_idempotent(self, reference_answers):
        first = generate_recommendations(reference_answers)
        second = generate_recommendations(reference_answers)
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    def test_result_cap(self, reference_answers):
        catalog = [BANK_NORWEGIAN.model_copy(update={"id": f"bn-{i}"}) for i in range(7)]
        results = generate_recommendations(reference_answers, products=catalog)
        assert len(results) == 5
        assert sum(r.recommended for r in results) == 1

    def test_custom_limits(self, reference_answers):
        config = RecommendationSettings(max_results=2)
        results = generate_recommendations(reference_answers, config=config)
        assert len(results) == 2

    def test_better_fit_outranks_cheaper_offer(self):
        """15 points of fit outweigh a ~2 800 kr price difference."""
        answers = ProfileAnswers(employment_status="Fast ansatt", credit_history="God")
        cheap = _product("cheap", "5.0", {"Pensjonist"})
        fitting = _product("fitting", "5.5", {"Fast ansatt"})

        results = generate_recommendations(answers, products=[cheap, fitting])

        assert [r.product.id for r in results] == ["fitting", "cheap"]
        assert results[0].total_cost > results[1].total_cost
        assert results[0].match_score == 100
        assert results[1].match_score == 85

    def test_threshold_is_exclusive(self):
        """A score of exactly 30 is not viable."""
        answers = ProfileAnswers(
            existing_debt="Over 500.000 kr",
            employment_status=EmploymentStatus.STUDENT.value,
            credit_history=CreditTier.POOR.value,
        )
        borderline = _product(
            "borderline",
            "6",
            {EmploymentStatus.RETIRED.value},
            min_income="1000000",
            max_debt_ratio="0",
            credit_tiers=(CreditTier.EXCELLENT.value,),
        )
        student = borderline.model_copy(
            update={
                "id": "student",
                "requirements": borderline.requirements.model_copy(
                    update={"employment_types": frozenset({EmploymentStatus.STUDENT.value})}
                ),
            }
        )

        results = generate_recommendations(answers, products=[borderline, student])

        assert [r.product.id for r in results] == ["student"]
        assert results[0].match_score == 45
