"""Pydantic schemas for the catalog, the normalizer and the recommendation engine.

Pure data classes with no I/O. Used as inputs/outputs for the deterministic
matching pipeline.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

# ---------------------------------------------------------------------------
# Product catalog
# ---------------------------------------------------------------------------


class EligibilityRequirements(BaseModel):
    """Lender rules a profile is scored against."""

    model_config = ConfigDict(frozen=True)

    min_income: Decimal = Field(ge=0)
    max_debt_ratio: Decimal = Field(ge=0)
    employment_types: frozenset[str]
    credit_tiers: tuple[str, ...]      # ordered best -> worst


class LoanProduct(BaseModel):
    """A single lender product. Immutable reference data."""

    model_config = ConfigDict(frozen=True)

    id: str
    lender_name: str
    product_name: str
    min_amount: Decimal = Field(ge=0)
    max_amount: Decimal = Field(ge=0)
    min_rate: Decimal = Field(ge=0)    # nominal annual %, e.g. Decimal("5.9")
    max_rate: Decimal = Field(ge=0)
    establishment_fee: Decimal = Field(ge=0)
    features: tuple[str, ...] = ()
    requirements: EligibilityRequirements
    referral_url: str
    commission: Decimal = Field(ge=0)

    @model_validator(mode="after")
    def check_ranges(self) -> LoanProduct:
        """Amount and rate ranges must not be inverted."""
        if self.min_amount > self.max_amount:
            msg = f"{self.id}: min_amount {self.min_amount} > max_amount {self.max_amount}"
            raise ValueError(msg)
        if self.min_rate > self.max_rate:
            msg = f"{self.id}: min_rate {self.min_rate} > max_rate {self.max_rate}"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Questionnaire input
# ---------------------------------------------------------------------------


class ProfileAnswers(BaseModel):
    """Raw questionnaire capture, one label per step.

    Labels are expected to come from the enums in loanmatch.models.enums,
    but any string is accepted; the normalizer falls back to defaults.
    """

    model_config = ConfigDict(frozen=True)

    loan_amount: str = ""
    loan_purpose: str = ""
    income: str = ""
    existing_debt: str = ""
    employment_status: str = ""
    housing_status: str = ""
    credit_history: str = ""


class NormalizedProfile(BaseModel):
    """Numeric view of ProfileAnswers (bucket midpoints)."""

    model_config = ConfigDict(frozen=True)

    loan_amount: Decimal
    income: Decimal
    debt: Decimal


# ---------------------------------------------------------------------------
# Recommendation output
# ---------------------------------------------------------------------------


class ScoreBreakdown(BaseModel):
    """Per-dimension contribution to a match score."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Decimal("0")          # 0-30
    income: Decimal = Decimal("0")          # 0-25
    debt_ratio: Decimal = Decimal("0")      # 0-20
    employment: Decimal = Decimal("0")      # 0 or 15
    credit: Decimal = Decimal("0")          # 0 or 10

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> Decimal:
        raw = self.amount + self.income + self.debt_ratio + self.employment + self.credit
        return min(Decimal("100"), max(Decimal("0"), raw))


class Recommendation(BaseModel):
    """One ranked offer for a profile."""

    product: LoanProduct
    estimated_rate: Decimal
    monthly_payment: Decimal            # whole kroner
    total_cost: Decimal                 # whole kroner, fee included
    match_score: Decimal = Field(ge=0, le=100)
    recommended: bool = False
    score_breakdown: ScoreBreakdown
