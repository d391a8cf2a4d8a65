"""Pydantic schemas for the standalone loan calculator."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

MAX_TERM_YEARS = 30


class LoanCalculationRequest(BaseModel):
    """Free numeric calculator input."""

    loan_amount: Decimal = Field(default=Decimal("200000"), gt=0, le=Decimal("10000000"))
    interest_rate: Decimal = Field(default=Decimal("6.5"), ge=0, le=100, description="Nominal annual %")
    term_years: int = Field(default=5, ge=1, le=MAX_TERM_YEARS)
    establishment_fee: Decimal = Field(default=Decimal("2000"), ge=0, le=Decimal("100000"))


class LoanCalculation(BaseModel):
    """Cost breakdown of an annuity loan."""

    monthly_payment: Decimal           # whole kroner
    total_cost: Decimal                # installments + fee, whole kroner
    total_interest: Decimal            # total_cost - principal
    effective_rate: Decimal            # annualized %, 2 decimals
