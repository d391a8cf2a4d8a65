"""Annuity loan calculator.

Pure Python, Decimal arithmetic. Implements:
- Monthly installment of an amortizing loan (annuity formula)
- Full cost breakdown: total cost, total interest, effective annual rate

Formula, with r the monthly rate and n the number of installments:
  payment = P · r(1+r)^n / ((1+r)^n − 1)
  payment = P / n                          when r = 0
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from loanmatch.schemas.calculators import LoanCalculation


def to_kroner(value: Decimal) -> Decimal:
    """Round to whole kroner."""
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def _to_percent(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def calculate_monthly_payment(principal: Decimal, annual_rate: Decimal, months: int) -> Decimal:
    """Unrounded monthly installment.

    Args:
        principal: Amount borrowed.
        annual_rate: Nominal annual rate in percent, e.g. Decimal("5.9").
        months: Number of monthly installments.

    Returns:
        The installment; exactly principal / months when the rate is zero.
    """
    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return principal / months

    growth = (1 + monthly_rate) ** months
    return principal * (monthly_rate * growth) / (growth - 1)


def calculate_loan(
    principal: Decimal,
    annual_rate: Decimal,
    years: int,
    establishment_fee: Decimal = Decimal("0"),
) -> LoanCalculation:
    """Cost breakdown for a loan entered in the calculator.

    Raises:
        ValueError: If principal or term is not positive, rate/fee is negative,
            or the figures overflow Decimal arithmetic.
    """
    if principal <= 0:
        msg = f"Loan amount must be positive, got {principal}"
        raise ValueError(msg)
    if years <= 0:
        msg = f"Loan term must be positive, got {years}"
        raise ValueError(msg)
    if annual_rate < 0:
        msg = f"Interest rate cannot be negative, got {annual_rate}"
        raise ValueError(msg)
    if establishment_fee < 0:
        msg = f"Establishment fee cannot be negative, got {establishment_fee}"
        raise ValueError(msg)

    months = years * 12
    try:
        monthly = calculate_monthly_payment(principal, annual_rate, months)
        total_cost = monthly * months + establishment_fee
        total_interest = total_cost - principal
        effective_rate = ((total_cost / principal) ** (Decimal(1) / Decimal(years)) - 1) * 100
        return LoanCalculation(
            monthly_payment=to_kroner(monthly),
            total_cost=to_kroner(total_cost),
            total_interest=to_kroner(total_interest),
            effective_rate=_to_percent(effective_rate),
        )
    except ArithmeticError as exc:
        msg = f"Loan of {principal} at {annual_rate}% over {years} years is out of range"
        raise ValueError(msg) from exc
