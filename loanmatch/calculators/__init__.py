"""Financial calculators: label normalization and annuity payments."""

from loanmatch.calculators.normalizer import (
    normalize_profile,
    parse_amount,
    parse_debt,
    parse_income,
)
from loanmatch.calculators.payment import calculate_loan, calculate_monthly_payment

__all__ = [
    "normalize_profile",
    "parse_amount",
    "parse_income",
    "parse_debt",
    "calculate_monthly_payment",
    "calculate_loan",
]
