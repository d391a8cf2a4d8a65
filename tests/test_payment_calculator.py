"""Tests for the annuity payment calculator."""

from __future__ import annotations

from decimal import Decimal

import pytest

from loanmatch.calculators.payment import calculate_loan, calculate_monthly_payment, to_kroner


class TestMonthlyPayment:
    def test_zero_rate_is_principal_over_periods(self):
        """r = 0 → exactly P / n."""
        principal = Decimal("120000")
        assert calculate_monthly_payment(principal, Decimal("0"), 60) == principal / 60
        assert calculate_monthly_payment(principal, Decimal("0"), 60) == Decimal("2000")

    def test_zero_rate_uneven_division(self):
        principal = Decimal("100000")
        assert calculate_monthly_payment(principal, Decimal("0"), 7) == principal / 7

    def test_known_annuity(self):
        """100 000 at 12 % over 12 months → 8 884,88 per month."""
        payment = calculate_monthly_payment(Decimal("100000"), Decimal("12"), 12)
        assert to_kroner(payment) == Decimal("8885")
        assert Decimal("8884.8") < payment < Decimal("8884.9")

    def test_installments_exceed_principal_with_interest(self):
        payment = calculate_monthly_payment(Decimal("200000"), Decimal("5.9"), 60)
        assert payment * 60 > Decimal("200000")

    def test_higher_rate_costs_more(self):
        low = calculate_monthly_payment(Decimal("200000"), Decimal("5.9"), 60)
        high = calculate_monthly_payment(Decimal("200000"), Decimal("19.9"), 60)
        assert high > low


class TestCalculateLoan:
    def test_zero_rate_no_fee(self):
        result = calculate_loan(Decimal("120000"), Decimal("0"), 5)
        assert result.monthly_payment == Decimal("2000")
        assert result.total_cost == Decimal("120000")
        assert result.total_interest == Decimal("0")
        assert result.effective_rate == Decimal("0")

    def test_fee_included_in_total(self):
        result = calculate_loan(Decimal("120000"), Decimal("0"), 5, establishment_fee=Decimal("2000"))
        assert result.total_cost == Decimal("122000")
        assert result.total_interest == Decimal("2000")
        assert result.effective_rate > 0

    def test_breakdown_consistent(self):
        result = calculate_loan(Decimal("200000"), Decimal("6.5"), 5, Decimal("2000"))
        assert result.total_cost - result.total_interest == Decimal("200000")
        assert result.monthly_payment > Decimal("3900")

    @pytest.mark.parametrize(
        ("principal", "rate", "years", "fee"),
        [
            (Decimal("0"), Decimal("5"), 5, Decimal("0")),
            (Decimal("-1000"), Decimal("5"), 5, Decimal("0")),
            (Decimal("100000"), Decimal("5"), 0, Decimal("0")),
            (Decimal("100000"), Decimal("-1"), 5, Decimal("0")),
            (Decimal("100000"), Decimal("5"), 5, Decimal("-10")),
        ],
    )
    def test_invalid_input_raises(self, principal, rate, years, fee):
        with pytest.raises(ValueError):
            calculate_loan(principal, rate, years, fee)

    @pytest.mark.parametrize(
        ("rate", "years"),
        [
            (Decimal("6.5"), 10**9),
            (Decimal("1000000000"), 100000),
        ],
    )
    def test_overflow_reported_as_value_error(self, rate, years):
        """Decimal overflow on absurd terms surfaces as ValueError, not ArithmeticError."""
        with pytest.raises(ValueError, match="out of range"):
            calculate_loan(Decimal("200000"), rate, years)
