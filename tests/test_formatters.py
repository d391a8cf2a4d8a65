"""Tests for locale currency formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest

from loanmatch.formatters import format_currency
from loanmatch.models.enums import Language


class TestFormatCurrency:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("2000000"), "2 000 000 kr"),
            (Decimal("400000"), "400 000 kr"),
            (999, "999 kr"),
            (1234.5, "1 235 kr"),
            (0, "0 kr"),
        ],
    )
    def test_norwegian(self, value, expected):
        assert format_currency(value) == expected

    def test_english(self):
        assert format_currency(Decimal("2000000"), Language.EN) == "2,000,000 NOK"

    def test_none(self):
        assert format_currency(None) == "-"
