"""Locale formatting for amounts shown in chat replies."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from loanmatch.models.enums import Language


def format_currency(value: Decimal | float | int | None, language: Language = Language.NO) -> str:
    """Whole-kroner amount: 2000000 -> "2 000 000 kr" (no) / "2,000,000 NOK" (en)."""
    if value is None:
        return "-"
    d = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    grouped = f"{d:,}"
    if language == Language.EN:
        return f"{grouped} NOK"
    return f"{grouped.replace(',', ' ')} kr"
