"""Consumer loan products offered through the comparison service.

Seeded at import and never mutated; safe to share across sessions.
"""

from __future__ import annotations

from decimal import Decimal

from loanmatch.exceptions import CatalogError
from loanmatch.models.enums import CreditTier, EmploymentStatus
from loanmatch.schemas.recommendation import EligibilityRequirements, LoanProduct

_E = EmploymentStatus
_C = CreditTier

PRODUCTS: tuple[LoanProduct, ...] = (
    LoanProduct(
        id="bank-norwegian-forbruk",
        lender_name="Bank Norwegian",
        product_name="Forbrukslån",
        min_amount=Decimal("50000"),
        max_amount=Decimal("500000"),
        min_rate=Decimal("5.9"),
        max_rate=Decimal("19.9"),
        establishment_fee=Decimal("0"),
        features=(
            "Ingen etableringsgebyr",
            "Fleksible nedbetalinger",
            "Tidlig innfrielse uten gebyr",
            "Rask behandling",
        ),
        requirements=EligibilityRequirements(
            min_income=Decimal("250000"),
            max_debt_ratio=Decimal("0.4"),
            employment_types=frozenset({_E.PERMANENT.value, _E.SELF_EMPLOYED.value}),
            credit_tiers=(_C.EXCELLENT.value, _C.GOOD.value, _C.FAIR.value),
        ),
        referral_url="https://banknorwegian.no/?ref=lansammenligning",
        commission=Decimal("800"),
    ),
    LoanProduct(
        id="nordax-forbruk",
        lender_name="Nordax Bank",
        product_name="Forbrukslån",
        min_amount=Decimal("30000"),
        max_amount=Decimal("600000"),
        min_rate=Decimal("6.4"),
        max_rate=Decimal("22.9"),
        establishment_fee=Decimal("1500"),
        features=(
            "Rask behandling",
            "Konkurransedyktige renter",
            "Personlig service",
            "Fleksible vilkår",
        ),
        requirements=EligibilityRequirements(
            min_income=Decimal("200000"),
            max_debt_ratio=Decimal("0.45"),
            employment_types=frozenset({
                _E.PERMANENT.value,
                _E.TEMPORARY.value,
                _E.SELF_EMPLOYED.value,
            }),
            credit_tiers=(_C.EXCELLENT.value, _C.GOOD.value, _C.FAIR.value),
        ),
        referral_url="https://nordax.no/?ref=lansammenligning",
        commission=Decimal("600"),
    ),
    LoanProduct(
        id="instabank-forbruk",
        lender_name="Instabank",
        product_name="Forbrukslån",
        min_amount=Decimal("25000"),
        max_amount=Decimal("500000"),
        min_rate=Decimal("7.1"),
        max_rate=Decimal("24.9"),
        establishment_fee=Decimal("2000"),
        features=(
            "Digital søknadsprosess",
            "Svar på minutter",
            "Fleksible vilkår",
            "Ingen skjulte kostnader",
        ),
        requirements=EligibilityRequirements(
            min_income=Decimal("180000"),
            max_debt_ratio=Decimal("0.5"),
            employment_types=frozenset({
                _E.PERMANENT.value,
                _E.TEMPORARY.value,
                _E.SELF_EMPLOYED.value,
                _E.RETIRED.value,
            }),
            credit_tiers=(_C.EXCELLENT.value, _C.GOOD.value, _C.FAIR.value, _C.POOR.value),
        ),
        referral_url="https://instabank.no/?ref=lansammenligning",
        commission=Decimal("500"),
    ),
    LoanProduct(
        id="komplett-forbruk",
        lender_name="Komplett Bank",
        product_name="Forbrukslån",
        min_amount=Decimal("50000"),
        max_amount=Decimal("400000"),
        min_rate=Decimal("6.9"),
        max_rate=Decimal("21.9"),
        establishment_fee=Decimal("1000"),
        features=(
            "Norsk kundeservice",
            "Ingen bindingstid",
            "Gratis refinansiering",
            "Transparent prising",
        ),
        requirements=EligibilityRequirements(
            min_income=Decimal("300000"),
            max_debt_ratio=Decimal("0.35"),
            employment_types=frozenset({_E.PERMANENT.value}),
            credit_tiers=(_C.EXCELLENT.value, _C.GOOD.value),
        ),
        referral_url="https://komplettbank.no/?ref=lansammenligning",
        commission=Decimal("700"),
    ),
    LoanProduct(
        id="santander-forbruk",
        lender_name="Santander Consumer Bank",
        product_name="Forbrukslån",
        min_amount=Decimal("20000"),
        max_amount=Decimal("600000"),
        min_rate=Decimal("8.2"),
        max_rate=Decimal("25.9"),
        establishment_fee=Decimal("2500"),
        features=(
            "Fleksible nedbetalinger",
            "Mulighet for betalingsfri periode",
            "Refinansieringsmuligheter",
            "Erfaren långiver",
        ),
        requirements=EligibilityRequirements(
            min_income=Decimal("150000"),
            max_debt_ratio=Decimal("0.55"),
            employment_types=frozenset({
                _E.PERMANENT.value,
                _E.TEMPORARY.value,
                _E.SELF_EMPLOYED.value,
                _E.RETIRED.value,
            }),
            credit_tiers=(_C.EXCELLENT.value, _C.GOOD.value, _C.FAIR.value, _C.POOR.value),
        ),
        referral_url="https://santanderconsumer.no/?ref=lansammenligning",
        commission=Decimal("400"),
    ),
)

PRODUCTS_BY_ID: dict[str, LoanProduct] = {p.id: p for p in PRODUCTS}

if len(PRODUCTS_BY_ID) != len(PRODUCTS):
    raise ValueError("Duplicate product ids in catalog")


def get_product(product_id: str) -> LoanProduct:
    """Look up a product by id.

    Raises:
        CatalogError: If no product has that id.
    """
    try:
        return PRODUCTS_BY_ID[product_id]
    except KeyError:
        msg = f"Unknown product: {product_id}"
        raise CatalogError(msg) from None
