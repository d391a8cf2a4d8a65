"""Reply for loan_comparison: top lenders, plus a borrowing ceiling when income is known.

The ceiling is income × 5, the maximum debt-to-income multiple Norwegian
lending rules allow.
"""

from __future__ import annotations

from decimal import Decimal

from loanmatch.conversation.responses.base import ROUTE_RESULTS, action
from loanmatch.formatters import format_currency
from loanmatch.models.enums import ActionType, Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody

INCOME_MULTIPLE = Decimal("5")

MESSAGES: dict[Language, str] = {
    Language.NO: """La meg hjelpe deg med å sammenligne lån! 📊

**Topp 3 anbefalinger for deg:**

🥇 **Bank Norwegian** - 5.9% rente
• Ingen etableringsgebyr
• Rask behandling (24-48 timer)
• Opptil 500.000 kr

🥈 **Nordax Bank** - 6.4% rente
• Fleksible vilkår
• Aksepterer varierende kredittverdighet
• Opptil 600.000 kr

🥉 **Instabank** - 7.1% rente
• Digital søknadsprosess
• Svar på minutter
• Opptil 500.000 kr""",
    Language.EN: """Let me help you compare loans! 📊

**Top 3 recommendations for you:**

🥇 **Bank Norwegian** - 5.9% rate
• No establishment fee
• Fast processing (24-48 hours)
• Up to 500,000 NOK

🥈 **Nordax Bank** - 6.4% rate
• Flexible terms
• Accepts varying creditworthiness
• Up to 600,000 NOK

🥉 **Instabank** - 7.1% rate
• Digital application process
• Response in minutes
• Up to 500,000 NOK""",
}

CEILING: dict[Language, str] = {
    Language.NO: "Basert på din inntekt på {income} kan du låne opptil {ceiling}.",
    Language.EN: "Based on your income of {income}, you can borrow up to {ceiling}.",
}

QUICK_REPLIES: dict[Language, tuple[str, ...]] = {
    Language.NO: (
        "Søk hos Bank Norwegian",
        "Se alle detaljer",
        "Beregn mine avdrag",
        "Hva påvirker renten?",
    ),
    Language.EN: (
        "Apply at Bank Norwegian",
        "See all details",
        "Calculate my payments",
        "What affects the rate?",
    ),
}


def borrowing_ceiling(income: Decimal) -> Decimal:
    return income * INCOME_MULTIPLE


def build(language: Language, profile: ChatUserProfile | None = None) -> ResponseBody:
    message = MESSAGES[language]
    if profile is not None and profile.income:
        message += "\n\n" + CEILING[language].format(
            income=format_currency(profile.income, language),
            ceiling=format_currency(borrowing_ceiling(profile.income), language),
        )

    return ResponseBody(
        message=message,
        suggested_actions=(
            action(
                ActionType.NAVIGATE,
                {Language.NO: "Se detaljert sammenligning", Language.EN: "View detailed comparison"},
                language,
                route=ROUTE_RESULTS,
            ),
        ),
        quick_replies=QUICK_REPLIES[language],
    )
