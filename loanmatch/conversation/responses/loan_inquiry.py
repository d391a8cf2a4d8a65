"""Reply for loan_inquiry: overview of loan types and where to start."""

from __future__ import annotations

from loanmatch.conversation.responses.base import ROUTE_CALCULATOR, ROUTE_QUIZ, action
from loanmatch.models.enums import ActionType, Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody

MESSAGES: dict[Language, str] = {
    Language.NO: """Jeg kan hjelpe deg med å finne det beste lånet! 🏦

Basert på din forespørsel kan jeg anbefale:

**Forbrukslån** - For bil, renovering, eller refinansiering
• Renter fra 5.9% (Bank Norwegian)
• Opptil 2 millioner kroner
• Ingen sikkerhet kreves

**Boliglån** - For kjøp av bolig
• Renter fra 3.5%
• Opptil 85% av boligverdi
• Krever egenkapital

Vil du at jeg skal hjelpe deg med å sammenligne alternativer basert på din situasjon?""",
    Language.EN: """I can help you find the best loan! 🏦

Based on your inquiry, I can recommend:

**Consumer Loans** - For cars, renovation, or refinancing
• Rates from 5.9% (Bank Norwegian)
• Up to 2 million NOK
• No collateral required

**Mortgage Loans** - For home purchases
• Rates from 3.5%
• Up to 85% of property value
• Requires down payment

Would you like me to help you compare options based on your situation?""",
}

QUICK_REPLIES: dict[Language, tuple[str, ...]] = {
    Language.NO: (
        "Sammenlign forbrukslån",
        "Se boliglån",
        "Beregn månedlige avdrag",
        "Hva trenger jeg for å søke?",
    ),
    Language.EN: (
        "Compare consumer loans",
        "View mortgages",
        "Calculate monthly payments",
        "What do I need to apply?",
    ),
}


def build(language: Language, _profile: ChatUserProfile | None = None) -> ResponseBody:
    return ResponseBody(
        message=MESSAGES[language],
        suggested_actions=(
            action(
                ActionType.NAVIGATE,
                {Language.NO: "Start sammenligning", Language.EN: "Start comparison"},
                language,
                route=ROUTE_QUIZ,
            ),
            action(
                ActionType.CALCULATE,
                {Language.NO: "Åpne kalkulator", Language.EN: "Open calculator"},
                language,
                route=ROUTE_CALCULATOR,
            ),
        ),
        quick_replies=QUICK_REPLIES[language],
    )
