"""Reply for calculation: what the loan calculator covers, with a worked example."""

from __future__ import annotations

from loanmatch.conversation.responses.base import ROUTE_CALCULATOR, action
from loanmatch.models.enums import ActionType, Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody

MESSAGES: dict[Language, str] = {
    Language.NO: """Jeg kan hjelpe deg med å beregne lånekostnader! 🧮

**Lånekalkulator:**
• Månedlige avdrag
• Totalkostnad over låneperioden
• Effektiv rente (inkl. alle gebyrer)
• Sammenligning av ulike scenarier

**Eksempel:**
Lån på 200.000 kr over 5 år:
• Bank Norwegian (5.9%): 3.857 kr/mnd
• Nordax (6.4%): 3.904 kr/mnd
• Forskjell: 2.820 kr over 5 år

Vil du bruke kalkulatoren for dine tall?""",
    Language.EN: """I can help you calculate loan costs! 🧮

**Loan Calculator:**
• Monthly payments
• Total cost over loan period
• Effective rate (incl. all fees)
• Comparison of different scenarios

**Example:**
200,000 NOK loan over 5 years:
• Bank Norwegian (5.9%): 3,857 NOK/month
• Nordax (6.4%): 3,904 NOK/month
• Difference: 2,820 NOK over 5 years

Would you like to use the calculator for your numbers?""",
}

QUICK_REPLIES: dict[Language, tuple[str, ...]] = {
    Language.NO: (
        "Åpne kalkulator",
        "Beregn 300.000 kr",
        "Sammenlign 3 vs 5 år",
        "Hva koster etablering?",
    ),
    Language.EN: (
        "Open calculator",
        "Calculate 300,000 NOK",
        "Compare 3 vs 5 years",
        "What does setup cost?",
    ),
}


def build(language: Language, _profile: ChatUserProfile | None = None) -> ResponseBody:
    return ResponseBody(
        message=MESSAGES[language],
        suggested_actions=(
            action(
                ActionType.NAVIGATE,
                {Language.NO: "Åpne lånekalkulator", Language.EN: "Open loan calculator"},
                language,
                route=ROUTE_CALCULATOR,
            ),
        ),
        quick_replies=QUICK_REPLIES[language],
    )
