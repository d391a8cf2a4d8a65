"""Reply for general_advice: borrowing strategy and financial health tips."""

from __future__ import annotations

from loanmatch.models.enums import Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody

MESSAGES: dict[Language, str] = {
    Language.NO: """Jeg er her for å hjelpe med dine finansielle spørsmål! 💡

**Populære råd:**

**💰 Lånestrategi:**
• Sammenlign alltid flere tilbud
• Fokuser på totalkostnad, ikke bare rente
• Vurder kortere løpetid for å spare renter

**📊 Økonomisk helse:**
• Hold gjeldsgrad under 4x årsinntekt
• Bygg opp bufferkonto (3-6 måneder utgifter)
• Refinansier når renten faller

**🎯 Smart låning:**
• Bruk forbrukslån til verdiskapende investeringer
• Unngå å låne til forbruk du ikke trenger
• Betal ekstra avdrag når du kan

Hva vil du vite mer om?""",
    Language.EN: """I'm here to help with your financial questions! 💡

**Popular advice:**

**💰 Loan Strategy:**
• Always compare multiple offers
• Focus on total cost, not just interest rate
• Consider shorter terms to save on interest

**📊 Financial Health:**
• Keep debt ratio under 4x annual income
• Build emergency fund (3-6 months expenses)
• Refinance when rates drop

**🎯 Smart Borrowing:**
• Use consumer loans for value-creating investments
• Avoid borrowing for unnecessary consumption
• Make extra payments when possible

What would you like to know more about?""",
}

QUICK_REPLIES: dict[Language, tuple[str, ...]] = {
    Language.NO: (
        "Refinansieringstips",
        "Hvordan forbedre kredittscore",
        "Gjeldskonsolidering",
        "Spare vs betale ned lån",
    ),
    Language.EN: (
        "Refinancing tips",
        "How to improve credit score",
        "Debt consolidation",
        "Save vs pay down loans",
    ),
}


def build(language: Language, _profile: ChatUserProfile | None = None) -> ResponseBody:
    return ResponseBody(message=MESSAGES[language], quick_replies=QUICK_REPLIES[language])
