"""Reply for general: greeting and a menu of what the assistant can do.

Also the fallback for anything the classifier does not recognize.
"""

from __future__ import annotations

from loanmatch.config import settings
from loanmatch.models.enums import Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody

MESSAGES: dict[Language, str] = {
    Language.NO: """Hei{name}! Jeg er {assistant}, din personlige finansrådgiver! 👋

Jeg kan hjelpe deg med:
• 🏦 Finne det beste lånet for din situasjon
• 📊 Sammenligne renter og vilkår fra norske banker
• 🧮 Beregne månedlige avdrag og totalkostnader
• 📋 Veilede deg gjennom søknadsprosessen
• 💡 Gi personlige finansielle råd

Hva kan jeg hjelpe deg med i dag?""",
    Language.EN: """Hi{name}! I'm {assistant}, your personal financial advisor! 👋

I can help you with:
• 🏦 Finding the best loan for your situation
• 📊 Comparing rates and terms from Norwegian banks
• 🧮 Calculating monthly payments and total costs
• 📋 Guiding you through the application process
• 💡 Providing personal financial advice

What can I help you with today?""",
}

QUICK_REPLIES: dict[Language, tuple[str, ...]] = {
    Language.NO: (
        "Jeg trenger et lån",
        "Sammenlign banker",
        "Beregn lånekostnader",
        "Finansielle råd",
    ),
    Language.EN: (
        "I need a loan",
        "Compare banks",
        "Calculate loan costs",
        "Financial advice",
    ),
}


def build(language: Language, profile: ChatUserProfile | None = None) -> ResponseBody:
    name = f" {profile.name}" if profile is not None and profile.name else ""
    return ResponseBody(
        message=MESSAGES[language].format(name=name, assistant=settings.chat.assistant_name),
        quick_replies=QUICK_REPLIES[language],
    )
