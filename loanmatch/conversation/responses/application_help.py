"""Reply for application_help: required documents and the application steps."""

from __future__ import annotations

from loanmatch.conversation.responses.base import ROUTE_QUIZ, action
from loanmatch.models.enums import ActionType, Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody

MESSAGES: dict[Language, str] = {
    Language.NO: """Jeg hjelper deg gjennom søknadsprosessen! 📋

**Dokumenter du trenger:**
✅ Gyldig ID (pass/førerkort)
✅ Siste 3 lønnslipper
✅ Skattemelding (siste år)
✅ Kontoutskrift (siste 3 måneder)
✅ Oversikt over eksisterende gjeld

**Søknadsprosess:**
1. **Forhåndsgodkjenning** (2-24 timer)
2. **Dokumentinnsending** (digitalt)
3. **Kredittvurdering** (1-3 dager)
4. **Endelig godkjenning** (samme dag)
5. **Utbetaling** (1-2 dager)

**Tips for bedre godkjenning:**
• Ha stabil inntekt i 6+ måneder
• Betal ned eksisterende gjeld
• Unngå nye kredittforespørsler""",
    Language.EN: """I'll guide you through the application process! 📋

**Documents you need:**
✅ Valid ID (passport/driver's license)
✅ Last 3 pay slips
✅ Tax return (last year)
✅ Bank statement (last 3 months)
✅ Overview of existing debt

**Application process:**
1. **Pre-approval** (2-24 hours)
2. **Document submission** (digital)
3. **Credit assessment** (1-3 days)
4. **Final approval** (same day)
5. **Disbursement** (1-2 days)

**Tips for better approval:**
• Have stable income for 6+ months
• Pay down existing debt
• Avoid new credit inquiries""",
}

QUICK_REPLIES: dict[Language, tuple[str, ...]] = {
    Language.NO: (
        "Start søknad nå",
        "Sjekk mine sjanser",
        "Hva hvis jeg blir avslått?",
        "Kan jeg søke flere steder?",
    ),
    Language.EN: (
        "Start application now",
        "Check my chances",
        "What if I get rejected?",
        "Can I apply multiple places?",
    ),
}


def build(language: Language, _profile: ChatUserProfile | None = None) -> ResponseBody:
    return ResponseBody(
        message=MESSAGES[language],
        suggested_actions=(
            action(
                ActionType.APPLY,
                {Language.NO: "Start søknad", Language.EN: "Start application"},
                language,
                route=ROUTE_QUIZ,
            ),
        ),
        quick_replies=QUICK_REPLIES[language],
    )
