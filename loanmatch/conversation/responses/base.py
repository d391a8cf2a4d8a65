"""Shared response pieces: routes, apology text, action helpers.

Every intent module renders a Norwegian and an English template from here
so both locales stay in step.
"""

from __future__ import annotations

from collections.abc import Callable

from loanmatch.models.enums import ActionType, Language
from loanmatch.schemas.chat import ChatUserProfile, ResponseBody, SuggestedAction

# Signature every intent module exposes as `build`.
ResponseBuilder = Callable[[Language, ChatUserProfile | None], ResponseBody]

# Host application routes a navigate action may point at.
ROUTE_QUIZ = "/quiz"
ROUTE_RESULTS = "/resultater"
ROUTE_CALCULATOR = "/kalkulator"

APOLOGY: dict[Language, str] = {
    Language.NO: "Beklager, jeg støtte på en feil. Vennligst prøv igjen.",
    Language.EN: "Sorry, I encountered an error. Please try again.",
}


def action(
    type_: ActionType,
    labels: dict[Language, str],
    language: Language,
    route: str | None = None,
) -> SuggestedAction:
    """Build a localized suggested action, optionally pointing at a route."""
    data = {"route": route} if route else {}
    return SuggestedAction(type=type_, label=labels[language], data=data)
