"""Conversation orchestrator.

Receives a user message for a session, records it, classifies the intent,
renders the matching localized template and records the reply. The engine
never navigates or calls out; suggested actions are for the host to offer.
"""

from __future__ import annotations

import logging

from loanmatch.analytics.service import AnalyticsService
from loanmatch.conversation.intents import classify_with_confidence
from loanmatch.conversation.responses import (
    application_help,
    calculation,
    general,
    general_advice,
    loan_comparison,
    loan_inquiry,
)
from loanmatch.conversation.responses.base import APOLOGY, ResponseBuilder
from loanmatch.conversation.session import ConversationSession
from loanmatch.models.enums import Intent, MessageRole, Topic
from loanmatch.schemas.chat import ChatReply, MessageMetadata
from loanmatch.schemas.events import EventType

logger = logging.getLogger(__name__)

# Map intents to their reply builders
RESPONSE_BUILDERS: dict[Intent, ResponseBuilder] = {
    Intent.LOAN_INQUIRY: loan_inquiry.build,
    Intent.LOAN_COMPARISON: loan_comparison.build,
    Intent.CALCULATION: calculation.build,
    Intent.APPLICATION_HELP: application_help.build,
    Intent.GENERAL_ADVICE: general_advice.build,
    Intent.GENERAL: general.build,
}

# Intents that move the conversation onto the loans topic
LOAN_INTENTS: set[Intent] = {
    Intent.LOAN_INQUIRY,
    Intent.LOAN_COMPARISON,
    Intent.CALCULATION,
    Intent.APPLICATION_HELP,
}

FALLBACK_CONFIDENCE = 0.0


class ConversationEngine:
    """Processes chat messages for any number of sessions.

    Stateless apart from the optional analytics service; all conversation
    state lives on the ConversationSession passed in.
    """

    def __init__(self, analytics: AnalyticsService | None = None) -> None:
        self.analytics = analytics

    def process_message(self, session: ConversationSession, text: str) -> ChatReply:
        """Handle one user message and return the assistant's reply.

        Both the user message and the reply are appended to the session
        history, in that order.
        """
        session.append(MessageRole.USER, text)

        match = classify_with_confidence(text)
        language = session.language
        body = RESPONSE_BUILDERS[match.intent](language, session.user_profile)

        if match.intent in LOAN_INTENTS:
            session.set_topic(Topic.LOANS)

        session.append(
            MessageRole.ASSISTANT,
            body.message,
            metadata=MessageMetadata(intent=match.intent, confidence=match.confidence),
        )

        logger.info(
            "Replied intent=%s confidence=%.2f lang=%s (session=%s, messages=%d)",
            match.intent.value,
            match.confidence,
            language.value,
            session.session_id,
            len(session.messages),
        )
        if self.analytics is not None:
            self.analytics.track_chat_message(match.intent.value, match.confidence, session.session_id)

        return ChatReply(
            message=body.message,
            intent=match.intent,
            confidence=match.confidence,
            suggested_actions=list(body.suggested_actions),
            quick_replies=list(body.quick_replies),
        )

    def record_fallback(self, session: ConversationSession, error: BaseException | None = None) -> ChatReply:
        """Append the localized apology after a downstream render failure.

        Keeps every user message paired with an assistant reply in history.
        """
        language = session.language
        message = APOLOGY[language]
        if error is not None:
            logger.warning("Fallback reply after %s (session=%s)", type(error).__name__, session.session_id)
        else:
            logger.warning("Fallback reply recorded (session=%s)", session.session_id)

        session.append(
            MessageRole.ASSISTANT,
            message,
            metadata=MessageMetadata(intent=Intent.ERROR, confidence=FALLBACK_CONFIDENCE),
        )
        if self.analytics is not None:
            self.analytics.track(
                EventType.CHAT_FALLBACK,
                {"error": type(error).__name__ if error is not None else None},
                session.session_id,
            )

        return ChatReply(message=message, intent=Intent.ERROR, confidence=FALLBACK_CONFIDENCE)
