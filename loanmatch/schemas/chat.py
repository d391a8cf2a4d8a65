"""Pydantic schemas for the conversational advisor.

ChatMessage is immutable once created; the session only ever appends.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from loanmatch.models.enums import (
    ActionType,
    CreditScore,
    Intent,
    Language,
    MessageRole,
    Topic,
)


def _new_message_id() -> str:
    return f"msg_{uuid.uuid4().hex}"


class ChatUserProfile(BaseModel):
    """What the advisor knows about the user. All fields optional."""

    preferred_language: Language = Language.NO
    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    income: Decimal | None = Field(default=None, ge=0)    # annual, kr
    existing_loans: Decimal | None = Field(default=None, ge=0)
    credit_score: CreditScore | None = None
    loan_purpose: str | None = None


class MessageMetadata(BaseModel):
    """Classifier output attached to assistant messages."""

    model_config = ConfigDict(frozen=True)

    intent: Intent
    confidence: float = Field(ge=0, le=1)


class ChatMessage(BaseModel):
    """A single entry in a session's history."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_message_id)
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: MessageMetadata | None = None


class SuggestedAction(BaseModel):
    """Follow-up the host may offer; the engine never performs it."""

    model_config = ConfigDict(frozen=True)

    type: ActionType
    label: str
    data: dict[str, Any] = Field(default_factory=dict)   # e.g. {"route": "/quiz"}


class ResponseBody(BaseModel):
    """Rendered template, before intent and confidence are attached."""

    model_config = ConfigDict(frozen=True)

    message: str
    suggested_actions: tuple[SuggestedAction, ...] = ()
    quick_replies: tuple[str, ...] = ()


class ChatReply(BaseModel):
    """What process_message returns to the chat widget."""

    message: str
    intent: Intent
    confidence: float = Field(ge=0, le=1)
    suggested_actions: list[SuggestedAction] = Field(default_factory=list)
    quick_replies: list[str] = Field(default_factory=list)


class IntentMatch(BaseModel):
    """Result of classifying one message."""

    model_config = ConfigDict(frozen=True)

    intent: Intent
    confidence: float
    match_count: int = 0


class ConversationContext(BaseModel):
    """Read-only snapshot of a session."""

    session_id: str
    user_profile: ChatUserProfile | None = None
    conversation_history: list[ChatMessage] = Field(default_factory=list)
    current_topic: Topic = Topic.GENERAL
    last_activity: datetime


class SendMessageRequest(BaseModel):
    """Body of a chat submit."""

    text: str = Field(max_length=2000)
