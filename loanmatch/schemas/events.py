"""AnalyticsEvent schema, the record every tracked interaction produces.

The core only builds these; shipping them anywhere is up to subscribers.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """All tracked event names."""

    # Questionnaire
    QUIZ_STARTED = "quiz_started"
    QUIZ_STEP_COMPLETED = "quiz_step_completed"
    QUIZ_COMPLETED = "quiz_completed"

    # Results
    RESULTS_VIEWED = "results_viewed"
    LOAN_DETAILS_VIEWED = "loan_details_viewed"
    LOAN_APPLICATION_STARTED = "loan_application_started"

    # Tools
    CALCULATOR_USED = "calculator_used"
    PAGE_VIEW = "page_view"

    # Chat
    CHAT_SESSION_STARTED = "chat_session_started"
    CHAT_MESSAGE = "chat_message"
    CHAT_FALLBACK = "chat_fallback"


class AnalyticsEvent(BaseModel):
    """A single tracked interaction. Immutable once created."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    event: EventType
    properties: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    session_id: str | None = None
    user_id: str | None = None

    model_config = {"frozen": True}


class ConversionEvent(BaseModel):
    """Data needed to attribute a referral click to a lender."""

    product_id: str
    lender_name: str
    loan_amount: Decimal
    estimated_rate: Decimal
    match_score: Decimal
    commission: Decimal
