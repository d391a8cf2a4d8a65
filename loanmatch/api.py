"""HTTP routes: a thin adapter between UI collaborators and the engines.

Handlers are plain (sync) functions; FastAPI runs them in its threadpool and
SessionStore.locked() serializes concurrent calls against one session.
"""
# ruff: noqa: B008  - Depends() in function defaults is standard FastAPI

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel

from loanmatch.analytics.service import AnalyticsService
from loanmatch.calculators.payment import calculate_loan
from loanmatch.catalog.products import PRODUCTS
from loanmatch.conversation.engine import ConversationEngine
from loanmatch.conversation.store import SessionStore
from loanmatch.exceptions import SessionLimitError, SessionNotFoundError
from loanmatch.recommendation.engine import generate_recommendations
from loanmatch.schemas.calculators import LoanCalculation, LoanCalculationRequest
from loanmatch.schemas.chat import ChatReply, ChatUserProfile, ConversationContext, SendMessageRequest
from loanmatch.schemas.events import EventType
from loanmatch.schemas.recommendation import LoanProduct, ProfileAnswers, Recommendation

logger = logging.getLogger(__name__)

router = APIRouter()


class SessionCreated(BaseModel):
    session_id: str


# ── Dependencies ─────────────────────────────────────────────────────


def get_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_engine(request: Request) -> ConversationEngine:
    return request.app.state.conversation


def get_analytics(request: Request) -> AnalyticsService:
    return request.app.state.analytics


# ── Catalog & recommendations ────────────────────────────────────────


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/products", response_model=list[LoanProduct])
def list_products() -> list[LoanProduct]:
    return list(PRODUCTS)


@router.post("/recommendations", response_model=list[Recommendation])
def recommend(
    answers: ProfileAnswers,
    analytics: AnalyticsService = Depends(get_analytics),
) -> list[Recommendation]:
    analytics.track_quiz_completed(answers)
    recommendations = generate_recommendations(answers)
    analytics.track_results_viewed(recommendations)
    return recommendations


@router.post("/calculator", response_model=LoanCalculation)
def calculator(
    body: LoanCalculationRequest,
    analytics: AnalyticsService = Depends(get_analytics),
) -> LoanCalculation:
    try:
        result = calculate_loan(body.loan_amount, body.interest_rate, body.term_years, body.establishment_fee)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    analytics.track_calculator_used(body.loan_amount, body.interest_rate, body.term_years)
    return result


# ── Chat ─────────────────────────────────────────────────────────────


@router.post("/chat/sessions", response_model=SessionCreated, status_code=status.HTTP_201_CREATED)
def create_session(
    profile: ChatUserProfile | None = None,
    store: SessionStore = Depends(get_store),
    analytics: AnalyticsService = Depends(get_analytics),
) -> SessionCreated:
    try:
        session = store.create(user_profile=profile)
    except SessionLimitError as exc:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(exc)) from exc
    analytics.track(
        EventType.CHAT_SESSION_STARTED,
        {"language": session.language.value},
        session.session_id,
    )
    return SessionCreated(session_id=session.session_id)


@router.post("/chat/sessions/{session_id}/messages", response_model=ChatReply)
def send_message(
    session_id: str,
    body: SendMessageRequest,
    store: SessionStore = Depends(get_store),
    engine: ConversationEngine = Depends(get_engine),
) -> ChatReply:
    try:
        with store.locked(session_id) as session:
            try:
                return engine.process_message(session, body.text)
            except Exception as exc:
                logger.exception("Chat reply failed (session=%s)", session_id)
                return engine.record_fallback(session, exc)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/chat/sessions/{session_id}", response_model=ConversationContext)
def get_session(session_id: str, store: SessionStore = Depends(get_store)) -> ConversationContext:
    try:
        with store.locked(session_id) as session:
            return session.get_context()
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.delete("/chat/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: str, store: SessionStore = Depends(get_store)) -> Response:
    store.discard(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
