"""In-process analytics service.

Collects AnalyticsEvents in a bounded buffer and fans them out to
subscribers (e.g. a batch uploader owned by the host). The service is an
explicitly constructed instance: the host creates one, calls start(), injects
it where tracking is needed, and calls close() on shutdown. Tests build their
own isolated instance.

Usage:
    analytics = AnalyticsService()
    analytics.start()
    analytics.subscribe(my_handler)          # def my_handler(event) -> None
    analytics.track_results_viewed(recommendations, session_id="...")
    analytics.close()
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any

from loanmatch.config import AnalyticsSettings, settings
from loanmatch.schemas.events import AnalyticsEvent, ConversionEvent, EventType
from loanmatch.schemas.recommendation import ProfileAnswers, Recommendation

logger = logging.getLogger(__name__)

# Type alias for event handler functions
EventHandler = Callable[[AnalyticsEvent], None]


class AnalyticsService:
    """Bounded event buffer with synchronous subscribers."""

    def __init__(self, config: AnalyticsSettings | None = None) -> None:
        self._config = config or settings.analytics
        self._events: deque[AnalyticsEvent] = deque(maxlen=self._config.max_buffered_events)
        self._subscribers: list[EventHandler] = []
        self._type_subscribers: dict[EventType, list[EventHandler]] = {}
        self._lock = threading.Lock()
        self._running = False

    # ── Lifecycle ────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin accepting events."""
        self._running = True
        logger.info(
            "Analytics started with %d global + %d typed subscribers",
            len(self._subscribers),
            sum(len(v) for v in self._type_subscribers.values()),
        )

    def close(self) -> None:
        """Stop accepting events and drop all subscribers."""
        self._running = False
        with self._lock:
            self._subscribers.clear()
            self._type_subscribers.clear()
        logger.info("Analytics stopped (%d events buffered)", len(self._events))

    # ── Subscribers ──────────────────────────────────────────────────

    def subscribe(self, handler: EventHandler, event_types: list[EventType] | None = None) -> None:
        """Register an event handler.

        Args:
            handler: Function that accepts an AnalyticsEvent.
            event_types: If provided, handler only receives these event types.
                         If None, handler receives ALL events.
        """
        with self._lock:
            if event_types is None:
                self._subscribers.append(handler)
            else:
                for et in event_types:
                    self._type_subscribers.setdefault(et, []).append(handler)
        logger.debug("Registered analytics subscriber %s", getattr(handler, "__name__", handler))

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove a previously registered handler."""
        with self._lock:
            if handler in self._subscribers:
                self._subscribers.remove(handler)
            for handlers in self._type_subscribers.values():
                if handler in handlers:
                    handlers.remove(handler)

    # ── Core ─────────────────────────────────────────────────────────

    def track(
        self,
        event_type: EventType,
        properties: dict[str, Any] | None = None,
        session_id: str | None = None,
        user_id: str | None = None,
    ) -> AnalyticsEvent | None:
        """Record an event and dispatch it.

        Returns:
            The recorded event, or None when the service is closed or disabled.
        """
        if not self._config.enabled:
            return None
        if not self._running:
            logger.warning("Analytics not running, dropping %s", event_type.value)
            return None

        event = AnalyticsEvent(
            event=event_type,
            properties=properties or {},
            session_id=session_id,
            user_id=user_id,
        )
        with self._lock:
            self._events.append(event)
            handlers = list(self._subscribers)
            handlers.extend(self._type_subscribers.get(event_type, ()))

        for handler in handlers:
            self._safe_call(handler, event)
        logger.debug("Event tracked: %s (session=%s)", event_type.value, session_id)
        return event

    @staticmethod
    def _safe_call(handler: EventHandler, event: AnalyticsEvent) -> None:
        """A failing subscriber never breaks tracking or other subscribers."""
        try:
            handler(event)
        except Exception:
            logger.exception(
                "Analytics handler %s failed for event %s",
                getattr(handler, "__name__", handler),
                event.event.value,
            )

    def get_events(self) -> list[AnalyticsEvent]:
        """Buffered events, oldest first."""
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        """Empty the buffer (after a successful batch upload)."""
        with self._lock:
            self._events.clear()

    # ── Questionnaire ────────────────────────────────────────────────

    def track_quiz_started(self, session_id: str | None = None) -> AnalyticsEvent | None:
        return self.track(EventType.QUIZ_STARTED, {"page": "quiz", "step": 1}, session_id)

    def track_quiz_step(
        self,
        step: int,
        question: str,
        answer: str,
        session_id: str | None = None,
    ) -> AnalyticsEvent | None:
        return self.track(
            EventType.QUIZ_STEP_COMPLETED,
            {"step": step, "question": question, "answer": answer, "page": "quiz"},
            session_id,
        )

    def track_quiz_completed(self, answers: ProfileAnswers, session_id: str | None = None) -> AnalyticsEvent | None:
        return self.track(EventType.QUIZ_COMPLETED, {**answers.model_dump(), "page": "quiz"}, session_id)

    # ── Results ──────────────────────────────────────────────────────

    def track_results_viewed(
        self,
        recommendations: Sequence[Recommendation],
        session_id: str | None = None,
    ) -> AnalyticsEvent | None:
        top = recommendations[0] if recommendations else None
        return self.track(
            EventType.RESULTS_VIEWED,
            {
                "page": "results",
                "num_recommendations": len(recommendations),
                "top_product": top.product.id if top else None,
                "top_lender": top.product.lender_name if top else None,
                "top_rate": str(top.estimated_rate) if top else None,
                "top_match_score": str(top.match_score) if top else None,
            },
            session_id,
        )

    def track_loan_details_viewed(
        self,
        recommendation: Recommendation,
        loan_amount: Any,
        session_id: str | None = None,
    ) -> AnalyticsEvent | None:
        return self.track(
            EventType.LOAN_DETAILS_VIEWED,
            {
                "product_id": recommendation.product.id,
                "lender_name": recommendation.product.lender_name,
                "loan_amount": str(loan_amount),
                "rate": str(recommendation.estimated_rate),
                "page": "results",
            },
            session_id,
        )

    def track_conversion(self, conversion: ConversionEvent, session_id: str | None = None) -> AnalyticsEvent | None:
        """Referral click on an offer; the commission is the conversion value."""
        properties = conversion.model_dump(mode="json")
        properties.update({"page": "results", "conversion_value": str(conversion.commission)})
        return self.track(EventType.LOAN_APPLICATION_STARTED, properties, session_id)

    # ── Tools & chat ─────────────────────────────────────────────────

    def track_calculator_used(
        self,
        loan_amount: Any,
        rate: Any,
        term_years: int,
        session_id: str | None = None,
    ) -> AnalyticsEvent | None:
        return self.track(
            EventType.CALCULATOR_USED,
            {"loan_amount": str(loan_amount), "rate": str(rate), "term": term_years, "page": "calculator"},
            session_id,
        )

    def track_page_view(
        self,
        page: str,
        session_id: str | None = None,
        **extra: Any,
    ) -> AnalyticsEvent | None:
        return self.track(EventType.PAGE_VIEW, {"page": page, **extra}, session_id)

    def track_chat_message(
        self,
        intent: str,
        confidence: float,
        session_id: str | None = None,
    ) -> AnalyticsEvent | None:
        return self.track(EventType.CHAT_MESSAGE, {"intent": intent, "confidence": confidence}, session_id)
