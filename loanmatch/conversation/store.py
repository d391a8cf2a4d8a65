"""Arena of conversation sessions keyed by session id.

Sessions never share state. Each id gets its own lock so that concurrent
requests against the same session run one at a time and history appends
keep their order; different sessions proceed in parallel.

Memory is bounded two ways: sessions idle longer than the idle timeout are
evicted on every registration, and registration fails with
SessionLimitError once max_sessions live sessions remain after eviction.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

from loanmatch.config import settings
from loanmatch.conversation.session import ConversationSession
from loanmatch.exceptions import SessionLimitError, SessionNotFoundError
from loanmatch.schemas.chat import ChatUserProfile

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns every live session and its per-session lock."""

    def __init__(
        self,
        idle_timeout: timedelta | None = None,
        max_sessions: int | None = None,
    ) -> None:
        self.idle_timeout = idle_timeout or timedelta(minutes=settings.chat.session_idle_minutes)
        self.max_sessions = max_sessions or settings.chat.max_sessions
        self._sessions: dict[str, ConversationSession] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def _evict_idle(self, now: datetime) -> list[str]:
        """Drop idle sessions nobody is using. Caller holds the guard."""
        cutoff = now - self.idle_timeout
        expired = [
            sid
            for sid, session in self._sessions.items()
            if session.last_activity < cutoff and not self._locks[sid].locked()
        ]
        for sid in expired:
            del self._sessions[sid]
            del self._locks[sid]
        return expired

    def _register(self, session: ConversationSession) -> None:
        """Caller holds the guard."""
        expired = self._evict_idle(datetime.now(timezone.utc))
        if expired:
            logger.info("Evicted %d idle chat sessions", len(expired))
        if len(self._sessions) >= self.max_sessions:
            logger.warning("Session limit reached (%d), refusing %s", self.max_sessions, session.session_id)
            raise SessionLimitError(self.max_sessions)
        self._sessions[session.session_id] = session
        self._locks[session.session_id] = threading.Lock()

    def create(
        self,
        user_profile: ChatUserProfile | None = None,
        session_id: str | None = None,
    ) -> ConversationSession:
        """Register a new session.

        Raises:
            ValueError: If session_id is already registered.
            SessionLimitError: If the store is full after evicting idle sessions.
        """
        session = ConversationSession(session_id=session_id, user_profile=user_profile)
        with self._guard:
            if session.session_id in self._sessions:
                msg = f"Session already exists: {session.session_id}"
                raise ValueError(msg)
            self._register(session)
        logger.info("Created chat session %s", session.session_id)
        return session

    def get(self, session_id: str) -> ConversationSession:
        """Raises SessionNotFoundError for unknown ids."""
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def get_or_create(
        self,
        session_id: str,
        user_profile: ChatUserProfile | None = None,
    ) -> ConversationSession:
        with self._guard:
            session = self._sessions.get(session_id)
            if session is None:
                session = ConversationSession(session_id=session_id, user_profile=user_profile)
                self._register(session)
                logger.info("Created chat session %s", session_id)
        return session

    def discard(self, session_id: str) -> None:
        """Drop a session; unknown ids are ignored."""
        with self._guard:
            removed = self._sessions.pop(session_id, None)
            self._locks.pop(session_id, None)
        if removed is not None:
            logger.info("Discarded chat session %s (%d messages)", session_id, len(removed.messages))

    def expire_idle(self, now: datetime | None = None) -> int:
        """Evict sessions idle longer than idle_timeout; returns how many."""
        with self._guard:
            expired = self._evict_idle(now or datetime.now(timezone.utc))
        if expired:
            logger.info("Evicted %d idle chat sessions", len(expired))
        return len(expired)

    @contextlib.contextmanager
    def locked(self, session_id: str) -> Iterator[ConversationSession]:
        """Hold the session's lock for the duration of the block.

        Raises:
            SessionNotFoundError: If the id is not registered.
        """
        with self._guard:
            lock = self._locks.get(session_id)
        if lock is None:
            raise SessionNotFoundError(session_id)
        with lock:
            yield self.get(session_id)

    def clear(self) -> None:
        """Drop every session (process teardown)."""
        with self._guard:
            count = len(self._sessions)
            self._sessions.clear()
            self._locks.clear()
        logger.info("Session store cleared (%d sessions)", count)
