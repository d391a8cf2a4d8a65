"""Per-session conversation state.

A session owns its message history. History is append-only and kept in
chronological order; append() is the only way to extend it. There is no
terminal state: a session lives until the store discards it.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from loanmatch.config import settings
from loanmatch.models.enums import Language, MessageRole, Topic
from loanmatch.schemas.chat import (
    ChatMessage,
    ChatUserProfile,
    ConversationContext,
    MessageMetadata,
)

logger = logging.getLogger(__name__)


class ConversationSession:
    """History, profile and topic for a single chat widget lifetime."""

    def __init__(
        self,
        session_id: str | None = None,
        user_profile: ChatUserProfile | None = None,
    ) -> None:
        self.session_id = session_id or f"session_{uuid.uuid4().hex}"
        self.user_profile = user_profile
        self.current_topic = Topic.GENERAL
        self.last_activity = datetime.now(timezone.utc)
        self._history: list[ChatMessage] = []

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Snapshot of the history, oldest first."""
        return tuple(self._history)

    @property
    def is_awaiting_first_message(self) -> bool:
        return not self._history

    @property
    def language(self) -> Language:
        """Reply locale: the profile's preference, else the configured default."""
        if self.user_profile is not None:
            return self.user_profile.preferred_language
        return Language(settings.chat.default_language)

    def append(
        self,
        role: MessageRole,
        content: str,
        metadata: MessageMetadata | None = None,
    ) -> ChatMessage:
        """Record a message and bump last_activity."""
        message = ChatMessage(role=role, content=content, metadata=metadata)
        self._history.append(message)
        self.last_activity = message.timestamp
        return message

    def update_profile(self, **fields: Any) -> ChatUserProfile:
        """Merge fields into the profile, creating it if needed."""
        base = self.user_profile or ChatUserProfile(preferred_language=self.language)
        self.user_profile = ChatUserProfile.model_validate({**base.model_dump(), **fields})
        return self.user_profile

    def set_language(self, language: Language | str) -> None:
        self.update_profile(preferred_language=Language(language))

    def set_topic(self, topic: Topic) -> None:
        if topic != self.current_topic:
            logger.debug("Topic change: %s -> %s (session=%s)", self.current_topic.value, topic.value, self.session_id)
        self.current_topic = topic

    def get_context(self) -> ConversationContext:
        """Read-only snapshot suitable for serialization."""
        return ConversationContext(
            session_id=self.session_id,
            user_profile=self.user_profile,
            conversation_history=list(self._history),
            current_topic=self.current_topic,
            last_activity=self.last_activity,
        )
