"""Package exceptions."""

from __future__ import annotations


class LoanMatchError(Exception):
    """Base class for loanmatch errors."""


class SessionNotFoundError(LoanMatchError, KeyError):
    """No conversation session is registered under the given id."""

    def __init__(self, session_id: str) -> None:
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Unknown chat session: {self.session_id}"


class CatalogError(LoanMatchError, LookupError):
    """A product id does not exist in the catalog."""


class SessionLimitError(LoanMatchError):
    """The session store is full and no idle session could be evicted."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Too many active chat sessions (limit {limit})")
        self.limit = limit
