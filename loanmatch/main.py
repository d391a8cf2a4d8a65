"""FastAPI application entry point: wires the engines into an HTTP host.

Usage:
    python -m loanmatch.main
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from loanmatch.analytics.service import AnalyticsService
from loanmatch.api import router
from loanmatch.config import settings
from loanmatch.conversation.engine import ConversationEngine
from loanmatch.conversation.store import SessionStore

logger = logging.getLogger(__name__)


# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str | None = None) -> None:
    """Route stdlib logging and structlog to stdout at the configured level."""
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the per-process services and tear them down in reverse order."""
    log = structlog.get_logger(__name__)
    log.info("starting", environment=settings.environment)

    analytics = AnalyticsService()
    analytics.start()
    sessions = SessionStore()

    app.state.analytics = analytics
    app.state.sessions = sessions
    app.state.conversation = ConversationEngine(analytics=analytics)

    try:
        yield
    finally:
        sessions.clear()
        analytics.close()
        log.info("shutdown complete")


def create_app() -> FastAPI:
    """Application factory; tests build a fresh app per case."""
    app = FastAPI(
        title="loanmatch API",
        description="Loan recommendations and conversational advice",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    configure_logging()
    uvicorn.run(
        "loanmatch.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
