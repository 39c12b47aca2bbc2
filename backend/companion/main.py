"""FastAPI application for the legal companion chat backend.

Run locally with::

    uvicorn companion.main:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import cases, chat
from .config import Settings
from .config import settings as default_settings
from .engine.orchestrator import ResponseOrchestrator
from .engine.rate_limiter import CooldownRateLimiter
from .errors import register_error_handlers


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Settings | None = None,
    orchestrator: ResponseOrchestrator | None = None,
    rate_limiter: CooldownRateLimiter | None = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title="CZ Judge Companion")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.state.settings = settings
    app.state.orchestrator = orchestrator or ResponseOrchestrator.from_settings(settings)
    app.state.rate_limiter = rate_limiter or CooldownRateLimiter(settings.message_cooldown_ms)

    app.include_router(chat.router)
    app.include_router(cases.router)
    return app


app = create_app()
