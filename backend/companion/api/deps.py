from fastapi import Request

from ..config import Settings
from ..engine.orchestrator import ResponseOrchestrator
from ..engine.rate_limiter import CooldownRateLimiter


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_orchestrator(request: Request) -> ResponseOrchestrator:
    return request.app.state.orchestrator


def get_rate_limiter(request: Request) -> CooldownRateLimiter:
    return request.app.state.rate_limiter
