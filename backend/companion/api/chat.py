import logging
import time
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from ..engine.orchestrator import ResponseOrchestrator
from ..engine.rate_limiter import CooldownRateLimiter
from ..errors import InternalError, RateLimited
from ..schemas import ChatMessage, ChatRequest, ChatResponse
from .deps import get_orchestrator, get_rate_limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


def session_key(req: ChatRequest, request: Request) -> str:
    if req.wallet_address:
        return req.wallet_address
    if request.client is not None and request.client.host:
        return request.client.host
    return "unknown"


def _clock_label() -> str:
    return datetime.now().strftime("%H:%M")


@router.post("", response_model=ChatResponse)
async def send_message(
    req: ChatRequest,
    request: Request,
    orchestrator: ResponseOrchestrator = Depends(get_orchestrator),
    rate_limiter: CooldownRateLimiter = Depends(get_rate_limiter),
):
    decision = rate_limiter.try_acquire(session_key(req, request))
    if not decision.allowed:
        raise RateLimited(decision.retry_after)

    try:
        result = await orchestrator.generate(req.content, req.language)
    except Exception as exc:
        logger.exception("Error in /api/chat")
        raise InternalError() from exc

    now_ms = int(time.time() * 1000)
    user_message = ChatMessage(
        id=str(now_ms),
        message=req.content,
        sender="user",
        username=req.username or "Anonymous",
        timestamp=_clock_label(),
    )
    cz_message = ChatMessage(
        id=str(now_ms + 1),
        message=result.message,
        sender="assistant",
        timestamp=_clock_label(),
        emotion=result.emotion,
        audio_base64=result.audio_base64,
    )
    return ChatResponse(
        user_message=user_message,
        cz_message=cz_message,
        analytics=result.analytics,
    )
