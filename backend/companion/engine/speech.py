from __future__ import annotations

import asyncio
import base64
import logging

import openai
from openai import AsyncOpenAI

from ..config import Settings

logger = logging.getLogger(__name__)


class SpeechSynthesizer:
    """Text-to-speech for assistant replies, returned as base64 mp3."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = "tts-1",
        voice: str = "echo",
        speed: float = 1.0,
        timeout: float = 30.0,
    ) -> None:
        self._client = client
        self.model = model
        self.voice = voice
        self.speed = speed
        self.timeout = timeout

    async def synthesize(self, text: str) -> str | None:
        """Return base64 audio, or ``None`` if synthesis failed for any reason."""
        try:
            response = await asyncio.wait_for(
                self._client.audio.speech.create(
                    model=self.model,
                    voice=self.voice,
                    input=text,
                    speed=self.speed,
                ),
                timeout=self.timeout,
            )
            return base64.b64encode(response.content).decode("ascii")
        except asyncio.TimeoutError:
            logger.error("Speech synthesis timed out after %ss", self.timeout)
        except openai.OpenAIError as exc:
            logger.error("Error generating speech: %s", exc)
        except Exception:
            logger.exception("Unexpected error generating speech")
        return None


def build_speech(settings: Settings) -> SpeechSynthesizer | None:
    if not settings.tts_enabled:
        return None
    if not settings.openai_api_key:
        logger.info("OpenAI not configured, skipping text-to-speech")
        return None
    return SpeechSynthesizer(
        AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.provider_timeout_seconds,
        ),
        model=settings.tts_model,
        voice=settings.tts_voice,
        speed=settings.tts_speed,
        timeout=settings.provider_timeout_seconds,
    )
