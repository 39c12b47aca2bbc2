from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import Settings
from ..schemas import CaseAnalysis, EmotionType
from .analytics import CaseAnalyzer
from .emotion import classify_emotion
from .prompts import (
    APOLOGY_MESSAGES,
    BUSY_MESSAGES,
    NOT_CONFIGURED_MESSAGES,
    companion_system_prompt,
    localized,
)
from .providers import CompletionProvider, ProviderError, build_providers
from .speech import SpeechSynthesizer, build_speech

logger = logging.getLogger(__name__)


@dataclass
class AIResponse:
    message: str
    emotion: EmotionType = "idle"
    audio_base64: str | None = None
    analytics: CaseAnalysis | None = None


class ResponseOrchestrator:
    def __init__(
        self,
        providers: Sequence[CompletionProvider],
        analyzer: CaseAnalyzer | None = None,
        speech: SpeechSynthesizer | None = None,
        max_tokens: int = 200,
        temperature: float = 0.8,
    ) -> None:
        self.providers = list(providers)
        self.analyzer = analyzer or CaseAnalyzer(self.providers)
        self.speech = speech
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResponseOrchestrator":
        providers = build_providers(settings)
        return cls(
            providers,
            analyzer=CaseAnalyzer(
                providers,
                max_tokens=settings.analytics_max_tokens,
                temperature=settings.analytics_temperature,
            ),
            speech=build_speech(settings),
            max_tokens=settings.chat_max_tokens,
            temperature=settings.chat_temperature,
        )

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self.providers]

    async def generate(self, user_text: str, language: str = "en") -> AIResponse:
        if not self.providers:
            return AIResponse(message=localized(NOT_CONFIGURED_MESSAGES, language))

        system = companion_system_prompt(language)
        for provider in self.providers:
            try:
                reply = await provider.complete(
                    system,
                    user_text,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
            except ProviderError as exc:
                logger.warning("Provider %s failed, trying next: %s", provider.name, exc.reason)
                continue
            return await self._complete_turn(user_text, reply or localized(BUSY_MESSAGES, language))

        logger.error("All providers failed: %s", ", ".join(self.provider_names))
        return AIResponse(message=localized(APOLOGY_MESSAGES, language))

    async def _complete_turn(self, user_text: str, reply: str) -> AIResponse:
        audio = None
        if self.speech is not None:
            audio = await self.speech.synthesize(reply)
        return AIResponse(
            message=reply,
            emotion=classify_emotion(reply),
            audio_base64=audio,
            analytics=await self.analyzer.maybe_analyze(user_text, reply),
        )
