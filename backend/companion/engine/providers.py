"""Language-model providers used for chat replies and case analytics.

Each provider exposes the same ``complete`` coroutine. Any failure (SDK
error, timeout, unusable response) is raised as ``ProviderError`` so the
callers can move on to the next provider in the list.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import anthropic
import openai
from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from ..config import Settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A provider could not produce a completion."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class CompletionProvider(Protocol):
    name: str

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str: ...


class OpenAIProvider:
    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 30.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self.timeout = timeout
        self._client = client or AsyncOpenAI(api_key=api_key, timeout=timeout)

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": user},
                    ],
                    temperature=temperature,
                    max_tokens=max_tokens,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise ProviderError(self.name, f"timed out after {self.timeout}s") from exc
        except openai.OpenAIError as exc:
            raise ProviderError(self.name, str(exc)) from exc

        if not response.choices:
            raise ProviderError(self.name, "response contained no choices")
        return response.choices[0].message.content or ""


class AnthropicProvider:
    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 30.0,
        client: AsyncAnthropic | None = None,
    ) -> None:
        self.model = model
        self.timeout = timeout
        self._client = client or AsyncAnthropic(api_key=api_key, timeout=timeout)

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        try:
            message = await asyncio.wait_for(
                self._client.messages.create(
                    model=self.model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=system,
                    messages=[{"role": "user", "content": user}],
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise ProviderError(self.name, f"timed out after {self.timeout}s") from exc
        except anthropic.AnthropicError as exc:
            raise ProviderError(self.name, str(exc)) from exc

        # Only the first text block is used.
        for block in message.content:
            if block.type == "text":
                return block.text
        return ""


def build_providers(settings: Settings) -> list[CompletionProvider]:
    """Configured providers in fallback order: OpenAI first, then Anthropic."""
    providers: list[CompletionProvider] = []
    if settings.openai_api_key:
        providers.append(
            OpenAIProvider(
                api_key=settings.openai_api_key,
                model=settings.openai_model,
                timeout=settings.provider_timeout_seconds,
            )
        )
    if settings.anthropic_api_key:
        providers.append(
            AnthropicProvider(
                api_key=settings.anthropic_api_key,
                model=settings.anthropic_model,
                timeout=settings.provider_timeout_seconds,
            )
        )
    if not providers:
        logger.warning("No language-model provider credentials configured")
    return providers
