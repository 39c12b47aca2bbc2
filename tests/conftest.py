import json

import pytest
from fastapi.testclient import TestClient

from companion.config import Settings
from companion.engine.orchestrator import ResponseOrchestrator
from companion.engine.prompts import ANALYTICS_SYSTEM_PROMPT
from companion.engine.providers import ProviderError
from companion.main import create_app

TAX_ANALYTICS = json.dumps({
    "caseStrength": 58,
    "successProbability": 44,
    "riskLevel": "medium",
    "keyFactors": [
        "Amount of unreported income",
        "Whether the omission was willful",
        "Availability of voluntary disclosure",
    ],
    "precedents": 14,
})


class FakeProvider:
    """In-memory provider; answers analytics requests separately from chat."""

    def __init__(self, name="fake", reply="", analytics=TAX_ANALYTICS, fail=False):
        self.name = name
        self.reply = reply
        self.analytics = analytics
        self.fail = fail
        self.calls = []

    async def complete(self, system, user, *, max_tokens, temperature):
        self.calls.append({
            "system": system,
            "user": user,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if self.fail:
            raise ProviderError(self.name, "service unavailable")
        if system == ANALYTICS_SYSTEM_PROMPT:
            return self.analytics
        return self.reply


class FakeSpeech:
    def __init__(self, audio="YXVkaW8="):
        self.audio = audio
        self.texts = []

    async def synthesize(self, text):
        self.texts.append(text)
        return self.audio


@pytest.fixture
def settings():
    return Settings(_env_file=None, openai_api_key="", anthropic_api_key="")


@pytest.fixture
def legal_provider():
    return FakeProvider(
        name="primary",
        reply=(
            "Tax evasion is a serious matter. I recommend gathering your records "
            "and speaking with a tax attorney about voluntary disclosure."
        ),
    )


@pytest.fixture
def make_client(settings):
    def _make(*providers, orchestrator=None):
        app = create_app(
            settings=settings,
            orchestrator=orchestrator or ResponseOrchestrator(list(providers)),
        )
        return TestClient(app)

    return _make
