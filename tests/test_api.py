from fastapi.testclient import TestClient

from companion.engine.analytics import risk_for_probability
from companion.engine.orchestrator import ResponseOrchestrator
from companion.engine.prompts import NOT_CONFIGURED_MESSAGES
from companion.main import create_app
from companion.schemas import EMOTIONS
from conftest import FakeProvider


def test_tax_question_returns_messages_and_analytics(make_client, legal_provider):
    client = make_client(legal_provider)

    resp = client.post(
        "/api/chat", json={"content": "I evaded taxes last year", "language": "en"}
    )

    assert resp.status_code == 200
    body = resp.json()
    user_message, cz_message = body["userMessage"], body["czMessage"]
    assert user_message["message"] == "I evaded taxes last year"
    assert user_message["sender"] == "user"
    assert user_message["username"] == "Anonymous"
    assert cz_message["sender"] == "assistant"
    assert cz_message["message"]
    assert cz_message["emotion"] in EMOTIONS
    assert int(cz_message["id"]) == int(user_message["id"]) + 1

    analytics = body["analytics"]
    assert analytics is not None
    assert set(analytics) == {
        "caseStrength",
        "successProbability",
        "riskLevel",
        "keyFactors",
        "precedents",
    }
    assert analytics["riskLevel"] == risk_for_probability(analytics["successProbability"])


def test_small_talk_returns_null_analytics(make_client):
    provider = FakeProvider(reply="It should be sunny all afternoon.")
    client = make_client(provider)

    resp = client.post("/api/chat", json={"content": "What's the weather today?"})

    assert resp.status_code == 200
    assert resp.json()["analytics"] is None


def test_username_is_echoed(make_client, legal_provider):
    client = make_client(legal_provider)

    resp = client.post("/api/chat", json={"content": "I was sued", "username": "alice"})

    assert resp.json()["userMessage"]["username"] == "alice"


def test_second_message_from_same_wallet_is_rate_limited(make_client, legal_provider):
    client = make_client(legal_provider)
    payload = {"content": "I evaded taxes last year", "walletAddress": "0xabc"}

    first = client.post("/api/chat", json=payload)
    second = client.post("/api/chat", json=payload)

    assert first.status_code == 200
    assert second.status_code == 429
    body = second.json()
    assert 1 <= body["remainingTime"] <= 5
    assert str(body["remainingTime"]) in body["error"]


def test_different_wallets_are_limited_separately(make_client, legal_provider):
    client = make_client(legal_provider)

    a = client.post("/api/chat", json={"content": "I was sued", "walletAddress": "0xaaa"})
    b = client.post("/api/chat", json={"content": "I was sued", "walletAddress": "0xbbb"})

    assert a.status_code == 200
    assert b.status_code == 200


def test_client_address_is_used_without_wallet(make_client, legal_provider):
    client = make_client(legal_provider)

    assert client.post("/api/chat", json={"content": "I was sued"}).status_code == 200
    assert client.post("/api/chat", json={"content": "I was sued"}).status_code == 429


def test_rate_limited_request_skips_providers(make_client, legal_provider):
    client = make_client(legal_provider)
    payload = {"content": "hello", "walletAddress": "0xabc"}

    client.post("/api/chat", json=payload)
    calls_after_first = len(legal_provider.calls)
    client.post("/api/chat", json=payload)

    assert len(legal_provider.calls) == calls_after_first


def test_validation_errors_return_400(make_client, legal_provider):
    client = make_client(legal_provider)

    for payload in (
        {},
        {"content": ""},
        {"content": "x" * 2001},
        {"content": "hello", "language": "fr"},
        {"content": 42},
    ):
        resp = client.post("/api/chat", json=payload)
        assert resp.status_code == 400, payload
        body = resp.json()
        assert body["error"] == "Invalid request data"
        assert body["details"]

    assert legal_provider.calls == []


def test_validation_failure_does_not_consume_cooldown(make_client, legal_provider):
    client = make_client(legal_provider)

    bad = client.post("/api/chat", json={"content": "", "walletAddress": "0xabc"})
    good = client.post("/api/chat", json={"content": "hello", "walletAddress": "0xabc"})

    assert bad.status_code == 400
    assert good.status_code == 200


def test_content_at_max_length_is_accepted(make_client, legal_provider):
    client = make_client(legal_provider)

    resp = client.post("/api/chat", json={"content": "x" * 2000})

    assert resp.status_code == 200


def test_unexpected_failure_returns_500(make_client):
    class ExplodingOrchestrator:
        providers = []
        speech = None

        async def generate(self, text, language):
            raise RuntimeError("boom")

    client = make_client(orchestrator=ExplodingOrchestrator())

    resp = client.post("/api/chat", json={"content": "hello"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_failure_outside_orchestrator_returns_json_500(settings, legal_provider):
    class BrokenLimiter:
        def try_acquire(self, key, now_ms=None):
            raise RuntimeError("limiter state corrupted")

    app = create_app(
        settings=settings,
        orchestrator=ResponseOrchestrator([legal_provider]),
        rate_limiter=BrokenLimiter(),
    )
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.post("/api/chat", json={"content": "hello"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert legal_provider.calls == []


def test_undecodable_analytics_reply_keeps_turn_alive(make_client):
    huge = "1" + "0" * 400
    provider = FakeProvider(
        reply="Your legal case needs evidence.",
        analytics=(
            '{"caseStrength": ' + huge + ', "successProbability": 50, "riskLevel": "medium", '
            '"keyFactors": ["a", "b", "c"], "precedents": 10}'
        ),
    )
    client = make_client(provider)

    resp = client.post("/api/chat", json={"content": "I was sued"})

    assert resp.status_code == 200
    assert resp.json()["czMessage"]["message"] == "Your legal case needs evidence."
    assert resp.json()["analytics"] is None


def test_deeply_nested_analytics_reply_keeps_turn_alive(make_client):
    depth = 100_000
    provider = FakeProvider(
        reply="Your legal case needs evidence.",
        analytics='{"a": ' + "[" * depth + "]" * depth + "}",
    )

    resp = make_client(provider).post("/api/chat", json={"content": "I was sued"})

    assert resp.status_code == 200
    assert resp.json()["analytics"] is None


def test_unset_message_fields_are_omitted(make_client):
    client = make_client(FakeProvider(reply="It should be sunny all afternoon."))

    body = client.post("/api/chat", json={"content": "What's the weather today?"}).json()

    assert "emotion" not in body["userMessage"]
    assert "audioBase64" not in body["userMessage"]
    assert "username" not in body["czMessage"]
    assert "audioBase64" not in body["czMessage"]
    assert body["czMessage"]["emotion"] in EMOTIONS
    # analytics stays present as an explicit null
    assert "analytics" in body and body["analytics"] is None


def test_missing_credentials_returns_fixed_message(make_client):
    client = make_client()

    resp = client.post("/api/chat", json={"content": "你好", "language": "zh"})

    assert resp.status_code == 200
    cz_message = resp.json()["czMessage"]
    assert cz_message["message"] == NOT_CONFIGURED_MESSAGES["zh"]
    assert cz_message["emotion"] == "idle"


def test_failed_providers_return_apology(make_client):
    client = make_client(FakeProvider("openai", fail=True), FakeProvider("anthropic", fail=True))

    resp = client.post("/api/chat", json={"content": "I evaded taxes last year"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["czMessage"]["emotion"] == "idle"
    assert body["analytics"] is None


def test_predefined_cases_are_localized(make_client):
    client = make_client()

    en = client.get("/api/cases").json()
    zh = client.get("/api/cases", params={"language": "zh"}).json()

    assert [c["id"] for c in en] == [c["id"] for c in zh]
    assert len(en) == 4
    assert en[0]["title"] == "Binance Regulatory Compliance"
    assert zh[0]["title"] == "Binance监管合规"


def test_predefined_cases_respect_risk_thresholds(make_client):
    for case in make_client().get("/api/cases").json():
        analysis = case["analysis"]
        assert analysis["riskLevel"] == risk_for_probability(analysis["successProbability"])
        assert 3 <= len(analysis["keyFactors"]) <= 5


def test_contract_address(make_client, settings):
    resp = make_client().get("/api/contract")
    assert resp.json() == {"address": settings.contract_address}


def test_health_lists_providers(make_client):
    resp = make_client(FakeProvider("openai"), FakeProvider("anthropic")).get("/api/health")
    assert resp.json() == {"status": "ok", "providers": ["openai", "anthropic"], "speech": False}
