"""Optional structured case assessment attached to a legal-sounding turn.

The assessment is produced by a second model request and is always optional:
provider errors, unusable JSON and failed validation all yield ``None`` and
never affect the chat reply itself.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Sequence

from ..knowledge.keywords import (
    ASSISTANT_LEGAL_INDICATORS,
    REDIRECT_PHRASES,
    USER_LEGAL_KEYWORDS,
)
from ..schemas import CaseAnalysis, RiskLevel
from .prompts import ANALYTICS_SYSTEM_PROMPT, analytics_prompt
from .providers import CompletionProvider, ProviderError

logger = logging.getLogger(__name__)

CASE_STRENGTH_RANGE = (20, 95)
SUCCESS_PROBABILITY_RANGE = (15, 90)
PRECEDENTS_RANGE = (5, 25)
MIN_KEY_FACTORS = 3
MAX_KEY_FACTORS = 5

MIN_USER_KEYWORDS = 1
MIN_ASSISTANT_INDICATORS = 2

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class MalformedAnalytics(ValueError):
    """The model's analytics reply could not be turned into a CaseAnalysis."""


def _count_matches(text: str, terms: Sequence[str]) -> int:
    return sum(1 for term in terms if term in text)


def user_keyword_count(user_text: str) -> int:
    lowered = user_text.lower()
    return sum(
        _count_matches(lowered, terms) for terms in USER_LEGAL_KEYWORDS.values()
    )


def assistant_indicator_count(assistant_text: str) -> int:
    return _count_matches(assistant_text.lower(), ASSISTANT_LEGAL_INDICATORS)


def is_redirect(assistant_text: str) -> bool:
    lowered = assistant_text.lower()
    return any(phrase in lowered for phrase in REDIRECT_PHRASES)


def is_legal_exchange(user_text: str, assistant_text: str) -> bool:
    if is_redirect(assistant_text):
        return False
    return (
        user_keyword_count(user_text) >= MIN_USER_KEYWORDS
        or assistant_indicator_count(assistant_text) >= MIN_ASSISTANT_INDICATORS
    )


def risk_for_probability(success_probability: int) -> RiskLevel:
    if success_probability > 65:
        return "low"
    if success_probability <= 35:
        return "high"
    return "medium"


def _clamp(value: float, bounds: tuple[int, int]) -> int:
    low, high = bounds
    # Halves round up, not to even.
    return min(high, max(low, math.floor(value + 0.5)))


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _validate(raw: Any) -> CaseAnalysis:
    if not isinstance(raw, dict):
        raise MalformedAnalytics("analytics payload is not an object")

    for key in ("caseStrength", "successProbability", "precedents"):
        if not _is_number(raw.get(key)):
            raise MalformedAnalytics(f"{key} is missing or not a number")

    reported_risk = raw.get("riskLevel")
    if reported_risk not in ("low", "medium", "high"):
        raise MalformedAnalytics(f"invalid riskLevel {reported_risk!r}")

    factors = raw.get("keyFactors")
    if not isinstance(factors, list) or len(factors) < MIN_KEY_FACTORS:
        raise MalformedAnalytics("keyFactors must list at least 3 factors")
    if not all(isinstance(f, str) for f in factors):
        raise MalformedAnalytics("keyFactors must be strings")

    success_probability = _clamp(raw["successProbability"], SUCCESS_PROBABILITY_RANGE)
    risk_level = risk_for_probability(success_probability)
    if risk_level != reported_risk:
        logger.info(
            "Analytics risk correction: probability %s%% should be '%s', got '%s'",
            success_probability,
            risk_level,
            reported_risk,
        )

    return CaseAnalysis(
        case_strength=_clamp(raw["caseStrength"], CASE_STRENGTH_RANGE),
        success_probability=success_probability,
        risk_level=risk_level,
        key_factors=factors[:MAX_KEY_FACTORS],
        precedents=_clamp(raw["precedents"], PRECEDENTS_RANGE),
    )


def parse_case_analysis(text: str | None) -> CaseAnalysis | None:
    """Extract and validate the first JSON object in a model reply."""
    if not text:
        return None
    match = _JSON_OBJECT.search(text)
    if match is None:
        logger.warning("Analytics reply contained no JSON object")
        return None
    try:
        return _validate(json.loads(match.group(0)))
    except json.JSONDecodeError as exc:
        logger.warning("Analytics reply was not valid JSON: %s", exc)
    except MalformedAnalytics as exc:
        logger.warning("Analytics validation failed: %s", exc)
    except (ValueError, ArithmeticError, RecursionError) as exc:
        # Out-of-range integers and pathologically nested documents.
        logger.warning("Analytics reply could not be decoded: %r", exc)
    return None


class CaseAnalyzer:
    def __init__(
        self,
        providers: Sequence[CompletionProvider],
        max_tokens: int = 300,
        temperature: float = 0.7,
    ) -> None:
        self.providers = list(providers)
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def maybe_analyze(
        self, user_text: str, assistant_text: str
    ) -> CaseAnalysis | None:
        if not is_legal_exchange(user_text, assistant_text):
            return None

        prompt = analytics_prompt(user_text, assistant_text)
        for provider in self.providers:
            try:
                reply = await provider.complete(
                    ANALYTICS_SYSTEM_PROMPT,
                    prompt,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                )
            except ProviderError as exc:
                logger.error("Analytics request failed on %s: %s", provider.name, exc.reason)
                continue
            # A reply that does not parse is final; only provider errors fall through.
            return parse_case_analysis(reply)
        return None
