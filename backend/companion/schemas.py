from typing import Any, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

EmotionType = Literal[
    "idle",
    "analyzing",
    "thinking_deep",
    "presenting",
    "approving",
    "concerned",
    "gavel_tap",
]
EMOTIONS: tuple[str, ...] = get_args(EmotionType)

RiskLevel = Literal["low", "medium", "high"]
Language = Literal["en", "zh"]
Sender = Literal["user", "assistant", "system"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CaseAnalysis(CamelModel):
    model_config = ConfigDict(frozen=True)

    case_strength: int = Field(ge=0, le=100)
    success_probability: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    key_factors: list[str]
    precedents: int = Field(ge=0)


class ChatMessage(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    message: str
    sender: Sender
    username: Optional[str] = None
    timestamp: str
    emotion: Optional[EmotionType] = None
    audio_base64: Optional[str] = None

    @model_serializer(mode="wrap")
    def omit_unset_fields(self, handler) -> dict[str, Any]:
        # Optional message fields are left out rather than sent as null.
        return {k: v for k, v in handler(self).items() if v is not None}


class ChatRequest(CamelModel):
    content: str = Field(min_length=1, max_length=2000)
    username: Optional[str] = None
    language: Language = "en"
    wallet_address: Optional[str] = None


class ChatResponse(CamelModel):
    user_message: ChatMessage
    cz_message: ChatMessage
    analytics: Optional[CaseAnalysis] = None


class PredefinedCaseResponse(CamelModel):
    id: str
    title: str
    description: str
    category: str
    analysis: CaseAnalysis


class ContractResponse(BaseModel):
    address: str


class HealthResponse(BaseModel):
    status: str = "ok"
    providers: list[str]
    speech: bool
