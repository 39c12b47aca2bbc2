from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocalizedText:
    en: str
    zh: str

    def get(self, language: str) -> str:
        return self.zh if language == "zh" else self.en


@dataclass(frozen=True)
class CaseAssessment:
    case_strength: int
    success_probability: int
    risk_level: str  # "low", "medium", "high"
    precedents: int
    key_factors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PredefinedCase:
    case_id: str
    category: str
    title: LocalizedText
    description: LocalizedText
    assessment: CaseAssessment
