from fastapi import APIRouter, Depends

from ..config import Settings
from ..engine.orchestrator import ResponseOrchestrator
from ..knowledge import PREDEFINED_CASES
from ..knowledge.base import PredefinedCase
from ..schemas import (
    CaseAnalysis,
    ContractResponse,
    HealthResponse,
    Language,
    PredefinedCaseResponse,
)
from .deps import get_orchestrator, get_settings

router = APIRouter(prefix="/api", tags=["info"])


def _to_response(case: PredefinedCase, language: str) -> PredefinedCaseResponse:
    assessment = case.assessment
    return PredefinedCaseResponse(
        id=case.case_id,
        title=case.title.get(language),
        description=case.description.get(language),
        category=case.category,
        analysis=CaseAnalysis(
            case_strength=assessment.case_strength,
            success_probability=assessment.success_probability,
            risk_level=assessment.risk_level,
            key_factors=list(assessment.key_factors),
            precedents=assessment.precedents,
        ),
    )


@router.get("/cases", response_model=list[PredefinedCaseResponse])
async def list_cases(language: Language = "en"):
    return [_to_response(case, language) for case in PREDEFINED_CASES.values()]


@router.get("/contract", response_model=ContractResponse)
async def contract_address(settings: Settings = Depends(get_settings)):
    return ContractResponse(address=settings.contract_address)


@router.get("/health", response_model=HealthResponse)
async def health(orchestrator: ResponseOrchestrator = Depends(get_orchestrator)):
    return HealthResponse(
        providers=orchestrator.provider_names,
        speech=orchestrator.speech is not None,
    )
