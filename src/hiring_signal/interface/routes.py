"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hiring_signal.interface.dependencies import get_use_case
from hiring_signal.interface.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from hiring_signal.services.analyze_profile import AnalyzeProfileUseCase

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid GitHub username"},
        403: {"model": ErrorResponse, "description": "GitHub refused access"},
        404: {"model": ErrorResponse, "description": "GitHub user not found"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub API error"},
    },
)
async def analyze(
    body: AnalyzeRequest,
    use_case: AnalyzeProfileUseCase = Depends(get_use_case),
) -> AnalyzeResponse:
    """Score a public GitHub profile for hiring signals."""
    report = await use_case.execute(body.username)
    return AnalyzeResponse.model_validate(report)
