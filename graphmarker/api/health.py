"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from graphmarker.dependencies import get_questions
from graphmarker.engine.registry import get_registry
from graphmarker.models.responses import HealthResponse
from graphmarker.models.solutions import GraphSolutions

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(questions: dict[str, GraphSolutions] = Depends(get_questions)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        features_registered=get_registry().count,
        questions_loaded=len(questions),
    )


@router.get("/features")
async def features() -> dict[str, str]:
    """Every feature tag with its description."""
    return {spec.tag: spec.description for spec in get_registry().all()}
