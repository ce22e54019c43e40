"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    features_registered: int = 0
    questions_loaded: int = 0


class ResponseExplanation(BaseModel):
    encoding: str = "markdown"
    tags: list[str] = Field(default_factory=list)
    type: str = "content"
    value: str | None = None
    children: list[ResponseExplanation] | None = None


class AnswerResponse(BaseModel):
    correct: bool
    explanation: ResponseExplanation | None = None


def content_response(correct: bool, text: str) -> AnswerResponse:
    """A response whose explanation is a single markdown paragraph."""
    return AnswerResponse(
        correct=correct,
        explanation=ResponseExplanation(children=[ResponseExplanation(value=text)]),
    )
