"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

GRAPH_ANSWER_TYPE = "graphChoice"


class AnswerRequest(BaseModel):
    type: str = Field(..., description="Answer type; only graphChoice is marked")
    value: str = Field(..., description="JSON-encoded GraphAnswer")
