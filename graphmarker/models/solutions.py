"""Accepted answer shapes for one question."""

from __future__ import annotations

from pydantic import BaseModel, Field

from graphmarker.models.responses import AnswerResponse


class GraphSolutionItem(BaseModel):
    graph_definition: str = Field(..., alias="graphDefinition", description="Specification text")
    response: AnswerResponse

    model_config = {"populate_by_name": True}


class GraphSolutions(BaseModel):
    answers: list[GraphSolutionItem] = Field(default_factory=list, description="Tried in order")
    unmatched_response: AnswerResponse = Field(..., alias="unmatchedResponse")

    model_config = {"populate_by_name": True}
