"""POST /api/questions/{question_id}/answer: mark an answer, or generate a specification."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from graphmarker.dependencies import get_marker, get_questions
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.marker import Marker
from graphmarker.models.answer import GraphAnswer
from graphmarker.models.requests import GRAPH_ANSWER_TYPE, AnswerRequest
from graphmarker.models.responses import AnswerResponse, content_response
from graphmarker.models.solutions import GraphSolutions

logger = logging.getLogger(__name__)

router = APIRouter()

GENERATE_QUESTION = "generate"


def _question_key(question_id: str) -> str:
    # Accept "graph_sketcher_test|<id>" as sent by the question page
    return question_id.rsplit("|", 1)[-1]


@router.post("/questions/{question_id}/answer", response_model=AnswerResponse)
def answer(
    question_id: str,
    request: AnswerRequest,
    marker: Marker = Depends(get_marker),
    questions: dict[str, GraphSolutions] = Depends(get_questions),
) -> AnswerResponse:
    if request.type != GRAPH_ANSWER_TYPE:
        raise HTTPException(status_code=400, detail=f"Unknown answer type {request.type}")

    try:
        graph_answer = GraphAnswer.model_validate_json(request.value)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Malformed graph answer: {e.error_count()} error(s)") from e

    key = _question_key(question_id)
    if key == GENERATE_QUESTION:
        text = marker.generate(graph_answer)
        logger.info("Generated specification for %d curve(s)", len(graph_answer.curves))
        return content_response(True, text.replace("\r\n", "<br>"))

    question = questions.get(key)
    if question is None:
        raise HTTPException(status_code=404, detail=f"Unknown question {key}")

    try:
        return marker.mark(question, graph_answer)
    except SpecificationError as e:
        logger.error("Question %s has a bad specification: %s", key, e)
        raise HTTPException(status_code=500, detail=f"Question {key} is misconfigured") from e
