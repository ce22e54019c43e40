"""Question ID → accepted answer shapes.

Built-in demo questions, or a JSON file of the form::

    {"<question id>": {"answers": [{"graphDefinition": "...", "response": {...}}],
                       "unmatchedResponse": {...}}}
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from graphmarker.models.responses import content_response
from graphmarker.models.solutions import GraphSolutionItem, GraphSolutions

logger = logging.getLogger(__name__)

_QUESTIONS_ADAPTER = TypeAdapter(dict[str, GraphSolutions])

CORRECT_TEXT = "Your answer was correct!"
INCORRECT_TEXT = "Unfortunately your answer was incorrect."


def single_solution(*clauses: str) -> GraphSolutions:
    """A question with one accepted shape built from the given clauses."""
    return GraphSolutions(
        answers=[
            GraphSolutionItem(
                graph_definition="\r\n".join(clauses),
                response=content_response(True, CORRECT_TEXT),
            )
        ],
        unmatched_response=content_response(False, INCORRECT_TEXT),
    )


DEMO_QUESTIONS: dict[str, GraphSolutions] = {
    "48cfddd0-8e66-4e2a-b462-fc27aeb97cee": single_solution(
        "through:bottomLeft,-Xaxis,topLeft,+Yaxis,topRight",
    ),
    "5b032e4c-e432-455f-925f-8efb8b33c18e": single_solution(
        "through:topLeft, +Yaxis, topRight",
        "points: minima in topRight",
    ),
    "96ee3e16-6fa0-46b5-b9d9-f02d0ba4f077": single_solution(
        "through:bottomLeft,-Yaxis,bottomRight,+Xaxis,topRight,+Xaxis,bottomRight,+Xaxis,topRight",
        "points:maxima in topRight, minima in bottomRight",
    ),
    "f5e5d9ea-8bc9-4adc-8073-a599b0eb3d58": single_solution(
        "curves:2",
        "line: 1; through:  bottomLeft",
        "line: 1; slope: start=flat, end=down",
        "line: 2; through: topRight",
        "line: 2; slope: start=down, end=flat",
    ),
    "afaaf16b-2415-4662-98bf-306c55cc72d0": single_solution(
        "through: topLeft, +Yaxis, topRight",
        "slope: start=flat, end=up",
    ),
    "asymptotic-curve": single_solution(
        "through: topRight",
        "slope: start=down, end=flat",
    ),
    "intersecting-curve": single_solution(
        "through: +Yaxis, topRight, +Xaxis",
        "slope: start=down, end=flat",
    ),
    "origin-intersecting-curve": single_solution(
        "through: bottomLeft, origin, topRight",
    ),
}


def load_questions(path: str | Path | None = None) -> dict[str, GraphSolutions]:
    if path is None:
        return dict(DEMO_QUESTIONS)

    path = Path(path)
    questions = _QUESTIONS_ADAPTER.validate_json(path.read_bytes())
    logger.info("Loaded %d questions from %s", len(questions), path)
    return questions
