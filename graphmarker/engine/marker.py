"""Marker: evaluates an answer against a question's accepted shapes."""

from __future__ import annotations

import logging
import time

from graphmarker.engine.config import DEFAULT_CONFIG, MarkerConfig
from graphmarker.engine.specification import Specification, generate
from graphmarker.engine.translation import answer_to_input
from graphmarker.models.answer import GraphAnswer
from graphmarker.models.responses import AnswerResponse
from graphmarker.models.solutions import GraphSolutions

logger = logging.getLogger(__name__)


class Marker:
    def __init__(self, config: MarkerConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def mark(self, solutions: GraphSolutions, answer: GraphAnswer) -> AnswerResponse:
        """Response of the first specification the answer matches, else the unmatched response.

        Every specification is parsed before any is tested, so a malformed
        one raises SpecificationError regardless of the answer.
        """
        start = time.perf_counter()
        candidate = answer_to_input(answer)
        specifications = [Specification.parse(item.graph_definition, self.config) for item in solutions.answers]

        for index, (item, specification) in enumerate(zip(solutions.answers, specifications)):
            if specification.test(candidate):
                elapsed = (time.perf_counter() - start) * 1000
                logger.info("Matched specification %d of %d (%.1fms)", index + 1, len(specifications), elapsed)
                return item.response

        elapsed = (time.perf_counter() - start) * 1000
        logger.info("No specification matched %d line(s) (%.1fms)", len(candidate.lines), elapsed)
        return solutions.unmatched_response

    def generate(self, answer: GraphAnswer) -> str:
        return generate(answer_to_input(answer), self.config)
