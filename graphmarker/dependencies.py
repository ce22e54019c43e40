"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from graphmarker.config import settings
from graphmarker.engine.marker import Marker
from graphmarker.models.solutions import GraphSolutions
from graphmarker.questions import load_questions


@lru_cache(maxsize=1)
def get_marker() -> Marker:
    return Marker(settings.marker_config())


@lru_cache(maxsize=1)
def get_questions() -> dict[str, GraphSolutions]:
    return load_questions(settings.graphmarker_questions_file or None)
