"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from graphmarker.engine.config import DEFAULT_CONFIG
from graphmarker.engine.data import Input, Line, Point
from graphmarker.engine.features.base import FeatureContext, get_context
from graphmarker.engine.lines import find_points_of_interest, sample
from graphmarker.models.answer import GraphAnswer


def line_of(*coords: float) -> Line:
    """Line through flattened x, y pairs, with its extrema detected."""
    points = tuple(Point(float(x), float(y)) for x, y in zip(coords[::2], coords[1::2]))
    return Line(points, find_points_of_interest(points))


def input_of(*lines: Line) -> Input:
    return Input(lines)


def curve_of(fn, min_x: float, max_x: float, count: int = 100) -> Line:
    return sample(fn, min_x, max_x, count)


def answer_of(*lines: Line, reverse: bool = False) -> GraphAnswer:
    """Wire answer with one curve per line, optionally drawn right to left."""
    curves = []
    for line in lines:
        points = list(line.points)
        if reverse:
            points.reverse()
        curves.append({
            "pts": [{"ind": i, "x": p.x, "y": p.y} for i, p in enumerate(points)],
            "maxima": [{"x": p.x, "y": p.y} for p in line.points_of_interest if p.type.value == "maxima"],
            "minima": [{"x": p.x, "y": p.y} for p in line.points_of_interest if p.type.value == "minima"],
        })
    return GraphAnswer.model_validate({"canvasWidth": 600, "canvasHeight": 400, "curves": curves})


# Normalised answers as the drawing tool would send them

DIAGONAL = curve_of(lambda x: x, -1, 1)
RECIPROCAL_LEFT = curve_of(lambda x: 1 / x, -10, -0.01)
RECIPROCAL_RIGHT = curve_of(lambda x: 1 / x, 0.01, 10)
COSINE = curve_of(math.cos, -2 * math.pi, 2 * math.pi)


@pytest.fixture
def context() -> FeatureContext:
    return get_context(DEFAULT_CONFIG)


@pytest.fixture
def classifier(context):
    return context.classifier


@pytest.fixture
def sectors(context):
    return context.sectors
