"""Wire answer → canonical Input.

Canonical form makes marking independent of how the answer was drawn:
each curve runs left to right, and curves are ordered by where they start.
"""

from __future__ import annotations

from graphmarker.engine.data import Input, Line, Point, PointOfInterest, PointType
from graphmarker.models.answer import Curve, GraphAnswer


def curve_to_line(curve: Curve) -> Line:
    points = [Point(pt.x, pt.y) for pt in curve.pts]
    # Two-point strokes keep their drawn direction
    if len(points) > 2 and points[0].x > points[-1].x:
        points.reverse()

    points_of_interest = [PointOfInterest(pt.x, pt.y, PointType.MAXIMA) for pt in curve.maxima]
    points_of_interest += [PointOfInterest(pt.x, pt.y, PointType.MINIMA) for pt in curve.minima]
    return Line(tuple(points), tuple(points_of_interest))


def _start_x(line: Line) -> float:
    return line.points[0].x if line.points else 0.0


def canonicalise(lines: list[Line]) -> Input:
    """Order lines by the x co-ordinate of their first point."""
    return Input(tuple(sorted(lines, key=_start_x)))


def answer_to_input(answer: GraphAnswer) -> Input:
    return canonicalise([curve_to_line(curve) for curve in answer.curves])
