"""Operations on whole lines: splitting, sizing and crossing."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from graphmarker.engine.data import Line, Point, PointOfInterest, PointType
from graphmarker.engine.sectors import left_of_x, right_of_x
from graphmarker.engine.segment import Segment
from graphmarker.utils.geometry import as_array, bbox, bboxes_overlap, local_extrema


def split_on_points(line: Line, split_points: Sequence[Point]) -> list[Line]:
    """Split a line at the x co-ordinate of each split point.

    Neighbouring pieces share the point where they were cut::

        1--2--A--3--B--4  →  1--2--A,  A--3--B,  B--4
    """
    lines: list[Line] = []
    remainder = line
    for point in split_points:
        lines.append(left_of_x(point.x).clip(remainder))
        remainder = right_of_x(point.x).clip(remainder)
    lines.append(remainder)
    return lines


def split_on_points_of_interest(line: Line) -> list[Line]:
    return split_on_points(line, line.points_of_interest)


def get_size(line: Line) -> Point:
    """Bounding box width and height, signed by the direction the line travels.

    Width is negative when the line starts right of its horizontal centre,
    height when it starts above its vertical centre.
    """
    if line.is_empty:
        return Point(0, 0)

    xmin, ymin, xmax, ymax = bbox(as_array(line.points))
    start = line.points[0]
    width = xmax - xmin
    height = ymax - ymin
    x = width if start.x < (xmin + xmax) / 2 else -width
    y = height if start.y < (ymin + ymax) / 2 else -height
    return Point(x, y)


def centre_of_points(points: Sequence[Point]) -> Point:
    """Middle point, or the midpoint of the middle two for an even count."""
    half = len(points) // 2
    if len(points) % 2 == 0:
        return points[half - 1].plus(points[half]).times(0.5)
    return Point(points[half].x, points[half].y)


def no_horizontal_overlap(lines: Sequence[Line]) -> bool:
    """True if no two lines share any x, touching ends included. Empty lines have no span."""
    spans: list[tuple[float, float]] = []
    for line in lines:
        if line.is_empty:
            continue
        xmin, _, xmax, _ = bbox(as_array(line.points))
        if any(xmin <= right and xmax >= left for left, right in spans):
            return False
        spans.append((xmin, xmax))
    return True


def _split_in_half(line: Line) -> list[Line]:
    points = line.points
    if len(points) == 2:
        return [line]
    half = len(points) // 2
    return [Line(points[: half + 1]), Line(points[half:])]


def find_intersections(line_a: Line, line_b: Line) -> list[Point]:
    """Every point where two lines cross, found by bisecting both.

    Results are de-duplicated and ordered by the recursion, which walks
    line A left to right.
    """
    if len(line_a) < 2 or len(line_b) < 2:
        return []

    if len(line_a) == 2 and len(line_b) == 2:
        a = Segment.closed(*line_a.points)
        b = Segment.closed(*line_b.points)
        param = a.intersection_param(b)
        return [] if param is None else [b.at_parameter(param.t)]

    found: list[Point] = []
    for sub_a in _split_in_half(line_a):
        box_a = bbox(as_array(sub_a.points))
        for sub_b in _split_in_half(line_b):
            if not bboxes_overlap(box_a, bbox(as_array(sub_b.points))):
                continue
            for point in find_intersections(sub_a, sub_b):
                if point not in found:
                    found.append(point)
    return found


def find_points_of_interest(points: Sequence[Point]) -> tuple[PointOfInterest, ...]:
    """Local maxima and minima of a sampled curve, ordered by x."""
    if len(points) < 3:
        return ()
    ys = np.asarray([p.y for p in points], dtype=np.float64)
    maxima, minima = local_extrema(ys)
    found = [PointOfInterest(points[i].x, points[i].y, PointType.MAXIMA) for i in maxima]
    found += [PointOfInterest(points[i].x, points[i].y, PointType.MINIMA) for i in minima]
    return tuple(sorted(found, key=lambda p: p.x))


def sample(fn, min_x: float, max_x: float, count: int = 100) -> Line:
    """A line through ``count`` evenly spaced samples of ``fn``, with its extrema."""
    if count < 2:
        raise ValueError(f"Need at least two samples, got {count}")
    # Scale before dividing so the midpoint of a symmetric range lands exactly on 0
    xs = min_x + (max_x - min_x) * np.arange(count) / (count - 1)
    points = tuple(Point(float(x), float(fn(float(x)))) for x in xs)
    return Line(points, find_points_of_interest(points))
