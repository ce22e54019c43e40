"""Directed segments, half-lines and full lines with an inside half-plane.

One class covers every variant:

- closed:          bounded at both ends, inside on the left
- open one end:    ray from ``start`` through ``end`` with an explicit side
- open both ends:  full line through ``start`` and ``end`` with an explicit side

Sector boundaries are built from these; a point is in a sector when it is
``inside`` every boundary.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from graphmarker.engine.data import Line, Point


class Side(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class IntersectionParam:
    """Where another segment crosses this one.

    ``t`` is the parameter along the *other* segment; ``inside`` records
    whether the other segment ends on this boundary's inside.
    """

    t: float
    inside: bool


def _cross(a: Point, b: Point) -> float:
    return a.x * b.y - a.y * b.x


def _dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    side: Side | None = None
    open_both: bool = False

    @classmethod
    def closed(cls, start: Point, end: Point) -> Segment:
        return cls(start, end)

    @classmethod
    def open_one_end(cls, origin: Point, direction: Point, side: Side) -> Segment:
        return cls(origin, origin.plus(direction), side)

    @classmethod
    def open_one_end_towards(cls, origin: Point, direction: Point, inside_point: Point) -> Segment:
        """Ray whose inside is whichever side ``origin + inside_point`` lies on."""
        side = Side.LEFT if _cross(direction, inside_point) >= 0 else Side.RIGHT
        return cls(origin, origin.plus(direction), side)

    @classmethod
    def open_both_ends(cls, origin: Point, direction: Point, side: Side) -> Segment:
        return cls(origin, origin.plus(direction), side, open_both=True)

    def _on_inside(self, direction: Point, offset: Point) -> bool:
        cross = _cross(direction, offset)
        if self.side is Side.RIGHT:
            return cross <= 0
        return cross >= 0

    def inside(self, point: Point) -> bool:
        direction = self.end.minus(self.start)
        offset = point.minus(self.start)
        if not self._on_inside(direction, offset):
            return False

        length_squared = _dot(direction, direction)
        if length_squared == 0:
            return point.x == self.start.x and point.y == self.start.y

        # Projection onto the segment: closed ends bound it to [0, 1]
        coef = _dot(offset, direction) / length_squared
        return (self.open_both or coef >= 0) and (self.side is not None or coef <= 1)

    def intersection_param(self, other: Segment) -> IntersectionParam | None:
        x1, y1 = self.start.x, self.start.y
        x2, y2 = self.end.x, self.end.y
        x3, y3 = other.start.x, other.start.y
        x4, y4 = other.end.x, other.end.y

        det = (x4 - x3) * (y1 - y2) - (x1 - x2) * (y4 - y3)
        # Parallel or collinear; exact comparison is intentional
        if det == 0:
            return None

        t = ((y3 - y4) * (x1 - x3) + (x4 - x3) * (y1 - y3)) / det
        if not self.open_both and t < 0:
            return None
        if self.side is None and t > 1:
            return None

        u = ((y1 - y2) * (x1 - x3) + (x2 - x1) * (y1 - y3)) / det
        if not other.open_both and u < 0:
            return None
        if other.side is None and u > 1:
            return None

        inside = self._on_inside(self.end.minus(self.start), other.end.minus(self.start))
        return IntersectionParam(u, inside)

    def intersects(self, other: Segment) -> bool:
        return self.intersection_param(other) is not None

    def at_parameter(self, t: float) -> Point:
        return Point(
            self.start.x * (1 - t) + self.end.x * t,
            self.start.y * (1 - t) + self.end.y * t,
        )

    def clip_segment(self, segment: Segment) -> Segment | None:
        """The part of ``segment`` on this boundary's inside, or None."""
        param = self.intersection_param(segment)
        if param is None:
            return segment if self.inside(segment.start) else None

        crossing = segment.at_parameter(param.t)
        if param.inside:
            if self.inside(segment.start):
                return segment
            return Segment.closed(crossing, segment.end)
        return Segment.closed(segment.start, crossing)

    def clip(self, line: Line) -> Line:
        """The parts of ``line`` on this boundary's inside, joined up."""
        points: list[Point] = []
        last: Point | None = None
        for point in line:
            if last is not None:
                clipped = self.clip_segment(Segment.closed(last, point))
                if clipped is not None:
                    if not points or points[-1] != clipped.start:
                        points.append(clipped.start)
                    if points[-1] != clipped.end:
                        points.append(clipped.end)
            last = point

        # Once clipped these may no longer be true extrema; kept as given
        kept = tuple(p for p in line.points_of_interest if self.inside(p))
        return Line(tuple(points), kept)
