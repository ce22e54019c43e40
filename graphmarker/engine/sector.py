"""Sectors: named regions of the plane bounded by segments."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from graphmarker.engine.data import Line, Point
from graphmarker.engine.segment import IntersectionParam, Segment


class Intersection(enum.Enum):
    INSIDE = "inside"
    INTERSECTS = "intersects"
    OUTSIDE = "outside"


@dataclass(frozen=True, eq=False)
class Sector:
    """A region inside every one of its boundaries.

    ``excludes`` lists higher-priority sectors carved out of this one so the
    default sectors partition the plane. Only ``contains`` honours it; the
    path walk works on raw boundaries and resolves overlaps by priority.
    """

    name: str
    boundaries: tuple[Segment, ...]
    excludes: tuple[Sector, ...] = field(default=())

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Sector({self.name})"

    def within_bounds(self, point: Point) -> bool:
        return all(boundary.inside(point) for boundary in self.boundaries)

    def contains(self, point: Point) -> bool:
        if not self.within_bounds(point):
            return False
        return not any(other.contains(point) for other in self.excludes)

    def intersects_segment(self, segment: Segment) -> bool:
        return any(boundary.intersects(segment) for boundary in self.boundaries)

    def intersects(self, line: Line) -> Intersection:
        all_inside = True
        some_inside = False
        any_crossing = False
        last: Point | None = None
        for point in line:
            if self.within_bounds(point):
                some_inside = True
            else:
                all_inside = False
            if last is not None:
                any_crossing = any_crossing or self.intersects_segment(Segment.closed(last, point))
            last = point

        if all_inside and not any_crossing:
            return Intersection.INSIDE
        if some_inside or any_crossing:
            return Intersection.INTERSECTS
        return Intersection.OUTSIDE

    def intersection_params(self, segment: Segment) -> list[IntersectionParam]:
        """Every boundary crossing of ``segment``, in order along it.

        Crossings at the same parameter stay in boundary order; the last one
        decides whether the segment ends up inside.
        """
        params = [boundary.intersection_param(segment) for boundary in self.boundaries]
        return sorted((p for p in params if p is not None), key=lambda p: p.t)

    def clip(self, line: Line) -> Line:
        for boundary in self.boundaries:
            line = boundary.clip(line)
        return line
