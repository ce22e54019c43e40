"""Immutable geometry values the engine works on.

Point → PointOfInterest (a Point tagged MAXIMA/MINIMA)
Line  → ordered points + points of interest sorted by x
Input → the ordered lines of one answer
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def plus(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def minus(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def times(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


class PointType(enum.Enum):
    MAXIMA = "maxima"
    MINIMA = "minima"

    @classmethod
    def by_name(cls, name: str) -> PointType:
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"{name!r} is not a valid point type") from None


@dataclass(frozen=True)
class PointOfInterest(Point):
    type: PointType = PointType.MAXIMA

    def minus(self, other: Point) -> PointOfInterest:
        return PointOfInterest(self.x - other.x, self.y - other.y, self.type)

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Line:
    """A polyline. Identity is the points; points of interest are derived."""

    points: tuple[Point, ...]
    points_of_interest: tuple[PointOfInterest, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(
            self,
            "points_of_interest",
            tuple(sorted(self.points_of_interest, key=lambda p: p.x)),
        )

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def shifted(self, offset: Point) -> Line:
        """The same line with every point (and point of interest) moved by -offset."""
        return Line(
            tuple(p.minus(offset) for p in self.points),
            tuple(p.minus(offset) for p in self.points_of_interest),
        )


@dataclass(frozen=True)
class Input:
    lines: tuple[Line, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
