"""slope: start=<up|down|flat>, end=<up|down|flat>. Direction at the ends of a line."""

from __future__ import annotations

import enum
import re

from graphmarker.engine.data import Line, Point
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, LineFeature
from graphmarker.engine.lines import get_size
from graphmarker.engine.registry import Scope, feature

_ITEM_SEPARATOR = re.compile(r"\s*,\s*")


class Position(enum.Enum):
    START = "start"
    END = "end"


class Slope(enum.Enum):
    FLAT = "flat"  # nearly horizontal
    UP = "up"  # nearly vertical, going up
    DOWN = "down"  # nearly vertical, going down
    OTHER = "other"


def _by_name(enum_cls, name: str, text: str):
    try:
        return enum_cls(name.strip().lower())
    except ValueError:
        raise SpecificationError(f"Unknown {enum_cls.__name__.lower()} {name.strip()!r} in: {text!r}") from None


def line_at_position(line: Line, position: Position, sample_points: int) -> Line:
    """The first or last few points of a line."""
    count = min(sample_points, len(line.points))
    if position is Position.START:
        return Line(line.points[:count])
    return Line(line.points[len(line.points) - count:])


def size_to_slope(size: Point, threshold: float) -> Slope:
    width = abs(size.x)
    height = size.y
    if width == 0 and height == 0:
        return Slope.OTHER
    if height == 0 or abs(width / height) > threshold:
        return Slope.FLAT
    if width == 0:
        return Slope.UP if height > 0 else Slope.DOWN
    steepness = height / width
    if abs(steepness) > threshold:
        return Slope.UP if steepness > 0 else Slope.DOWN
    return Slope.OTHER


def line_to_slope(line: Line, threshold: float) -> Slope:
    return size_to_slope(get_size(line), threshold)


@feature(tag="slope", scope=Scope.LINE, order=1, description="Slope at the start and end")
class SlopeFeature(LineFeature):
    def __init__(self, expected: dict[Position, Slope], context: FeatureContext) -> None:
        super().__init__(context)
        self.expected = expected

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> SlopeFeature:
        expected: dict[Position, Slope] = {}
        for item in _ITEM_SEPARATOR.split(data.strip()):
            parts = item.split("=")
            if len(parts) != 2:
                raise SpecificationError(f"Incorrect number of slope parts in: {item!r}")
            position = _by_name(Position, parts[0], data)
            if position in expected:
                raise SpecificationError(f"Slope at {position.value} given twice in: {data!r}")
            expected[position] = _by_name(Slope, parts[1], data)
        return cls(expected, context)

    def serialize(self) -> str:
        return ", ".join(
            f"{position.value}={self.expected[position].value}"
            for position in Position
            if position in self.expected
        )

    def slope_at(self, line: Line, position: Position) -> Slope:
        config = self.context.config
        return line_to_slope(
            line_at_position(line, position, config.slope_sample_points), config.slope_threshold
        )

    def test(self, candidate: Line) -> bool:
        return all(
            self.slope_at(candidate, position) is slope
            for position, slope in self.expected.items()
        )

    @classmethod
    def generate(cls, example: Line, context: FeatureContext) -> list[str]:
        config = context.config
        found = [
            (position, line_to_slope(
                line_at_position(example, position, config.slope_sample_points),
                config.slope_threshold,
            ))
            for position in Position
        ]
        items = [f"{position.value}={slope.value}" for position, slope in found if slope is not Slope.OTHER]
        return [", ".join(items)] if items else []
