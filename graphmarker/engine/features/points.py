"""points / has-points: where a line's maxima and minima lie.

``points: maxima in topRight, minima in bottomRight`` lists every point of
interest left to right. ``has-points`` takes the same clauses but only
requires each to be found somewhere on the line.
"""

from __future__ import annotations

import re

from graphmarker.engine.data import Line, PointOfInterest, PointType
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, LineFeature
from graphmarker.engine.registry import Scope, feature
from graphmarker.engine.sector import Sector

_ITEM_SEPARATOR = re.compile(r"\s*,\s*")
_LOCATION = re.compile(r"\s+(?:in|on|at)\s+")

ExpectedPoint = tuple[PointType, Sector]


def _parse_items(data: str, context: FeatureContext) -> list[ExpectedPoint]:
    expected: list[ExpectedPoint] = []
    for item in _ITEM_SEPARATOR.split(data.strip()):
        parts = _LOCATION.split(item.strip())
        if len(parts) != 2:
            raise SpecificationError(f"Incorrect number of point parts in: {item!r}")
        try:
            point_type = PointType.by_name(parts[0])
        except ValueError as e:
            raise SpecificationError(str(e)) from None
        expected.append((point_type, context.sectors.by_name(parts[1])))
    return expected


def _serialize_items(expected: list[ExpectedPoint]) -> str:
    return ", ".join(f"{point_type.value} in {sector.name}" for point_type, sector in expected)


class _PointsFeatureBase(LineFeature):
    def __init__(self, expected: list[ExpectedPoint], context: FeatureContext) -> None:
        super().__init__(context)
        self.expected = expected

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext):
        return cls(_parse_items(data, context), context)

    def serialize(self) -> str:
        return _serialize_items(self.expected)

    def point_matches(self, expected: ExpectedPoint, actual: PointOfInterest) -> bool:
        point_type, sector = expected
        if point_type is not actual.type:
            return False
        return sector is self.context.sectors.any or sector in self.context.classifier.classify_all(actual)


@feature(tag="points", scope=Scope.LINE, order=3, description="Maxima and minima, left to right")
class PointsFeature(_PointsFeatureBase):
    def test(self, candidate: Line) -> bool:
        actual = candidate.points_of_interest
        if len(actual) != len(self.expected):
            return False
        return all(self.point_matches(e, a) for e, a in zip(self.expected, actual))

    @classmethod
    def generate(cls, example: Line, context: FeatureContext) -> list[str]:
        if not example.points_of_interest:
            return []
        classify = context.classifier.classify
        return [_serialize_items([(p.type, classify(p)) for p in example.points_of_interest])]


@feature(tag="has-points", scope=Scope.LINE, generated=False, description="Maxima and minima, any order")
class UnorderedPointsFeature(_PointsFeatureBase):
    def test(self, candidate: Line) -> bool:
        return all(
            any(self.point_matches(expected, actual) for actual in candidate.points_of_interest)
            for expected in self.expected
        )
