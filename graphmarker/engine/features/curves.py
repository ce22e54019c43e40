"""curves: N. The answer has exactly N lines."""

from __future__ import annotations

from graphmarker.engine.data import Input
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, InputFeature
from graphmarker.engine.registry import Scope, feature


@feature(tag="curves", scope=Scope.INPUT, order=0, description="Number of separate curves")
class CurvesCountFeature(InputFeature):
    def __init__(self, count: int, context: FeatureContext) -> None:
        super().__init__(context)
        self.count = count

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> CurvesCountFeature:
        try:
            count = int(data.strip())
        except ValueError:
            raise SpecificationError(f"Not a number: {data!r}") from None
        if count < 0:
            raise SpecificationError(f"Curve count cannot be negative: {count}")
        return cls(count, context)

    def serialize(self) -> str:
        return str(self.count)

    def test(self, candidate: Input) -> bool:
        return len(candidate.lines) == self.count

    @classmethod
    def generate(cls, example: Input, context: FeatureContext) -> list[str]:
        if len(example.lines) < 2:
            return []
        return [str(len(example.lines))]
