"""through: s1, s2, .... The line passes through these sectors in order."""

from __future__ import annotations

import logging

from graphmarker.engine.data import Line
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, LineFeature
from graphmarker.engine.registry import Scope, feature
from graphmarker.engine.sector import Sector

logger = logging.getLogger(__name__)


def match_sector_path(expected: list[Sector], actual: list[set[Sector]]) -> bool:
    """Align an expected sector sequence with the sets a path occupied.

    Each expected sector must be found in one or more consecutive sets, one
    set may satisfy several consecutive expected sectors, empty sets are
    skipped, and both sequences must be used up.
    """
    n_expected, n_actual = len(expected), len(actual)
    # reach[i][j]: expected[i:] can be aligned with actual[j:]
    reach = [[False] * (n_actual + 1) for _ in range(n_expected + 1)]
    reach[n_expected][n_actual] = True
    for j in range(n_actual - 1, -1, -1):
        reach[n_expected][j] = not actual[j] and reach[n_expected][j + 1]

    for i in range(n_expected - 1, -1, -1):
        for j in range(n_actual - 1, -1, -1):
            if not actual[j]:
                reach[i][j] = reach[i][j + 1]
            elif expected[i] in actual[j]:
                reach[i][j] = reach[i][j + 1] or reach[i + 1][j] or reach[i + 1][j + 1]
    return reach[0][0]


@feature(tag="through", scope=Scope.LINE, order=0, description="Ordered sectors the line visits")
class ExpectedSectorsFeature(LineFeature):
    def __init__(self, sectors: list[Sector], context: FeatureContext) -> None:
        super().__init__(context)
        self.sectors = sectors

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> ExpectedSectorsFeature:
        sectors = context.sectors.from_list(data)
        if not sectors:
            raise SpecificationError(f"No sectors listed in: {data!r}")
        return cls(sectors, context)

    def serialize(self) -> str:
        return ", ".join(s.name for s in self.sectors)

    def test(self, candidate: Line) -> bool:
        actual = self.context.classifier.convert_line_to_sector_set_list(candidate)
        logger.debug("Line passed through sectors: %s", [sorted(s.name for s in step) for step in actual])
        return match_sector_path(self.sectors, actual)

    @classmethod
    def generate(cls, example: Line, context: FeatureContext) -> list[str]:
        path = context.classifier.convert_line_to_sector_list(example)
        return [", ".join(s.name for s in path)]
