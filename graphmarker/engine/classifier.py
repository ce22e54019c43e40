"""Sector classifier: which sectors a point or a polyline visits."""

from __future__ import annotations

import logging

from graphmarker.engine.config import DEFAULT_CONFIG, MarkerConfig
from graphmarker.engine.data import Line, Point
from graphmarker.engine.sector import Sector
from graphmarker.engine.sectors import SectorBuilder, get_sectors
from graphmarker.engine.segment import IntersectionParam, Segment

logger = logging.getLogger(__name__)


class SectorClassifier:
    """Classifies points and paths against the default ordered sectors.

    Raw sector boundaries overlap along the axes and around the origin, so a
    point may be *within* several sectors; ``classify`` picks the first in
    priority order, which is also the single sector whose ``contains`` holds.
    """

    def __init__(self, config: MarkerConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.sectors: SectorBuilder = get_sectors(config)
        self.ordered: tuple[Sector, ...] = self.sectors.default_ordered

    def classify_all(self, point: Point) -> set[Sector]:
        return {sector for sector in self.ordered if sector.within_bounds(point)}

    def classify(self, point: Point) -> Sector:
        for sector in self.ordered:
            if sector.within_bounds(point):
                return sector
        # Quadrants are closed on their raw boundaries and cover the plane
        raise AssertionError(f"No sector contains {point}")

    def highest_priority(self, sectors: set[Sector]) -> Sector | None:
        for sector in self.ordered:
            if sector in sectors:
                return sector
        return None

    def convert_line_to_sector_set_list(self, line: Line) -> list[set[Sector]]:
        """Every set of sectors the path occupies, in order, without repeats."""
        output: list[set[Sector]] = []
        last: Point | None = None
        for point in line:
            if last is not None:
                self._classify_segment(output, Segment.closed(last, point))
            self._add_sectors(output, self.classify_all(point))
            last = point
        return output

    def convert_line_to_sector_list(self, line: Line) -> list[Sector]:
        """The canonical path: one sector per step, consecutive repeats collapsed."""
        output: list[Sector] = []
        for sectors in self.convert_line_to_sector_set_list(line):
            sector = self.highest_priority(sectors)
            if sector is None:
                continue
            if not output or output[-1] is not sector:
                output.append(sector)
        logger.debug("Line of %d points passes through %s", len(line), [s.name for s in output])
        return output

    def _add_sectors(self, output: list[set[Sector]], sectors: set[Sector]) -> None:
        # On the line between two opposing sectors: belongs to neither
        opposed = [pair for pair in self.sectors.opposing_pairs if pair <= sectors]
        for pair in opposed:
            sectors -= pair

        if not output or output[-1] != sectors:
            output.append(sectors)

    def _classify_segment(self, output: list[set[Sector]], segment: Segment) -> None:
        """Record the sectors entered and left along ``segment`` in crossing order."""
        pending: list[list[IntersectionParam]] = [
            sector.intersection_params(segment) for sector in self.ordered
        ]
        inside = [sector.within_bounds(segment.start) for sector in self.ordered]

        index = _lowest_index(pending)
        while index is not None:
            crossing = pending[index].pop(0)
            inside[index] = crossing.inside
            index = _lowest_index(pending)
            # Crossings at the same parameter happen together
            while index is not None and pending[index][0].t == crossing.t:
                crossing = pending[index].pop(0)
                inside[index] = crossing.inside
                index = _lowest_index(pending)

            self._add_sectors(
                output,
                {sector for sector, is_inside in zip(self.ordered, inside) if is_inside},
            )


def _lowest_index(pending: list[list[IntersectionParam]]) -> int | None:
    index = None
    lowest = float("inf")
    for i, params in enumerate(pending):
        if params and params[0].t < lowest:
            index = i
            lowest = params[0].t
    return index
