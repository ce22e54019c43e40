"""The named sectors, built once per MarkerConfig.

Default partition, in priority order:

    origin, +X axis, +Y axis, -X axis, -Y axis, topRight, topLeft, bottomLeft, bottomRight

Axis strips and quadrants overlap on their raw boundaries; each carves out
the higher-priority sectors it touches so exactly one contains any point.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from graphmarker.engine.config import DEFAULT_CONFIG, MarkerConfig
from graphmarker.engine.data import Point
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.sector import Sector
from graphmarker.engine.segment import Segment, Side

logger = logging.getLogger(__name__)

ORIGIN = Point(0, 0)
UP = Point(0, 1)
DOWN = Point(0, -1)
RIGHT = Point(1, 0)
LEFT = Point(-1, 0)

# Shorthand accepted when parsing
ALIASES = {
    "+Xaxis": "onAxisWithPositiveX",
    "-Xaxis": "onAxisWithNegativeX",
    "+Yaxis": "onAxisWithPositiveY",
    "-Yaxis": "onAxisWithNegativeY",
}


def _quadrant(name: str, axis1: Point, axis2: Point, excludes: tuple[Sector, ...]) -> Sector:
    return Sector(
        name,
        (
            Segment.open_one_end_towards(ORIGIN, axis1, axis2),
            Segment.open_one_end_towards(ORIGIN, axis2, axis1),
        ),
        excludes,
    )


def _axis(name: str, left: Point, right: Point, axis: Point, slop: float, origin: Sector) -> Sector:
    left = left.times(slop)
    right = right.times(slop)
    return Sector(
        name,
        (
            Segment.closed(left, right),
            Segment.open_one_end(left, axis, Side.RIGHT),
            Segment.open_one_end(right, axis, Side.LEFT),
        ),
        (origin,),
    )


def _square(name: str, size: float) -> Sector:
    corners = [Point(size, size), Point(-size, size), Point(-size, -size), Point(size, -size)]
    return Sector(
        name,
        tuple(Segment.closed(a, b) for a, b in zip(corners, corners[1:] + corners[:1])),
    )


def _half(name: str, direction: Point) -> Sector:
    return Sector(name, (Segment.open_both_ends(ORIGIN, direction, Side.LEFT),))


def left_of_x(x: float) -> Sector:
    """Half-plane with x co-ordinate at most ``x``."""
    return Sector(f"leftOfX={x}", (Segment.open_both_ends(Point(x, 0), UP, Side.LEFT),))


def right_of_x(x: float) -> Sector:
    """Half-plane with x co-ordinate at least ``x``."""
    return Sector(f"rightOfX={x}", (Segment.open_both_ends(Point(x, 0), UP, Side.RIGHT),))


class SectorBuilder:
    """Every named sector for one configuration."""

    def __init__(self, config: MarkerConfig) -> None:
        self.config = config

        self.origin = _square("origin", config.origin_slop)
        self.relaxed_origin = _square("relaxedOrigin", config.relaxed_origin_slop)

        slop = config.axis_slop
        self.on_axis_with_positive_y = _axis("onAxisWithPositiveY", LEFT, RIGHT, UP, slop, self.origin)
        self.on_axis_with_negative_y = _axis("onAxisWithNegativeY", RIGHT, LEFT, DOWN, slop, self.origin)
        self.on_axis_with_positive_x = _axis("onAxisWithPositiveX", UP, DOWN, RIGHT, slop, self.origin)
        self.on_axis_with_negative_x = _axis("onAxisWithNegativeX", DOWN, UP, LEFT, slop, self.origin)

        self.top_right = _quadrant(
            "topRight", RIGHT, UP,
            (self.origin, self.on_axis_with_positive_x, self.on_axis_with_positive_y),
        )
        self.top_left = _quadrant(
            "topLeft", LEFT, UP,
            (self.origin, self.on_axis_with_negative_x, self.on_axis_with_positive_y),
        )
        self.bottom_left = _quadrant(
            "bottomLeft", LEFT, DOWN,
            (self.origin, self.on_axis_with_negative_x, self.on_axis_with_negative_y),
        )
        self.bottom_right = _quadrant(
            "bottomRight", RIGHT, DOWN,
            (self.origin, self.on_axis_with_positive_x, self.on_axis_with_negative_y),
        )

        self.left = _half("left", UP)
        self.right = _half("right", DOWN)
        self.top = _half("top", RIGHT)
        self.bottom = _half("bottom", LEFT)
        self.any = Sector("any", ())

        self.default_ordered: tuple[Sector, ...] = (
            self.origin,
            self.on_axis_with_positive_x,
            self.on_axis_with_positive_y,
            self.on_axis_with_negative_x,
            self.on_axis_with_negative_y,
            self.top_right,
            self.top_left,
            self.bottom_left,
            self.bottom_right,
        )

        # Pairs that cannot both be occupied; seeing both means the path is on the dividing line
        self.opposing_pairs: tuple[frozenset[Sector], ...] = (
            frozenset({self.top_right, self.bottom_right}),
            frozenset({self.top_left, self.bottom_left}),
            frozenset({self.top_right, self.top_left}),
            frozenset({self.bottom_right, self.bottom_left}),
            frozenset({self.on_axis_with_positive_x, self.on_axis_with_negative_x}),
            frozenset({self.on_axis_with_positive_y, self.on_axis_with_negative_y}),
        )

        self._by_name: dict[str, Sector] = {
            sector.name: sector
            for sector in (
                *self.default_ordered,
                self.relaxed_origin,
                self.left,
                self.right,
                self.top,
                self.bottom,
                self.any,
            )
        }
        logger.debug("Built %d sectors for %s", len(self._by_name), config)

    def by_name(self, name: str) -> Sector:
        name = name.strip()
        name = ALIASES.get(name, name)
        try:
            return self._by_name[name]
        except KeyError:
            raise SpecificationError(f"{name!r} is not a valid sector") from None

    def from_list(self, text: str) -> list[Sector]:
        """Parse a comma-separated list of sector names, ignoring empty items."""
        return [self.by_name(item) for item in text.split(",") if item.strip()]


@lru_cache(maxsize=8)
def get_sectors(config: MarkerConfig = DEFAULT_CONFIG) -> SectorBuilder:
    return SectorBuilder(config)
