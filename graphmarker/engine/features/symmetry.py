"""symmetry: odd|even|symmetric|antisymmetric|none.

``odd`` and ``even`` are about the y-axis and origin. ``symmetric`` and
``antisymmetric`` are the same tests re-centred on the middle point(s) of
interest, for curves that are symmetric about some other vertical line.

The test clips the line into left and right halves, cuts each half at its
points of interest, then compares mirrored sections by their signed sizes.
"""

from __future__ import annotations

import enum

from graphmarker.engine.data import Line
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.base import FeatureContext, LineFeature
from graphmarker.engine.lines import centre_of_points, get_size, split_on_points_of_interest
from graphmarker.engine.registry import Scope, feature


class SymmetryType(enum.Enum):
    NONE = "none"
    ODD = "odd"
    EVEN = "even"
    SYMMETRIC = "symmetric"
    ANTISYMMETRIC = "antisymmetric"

    def to_non_axial(self) -> SymmetryType:
        if self is SymmetryType.EVEN:
            return SymmetryType.SYMMETRIC
        if self is SymmetryType.ODD:
            return SymmetryType.ANTISYMMETRIC
        return self


def _section_symmetry(
    left: Line, right: Line, innermost: bool, context: FeatureContext
) -> SymmetryType | None:
    """Compare a left section with its mirror on the right. None if both are points."""
    left_size = get_size(left)
    right_size = get_size(right)
    if left_size.x == 0 and left_size.y == 0 and right_size.x == 0 and right_size.y == 0:
        return None
    if right_size.x == 0:
        return SymmetryType.NONE

    tolerance = context.config.symmetry_tolerance
    if abs((right_size.x - left_size.x) / right_size.x) < tolerance:
        if right_size.y == 0 and left_size.y == 0:
            return SymmetryType.EVEN
        if right_size.y == 0:
            return SymmetryType.NONE
        if abs((right_size.y - left_size.y) / right_size.y) < tolerance:
            if not innermost:
                return SymmetryType.ODD
            # The two innermost sections must meet at the origin
            relaxed_origin = context.sectors.relaxed_origin
            if relaxed_origin.within_bounds(left.points[-1]) and relaxed_origin.within_bounds(right.points[0]):
                return SymmetryType.ODD
            return SymmetryType.NONE
        if abs((right_size.y + left_size.y) / right_size.y) < tolerance:
            return SymmetryType.EVEN
    return SymmetryType.NONE


def standard_symmetry(line: Line, context: FeatureContext) -> SymmetryType:
    """Symmetry about the y-axis (even) or the origin (odd)."""
    lefts = split_on_points_of_interest(context.sectors.left.clip(line))
    rights = split_on_points_of_interest(context.sectors.right.clip(line))
    if len(lefts) != len(rights):
        return SymmetryType.NONE

    # Pair sections from the middle outwards
    lefts.reverse()
    found: SymmetryType | None = None
    for left, right in zip(lefts, rights):
        section = _section_symmetry(left, right, found is None, context)
        if section is None:
            continue
        if found is None:
            found = section
        elif section is not found:
            return SymmetryType.NONE
    return found or SymmetryType.NONE


def symmetry_of_line(line: Line, context: FeatureContext) -> SymmetryType:
    symmetry = standard_symmetry(line, context)
    if symmetry is not SymmetryType.NONE or not line.points_of_interest:
        return symmetry

    centre = centre_of_points(line.points_of_interest)
    return standard_symmetry(line.shifted(centre), context).to_non_axial()


@feature(tag="symmetry", scope=Scope.LINE, order=2, description="Odd, even or re-centred symmetry")
class SymmetryFeature(LineFeature):
    def __init__(self, symmetry: SymmetryType, context: FeatureContext) -> None:
        super().__init__(context)
        self.symmetry = symmetry

    @classmethod
    def deserialize(cls, data: str, context: FeatureContext) -> SymmetryFeature:
        try:
            return cls(SymmetryType(data.strip().lower()), context)
        except ValueError:
            raise SpecificationError(f"Unknown symmetry: {data.strip()!r}") from None

    def serialize(self) -> str:
        return self.symmetry.value

    def test(self, candidate: Line) -> bool:
        return symmetry_of_line(candidate, self.context) is self.symmetry

    @classmethod
    def generate(cls, example: Line, context: FeatureContext) -> list[str]:
        symmetry = symmetry_of_line(example, context)
        if symmetry is SymmetryType.NONE:
            return []
        return [symmetry.value]
