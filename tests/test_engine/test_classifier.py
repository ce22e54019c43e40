"""Tests for the sector partition and path classification."""

import numpy as np
import pytest

from graphmarker.engine.config import MarkerConfig
from graphmarker.engine.data import Point
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.sectors import get_sectors
from tests.conftest import curve_of, line_of


def _names(sectors):
    return [s.name for s in sectors]


def test_every_point_is_in_exactly_one_sector(classifier):
    grid = np.linspace(-1, 1, 81)
    special = [0.0, 0.02, -0.02, 0.05, -0.05, 0.1, -0.1]
    coords = sorted(set(grid.tolist()) | set(special))
    for x in coords:
        for y in coords:
            point = Point(x, y)
            containing = [s for s in classifier.ordered if s.contains(point)]
            assert len(containing) == 1, f"{point} is in {_names(containing)}"
            assert containing[0] is classifier.classify(point)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, "origin"),
        (0.04, -0.04, "origin"),
        (0.5, 0, "onAxisWithPositiveX"),
        (0.5, 0.02, "onAxisWithPositiveX"),
        (0.01, 0.5, "onAxisWithPositiveY"),
        (-0.5, -0.01, "onAxisWithNegativeX"),
        (0, -0.5, "onAxisWithNegativeY"),
        (0.5, 0.5, "topRight"),
        (-0.5, 0.5, "topLeft"),
        (-0.5, -0.5, "bottomLeft"),
        (0.5, -0.5, "bottomRight"),
    ],
)
def test_classify(classifier, x, y, expected):
    assert classifier.classify(Point(x, y)).name == expected


def test_classify_all_reports_overlaps(classifier, sectors):
    found = classifier.classify_all(Point(0, 2))
    assert found == {sectors.on_axis_with_positive_y, sectors.top_right, sectors.top_left}


def test_by_name_accepts_aliases(sectors):
    assert sectors.by_name("+Xaxis") is sectors.on_axis_with_positive_x
    assert sectors.by_name(" -Yaxis ") is sectors.on_axis_with_negative_y
    assert sectors.by_name("topLeft") is sectors.top_left
    assert sectors.by_name("any") is sectors.any


def test_by_name_unknown_sector(sectors):
    with pytest.raises(SpecificationError):
        sectors.by_name("middle")


def test_from_list(sectors):
    parsed = sectors.from_list("bottomLeft,-Xaxis, topLeft ,")
    assert _names(parsed) == ["bottomLeft", "onAxisWithNegativeX", "topLeft"]


def test_sectors_follow_config():
    wide = get_sectors(MarkerConfig(axis_slop=0.1, origin_slop=0.2))
    assert wide.on_axis_with_positive_x.contains(Point(0.5, 0.08))
    assert wide.origin.contains(Point(0.15, 0.15))


def test_origin_must_cover_axis_strips():
    with pytest.raises(ValueError):
        MarkerConfig(axis_slop=0.1, origin_slop=0.05)


def test_straight_line_through_axes(classifier):
    line = line_of(-1, 1, 2, -1)
    path = classifier.convert_line_to_sector_list(line)
    assert _names(path) == [
        "topLeft",
        "onAxisWithPositiveY",
        "topRight",
        "onAxisWithPositiveX",
        "bottomRight",
    ]


def test_diagonal_through_origin(classifier):
    line = curve_of(lambda x: x, -10, 10)
    path = classifier.convert_line_to_sector_list(line)
    assert _names(path) == ["bottomLeft", "origin", "topRight"]


def test_segment_crossing_implies_intermediate_sector(classifier):
    # Both ends are in bottomLeft/topRight; the axis and origin come from the crossing
    line = line_of(-1, -1, 1, 1)
    path = classifier.convert_line_to_sector_list(line)
    assert _names(path) == ["bottomLeft", "origin", "topRight"]


def test_path_stays_in_one_sector(classifier):
    line = curve_of(lambda x: x * x + 2, 1, 3)
    assert _names(classifier.convert_line_to_sector_list(line)) == ["topRight"]


def test_sector_set_list_has_no_repeats(classifier):
    sets = classifier.convert_line_to_sector_set_list(curve_of(lambda x: x * x - 2, -5, 5))
    assert all(a != b for a, b in zip(sets, sets[1:]))
