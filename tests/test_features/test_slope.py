"""Tests for the slope feature."""

import pytest

from graphmarker.engine.data import Point
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.slope import (
    Position,
    Slope,
    SlopeFeature,
    line_at_position,
    line_to_slope,
    size_to_slope,
)
from tests.conftest import RECIPROCAL_LEFT, RECIPROCAL_RIGHT, curve_of, line_of


@pytest.mark.parametrize(
    "coords, expected",
    [
        ((0, 0, 10, 100), Slope.UP),
        ((10, 0, 15, -50), Slope.DOWN),
        ((0, 0, 100, -5), Slope.FLAT),
        ((0, 0, -100, -5), Slope.FLAT),
        ((0, 0, 100, 100), Slope.OTHER),
        ((0, 0, 0, 1), Slope.UP),
        ((0, 0, 0, -1), Slope.DOWN),
        ((0, 0, 1, 0), Slope.FLAT),
    ],
)
def test_line_to_slope(coords, expected):
    assert line_to_slope(line_of(*coords), 4.0) is expected


def test_size_to_slope_single_point():
    assert size_to_slope(Point(0, 0), 4.0) is Slope.OTHER


def test_line_at_position():
    line = line_of(*range(20))
    assert line_at_position(line, Position.START, 3).points == line.points[:3]
    assert line_at_position(line, Position.END, 3).points == line.points[-3:]
    assert line_at_position(line, Position.END, 50).points == line.points


def test_reciprocal_ends(context):
    assert SlopeFeature.deserialize("start=flat, end=down", context).test(RECIPROCAL_LEFT)
    assert SlopeFeature.deserialize("start=down, end=flat", context).test(RECIPROCAL_RIGHT)
    assert not SlopeFeature.deserialize("start=down", context).test(RECIPROCAL_LEFT)


def test_one_end_only(context):
    feature = SlopeFeature.deserialize("end=flat", context)
    assert feature.test(RECIPROCAL_RIGHT)
    assert Position.START not in feature.expected


def test_parse_is_lenient_about_spacing_and_case(context):
    feature = SlopeFeature.deserialize("  END = Flat ,start= down", context)
    assert feature.expected == {Position.END: Slope.FLAT, Position.START: Slope.DOWN}
    assert feature.serialize() == "start=down, end=flat"


@pytest.mark.parametrize(
    "text",
    ["start", "start=down=up", "middle=flat", "start=sideways", "start=up, start=down"],
)
def test_parse_errors(context, text):
    with pytest.raises(SpecificationError):
        SlopeFeature.deserialize(text, context)


def test_generate(context):
    assert SlopeFeature.generate(RECIPROCAL_RIGHT, context) == ["start=down, end=flat"]
    assert SlopeFeature.generate(curve_of(lambda x: x, -1, 1), context) == []


def test_generate_one_end(context):
    line = curve_of(lambda x: x * x, 0.5, 10)
    assert SlopeFeature.generate(line, context) == ["end=up"]
