"""Tests for whole-answer features: curves and intersects."""

import pytest

from graphmarker.engine.assignments import Assignments
from graphmarker.engine.errors import SpecificationError
from graphmarker.engine.features.curves import CurvesCountFeature
from graphmarker.engine.features.intersects import IntersectionPointsFeature
from tests.conftest import DIAGONAL, curve_of, input_of, line_of

ANTI_DIAGONAL = curve_of(lambda x: -x, -1, 1)


def test_curves(context):
    feature = CurvesCountFeature.deserialize(" 2 ", context)
    assert feature.test(input_of(DIAGONAL, ANTI_DIAGONAL))
    assert not feature.test(input_of(DIAGONAL))
    assert str(feature) == "curves: 2"


@pytest.mark.parametrize("text", ["two", "", "-1", "1.5"])
def test_curves_parse_errors(context, text):
    with pytest.raises(SpecificationError):
        CurvesCountFeature.deserialize(text, context)


def test_curves_generated_only_for_several_lines(context):
    assert CurvesCountFeature.generate(input_of(DIAGONAL), context) == []
    assert CurvesCountFeature.generate(input_of(DIAGONAL, ANTI_DIAGONAL), context) == ["2"]


def test_intersects_at_origin(context):
    feature = IntersectionPointsFeature.deserialize("1 to 2 at origin", context)
    assert feature.test(input_of(DIAGONAL, ANTI_DIAGONAL))
    assert not feature.test(input_of(DIAGONAL, curve_of(lambda x: 0.5 - x, -1, 1)))


def test_intersects_nowhere(context):
    parallel = input_of(line_of(-1, -0.5, 1, 1.5), line_of(-1, -1.5, 1, 0.5))
    assert IntersectionPointsFeature.deserialize("1 to 2 nowhere", context).test(parallel)
    assert not IntersectionPointsFeature.deserialize("1 to 2 at origin", context).test(parallel)


def test_intersects_missing_line(context):
    feature = IntersectionPointsFeature.deserialize("1 to 3 nowhere", context)
    assert not feature.test(input_of(DIAGONAL, ANTI_DIAGONAL))


def test_intersects_serialize(context):
    feature = IntersectionPointsFeature.deserialize("2 to 1 on topRight , bottomLeft", context)
    assert (feature.line_a, feature.line_b) == ("2", "1")
    assert feature.serialize() == "2 to 1 at topRight, bottomLeft"
    assert IntersectionPointsFeature.deserialize("1 to 2 nowhere", context).serialize() == "1 to 2 nowhere"


@pytest.mark.parametrize(
    "text",
    ["1 to 1 nowhere", "a to A nowhere", "0 to 1 nowhere", "1 and 2 nowhere", "1 to 2 at middle", "a1 to b nowhere"],
)
def test_intersects_parse_errors(context, text):
    with pytest.raises(SpecificationError):
        IntersectionPointsFeature.deserialize(text, context)


def test_intersects_generate(context):
    lines = input_of(DIAGONAL, ANTI_DIAGONAL, line_of(-1, 0.5, 1, 0.5))
    assert IntersectionPointsFeature.generate(lines, context) == [
        "A to B at origin",
        "A to C at topRight",
        "B to C at topLeft",
    ]


def test_intersects_generate_numbers_lines_side_by_side(context):
    lines = input_of(line_of(-1, -0.5, -0.5, -1), line_of(0.5, 1, 1, 0.5))
    assert IntersectionPointsFeature.generate(lines, context) == ["1 to 2 nowhere"]


def test_intersects_by_name(context):
    feature = IntersectionPointsFeature.deserialize("a to B at topRight", context)
    flat = line_of(-1, 0.5, 1, 0.5)
    assert feature.test(input_of(DIAGONAL, ANTI_DIAGONAL, flat))
    assert feature.test(input_of(flat, ANTI_DIAGONAL, DIAGONAL))
    assert not feature.test(input_of(ANTI_DIAGONAL, flat))


def test_intersects_narrows_assignments(context):
    candidate = input_of(DIAGONAL, ANTI_DIAGONAL, line_of(-1, 0.5, 1, 0.5))
    feature = IntersectionPointsFeature.deserialize("A to B at topLeft", context)
    narrowed = feature.narrow(candidate, Assignments.for_input(candidate))
    # The anti-diagonal and the flat line, either way round
    assert narrowed.lines_for("a") == {1, 2}
    assert len(narrowed) == 2


def test_intersects_mixes_positions_and_names(context):
    feature = IntersectionPointsFeature.deserialize("1 to b at origin", context)
    assert feature.test(input_of(DIAGONAL, ANTI_DIAGONAL))
    assert not feature.test(input_of(DIAGONAL))
