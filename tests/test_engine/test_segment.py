"""Tests for segments, rays and lines with an inside half-plane."""

from __future__ import annotations

from graphmarker.engine.data import Point
from graphmarker.engine.segment import Segment, Side
from tests.conftest import line_of


# ---------------------------------------------------------------------------
# 1. Inside tests
# ---------------------------------------------------------------------------

class TestInside:
    def test_closed_segment(self):
        segment = Segment.closed(Point(0, 0), Point(2, 2))
        assert segment.inside(Point(1, 1))
        assert segment.inside(Point(0, 0))
        assert segment.inside(Point(2, 2))
        # On the extension, beyond the end
        assert not segment.inside(Point(3, 3))

    def test_closed_segment_is_left_half_plane(self):
        segment = Segment.closed(Point(0, 0), Point(2, 0))
        assert segment.inside(Point(1, 1))
        assert not segment.inside(Point(1, -1))

    def test_open_both_ends_on_the_other_side(self):
        line = Segment.open_both_ends(Point(0, 2), Point(1, 0), Side.LEFT)
        assert not line.inside(Point(1, 1))
        assert line.inside(Point(100, 3))
        assert line.inside(Point(-100, 2))

    def test_right_side(self):
        line = Segment.open_both_ends(Point(0, 0), Point(0, 1), Side.RIGHT)
        assert line.inside(Point(1, 5))
        assert line.inside(Point(0, -5))
        assert not line.inside(Point(-1, 0))

    def test_open_one_end_towards_picks_side(self):
        ray = Segment.open_one_end_towards(Point(0, 0), Point(1, 0), Point(0, 1))
        assert ray.side is Side.LEFT
        ray = Segment.open_one_end_towards(Point(0, 0), Point(1, 0), Point(0, -1))
        assert ray.side is Side.RIGHT
        # Rays start at their origin
        assert ray.inside(Point(5, -1))
        assert not ray.inside(Point(-5, -1))


# ---------------------------------------------------------------------------
# 2. Intersections
# ---------------------------------------------------------------------------

class TestIntersection:
    def test_extensions_crossing_is_not_an_intersection(self):
        a = Segment.closed(Point(0, 0), Point(1, 0))
        b = Segment.closed(Point(2, -1), Point(2, 1))
        assert a.intersection_param(b) is None
        assert not a.intersects(b)

    def test_ray_reaches_beyond_its_direction_point(self):
        ray = Segment.open_one_end(Point(0, 0), Point(1, 0), Side.LEFT)
        b = Segment.closed(Point(2, -1), Point(2, 1))
        param = ray.intersection_param(b)
        assert param is not None
        assert param.t == 0.5
        assert param.inside

    def test_ray_does_not_reach_behind_its_origin(self):
        ray = Segment.open_one_end(Point(0, 0), Point(1, 0), Side.LEFT)
        b = Segment.closed(Point(-2, -1), Point(-2, 1))
        assert not ray.intersects(b)

    def test_parallel_segments(self):
        a = Segment.closed(Point(0, 0), Point(1, 1))
        b = Segment.closed(Point(0, 1), Point(1, 2))
        assert a.intersection_param(b) is None

    def test_param_reports_other_end_side(self):
        boundary = Segment.closed(Point(0, 0), Point(2, 0))
        upwards = Segment.closed(Point(1, -1), Point(1, 1))
        param = boundary.intersection_param(upwards)
        assert param.t == 0.5
        assert param.inside

        downwards = Segment.closed(Point(1, 1), Point(1, -1))
        assert not boundary.intersection_param(downwards).inside

    def test_at_parameter(self):
        segment = Segment.closed(Point(0, 0), Point(4, 2))
        assert segment.at_parameter(0) == Point(0, 0)
        assert segment.at_parameter(0.5) == Point(2, 1)
        assert segment.at_parameter(1) == Point(4, 2)


# ---------------------------------------------------------------------------
# 3. Clipping
# ---------------------------------------------------------------------------

class TestClip:
    def test_keeps_inside_part(self):
        left_half = Segment.open_both_ends(Point(0, 0), Point(0, 1), Side.LEFT)
        clipped = left_half.clip(line_of(-2, 0, 2, 0))
        assert clipped.points == (Point(-2, 0), Point(0, 0))

    def test_outside_line_is_empty(self):
        left_half = Segment.open_both_ends(Point(0, 0), Point(0, 1), Side.LEFT)
        clipped = left_half.clip(line_of(1, 0, 2, 1, 3, 0))
        assert clipped.is_empty
        assert clipped.points_of_interest == ()

    def test_keeps_points_of_interest_inside(self):
        right_half = Segment.open_both_ends(Point(0, 0), Point(0, -1), Side.LEFT)
        line = line_of(-2, 0, -1, 1, 0, 0, 1, -1, 2, 0)
        clipped = right_half.clip(line)
        assert clipped.points == (Point(0, 0), Point(1, -1), Point(2, 0))
        assert [p.point for p in clipped.points_of_interest] == [Point(1, -1)]
