"""Tests for points, segments, bounding boxes and ray casting."""

import math
import pytest
import numpy as np
from roomlight import (
    Point2,
    Segment,
    BoundingBox,
    ray_segment_intersect,
    segments_intersect,
    distance_point_to_segment,
)
from roomlight.geometry import (
    subtract,
    normalize,
    perpendicular,
    cross,
    dot,
    cast_rays,
)


class TestVectorHelpers:
    """Tests for the planar vector helpers."""

    def test_subtract(self):
        assert subtract(Point2(3, 4), Point2(1, 1)) == Point2(2, 3)

    def test_normalize(self):
        v = normalize(Point2(3, 4))
        assert v.x == pytest.approx(0.6)
        assert v.y == pytest.approx(0.8)

    def test_normalize_zero_vector(self):
        """The zero vector has no direction and stays zero."""
        assert normalize(Point2(0, 0)) == Point2(0, 0)

    def test_perpendicular_is_ccw(self):
        """Rotating +x by 90 degrees CCW gives +y."""
        assert perpendicular(Point2(1, 0)) == Point2(0, 1)

    def test_cross_sign(self):
        assert cross(Point2(1, 0), Point2(0, 1)) == 1
        assert cross(Point2(0, 1), Point2(1, 0)) == -1

    def test_dot(self):
        assert dot(Point2(1, 2), Point2(3, 4)) == 11


class TestPoint2:
    def test_unpacks(self):
        x, y = Point2(1.5, 2.5)
        assert (x, y) == (1.5, 2.5)

    def test_from_any(self):
        assert Point2.from_any((1, 2)) == Point2(1.0, 2.0)
        assert Point2.from_any({"x": 1, "y": 2}) == Point2(1.0, 2.0)


class TestSegment:
    """Tests for Segment properties."""

    def test_length(self):
        assert Segment((0, 0), (3, 4)).length == pytest.approx(5.0)

    def test_coerces_tuples(self):
        seg = Segment((0, 0), (1, 0))
        assert isinstance(seg.start, Point2)

    def test_zero_length_is_degenerate(self):
        assert Segment((2, 2), (2, 2)).is_degenerate()
        assert not Segment((0, 0), (1, 0)).is_degenerate()

    def test_point_at(self):
        p = Segment((0, 0), (0, 10)).point_at(4)
        assert p.x == pytest.approx(0.0)
        assert p.y == pytest.approx(4.0)

    def test_dict_round_trip(self):
        seg = Segment((0, 0), (1, 2), "w1")
        assert Segment.from_dict(seg.to_dict()) == seg


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_inverted_box_raises(self):
        with pytest.raises(ValueError):
            BoundingBox(5, 0, 0, 5)

    def test_flat_box_allowed(self):
        """min == max is a valid (degenerate) extent."""
        box = BoundingBox(0, 0, 0, 5)
        assert box.width == 0

    def test_corners_ccw(self):
        box = BoundingBox(0, 0, 2, 1)
        assert box.corners == (Point2(0, 0), Point2(2, 0), Point2(2, 1), Point2(0, 1))

    def test_segments_close_the_box(self):
        segs = BoundingBox(0, 0, 2, 1).segments
        assert len(segs) == 4
        for a, b in zip(segs, segs[1:] + segs[:1]):
            assert a.end == b.start

    def test_from_points_with_padding(self):
        box = BoundingBox.from_points([(0, 0), (10, 5)], padding=2)
        assert box == BoundingBox(-2, -2, 12, 7)

    def test_from_no_points_raises(self):
        with pytest.raises(ValueError):
            BoundingBox.from_points([])


class TestRaySegmentIntersect:
    """Tests for ray_segment_intersect."""

    def test_hit(self):
        result = ray_segment_intersect(Point2(0, 0), Point2(1, 0), Point2(5, -1), Point2(5, 1))
        assert result is not None
        t, point = result
        assert t == pytest.approx(5.0)
        assert point == Point2(5.0, 0.0)

    def test_parallel_is_none(self):
        assert ray_segment_intersect(Point2(0, 0), Point2(1, 0), Point2(0, 1), Point2(5, 1)) is None

    def test_miss_beyond_segment_end(self):
        assert ray_segment_intersect(Point2(0, 0), Point2(1, 0), Point2(5, 1), Point2(5, 3)) is None

    def test_behind_origin_is_none(self):
        assert ray_segment_intersect(Point2(0, 0), Point2(1, 0), Point2(-5, -1), Point2(-5, 1)) is None

    def test_self_hit_guard(self):
        """A segment touching the ray origin is not reported."""
        assert ray_segment_intersect(Point2(0, 0), Point2(1, 0), Point2(0, -1), Point2(0, 1)) is None

    def test_hit_at_segment_endpoint(self):
        result = ray_segment_intersect(Point2(0, 0), Point2(1, 0), Point2(5, 0), Point2(5, 3))
        assert result is not None
        assert result[0] == pytest.approx(5.0)


class TestSegmentsIntersect:
    """Tests for segments_intersect."""

    def test_crossing_diagonals(self):
        assert segments_intersect(Point2(0, 0), Point2(4, 4), Point2(0, 4), Point2(4, 0))

    def test_parallel(self):
        assert not segments_intersect(Point2(0, 0), Point2(4, 0), Point2(0, 1), Point2(4, 1))

    def test_disjoint(self):
        assert not segments_intersect(Point2(0, 0), Point2(1, 1), Point2(3, 0), Point2(4, -2))

    def test_shared_endpoint_is_not_crossing(self):
        assert not segments_intersect(Point2(0, 0), Point2(2, 0), Point2(2, 0), Point2(2, 2))


class TestDistancePointToSegment:
    def test_perpendicular_foot(self):
        assert distance_point_to_segment(Point2(5, 3), Point2(0, 0), Point2(10, 0)) == pytest.approx(3)

    def test_beyond_end(self):
        assert distance_point_to_segment(Point2(13, 4), Point2(0, 0), Point2(10, 0)) == pytest.approx(5)

    def test_degenerate_segment(self):
        assert distance_point_to_segment(Point2(3, 4), Point2(0, 0), Point2(0, 0)) == pytest.approx(5)


class TestCastRays:
    """Tests for the vectorized nearest-hit ray caster."""

    def test_matches_scalar_intersection(self):
        starts = np.array([[5, -5], [8, -5]])
        ends = np.array([[5, 5], [8, 5]])
        angles = np.array([0.0, math.pi / 8, math.pi])
        t, points = cast_rays((0, 0), angles, starts, ends)

        for angle, ti, pi in zip(angles, t, points):
            direction = Point2(math.cos(angle), math.sin(angle))
            hits = [
                ray_segment_intersect(Point2(0, 0), direction, Point2(*s), Point2(*e))
                for s, e in zip(starts, ends)
            ]
            hits = [h for h in hits if h is not None]
            if not hits:
                assert np.isinf(ti)
                assert np.all(np.isnan(pi))
            else:
                nearest = min(hits, key=lambda h: h[0])
                assert ti == pytest.approx(nearest[0])
                np.testing.assert_array_almost_equal(pi, tuple(nearest[1]))

    def test_nearest_segment_wins(self):
        t, points = cast_rays((0, 0), [0.0], [[8, -1], [5, -1]], [[8, 1], [5, 1]])
        assert t[0] == pytest.approx(5.0)
        np.testing.assert_array_almost_equal(points[0], [5.0, 0.0])

    def test_no_segments(self):
        t, points = cast_rays((0, 0), [0.0, 1.0], np.empty((0, 2)), np.empty((0, 2)))
        assert np.all(np.isinf(t))
        assert points.shape == (2, 2)
