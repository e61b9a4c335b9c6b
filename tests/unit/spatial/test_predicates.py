"""Unit tests for the planar geometry predicates."""

import pytest
from shapely.geometry import Polygon as ShapelyPolygon
from tests.utils import polygon, square

from texel.models.geometry import Bound, Polygon
from texel.spatial.predicates import bound, clip, point_in_polygon, polygon_overlaps, ring_closed


@pytest.mark.parametrize(
    ("ring", "expected"),
    [
        (((0, 0), (0, 1), (1, 1), (0, 0)), True),
        (((0, 0), (0, 1), (1, 1), (1, 0)), False),
        (((1, 1),), True),
        ((), False),
    ],
)
def test_ring_closed(ring, expected):
    assert ring_closed(ring) is expected


def test_ring_closed_is_exact():
    """No tolerance: a last vertex off by a tiny amount leaves the ring open."""
    assert not ring_closed(((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 1e-12)))


def test_bound_of_outer_ring():
    """Holes never extend past the outer ring, so only the outer ring counts."""
    p = polygon(
        [[2, 1], [2, 5], [7, 5], [7, 1], [2, 1]],
        [[3, 2], [3, 3], [4, 3], [4, 2], [3, 2]],
    )

    assert bound(p) == Bound(min_x=2, min_y=1, max_x=7, max_y=5)


def test_bound_of_empty_polygon():
    assert bound(Polygon()) is None
    assert bound(Polygon(rings=((),))) is None


def test_point_in_polygon():
    limit = square(0, 0, 10)

    assert point_in_polygon(limit, (5, 5))
    assert not point_in_polygon(limit, (15, 5))
    assert not point_in_polygon(limit, (-0.001, 5))


@pytest.mark.parametrize("boundary_point", [(0, 5), (10, 10), (5, 0)])
def test_point_on_boundary_is_inside(boundary_point):
    assert point_in_polygon(square(0, 0, 10), boundary_point)


def test_point_in_hole_is_inside():
    """Only the outer ring is tested."""
    with_hole = polygon(
        [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]],
        [[2, 2], [2, 8], [8, 8], [8, 2], [2, 2]],
    )

    assert point_in_polygon(with_hole, (5, 5))


def test_point_in_unclosed_polygon():
    unclosed = polygon([[0, 0], [0, 1], [1, 1], [1, 0]])

    assert point_in_polygon(unclosed, (0.5, 0.5))


@pytest.mark.parametrize(
    "degenerate",
    [
        Polygon(),
        polygon([[0, 0]]),
        polygon([[0, 0], [1, 1], [0, 0]]),
    ],
)
def test_degenerate_polygon_contains_nothing(degenerate):
    assert not point_in_polygon(degenerate, (0, 0))


def test_clip_partial_overlap():
    rings = clip(square(0, 0, 1), Bound(min_x=0.5, min_y=0.5, max_x=1.5, max_y=1.5))

    assert len(rings) == 1
    assert ShapelyPolygon(rings[0]).area == pytest.approx(0.25)
    assert rings[0][0] == rings[0][-1]


def test_clip_disjoint_is_empty():
    assert clip(square(0, 0, 1), Bound(min_x=5, min_y=5, max_x=6, max_y=6)) == []


def test_clip_degenerate_polygon_is_empty():
    assert clip(polygon([[0, 0], [1, 1]]), Bound(min_x=0, min_y=0, max_x=1, max_y=1)) == []


def test_overlapping_polygons():
    assert polygon_overlaps(square(0, 0, 1), square(0.5, 0.5, 1))
    assert polygon_overlaps(square(0.5, 0.5, 1), square(0, 0, 1))


def test_disjoint_polygons():
    assert not polygon_overlaps(square(0, 0, 1), square(2, 2, 1))


def test_contained_polygon_overlaps():
    assert polygon_overlaps(square(0, 0, 10), square(2, 2, 1))
    assert polygon_overlaps(square(2, 2, 1), square(0, 0, 10))


def test_touching_polygons_overlap():
    """A shared edge puts one polygon's first vertex on the other's boundary."""
    assert polygon_overlaps(square(0, 0, 1), square(1, 0, 1))


def test_overlapping_bounds_report_overlap():
    """The bounding-box clip flags disjoint polygons whose bounds intersect."""
    lower_left = polygon([[0, 0], [10, 0], [0, 10], [0, 0]])
    upper_right = polygon([[10, 10], [10, 4], [4, 10], [10, 10]])

    assert polygon_overlaps(lower_left, upper_right)


def test_overlap_is_asymmetric():
    """Clipping uses the second polygon's bound only."""
    l_shape = polygon([[0, 0], [0, 10], [2, 10], [2, 2], [10, 2], [10, 0], [0, 0]])
    in_notch = square(5, 5, 3)

    assert not polygon_overlaps(l_shape, in_notch)
    assert polygon_overlaps(in_notch, l_shape)


def test_empty_polygon_overlaps_nothing():
    assert not polygon_overlaps(Polygon(), square(0, 0, 1))
    assert not polygon_overlaps(square(0, 0, 1), Polygon())
