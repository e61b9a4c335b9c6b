"""Unit tests for the design rule engine with the built-in rules."""

import pytest
from tests.utils import collection, point, polygon, square

from texel.models.enums import RuleKind
from texel.models.geometry import FeatureCollection, OtherGeometry, Polygon

CLOSED = polygon([[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]])
UNCLOSED = polygon([[0, 0], [0, 1], [1, 1], [1, 0]])
SHIFTED = polygon([[0.5, 0.5], [0.5, 1.5], [1.5, 1.5], [1.5, 0.5], [0.5, 0.5]])

BUILDING_LIMIT = polygon([[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]])
INSIDE_PLATEAU = polygon([[1, 1], [1, 2], [2, 2], [2, 1], [1, 1]])
CROSSING_PLATEAU = polygon([[5, 5], [5, 15], [15, 15], [15, 5], [5, 5]])


class TestValidateCollection:
    def test_empty_collection_passes(self, design_rule_engine):
        assert design_rule_engine.validate_collection(FeatureCollection()) == (True, [])

    def test_valid_collection_passes(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_collection(
            collection(square(0, 0, 1), square(2, 2, 1), square(5, 0, 3))
        )

        assert ok
        assert violations == []

    def test_point_is_not_a_polygon(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_collection(collection(point(0, 0)))

        assert not ok
        assert violations == [RuleKind.NOT_POLYGON]

    def test_null_geometry_is_not_a_polygon(self, design_rule_engine):
        _, violations = design_rule_engine.validate_collection(
            collection(CLOSED, OtherGeometry(type=None))
        )

        assert violations == [RuleKind.NOT_POLYGON]

    def test_unclosed_ring(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_collection(collection(UNCLOSED))

        assert not ok
        assert violations == [RuleKind.NOT_CLOSED]

    def test_unclosed_hole(self, design_rule_engine):
        with_open_hole = polygon(
            [[0, 0], [0, 10], [10, 10], [10, 0], [0, 0]],
            [[2, 2], [2, 3], [3, 3], [3, 2]],
        )

        _, violations = design_rule_engine.validate_collection(collection(with_open_hole))

        assert violations == [RuleKind.NOT_CLOSED]

    def test_empty_polygon_is_not_closed(self, design_rule_engine):
        _, violations = design_rule_engine.validate_collection(
            collection(Polygon(rings=((),)))
        )

        assert violations == [RuleKind.NOT_CLOSED]

    def test_overlapping_polygons(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_collection(collection(CLOSED, SHIFTED))

        assert not ok
        assert violations == [RuleKind.OVERLAPPED]

    def test_closed_ring_passes(self, design_rule_engine):
        assert design_rule_engine.validate_collection(collection(CLOSED)) == (True, [])

    def test_disjoint_polygons(self, design_rule_engine):
        disjoint = polygon([[2, 2], [2, 3], [3, 3], [3, 2], [2, 2]])

        assert design_rule_engine.validate_collection(collection(CLOSED, disjoint)) == (True, [])

    def test_single_polygon_never_overlaps(self, design_rule_engine):
        assert design_rule_engine.validate_collection(collection(BUILDING_LIMIT)) == (True, [])

    def test_multiple_violations_reported_once_each(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_collection(
            collection(point(0, 0), point(1, 1), UNCLOSED, CLOSED, SHIFTED)
        )

        assert not ok
        assert violations == [RuleKind.NOT_POLYGON, RuleKind.NOT_CLOSED, RuleKind.OVERLAPPED]

    def test_non_polygons_ignored_by_ring_rules(self, design_rule_engine):
        _, violations = design_rule_engine.validate_collection(
            collection(point(0.5, 0.5), CLOSED)
        )

        assert violations == [RuleKind.NOT_POLYGON]

    def test_validation_is_idempotent(self, design_rule_engine):
        fc = collection(point(0, 0), CLOSED, SHIFTED)

        first = design_rule_engine.validate_collection(fc)
        second = design_rule_engine.validate_collection(fc)

        assert first == second

    def test_type_and_closure_rules_ignore_feature_order(self, design_rule_engine):
        far = square(20, 20, 1)

        forward = design_rule_engine.validate_collection(collection(point(9, 9), UNCLOSED, far))
        backward = design_rule_engine.validate_collection(collection(far, UNCLOSED, point(9, 9)))

        assert forward == backward == (False, [RuleKind.NOT_POLYGON, RuleKind.NOT_CLOSED])

    def test_overlap_depends_on_feature_order(self, design_rule_engine):
        """Only the earlier polygon is clipped against the later one's bound.

        A square in the notch of an L-shape lies inside the L's bound but
        outside the L, and no sampled vertex falls inside the other polygon.
        """
        l_shape = polygon([[0, 0], [0, 10], [2, 10], [2, 2], [10, 2], [10, 0], [0, 0]])
        in_notch = square(5, 5, 3)

        assert design_rule_engine.validate_collection(collection(l_shape, in_notch)) == (True, [])
        assert design_rule_engine.validate_collection(collection(in_notch, l_shape)) == (
            False,
            [RuleKind.OVERLAPPED],
        )


class TestValidateSplits:
    def test_plateau_inside_limit(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_splits(
            collection(INSIDE_PLATEAU), collection(BUILDING_LIMIT)
        )

        assert ok
        assert violations == []

    def test_plateau_crossing_limit(self, design_rule_engine):
        ok, violations = design_rule_engine.validate_splits(
            collection(CROSSING_PLATEAU), collection(BUILDING_LIMIT)
        )

        assert not ok
        assert violations == [RuleKind.OUT_OF_BOUND]

    def test_plateau_equal_to_limit(self, design_rule_engine):
        """Bound corners on the limit boundary are in bound."""
        assert design_rule_engine.validate_splits(
            collection(BUILDING_LIMIT), collection(BUILDING_LIMIT)
        ) == (True, [])

    def test_each_plateau_needs_one_containing_limit(self, design_rule_engine):
        left = square(0, 0, 5)
        right = square(5, 0, 5)

        assert design_rule_engine.validate_splits(
            collection(square(1, 1, 2), square(6, 1, 2)), collection(left, right)
        ) == (True, [])

        # Corners fall in different limits
        _, violations = design_rule_engine.validate_splits(
            collection(polygon([[4, 1], [4, 2], [6, 2], [6, 1], [4, 1]])), collection(left, right)
        )
        assert violations == [RuleKind.OUT_OF_BOUND]

    def test_empty_reference(self, design_rule_engine):
        _, violations = design_rule_engine.validate_splits(
            collection(INSIDE_PLATEAU), FeatureCollection()
        )

        assert violations == [RuleKind.OUT_OF_BOUND]

    @pytest.mark.parametrize(
        "dependent",
        [
            FeatureCollection(),
            collection(point(50, 50)),
            collection(Polygon()),
        ],
    )
    def test_nothing_to_check_passes(self, design_rule_engine, dependent):
        assert design_rule_engine.validate_splits(dependent, FeatureCollection()) == (True, [])

    def test_split_validation_is_idempotent(self, design_rule_engine):
        dependent = collection(CROSSING_PLATEAU)
        reference = collection(BUILDING_LIMIT)

        first = design_rule_engine.validate_splits(dependent, reference)
        second = design_rule_engine.validate_splits(dependent, reference)

        assert first == second
