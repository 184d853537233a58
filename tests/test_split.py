"""Tests for polygon splitting."""

import warnings

import numpy as np
import pytest
from shapely.geometry import LineString, Polygon

from polycut import (
    Point,
    SplitConfig,
    SplitResult,
    VertexPolicy,
    split,
    split_polygon,
)
from polycut.core.errors import ValidationError


SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]

# Seven-vertex sample shape in screen coordinates
SAMPLE = [
    (100, 100),
    (200, 50),
    (300, 50),
    (400, 200),
    (350, 250),
    (200, 300),
    (150, 300),
]


def _point_set(points):
    return {(p.x, p.y) for p in points}


class TestSplitSquare:
    """Tests for the basic square scenarios."""

    def test_horizontal_cut(self):
        """Test a cut across the middle gives two 4-vertex rectangles."""
        result = split(SQUARE, [(-5, 5), (15, 5)])

        assert result.is_split
        assert result.poly1 == (
            Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 5.0), Point(0.0, 5.0),
        )
        assert _point_set(result.poly2) == {(0, 5), (10, 5), (10, 10), (0, 10)}
        assert result.crossings == (Point(10.0, 5.0), Point(0.0, 5.0))

    def test_cut_outside(self):
        """Test a cut entirely outside the square gives no split."""
        result = split(SQUARE, [(-5, -5), (-1, -1)])

        assert not result
        assert result == SplitResult.no_split()
        assert result.to_shapely() is None
        assert result.pieces() == []

    def test_corner_to_corner(self):
        """Test a cut through opposite corners gives two triangles."""
        result = split(SQUARE, [(0, 0), (10, 10)])

        assert result.is_split
        assert len(result.poly1) == 3
        assert len(result.poly2) == 3
        assert _point_set(result.poly1) == {(0, 0), (10, 10), (0, 10)}
        assert _point_set(result.poly2) == {(0, 0), (10, 0), (10, 10)}
        assert _point_set(result.crossings) == {(0, 0), (10, 10)}

    def test_corner_to_corner_keep_policy(self):
        """Test the classic walk registers each corner on both adjacent edges."""
        config = SplitConfig(vertex_policy=VertexPolicy.KEEP)
        result = split(SQUARE, [(0, 0), (10, 10)], config)

        assert result.is_split
        assert len(result.crossings) == 4
        assert _point_set(result.poly2) == {(0, 0), (10, 0), (10, 10), (0, 10)}

    def test_reversed_cut_same_pieces(self):
        """Test the cut direction does not change the pieces."""
        forward = split(SQUARE, [(-5, 5), (15, 5)])
        backward = split(SQUARE, [(15, 5), (-5, 5)])

        assert {frozenset(_point_set(p)) for p in forward.pieces()} == \
            {frozenset(_point_set(p)) for p in backward.pieces()}

    def test_areas_add_up(self):
        """Test piece areas sum to the original area."""
        result = split(SQUARE, [(-1, 2), (11, 7)])
        piece1, piece2 = result.to_shapely()

        assert piece1.is_valid and piece2.is_valid
        assert piece1.area + piece2.area == pytest.approx(100.0)


class TestNoSplit:
    """Tests for cuts that must not split."""

    def test_cut_enters_but_stops_inside(self):
        """Test a single crossing (odd count) gives no split."""
        result = split(SQUARE, [(-5, 5), (5, 5)])

        assert not result

    def test_cut_fully_inside(self):
        """Test a cut that never reaches the boundary."""
        assert not split(SQUARE, [(2, 2), (8, 8)])

    def test_cut_touches_single_corner(self):
        """Test a cut grazing one corner from outside."""
        assert not split(SQUARE, [(-5, 5), (5, -5)])

    def test_cut_along_edge(self):
        """Test a cut running along a boundary edge."""
        assert not split(SQUARE, [(-5, 10), (15, 10)])

    def test_cut_along_edge_with_collinear_vertex(self):
        """Test an edge split by an extra collinear vertex does not yield a flat piece."""
        result = split([(0, 0), (5, 0), (10, 0), (10, 10), (0, 10)], [(-5, 0), (15, 0)])

        assert not result
        assert result.crossings == ()

    def test_cut_along_nearly_straight_edge_with_tolerance(self):
        ring = [(0, 0), (5, 1e-12), (10, 0), (10, 10), (0, 10)]

        assert not split(ring, [(-5, 0), (15, 0)], SplitConfig(tolerance=1e-9))

    def test_cut_along_edge_keep_policy(self):
        """Test the classic walk accepts a cut along an edge, leaving a zero-area piece."""
        config = SplitConfig(vertex_policy=VertexPolicy.KEEP)
        result = split(SQUARE, [(-5, 10), (15, 10)], config)

        assert result.is_split
        assert _point_set(result.poly1) == {(0, 0), (10, 0), (10, 10), (0, 10)}
        assert Polygon(result.poly2).area == 0.0

    @pytest.mark.parametrize("cut", [
        [(20, 20), (30, 25)],
        [(-100, -1), (100, -1)],
        [(11, -50), (11, 50)],
    ])
    def test_outside_bounding_box(self, cut):
        """Test cuts outside the bounding box never split."""
        assert not split(SAMPLE, cut)
        assert not split(SQUARE, cut)


class TestSplitInvariants:
    """Tests for properties that hold for every split."""

    @pytest.mark.parametrize("cut", [
        [(50, 150), (450, 200)],
        [(250, 0), (250, 400)],
        [(0, 0), (500, 400)],
        [(120, 20), (380, 320)],
    ])
    def test_conservation(self, cut):
        """Test no vertex is lost or duplicated beyond the shared crossings."""
        result = split(SAMPLE, cut)

        assert result.is_split
        assert len(result.crossings) == 2
        assert len(result.poly1) + len(result.poly2) - 2 * len(result.crossings) == len(SAMPLE)

    @pytest.mark.parametrize("cut", [
        [(50, 150), (450, 200)],
        [(250, 0), (250, 400)],
    ])
    def test_every_vertex_in_one_piece(self, cut):
        result = split(SAMPLE, cut)
        originals = {(float(x), float(y)) for x, y in SAMPLE}

        in1 = _point_set(result.poly1) & originals
        in2 = _point_set(result.poly2) & originals

        assert in1.isdisjoint(in2)
        assert in1 | in2 == originals

    def test_traversal_order_preserved(self):
        """Test original vertices keep their relative order in each piece."""
        result = split(SAMPLE, [(250, 0), (250, 400)])
        order = {(float(x), float(y)): i for i, (x, y) in enumerate(SAMPLE)}

        for piece in result.pieces():
            indices = [order[(p.x, p.y)] for p in piece if (p.x, p.y) in order]
            assert indices == sorted(indices)

    def test_area_preserved(self):
        original = Polygon(SAMPLE)
        piece1, piece2 = split(SAMPLE, [(50, 150), (450, 200)]).to_shapely()

        assert piece1.area + piece2.area == pytest.approx(original.area)
        assert piece1.union(piece2).symmetric_difference(original).area == pytest.approx(0.0, abs=1e-6)

    def test_cut_through_vertex_and_edge(self):
        """Test a cut through one corner and the opposite edge."""
        result = split(SQUARE, [(-2, -1), (12, 6)])

        assert result.is_split
        assert result.poly1[0] == Point(0.0, 0.0)
        assert len(result.poly1) == 4
        assert len(result.poly2) == 3
        assert result.crossings[0] == Point(0.0, 0.0)
        np.testing.assert_array_almost_equal(result.crossings[1], (10.0, 5.0))


# Square with a V notch cut into its top edge, reflex vertex at (5, 5)
NOTCHED = [(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)]

# L shape: 10 x 5 base with a 5 x 5 block on its left half
L_SHAPE = [(0, 0), (10, 0), (10, 5), (5, 5), (5, 10), (0, 10)]

# Mirror of L_SHAPE, block on the right half
L_SHAPE_MIRRORED = [(0, 0), (10, 0), (10, 10), (5, 10), (5, 5), (0, 5)]


class TestConcavePolygons:
    """Tests for cuts touching or running along the boundary of concave polygons."""

    def test_line_grazing_both_notch_tips(self):
        """Test a cut touching two vertices from inside the polygon is no split."""
        result = split(NOTCHED, [(-5, 10), (15, 10)])

        assert not result
        assert result.crossings == ()

    def test_grazing_keeps_working_under_tolerance(self):
        result = split(NOTCHED, [(-5, 10 + 1e-12), (15, 10 + 1e-12)], SplitConfig(tolerance=1e-9))

        assert not result

    def test_cut_through_reflex_vertex(self):
        """Test a vertical cut through the notch vertex and the base."""
        result = split(NOTCHED, [(5, -5), (5, 15)])

        assert result.is_split
        assert result.crossings == (Point(5.0, 0.0), Point(5.0, 5.0))
        assert _point_set(result.poly1) == {(0, 0), (5, 0), (5, 5), (0, 10)}
        assert _point_set(result.poly2) == {(5, 0), (10, 0), (10, 10), (5, 5)}

    def test_cut_below_notch(self):
        result = split(NOTCHED, [(-5, 2), (15, 2)])

        assert result.is_split
        assert len(result.crossings) == 2
        piece1, piece2 = result.to_shapely()
        assert piece1.area == pytest.approx(20.0)
        assert piece2.area == pytest.approx(Polygon(NOTCHED).area - 20.0)

    def test_cut_along_inner_edge_of_l_shape(self):
        """Test a cut running along the inner edge of an L crosses at the reflex corner."""
        result = split(L_SHAPE, [(-5, 5), (15, 5)])

        assert result.is_split
        assert result.crossings == (Point(5.0, 5.0), Point(0.0, 5.0))
        assert _point_set(result.poly1) == {(0, 0), (10, 0), (10, 5), (5, 5), (0, 5)}
        assert _point_set(result.poly2) == {(5, 5), (5, 10), (0, 10), (0, 5)}

    def test_cut_along_inner_edge_of_mirrored_l_shape(self):
        result = split(L_SHAPE_MIRRORED, [(-5, 5), (15, 5)])

        assert result.is_split
        assert result.crossings == (Point(10.0, 5.0), Point(5.0, 5.0))
        assert _point_set(result.poly1) == {(0, 0), (10, 0), (10, 5), (5, 5), (0, 5)}
        assert _point_set(result.poly2) == {(10, 5), (10, 10), (5, 10), (5, 5)}

    @pytest.mark.parametrize("ring, cut", [
        (NOTCHED, [(5, -5), (5, 15)]),
        (NOTCHED, [(-5, 2), (15, 2)]),
        (L_SHAPE, [(-5, 5), (15, 5)]),
        (L_SHAPE, [(2, -5), (2, 15)]),
        (L_SHAPE_MIRRORED, [(-5, 5), (15, 5)]),
    ])
    def test_pieces_valid_and_cover_polygon(self, ring, cut):
        original = Polygon(ring)
        piece1, piece2 = split(ring, cut).to_shapely()

        assert piece1.is_valid and piece2.is_valid
        assert piece1.area > 0 and piece2.area > 0
        assert piece1.area + piece2.area == pytest.approx(original.area)
        assert piece1.union(piece2).symmetric_difference(original).area == pytest.approx(0.0, abs=1e-6)

    def test_grazing_split_keep_policy(self):
        """Test the classic walk still counts both grazed vertices."""
        result = split(NOTCHED, [(-5, 10), (15, 10)], SplitConfig(vertex_policy=VertexPolicy.KEEP))

        assert len(result.crossings) == 4


class TestSplitInput:
    """Tests for the accepted input forms."""

    def test_shapely_polygon_input(self):
        """Test a shapely Polygon (with closing coordinate) is accepted."""
        result = split(Polygon(SQUARE), LineString([(-5, 5), (15, 5)]))

        assert result.is_split
        assert len(result.poly1) == 4

    def test_numpy_input(self):
        result = split(np.array(SQUARE, dtype=float), np.array([(-5, 5), (15, 5)]))

        assert result.is_split

    def test_explicitly_closed_ring(self):
        """Test a repeated closing vertex is dropped."""
        result = split(SQUARE + [SQUARE[0]], [(-5, 5), (15, 5)])

        assert len(result.poly1) + len(result.poly2) == 8

    def test_split_polygon_returns_shapely(self):
        pieces = split_polygon(Polygon(SQUARE), LineString([(-5, 5), (15, 5)]))

        assert pieces is not None
        areas = sorted(p.area for p in pieces)
        assert areas == [pytest.approx(50.0), pytest.approx(50.0)]

    def test_split_polygon_no_split(self):
        assert split_polygon(Polygon(SQUARE), LineString([(-5, -5), (-1, -1)])) is None


class TestSplitPreconditions:
    """Tests for rejected input."""

    def test_two_vertices_rejected(self):
        with pytest.raises(ValidationError, match="at least 3"):
            split([(0, 0), (1, 1)], [(-1, 0), (2, 0)])

    def test_repeated_vertices_rejected(self):
        with pytest.raises(ValidationError):
            split([(0, 0), (1, 1), (0, 0), (1, 1)], [(-1, 0), (2, 0)])

    def test_empty_polygon_rejected(self):
        with pytest.raises(ValidationError):
            split(Polygon(), [(-1, 0), (2, 0)])

    def test_wrong_geometry_type_rejected(self):
        with pytest.raises(ValidationError, match="Polygon or LinearRing"):
            split(LineString([(0, 0), (1, 0), (1, 1)]), [(-1, 0), (2, 0)])

    def test_infinite_coordinate_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            split([(0, 0), (float('inf'), 0), (1, 1)], [(-1, 0), (2, 0)])

    def test_bad_cut_rejected(self):
        with pytest.raises(ValidationError):
            split(SQUARE, [(0, 0)])


class TestCheckSimple:
    """Tests for the optional simplicity check."""

    BOWTIE = [(0, 0), (10, 10), (10, 0), (0, 10)]

    def test_warns_on_self_intersection(self):
        config = SplitConfig(check_simple=True)

        with pytest.warns(UserWarning, match="not simple"):
            split(self.BOWTIE, [(-5, 2), (15, 2)], config)

    def test_no_warning_by_default(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            split(self.BOWTIE, [(-5, 2), (15, 2)])

    def test_no_warning_for_simple_polygon(self):
        config = SplitConfig(check_simple=True)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = split(SQUARE, [(-5, 5), (15, 5)], config)

        assert result.is_split


class TestTolerance:
    """Tests for tolerance-aware splitting."""

    def test_near_corner_merged_with_tolerance(self):
        """Test a cut passing within tolerance of corners behaves like an exact hit."""
        config = SplitConfig(tolerance=1e-9)
        result = split(SQUARE, [(0, 1e-12), (10, 10 + 1e-12)], config)

        assert result.is_split
        assert len(result.poly1) == 3
        assert len(result.poly2) == 3
